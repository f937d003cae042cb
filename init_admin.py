#!/usr/bin/env python3
"""
Create the database tables and one default user per role.
Run with: python init_admin.py
"""
from vetclinic import create_app
from vetclinic.seeds import DEFAULT_USERS, seed_default_users


def create_default_users(app=None):
    app = app or create_app()
    with app.app_context():
        return seed_default_users()


if __name__ == '__main__':
    print("=" * 60)
    print("Initializing Vet Clinic Users")
    print("=" * 60)
    created = create_default_users()
    for user_data in DEFAULT_USERS:
        mark = '✓ Created' if user_data['email'] in created else '- Exists '
        print(f"  {mark}: {user_data['email']} ({user_data['role']})")
    print("=" * 60)
    print(f"✅ Created {len(created)} new user(s)")
    print("=" * 60)
    print("\n⚠️  IMPORTANT: Change passwords after first login!")
