"""
Default accounts: one user per role so a fresh database can be logged into.
"""
import logging
import os

from vetclinic.extensions import db
from vetclinic.repositories import UserRepository

logger = logging.getLogger(__name__)

DEFAULT_USERS = [
    {
        'name': 'Clinic Admin',
        'email': 'admin@vetclinic.local',
        'password': os.getenv('DEFAULT_ADMIN_PASSWORD', 'admin123'),
        'role': 'Admin',
        'phone': ''
    },
    {
        'name': 'Dr. Jane Doe',
        'email': 'doctor@vetclinic.local',
        'password': os.getenv('DEFAULT_DOCTOR_PASSWORD', 'doctor123'),
        'role': 'Doctor',
        'phone': ''
    },
    {
        'name': 'Front Desk',
        'email': 'staff@vetclinic.local',
        'password': os.getenv('DEFAULT_STAFF_PASSWORD', 'staff123'),
        'role': 'Staff',
        'phone': ''
    },
]


def seed_default_users():
    """Create tables and default users; existing emails are skipped. Needs an app context."""
    db.create_all()
    users = UserRepository()
    created = []

    for user_data in DEFAULT_USERS:
        if users.email_taken(user_data['email']):
            logger.info(f"User '{user_data['email']}' already exists (skipping)")
            continue
        user = users.register(user_data)
        created.append(user.email)
        logger.info(f"Seeded {user.role} user {user.email}")

    return created
