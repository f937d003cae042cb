from vetclinic.extensions import db, bcrypt
from .base import AuditMixin

ROLE_STAFF = 'Staff'
ROLE_DOCTOR = 'Doctor'
ROLE_ADMIN = 'Admin'
VALID_ROLES = (ROLE_STAFF, ROLE_DOCTOR, ROLE_ADMIN)


class User(db.Model, AuditMixin):
    __tablename__ = 'Users'

    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    phone = db.Column(db.String(20))
    password_hash = db.Column(db.String(255), nullable=False)

    # One of 'Staff', 'Doctor', 'Admin'
    role = db.Column(db.String(20), nullable=False, index=True)

    def set_password(self, password):
        """Hash and set password"""
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        """Check if provided password matches hash"""
        if not self.password_hash or not password:
            return False
        return bcrypt.check_password_hash(self.password_hash, password)

    def to_dict(self):
        """Public representation; the password hash is never exposed."""
        data = {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'role': self.role,
        }
        data.update(self.audit_dict())
        return data

    def __repr__(self):
        return f"<User {self.email} - {self.role}>"
