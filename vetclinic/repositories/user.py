"""Credential store: user lookups, registration and account maintenance."""
import logging

from sqlalchemy.exc import IntegrityError

from vetclinic.extensions import db
from vetclinic.exceptions import BadRequest, Unauthenticated
from vetclinic.models import User
from vetclinic.models.user import VALID_ROLES
from .base import BaseRepository, is_blank, persistence_guard

logger = logging.getLogger(__name__)


def validate_role(role):
    if role not in VALID_ROLES:
        raise BadRequest(f'Role must be one of: {", ".join(VALID_ROLES)}')
    return role


class UserRepository(BaseRepository):
    model = User
    entity_name = 'User'
    required_fields = ('name', 'email', 'password', 'role')
    updatable_fields = ('name', 'email', 'phone')

    def get_by_email(self, email):
        if not isinstance(email, str) or not email:
            return None
        with persistence_guard('fetch user'):
            return User.query.filter_by(email=email.strip(), active_status=True).first()

    def email_taken(self, email, exclude_id=None):
        # Inactive users keep their email: the column is unique across all rows
        with persistence_guard('fetch user'):
            query = User.query.filter_by(email=email)
            if exclude_id is not None:
                query = query.filter(User.id != exclude_id)
            return db.session.query(query.exists()).scalar()

    def list_by_role(self, role):
        validate_role(role)
        return self.list_active(role=role, order_by=User.created_at.desc())

    def register(self, data):
        """Create a user; the new account is its own creator."""
        self.validate_required(data)
        name = self.parse('name', data['name'])
        email = self.parse('email', data['email']).strip()
        password = self.parse('password', data['password'])
        role = validate_role(data['role'])
        phone = data.get('phone')
        if not is_blank(phone):
            phone = self.parse('phone', phone)

        if self.email_taken(email):
            raise BadRequest('Email is already registered')

        user = User(name=name, email=email, phone=phone or None, role=role)
        user.set_password(password)
        self.stamp_created(user, actor=None)
        user.created_by = user.modified_by = user.id

        with persistence_guard('register user'):
            try:
                db.session.add(user)
                db.session.commit()
            except IntegrityError:
                # lost a race with a concurrent registration of the same email
                db.session.rollback()
                raise BadRequest('Email is already registered')
        logger.info(f"User {user.id} registered with role {role}")
        return user

    def authenticate(self, email, password):
        """
        Active user whose password matches, else None.
        Unknown email and wrong password are deliberately indistinguishable.
        """
        user = self.get_by_email(email)
        if user is None or not isinstance(password, str) or not user.check_password(password):
            return None
        return user

    def merge(self, instance, data):
        email = data.get('email')
        if isinstance(email, str) and not is_blank(email):
            email = email.strip()
            data = dict(data, email=email)
            if email != instance.email and self.email_taken(email, exclude_id=instance.id):
                raise BadRequest('Email is already registered')
        return super().merge(instance, data)

    def change_password(self, entity_id, old_password, new_password, confirm_password, actor):
        if is_blank(old_password) or is_blank(new_password) or is_blank(confirm_password):
            raise BadRequest('Fields "old_password", "new_password" and "confirm_password" are required')
        user = self.fetch_by_id(entity_id)
        if not isinstance(old_password, str) or not user.check_password(old_password):
            raise Unauthenticated('Old password is incorrect')
        if new_password != confirm_password:
            raise BadRequest('New password and confirmation do not match')

        user.set_password(self.parse('new_password', new_password))
        self.stamp_modified(user, actor)
        with persistence_guard('update password'):
            db.session.commit()
        return user

    def update_role(self, entity_id, role, actor):
        validate_role(role)
        user = self.fetch_by_id(entity_id)
        user.role = role
        self.stamp_modified(user, actor)
        with persistence_guard('update role'):
            db.session.commit()
        logger.info(f"User {entity_id} role set to {role} by {actor}")
        return user
