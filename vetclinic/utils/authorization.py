"""
Authorization gate.

Every request passes through ``authorize_request`` before its view runs. The
allowed roles of each endpoint live in ``ROUTE_ROLES``; endpoints missing from
both that table and ``PUBLIC_ENDPOINTS`` admit nobody.
"""
import logging

from flask import g, request

from vetclinic.exceptions import Forbidden, Unauthenticated
from vetclinic.models.user import ROLE_ADMIN, ROLE_DOCTOR, ROLE_STAFF
from vetclinic.services.token_service import verify_request_token

logger = logging.getLogger(__name__)

ALL_ROLES = (ROLE_STAFF, ROLE_DOCTOR, ROLE_ADMIN)
STAFF_ADMIN = (ROLE_STAFF, ROLE_ADMIN)
DOCTOR_ADMIN = (ROLE_DOCTOR, ROLE_ADMIN)
ADMIN_ONLY = (ROLE_ADMIN,)

PUBLIC_ENDPOINTS = frozenset({
    'users.register',
    'users.login',
    'health.health_check',
    'health.readiness_check',
    'health.liveness_check',
})

# endpoint -> roles allowed to call it
ROUTE_ROLES = {
    # /api/users
    'users.get_profile': ALL_ROLES,
    'users.list_by_role': ALL_ROLES,
    'users.update_user': ALL_ROLES,
    'users.change_password': ALL_ROLES,
    'users.update_role': ADMIN_ONLY,
    'users.deactivate_user': ADMIN_ONLY,
    # /api/pets
    'pets.get_pet_profile': ALL_ROLES,
    'pets.list_pets_by_owner': ALL_ROLES,
    'pets.create_pet': STAFF_ADMIN,
    'pets.update_pet': STAFF_ADMIN,
    'pets.deactivate_pet': STAFF_ADMIN,
    # /api/appointments
    'appointments.create_appointment': STAFF_ADMIN,
    'appointments.get_appointment': ALL_ROLES,
    'appointments.update_appointment': STAFF_ADMIN,
    'appointments.update_appointment_status': ALL_ROLES,
    'appointments.deactivate_appointment': STAFF_ADMIN,
    'appointments.list_by_pet': ALL_ROLES,
    'appointments.list_by_doctor': ALL_ROLES,
    'appointments.list_by_date': ALL_ROLES,
    'appointments.get_full_appointment': ALL_ROLES,
    # /api/medical-records
    'medical_records.create_medical_record': DOCTOR_ADMIN,
    'medical_records.get_by_appointment': ALL_ROLES,
    'medical_records.update_medical_record': DOCTOR_ADMIN,
    'medical_records.deactivate_medical_record': ADMIN_ONLY,
    # /api/treatments
    'treatments.create_treatment': DOCTOR_ADMIN,
    'treatments.list_by_medical_record': ALL_ROLES,
    'treatments.update_treatment': DOCTOR_ADMIN,
    'treatments.deactivate_treatment': DOCTOR_ADMIN,
}


def allowed_roles(endpoint):
    return ROUTE_ROLES.get(endpoint, ())


def authorize_request():
    """before_request hook: authenticate the bearer token, then check the role."""
    g.pop('current_claims', None)
    endpoint = request.endpoint
    # Unmatched URLs fall through to the 404/405 handlers; preflights carry no token
    if endpoint is None or request.method == 'OPTIONS':
        return None
    if endpoint in PUBLIC_ENDPOINTS or endpoint == 'static':
        return None

    claims = verify_request_token()
    roles = allowed_roles(endpoint)
    if claims.role not in roles:
        logger.warning(f"User {claims.user_id} ({claims.role}) denied {request.method} {request.path}")
        raise Forbidden(f'Permission denied. Required roles: {", ".join(roles) or "none"}')

    g.current_claims = claims
    return None


def init_authorization(app):
    app.before_request(authorize_request)


def current_claims():
    """Claims attached by the gate for the request being handled."""
    claims = g.get('current_claims')
    if claims is None:
        raise Unauthenticated()
    return claims


def current_actor():
    """Id of the authenticated user, used for created_by / modified_by."""
    return current_claims().user_id
