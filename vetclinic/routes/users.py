from flask import Blueprint, jsonify

from vetclinic.exceptions import BadRequest, Unauthenticated
from vetclinic.repositories import UserRepository
from vetclinic.services.token_service import issue_token, token_lifetime_seconds
from vetclinic.utils.authorization import current_actor
from vetclinic.utils.request_helpers import json_body

users_bp = Blueprint('users', __name__, url_prefix='/api/users')

users = UserRepository()


@users_bp.route('/register', methods=['POST'])
def register():
    """
    Register a new user
    Access: public
    Body: name, email, password, role (Staff|Doctor|Admin), phone (optional)
    """
    data = json_body()
    user = users.register(data)
    return jsonify({
        'success': True,
        'data': user.to_dict(),
        'message': 'User registered successfully'
    }), 201


@users_bp.route('/login', methods=['POST'])
def login():
    """Login endpoint - authenticates a user and returns a bearer token"""
    data = json_body()
    email = data.get('email')
    password = data.get('password')

    if not email or not password:
        raise BadRequest('Fields "email" and "password" are required')

    user = users.authenticate(email, password)
    if user is None:
        # Same response for an unknown email and a wrong password
        raise Unauthenticated('Invalid email or password')

    return jsonify({
        'success': True,
        'data': user.to_dict(),
        'access_token': issue_token(user),
        'token_type': 'bearer',
        'expires_in': token_lifetime_seconds()
    }), 200


@users_bp.route('/<user_id>/profile', methods=['GET'])
def get_profile(user_id):
    user = users.fetch_by_id(user_id)
    return jsonify({'success': True, 'data': user.to_dict()}), 200


@users_bp.route('/role/<role>', methods=['GET'])
def list_by_role(role):
    """Active users holding a role; 404 when there are none."""
    result = users.list_by_role(role)
    if not result:
        return jsonify({
            'success': False,
            'error': 'No active users found for this role'
        }), 404
    return jsonify({'success': True, 'data': [u.to_dict() for u in result]}), 200


@users_bp.route('/<user_id>/update', methods=['PUT'])
def update_user(user_id):
    """
    Update name, email, phone. Empty values leave the stored value unchanged.
    """
    data = json_body()
    user = users.update(user_id, data, current_actor())
    return jsonify({
        'success': True,
        'data': user.to_dict(),
        'message': 'User updated successfully'
    }), 200


@users_bp.route('/<user_id>/change-password', methods=['PUT'])
def change_password(user_id):
    """Body: old_password, new_password, confirm_password"""
    data = json_body()
    users.change_password(
        user_id,
        data.get('old_password'),
        data.get('new_password'),
        data.get('confirm_password'),
        current_actor(),
    )
    return jsonify({
        'success': True,
        'message': 'Password updated successfully'
    }), 200


@users_bp.route('/<user_id>/role', methods=['PUT'])
def update_role(user_id):
    """Access: Admin"""
    data = json_body()
    actor = current_actor()
    user = users.update_role(user_id, data.get('role'), actor)
    return jsonify({
        'success': True,
        'data': {
            'id': user.id,
            'role': user.role,
            'updated_by': actor
        },
        'message': 'Role updated successfully'
    }), 200


@users_bp.route('/<user_id>/active-status', methods=['PUT'])
def deactivate_user(user_id):
    """Soft delete. Access: Admin"""
    actor = current_actor()
    users.deactivate(user_id, actor)
    return jsonify({
        'success': True,
        'data': {'id': user_id, 'deactivated_by': actor},
        'message': 'User deactivated successfully'
    }), 200
