from flask import Blueprint, jsonify

from vetclinic.repositories import PetRepository
from vetclinic.utils.authorization import current_actor
from vetclinic.utils.request_helpers import json_body

pets_bp = Blueprint('pets', __name__, url_prefix='/api/pets')

pets = PetRepository()


@pets_bp.route('/<pet_id>/profile', methods=['GET'])
def get_pet_profile(pet_id):
    pet = pets.fetch_by_id(pet_id)
    return jsonify({'success': True, 'data': pet.to_dict()}), 200


@pets_bp.route('/by-owner/<owner_name>/<owner_phone>', methods=['GET'])
def list_pets_by_owner(owner_name, owner_phone):
    """Pets whose owner name and phone both match exactly."""
    result = pets.list_by_owner(owner_name, owner_phone)
    if not result:
        return jsonify({
            'success': False,
            'error': 'No active pets found for this owner'
        }), 404
    return jsonify({'success': True, 'data': [p.to_dict() for p in result]}), 200


@pets_bp.route('', methods=['POST'])
def create_pet():
    """
    Create new pet
    Access: Staff, Admin
    Body: name, species, gender (required); breed, birth_date, owner_name, owner_phone
    """
    data = json_body()
    pet = pets.create(data, current_actor())
    return jsonify({
        'success': True,
        'data': pet.to_dict(),
        'message': 'Pet created successfully'
    }), 201


@pets_bp.route('/<pet_id>', methods=['PUT'])
def update_pet(pet_id):
    data = json_body()
    pet = pets.update(pet_id, data, current_actor())
    return jsonify({
        'success': True,
        'data': pet.to_dict(),
        'message': 'Pet updated successfully'
    }), 200


@pets_bp.route('/<pet_id>/active-status', methods=['PUT'])
def deactivate_pet(pet_id):
    actor = current_actor()
    pets.deactivate(pet_id, actor)
    return jsonify({
        'success': True,
        'data': {'id': pet_id, 'deactivated_by': actor},
        'message': 'Pet deactivated successfully'
    }), 200
