from flask import Blueprint, jsonify

from vetclinic.repositories import TreatmentRepository
from vetclinic.utils.authorization import current_actor
from vetclinic.utils.request_helpers import json_body

treatments_bp = Blueprint('treatments', __name__, url_prefix='/api/treatments')

treatments = TreatmentRepository()


@treatments_bp.route('', methods=['POST'])
def create_treatment():
    """
    Create new treatment
    Access: Doctor, Admin
    Body: medicalrecord_id, description, cost (integer > 0) required; doctor_id optional
    """
    data = json_body()
    treatment = treatments.create(data, current_actor())
    return jsonify({
        'success': True,
        'data': treatment.to_dict(),
        'message': 'Treatment created successfully'
    }), 201


@treatments_bp.route('/medicalrecord/<medicalrecord_id>', methods=['GET'])
def list_by_medical_record(medicalrecord_id):
    """Newest treatment first"""
    result = treatments.list_by_medical_record(medicalrecord_id)
    return jsonify({'success': True, 'data': [t.to_dict() for t in result]}), 200


@treatments_bp.route('/<treatment_id>', methods=['PUT'])
def update_treatment(treatment_id):
    data = json_body()
    treatment = treatments.update(treatment_id, data, current_actor())
    return jsonify({
        'success': True,
        'data': treatment.to_dict(),
        'message': 'Treatment updated successfully'
    }), 200


@treatments_bp.route('/<treatment_id>/active-status', methods=['PUT'])
def deactivate_treatment(treatment_id):
    actor = current_actor()
    treatments.deactivate(treatment_id, actor)
    return jsonify({
        'success': True,
        'data': {'id': treatment_id, 'deactivated_by': actor},
        'message': 'Treatment deactivated successfully'
    }), 200
