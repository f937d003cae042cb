from flask import Blueprint, jsonify

from vetclinic.exceptions import NotFound
from vetclinic.repositories import MedicalRecordRepository
from vetclinic.utils.authorization import current_actor
from vetclinic.utils.request_helpers import json_body

medical_records_bp = Blueprint('medical_records', __name__, url_prefix='/api/medical-records')

medical_records = MedicalRecordRepository()


@medical_records_bp.route('', methods=['POST'])
def create_medical_record():
    """
    Create new medical record
    Access: Doctor, Admin
    Body: appointment_id, pet_id, diagnosis required; notes optional
    """
    data = json_body()
    record = medical_records.create(data, current_actor())
    return jsonify({
        'success': True,
        'data': record.to_dict(),
        'message': 'Medical record created successfully'
    }), 201


@medical_records_bp.route('/appointment/<appointment_id>', methods=['GET'])
def get_by_appointment(appointment_id):
    record = medical_records.find_by_appointment(appointment_id)
    if record is None:
        raise NotFound('Medical record not found')
    return jsonify({'success': True, 'data': record.to_dict()}), 200


@medical_records_bp.route('/<record_id>', methods=['PUT'])
def update_medical_record(record_id):
    data = json_body()
    record = medical_records.update(record_id, data, current_actor())
    return jsonify({
        'success': True,
        'data': record.to_dict(),
        'message': 'Medical record updated successfully'
    }), 200


@medical_records_bp.route('/<record_id>/active-status', methods=['PUT'])
def deactivate_medical_record(record_id):
    """Access: Admin"""
    actor = current_actor()
    medical_records.deactivate(record_id, actor)
    return jsonify({
        'success': True,
        'data': {'id': record_id, 'deactivated_by': actor},
        'message': 'Medical record deactivated successfully'
    }), 200
