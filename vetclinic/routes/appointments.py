from flask import Blueprint, jsonify

from vetclinic.repositories import AppointmentRepository
from vetclinic.services.appointment_detail import get_full_appointment_detail
from vetclinic.utils.authorization import current_actor
from vetclinic.utils.request_helpers import json_body

appointments_bp = Blueprint('appointments', __name__, url_prefix='/api/appointments')

appointments = AppointmentRepository()


def _list_response(result):
    return jsonify({'success': True, 'data': [a.to_dict() for a in result]}), 200


@appointments_bp.route('', methods=['POST'])
def create_appointment():
    """
    Create new appointment
    Access: Staff, Admin
    Body: pet_id, appointment_datetime (ISO 8601) required; doctor_id, notes optional.
    Status always starts as Pending.
    """
    data = json_body()
    appointment = appointments.create(data, current_actor())
    return jsonify({
        'success': True,
        'data': appointment.to_dict(),
        'message': 'Appointment created successfully'
    }), 201


@appointments_bp.route('/<appointment_id>', methods=['GET'])
def get_appointment(appointment_id):
    appointment = appointments.fetch_by_id(appointment_id)
    return jsonify({'success': True, 'data': appointment.to_dict()}), 200


@appointments_bp.route('/<appointment_id>', methods=['PUT'])
def update_appointment(appointment_id):
    data = json_body()
    appointment = appointments.update(appointment_id, data, current_actor())
    return jsonify({
        'success': True,
        'data': appointment.to_dict(),
        'message': 'Appointment updated successfully'
    }), 200


@appointments_bp.route('/<appointment_id>/status', methods=['PUT'])
def update_appointment_status(appointment_id):
    """Body: status (Pending|Cancelled|Completed)"""
    data = json_body()
    appointment = appointments.update_status(appointment_id, data.get('status'), current_actor())
    return jsonify({
        'success': True,
        'data': appointment.to_dict(),
        'message': 'Appointment status updated successfully'
    }), 200


@appointments_bp.route('/<appointment_id>/active-status', methods=['PUT'])
def deactivate_appointment(appointment_id):
    actor = current_actor()
    appointments.deactivate(appointment_id, actor)
    return jsonify({
        'success': True,
        'data': {'id': appointment_id, 'deactivated_by': actor},
        'message': 'Appointment deactivated successfully'
    }), 200


@appointments_bp.route('/pet/<pet_id>', methods=['GET'])
def list_by_pet(pet_id):
    """Newest appointment first"""
    return _list_response(appointments.list_by_pet(pet_id))


@appointments_bp.route('/doctor/<doctor_id>', methods=['GET'])
def list_by_doctor(doctor_id):
    return _list_response(appointments.list_by_doctor(doctor_id))


@appointments_bp.route('/date/<date>', methods=['GET'])
def list_by_date(date):
    """date: YYYY-MM-DD"""
    return _list_response(appointments.list_by_date(date))


@appointments_bp.route('/<appointment_id>/full', methods=['GET'])
def get_full_appointment(appointment_id):
    """
    Appointment with its medical record, treatments and total treatment cost.
    medical_record is null and treatments empty when no record exists yet.
    """
    detail = get_full_appointment_detail(appointment_id, appointments=appointments)
    return jsonify({'success': True, 'data': detail.to_dict()}), 200
