"""GET /api/appointments/<id>/full and the service that composes it."""
import pytest
from sqlalchemy.exc import OperationalError

from vetclinic.exceptions import NotFound
from vetclinic.repositories import TreatmentRepository
from vetclinic.repositories.base import persistence_guard
from vetclinic.services import get_full_appointment_detail


@pytest.fixture
def appointment(create_pet, create_appointment):
    pet = create_pet()
    return create_appointment(pet['id'])


def _full(client, appointment_id, headers):
    return client.get(f'/api/appointments/{appointment_id}/full', headers=headers)


def test_appointment_without_record(client, staff_headers, appointment):
    resp = _full(client, appointment['id'], staff_headers)
    assert resp.status_code == 200
    data = resp.get_json()['data']
    assert data['appointment'] == appointment
    assert data['medical_record'] is None
    assert data['treatments'] == []
    assert data['total_cost'] == 0


def test_record_with_treatments(client, clock, doctor_headers, appointment,
                                create_medical_record, create_treatment):
    record = create_medical_record(appointment)
    first = create_treatment(record['id'], 100)
    clock.advance(minutes=1)
    second = create_treatment(record['id'], 250, description='Antibiotics')

    resp = _full(client, appointment['id'], doctor_headers)
    assert resp.status_code == 200
    data = resp.get_json()['data']
    assert data['medical_record']['id'] == record['id']
    assert [t['id'] for t in data['treatments']] == [second['id'], first['id']]
    assert data['total_cost'] == 350


def test_record_without_treatments(client, staff_headers, appointment, create_medical_record):
    record = create_medical_record(appointment)
    data = _full(client, appointment['id'], staff_headers).get_json()['data']
    assert data['medical_record']['id'] == record['id']
    assert data['treatments'] == []
    assert data['total_cost'] == 0


def test_inactive_treatments_are_not_counted(client, doctor_headers, appointment,
                                             create_medical_record, create_treatment):
    record = create_medical_record(appointment)
    create_treatment(record['id'], 100)
    dropped = create_treatment(record['id'], 900)
    client.put(f"/api/treatments/{dropped['id']}/active-status", headers=doctor_headers)

    data = _full(client, appointment['id'], doctor_headers).get_json()['data']
    assert len(data['treatments']) == 1
    assert data['total_cost'] == 100


def test_inactive_record_reads_as_no_record(client, admin_headers, appointment,
                                            create_medical_record, create_treatment):
    record = create_medical_record(appointment)
    create_treatment(record['id'], 100)
    client.put(f"/api/medical-records/{record['id']}/active-status", headers=admin_headers)

    data = _full(client, appointment['id'], admin_headers).get_json()['data']
    assert data['medical_record'] is None
    assert data['total_cost'] == 0


def test_missing_or_inactive_appointment(client, staff_headers, appointment):
    assert _full(client, 'missing', staff_headers).status_code == 404
    client.put(f"/api/appointments/{appointment['id']}/active-status", headers=staff_headers)
    resp = _full(client, appointment['id'], staff_headers)
    assert resp.status_code == 404
    assert resp.get_json()['error'] == 'Appointment not found'


def test_store_failure_is_opaque_500(client, monkeypatch, staff_headers, appointment, create_medical_record):
    create_medical_record(appointment)

    def broken(self, medicalrecord_id):
        with persistence_guard('fetch treatment list'):
            raise OperationalError('SELECT ...', {}, Exception('database is locked'))

    monkeypatch.setattr(TreatmentRepository, 'list_by_medical_record', broken)
    resp = _full(client, appointment['id'], staff_headers)
    assert resp.status_code == 500
    body = resp.get_json()
    assert body['success'] is False
    assert 'locked' not in body['error']


def test_service_returns_typed_detail(app, appointment, create_medical_record, create_treatment):
    record = create_medical_record(appointment)
    create_treatment(record['id'], 40)

    detail = get_full_appointment_detail(appointment['id'])
    assert detail.has_medical_record
    assert detail.appointment.id == appointment['id']
    assert detail.total_cost == 40

    with pytest.raises(NotFound):
        get_full_appointment_detail('missing')
