"""
Shared pytest fixtures: a fresh in-memory database per test, one user per
role, bearer headers and small factories for the clinic records.
"""
import os
from datetime import datetime, timedelta

import pytest

os.environ.setdefault('FLASK_ENV', 'testing')

from vetclinic import create_app
from vetclinic.extensions import db as _db
from vetclinic.repositories import UserRepository
from vetclinic.services.token_service import issue_token

PASSWORDS = {
    'Staff': 'staff-pass-123',
    'Doctor': 'doctor-pass-123',
    'Admin': 'admin-pass-123',
}


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def clock(monkeypatch):
    """Deterministic audit clock; call clock.advance(...) between writes."""
    class Clock:
        def __init__(self):
            self.now = datetime(2024, 3, 1, 9, 0, 0)

        def __call__(self):
            return self.now

        def advance(self, **kwargs):
            self.now += timedelta(**kwargs)

    fake = Clock()
    monkeypatch.setattr('vetclinic.repositories.base.utcnow', fake)
    return fake


def _register(role, email=None, name=None):
    return UserRepository().register({
        'name': name or f'{role} User',
        'email': email or f'{role.lower()}@clinic.test',
        'password': PASSWORDS[role],
        'role': role,
        'phone': '555-0100',
    })


def bearer(user):
    return {'Authorization': f'Bearer {issue_token(user)}'}


@pytest.fixture
def staff_user(app):
    return _register('Staff')


@pytest.fixture
def doctor_user(app):
    return _register('Doctor')


@pytest.fixture
def admin_user(app):
    return _register('Admin')


@pytest.fixture
def staff_headers(staff_user):
    return bearer(staff_user)


@pytest.fixture
def doctor_headers(doctor_user):
    return bearer(doctor_user)


@pytest.fixture
def admin_headers(admin_user):
    return bearer(admin_user)


@pytest.fixture
def create_pet(client, staff_headers):
    def _create(**overrides):
        payload = {
            'name': 'Milo',
            'species': 'Dog',
            'breed': 'Beagle',
            'gender': 'Male',
            'birth_date': '2021-04',
            'owner_name': 'Ana Lima',
            'owner_phone': '555-1234',
        }
        payload.update(overrides)
        resp = client.post('/api/pets', json=payload, headers=staff_headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()['data']
    return _create


@pytest.fixture
def create_appointment(client, staff_headers):
    def _create(pet_id, **overrides):
        payload = {
            'pet_id': pet_id,
            'appointment_datetime': '2024-05-01T10:30:00',
            'notes': 'Annual checkup',
        }
        payload.update(overrides)
        resp = client.post('/api/appointments', json=payload, headers=staff_headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()['data']
    return _create


@pytest.fixture
def create_medical_record(client, doctor_headers):
    def _create(appointment, **overrides):
        payload = {
            'appointment_id': appointment['id'],
            'pet_id': appointment['pet_id'],
            'diagnosis': 'Mild otitis',
            'notes': 'Left ear',
        }
        payload.update(overrides)
        resp = client.post('/api/medical-records', json=payload, headers=doctor_headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()['data']
    return _create


@pytest.fixture
def create_treatment(client, doctor_headers):
    def _create(record_id, cost, **overrides):
        payload = {
            'medicalrecord_id': record_id,
            'description': 'Ear drops',
            'cost': cost,
        }
        payload.update(overrides)
        resp = client.post('/api/treatments', json=payload, headers=doctor_headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()['data']
    return _create
