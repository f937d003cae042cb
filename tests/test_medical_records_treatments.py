"""Medical records and the treatments written against them."""
import pytest


@pytest.fixture
def appointment(create_pet, create_appointment):
    pet = create_pet()
    return create_appointment(pet['id'])


@pytest.fixture
def record(appointment, create_medical_record):
    return create_medical_record(appointment)


class TestMedicalRecords:

    def test_create(self, doctor_user, appointment, create_medical_record):
        record = create_medical_record(appointment)
        assert record['appointment_id'] == appointment['id']
        assert record['pet_id'] == appointment['pet_id']
        assert record['diagnosis'] == 'Mild otitis'
        assert record['created_by'] == doctor_user.id

    def test_missing_fields(self, client, doctor_headers):
        resp = client.post('/api/medical-records', json={'diagnosis': 'x'}, headers=doctor_headers)
        assert resp.status_code == 400
        assert 'appointment_id' in resp.get_json()['error']

    def test_unknown_appointment(self, client, doctor_headers, appointment):
        resp = client.post('/api/medical-records', json={
            'appointment_id': 'missing', 'pet_id': appointment['pet_id'], 'diagnosis': 'x',
        }, headers=doctor_headers)
        assert resp.status_code == 404
        assert resp.get_json()['error'] == 'Appointment not found'

    def test_unknown_pet(self, client, doctor_headers, appointment):
        resp = client.post('/api/medical-records', json={
            'appointment_id': appointment['id'], 'pet_id': 'missing', 'diagnosis': 'x',
        }, headers=doctor_headers)
        assert resp.status_code == 404
        assert resp.get_json()['error'] == 'Pet not found'

    def test_get_by_appointment(self, client, staff_headers, appointment, record):
        resp = client.get(f"/api/medical-records/appointment/{appointment['id']}", headers=staff_headers)
        assert resp.status_code == 200
        assert resp.get_json()['data']['id'] == record['id']

    def test_get_by_appointment_without_record(self, client, staff_headers, appointment):
        resp = client.get(f"/api/medical-records/appointment/{appointment['id']}", headers=staff_headers)
        assert resp.status_code == 404
        assert resp.get_json()['error'] == 'Medical record not found'

    def test_most_recent_record_wins(self, client, clock, staff_headers, appointment, create_medical_record):
        create_medical_record(appointment, diagnosis='First look')
        clock.advance(minutes=30)
        latest = create_medical_record(appointment, diagnosis='Second look')
        resp = client.get(f"/api/medical-records/appointment/{appointment['id']}", headers=staff_headers)
        assert resp.get_json()['data']['id'] == latest['id']

    def test_update(self, client, doctor_headers, record):
        resp = client.put(f"/api/medical-records/{record['id']}", json={
            'diagnosis': 'Otitis externa', 'notes': '',
        }, headers=doctor_headers)
        assert resp.status_code == 200
        data = resp.get_json()['data']
        assert data['diagnosis'] == 'Otitis externa'
        assert data['notes'] == 'Left ear'

    def test_staff_cannot_update(self, client, staff_headers, record):
        resp = client.put(f"/api/medical-records/{record['id']}", json={'diagnosis': 'x'}, headers=staff_headers)
        assert resp.status_code == 403

    def test_only_admin_deactivates(self, client, doctor_headers, admin_headers, appointment, record):
        path = f"/api/medical-records/{record['id']}/active-status"
        assert client.put(path, headers=doctor_headers).status_code == 403
        assert client.put(path, headers=admin_headers).status_code == 200
        resp = client.get(f"/api/medical-records/appointment/{appointment['id']}", headers=admin_headers)
        assert resp.status_code == 404


class TestTreatments:

    def test_create(self, doctor_user, record, create_treatment):
        treatment = create_treatment(record['id'], 120, doctor_id=doctor_user.id)
        assert treatment['cost'] == 120
        assert treatment['doctor_id'] == doctor_user.id
        assert treatment['medicalrecord_id'] == record['id']

    @pytest.mark.parametrize('cost', [0, -5, 12.5, '100', True])
    def test_cost_must_be_a_positive_integer(self, client, doctor_headers, record, cost):
        resp = client.post('/api/treatments', json={
            'medicalrecord_id': record['id'], 'description': 'Drops', 'cost': cost,
        }, headers=doctor_headers)
        assert resp.status_code == 400

    def test_unknown_medical_record(self, client, doctor_headers):
        resp = client.post('/api/treatments', json={
            'medicalrecord_id': 'missing', 'description': 'Drops', 'cost': 10,
        }, headers=doctor_headers)
        assert resp.status_code == 404
        assert resp.get_json()['error'] == 'Medical record not found'

    def test_staff_cannot_create(self, client, staff_headers, record):
        resp = client.post('/api/treatments', json={
            'medicalrecord_id': record['id'], 'description': 'Drops', 'cost': 10,
        }, headers=staff_headers)
        assert resp.status_code == 403

    def test_list_newest_first(self, client, clock, staff_headers, record, create_treatment):
        older = create_treatment(record['id'], 100)
        clock.advance(minutes=10)
        newer = create_treatment(record['id'], 250)
        resp = client.get(f"/api/treatments/medicalrecord/{record['id']}", headers=staff_headers)
        assert resp.status_code == 200
        assert [t['id'] for t in resp.get_json()['data']] == [newer['id'], older['id']]

    def test_list_for_unknown_record_is_empty(self, client, staff_headers):
        resp = client.get('/api/treatments/medicalrecord/missing', headers=staff_headers)
        assert resp.status_code == 200
        assert resp.get_json()['data'] == []

    def test_update(self, client, doctor_headers, record, create_treatment):
        treatment = create_treatment(record['id'], 100)
        resp = client.put(f"/api/treatments/{treatment['id']}", json={'description': '', 'cost': 80},
                          headers=doctor_headers)
        assert resp.status_code == 200
        data = resp.get_json()['data']
        assert data['cost'] == 80
        assert data['description'] == 'Ear drops'

    def test_update_with_zero_cost_keeps_cost(self, client, doctor_headers, record, create_treatment):
        treatment = create_treatment(record['id'], 100)
        resp = client.put(f"/api/treatments/{treatment['id']}", json={'cost': 0}, headers=doctor_headers)
        assert resp.status_code == 200
        assert resp.get_json()['data']['cost'] == 100

    def test_update_with_negative_cost(self, client, doctor_headers, record, create_treatment):
        treatment = create_treatment(record['id'], 100)
        resp = client.put(f"/api/treatments/{treatment['id']}", json={'cost': -1}, headers=doctor_headers)
        assert resp.status_code == 400

    def test_deactivated_treatment_is_not_listed(self, client, doctor_headers, record, create_treatment):
        treatment = create_treatment(record['id'], 100)
        resp = client.put(f"/api/treatments/{treatment['id']}/active-status", headers=doctor_headers)
        assert resp.status_code == 200
        resp = client.get(f"/api/treatments/medicalrecord/{record['id']}", headers=doctor_headers)
        assert resp.get_json()['data'] == []
