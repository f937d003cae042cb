from vetclinic.exceptions import NotFound
from vetclinic.models import MedicalRecord, Treatment, User
from .appointment import active_exists
from .base import BaseRepository, parse_positive_int


class TreatmentRepository(BaseRepository):
    model = Treatment
    entity_name = 'Treatment'
    required_fields = ('medicalrecord_id', 'description', 'cost')
    updatable_fields = ('description', 'cost')
    create_fields = ('doctor_id',)
    parsers = {'cost': parse_positive_int}

    def check_references(self, values):
        if 'medicalrecord_id' in values and not active_exists(MedicalRecord, values['medicalrecord_id']):
            raise NotFound('Medical record not found')
        if 'doctor_id' in values and not active_exists(User, values['doctor_id']):
            raise NotFound('Doctor not found')

    def list_by_medical_record(self, medicalrecord_id):
        """Active treatments, newest first."""
        return self.list_active(medicalrecord_id=medicalrecord_id, order_by=Treatment.created_at.desc())
