from vetclinic.exceptions import NotFound
from vetclinic.models import Appointment, MedicalRecord, Pet
from .appointment import active_exists
from .base import BaseRepository, persistence_guard


class MedicalRecordRepository(BaseRepository):
    model = MedicalRecord
    entity_name = 'Medical record'
    required_fields = ('appointment_id', 'pet_id', 'diagnosis')
    updatable_fields = ('diagnosis', 'notes')

    def check_references(self, values):
        if 'appointment_id' in values and not active_exists(Appointment, values['appointment_id']):
            raise NotFound('Appointment not found')
        if 'pet_id' in values and not active_exists(Pet, values['pet_id']):
            raise NotFound('Pet not found')

    def find_by_appointment(self, appointment_id):
        """
        The active record for an appointment, or None when none has been written.
        Should several exist, the most recent one wins.
        """
        with persistence_guard('fetch medical record'):
            return (MedicalRecord.query
                    .filter_by(appointment_id=appointment_id, active_status=True)
                    .order_by(MedicalRecord.created_at.desc())
                    .first())
