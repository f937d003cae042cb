from datetime import datetime, timedelta

from vetclinic.exceptions import BadRequest, NotFound
from vetclinic.models import Appointment, Pet, User
from vetclinic.models.appointment import STATUS_PENDING, VALID_STATUSES
from vetclinic.extensions import db
from .base import BaseRepository, parse_datetime, persistence_guard


def active_exists(model, entity_id):
    with persistence_guard('fetch reference'):
        return db.session.query(
            model.query.filter_by(id=entity_id, active_status=True).exists()
        ).scalar()


def parse_date(date_str):
    """YYYY-MM-DD -> date, or BadRequest."""
    try:
        return datetime.strptime(date_str, '%Y-%m-%d').date()
    except (TypeError, ValueError):
        raise BadRequest('Invalid date format. Use YYYY-MM-DD')


class AppointmentRepository(BaseRepository):
    model = Appointment
    entity_name = 'Appointment'
    required_fields = ('pet_id', 'appointment_datetime')
    updatable_fields = ('pet_id', 'doctor_id', 'appointment_datetime', 'notes')
    parsers = {'appointment_datetime': parse_datetime}

    def check_references(self, values):
        if 'pet_id' in values and not active_exists(Pet, values['pet_id']):
            raise NotFound('Pet not found')
        if 'doctor_id' in values and not active_exists(User, values['doctor_id']):
            raise NotFound('Doctor not found')

    def build(self, values):
        # Whatever the payload says, a new appointment starts out Pending
        return Appointment(status=STATUS_PENDING, **values)

    def update_status(self, entity_id, status, actor):
        if status not in VALID_STATUSES:
            raise BadRequest(f'Invalid status. Must be one of: {", ".join(VALID_STATUSES)}')
        appointment = self.fetch_by_id(entity_id)
        appointment.status = status
        self.stamp_modified(appointment, actor)
        with persistence_guard('update appointment status'):
            db.session.commit()
        return appointment

    def list_by_pet(self, pet_id):
        return self.list_active(pet_id=pet_id, order_by=Appointment.appointment_datetime.desc())

    def list_by_doctor(self, doctor_id):
        return self.list_active(doctor_id=doctor_id, order_by=Appointment.appointment_datetime.desc())

    def list_by_date(self, date_str):
        """Appointments on a calendar day, matched as the range [day, day + 1)."""
        day = parse_date(date_str)
        start = datetime.combine(day, datetime.min.time())
        end = start + timedelta(days=1)
        return self.list_active(
            Appointment.appointment_datetime >= start,
            Appointment.appointment_datetime < end,
            order_by=Appointment.appointment_datetime.desc(),
        )
