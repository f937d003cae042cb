from vetclinic.extensions import db
from .base import AuditMixin, isoformat

STATUS_PENDING = 'Pending'
STATUS_CANCELLED = 'Cancelled'
STATUS_COMPLETED = 'Completed'
VALID_STATUSES = (STATUS_PENDING, STATUS_CANCELLED, STATUS_COMPLETED)


class Appointment(db.Model, AuditMixin):
    __tablename__ = 'Appointments'

    pet_id = db.Column(db.String(36), db.ForeignKey('Pets.id'), nullable=False, index=True)
    doctor_id = db.Column(db.String(36), db.ForeignKey('Users.id'), nullable=True, index=True)

    # Pending, Cancelled, Completed. New appointments always start Pending.
    status = db.Column(db.String(20), nullable=False, default=STATUS_PENDING)
    appointment_datetime = db.Column(db.DateTime, nullable=False, index=True)
    notes = db.Column(db.Text)

    def to_dict(self):
        data = {
            'id': self.id,
            'pet_id': self.pet_id,
            'doctor_id': self.doctor_id,
            'status': self.status,
            'appointment_datetime': isoformat(self.appointment_datetime),
            'notes': self.notes,
        }
        data.update(self.audit_dict())
        return data

    def __repr__(self):
        return f"<Appointment {self.id} - Pet: {self.pet_id} on {self.appointment_datetime}>"
