from vetclinic.extensions import db
from .base import AuditMixin


class MedicalRecord(db.Model, AuditMixin):
    """
    Diagnosis written for one appointment.

    At most one active record per appointment is expected, but nothing in the
    schema enforces it; readers take the most recent active one.
    """
    __tablename__ = 'MedicalRecords'

    appointment_id = db.Column(db.String(36), db.ForeignKey('Appointments.id'), nullable=False, index=True)
    pet_id = db.Column(db.String(36), db.ForeignKey('Pets.id'), nullable=False, index=True)
    diagnosis = db.Column(db.Text, nullable=False)
    notes = db.Column(db.Text)

    appointment = db.relationship('Appointment', backref=db.backref('medical_records', lazy='dynamic'), lazy=True)

    def to_dict(self):
        data = {
            'id': self.id,
            'appointment_id': self.appointment_id,
            'pet_id': self.pet_id,
            'diagnosis': self.diagnosis,
            'notes': self.notes,
        }
        data.update(self.audit_dict())
        return data

    def __repr__(self):
        return f"<MedicalRecord {self.id} - Appointment: {self.appointment_id}>"
