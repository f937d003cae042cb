from vetclinic.extensions import db
from .base import AuditMixin


class Treatment(db.Model, AuditMixin):
    __tablename__ = 'Treatments'

    medicalrecord_id = db.Column(db.String(36), db.ForeignKey('MedicalRecords.id'), nullable=False, index=True)
    doctor_id = db.Column(db.String(36), db.ForeignKey('Users.id'), nullable=True)
    description = db.Column(db.Text, nullable=False)
    cost = db.Column(db.Integer, nullable=False)  # whole currency units, > 0

    def to_dict(self):
        data = {
            'id': self.id,
            'medicalrecord_id': self.medicalrecord_id,
            'doctor_id': self.doctor_id,
            'description': self.description,
            'cost': self.cost,
        }
        data.update(self.audit_dict())
        return data

    def __repr__(self):
        return f"<Treatment {self.id} - {self.description} ({self.cost})>"
