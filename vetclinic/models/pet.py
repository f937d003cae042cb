from vetclinic.extensions import db
from .base import AuditMixin


class Pet(db.Model, AuditMixin):
    __tablename__ = 'Pets'

    name = db.Column(db.String(100), nullable=False)
    species = db.Column(db.String(50), nullable=False)
    breed = db.Column(db.String(100))
    gender = db.Column(db.String(20), nullable=False)
    birth_date = db.Column(db.String(30))  # free text, e.g. "2021-04" or "about 3 years"

    # Owner is denormalized: no owner table, pets share an owner by name + phone
    owner_name = db.Column(db.String(100), index=True)
    owner_phone = db.Column(db.String(20), index=True)

    appointments = db.relationship('Appointment', backref='pet', lazy='dynamic')

    def to_dict(self):
        data = {
            'id': self.id,
            'name': self.name,
            'species': self.species,
            'breed': self.breed,
            'gender': self.gender,
            'birth_date': self.birth_date,
            'owner_name': self.owner_name,
            'owner_phone': self.owner_phone,
        }
        data.update(self.audit_dict())
        return data

    def __repr__(self):
        return f"<Pet {self.name} ({self.species}) - {self.owner_name}>"
