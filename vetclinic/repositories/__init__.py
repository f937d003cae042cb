from .user import UserRepository
from .pet import PetRepository
from .appointment import AppointmentRepository
from .medical_record import MedicalRecordRepository
from .treatment import TreatmentRepository

__all__ = [
    "UserRepository",
    "PetRepository",
    "AppointmentRepository",
    "MedicalRecordRepository",
    "TreatmentRepository",
]
