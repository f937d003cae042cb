from .user import User
from .pet import Pet
from .appointment import Appointment
from .medical_record import MedicalRecord
from .treatment import Treatment

__all__ = ["User", "Pet", "Appointment", "MedicalRecord", "Treatment"]
