"""
Full appointment detail: one appointment joined with its medical record and
treatments, plus the summed treatment cost.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from vetclinic.models import Appointment, MedicalRecord, Treatment
from vetclinic.repositories import AppointmentRepository, MedicalRecordRepository, TreatmentRepository

logger = logging.getLogger(__name__)


@dataclass
class AppointmentDetail:
    appointment: Appointment
    # None means no record has been written yet, which is a valid state
    medical_record: Optional[MedicalRecord] = None
    treatments: List[Treatment] = field(default_factory=list)
    total_cost: int = 0

    @property
    def has_medical_record(self):
        return self.medical_record is not None

    def to_dict(self):
        return {
            'appointment': self.appointment.to_dict(),
            'medical_record': self.medical_record.to_dict() if self.has_medical_record else None,
            'treatments': [t.to_dict() for t in self.treatments],
            'total_cost': self.total_cost,
        }


def get_full_appointment_detail(appointment_id, appointments=None, medical_records=None, treatments=None):
    """
    Compose the detail view for one appointment.

    Raises NotFound if the appointment is missing or inactive. A missing
    medical record yields an empty treatment list and a total cost of 0.
    Store failures in any of the three reads propagate as PersistenceError.
    """
    appointments = appointments or AppointmentRepository()
    medical_records = medical_records or MedicalRecordRepository()
    treatments = treatments or TreatmentRepository()

    appointment = appointments.fetch_by_id(appointment_id)
    detail = AppointmentDetail(appointment=appointment)

    record = medical_records.find_by_appointment(appointment.id)
    if record is None:
        logger.debug(f"Appointment {appointment.id} has no medical record yet")
        return detail

    detail.medical_record = record
    detail.treatments = treatments.list_by_medical_record(record.id)
    detail.total_cost = sum(t.cost for t in detail.treatments)
    return detail
