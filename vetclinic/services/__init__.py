"""
Services layer: token handling and composite reads.
"""
from .token_service import Claims, issue_token, token_lifetime_seconds, verify_request_token
from .appointment_detail import AppointmentDetail, get_full_appointment_detail

__all__ = [
    "Claims",
    "issue_token",
    "token_lifetime_seconds",
    "verify_request_token",
    "AppointmentDetail",
    "get_full_appointment_detail",
]
