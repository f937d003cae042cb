from .users import users_bp
from .pets import pets_bp
from .appointments import appointments_bp
from .medical_records import medical_records_bp
from .treatments import treatments_bp
from .health import health_bp

__all__ = ['users_bp', 'pets_bp', 'appointments_bp', 'medical_records_bp', 'treatments_bp', 'health_bp']
