from .user import User
from .doctor import Doctor
from .health_post import HealthPost
from .medication import Medication
from .appointment import Appointment

__all__ = ["User", "Doctor", "HealthPost", "Medication", "Appointment"]
