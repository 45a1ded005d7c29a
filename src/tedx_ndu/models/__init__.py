"""Database models for the TEDx NDU backend"""

from tedx_ndu.models.contact import Contact
from tedx_ndu.models.registration import Registration
from tedx_ndu.models.session import AdminSession
from tedx_ndu.models.user import User

__all__ = [
    "User",
    "Registration",
    "Contact",
    "AdminSession",
]
