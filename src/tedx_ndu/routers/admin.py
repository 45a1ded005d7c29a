"""Admin dashboard API. Every route requires a logged-in session."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from tedx_ndu.auth.dependencies import require_admin
from tedx_ndu.errors import NotFoundError
from tedx_ndu.models.database import get_db
from tedx_ndu.models.schemas import (
    AdminStats,
    ContactRead,
    MessageResponse,
    RegistrationRead,
)
from tedx_ndu.services.contact_service import ContactService
from tedx_ndu.services.registration_service import RegistrationService
from tedx_ndu.services.stats_service import StatsService

# The guard runs as a router dependency, before any handler body
router = APIRouter(
    prefix="/api/admin", tags=["Admin"], dependencies=[Depends(require_admin)]
)


@router.get("/registrations", response_model=list[RegistrationRead])
def list_registrations(db: Session = Depends(get_db)):
    return [
        RegistrationRead.model_validate(r)
        for r in RegistrationService(db).list_registrations()
    ]


@router.delete("/registrations/{registration_id}", response_model=MessageResponse)
def delete_registration(registration_id: int, db: Session = Depends(get_db)):
    RegistrationService(db).delete_registration(registration_id)
    return MessageResponse(message="Qeydiyyat silindi")


@router.get("/contacts", response_model=list[ContactRead])
def list_contacts(db: Session = Depends(get_db)):
    return [ContactRead.model_validate(c) for c in ContactService(db).list_contacts()]


@router.delete("/contacts/{contact_id}", response_model=MessageResponse)
def delete_contact(contact_id: int, db: Session = Depends(get_db)):
    ContactService(db).delete_contact(contact_id)
    return MessageResponse(message="Əlaqə mesajı silindi")


@router.patch("/contacts/{contact_id}/read", response_model=ContactRead)
def mark_contact_read(contact_id: int, db: Session = Depends(get_db)):
    """Mark a message read; repeating the call is harmless"""
    return ContactRead.model_validate(ContactService(db).mark_read(contact_id))


@router.get("/stats", response_model=AdminStats)
def dashboard_stats(db: Session = Depends(get_db)):
    """Totals and occupation breakdown for the dashboard"""
    return StatsService(db).get_stats()


# Registered last so unknown /api/admin paths still pass through the guard
@router.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
def unknown_admin_route(path: str):
    raise NotFoundError("Not Found")
