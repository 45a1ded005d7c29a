"""Public event registration endpoints"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from pydantic import ValidationError as PydanticValidationError
from sqlmodel import Session

from tedx_ndu.errors import ValidationError
from tedx_ndu.models.database import get_db
from tedx_ndu.models.schemas import Credentials, RegistrationCreate, RegistrationRead
from tedx_ndu.routers.auth import register_admin
from tedx_ndu.services.registration_service import RegistrationService

router = APIRouter(prefix="/api", tags=["Registration"])

logger = logging.getLogger(__name__)


def _submit(db: Session, data: RegistrationCreate) -> RegistrationRead:
    registration = RegistrationService(db).create_registration(data)
    return RegistrationRead.model_validate(registration)


@router.post(
    "/registration",
    response_model=RegistrationRead,
    status_code=status.HTTP_201_CREATED,
)
def submit_registration(data: RegistrationCreate, db: Session = Depends(get_db)):
    """Register an attendee for the event"""
    return _submit(db, data)


@router.post("/register", response_model=None, status_code=status.HTTP_201_CREATED)
def register(
    request: Request,
    payload: dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
):
    """
    Shared registration endpoint.

    A body with a ``username`` creates an admin account and logs it in;
    anything else is an event registration.
    """
    try:
        if "username" in payload:
            return register_admin(request, db, Credentials.model_validate(payload))
        data = RegistrationCreate.model_validate(payload)
    except PydanticValidationError as e:
        logger.info(f"Rejected registration body: {e.errors()}")
        raise ValidationError("Invalid request body")

    return _submit(db, data)
