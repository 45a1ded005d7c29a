"""Session-based admin authentication routes"""

import logging

from fastapi import APIRouter, Depends, Request, status
from sqlmodel import Session

from tedx_ndu.auth.authenticator import Authenticator
from tedx_ndu.auth.dependencies import (
    close_session,
    get_authenticator,
    open_session,
    require_user,
)
from tedx_ndu.models.database import get_db
from tedx_ndu.models.schemas import Credentials, MessageResponse, UserRead
from tedx_ndu.models.user import User
from tedx_ndu.services.user_service import UserService

router = APIRouter(prefix="/api", tags=["Authentication"])

logger = logging.getLogger(__name__)


def register_admin(request: Request, db: Session, credentials: Credentials) -> UserRead:
    """
    Create an admin account and log it in straight away.

    Shared with the event registration route, which hands over bodies that
    carry a ``username``.
    """
    user = UserService(db).create_user(credentials.username, credentials.password)
    open_session(request, db, user)
    return UserRead.model_validate(user)


@router.post("/login", response_model=UserRead)
def login(
    request: Request,
    credentials: Credentials,
    db: Session = Depends(get_db),
    authenticator: Authenticator = Depends(get_authenticator),
):
    """Verify credentials and open a session"""
    user = authenticator.verify(credentials.username or "", credentials.password or "")
    open_session(request, db, user)
    logger.info(f"Admin {user.id} logged in")
    return UserRead.model_validate(user)


@router.post("/logout", response_model=MessageResponse)
def logout(request: Request, db: Session = Depends(get_db)):
    close_session(request, db)
    return MessageResponse(message="Uğurla çıxış edildi")


@router.get("/user", response_model=UserRead)
async def current_user(user: User = Depends(require_user)):
    return UserRead.model_validate(user)


# Account creation lives on POST /api/register together with event
# registrations; see routers/registration.py. This alias keeps a dedicated path.
@router.post(
    "/auth/register", response_model=UserRead, status_code=status.HTTP_201_CREATED
)
def register_account(
    request: Request, credentials: Credentials, db: Session = Depends(get_db)
):
    return register_admin(request, db, credentials)
