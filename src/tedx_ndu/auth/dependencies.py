"""Authentication dependencies for FastAPI"""

import logging
from typing import Optional

from fastapi import Depends, Request
from sqlmodel import Session

from tedx_ndu.auth.authenticator import Authenticator, DatabaseAuthenticator
from tedx_ndu.auth.session_store import SessionStore
from tedx_ndu.errors import UnauthorizedError
from tedx_ndu.models.database import get_db
from tedx_ndu.models.user import User
from tedx_ndu.services.user_service import UserService

logger = logging.getLogger(__name__)

SESSION_KEY = "sid"


def get_authenticator(db: Session = Depends(get_db)) -> Authenticator:
    """Authenticator used by the login route; overridden in tests"""
    return DatabaseAuthenticator(db)


def get_current_user(
    request: Request, db: Session = Depends(get_db)
) -> Optional[User]:
    """
    Resolve the logged-in admin from the session cookie.

    Returns:
        - User for a live session whose user still exists
        - None when there is no session, it expired, or the user is gone
    """
    sid = request.session.get(SESSION_KEY)
    if not sid:
        return None

    user_id = SessionStore(db).resolve(sid)
    user = UserService(db).get_user_by_id(user_id) if user_id is not None else None
    if not user:
        # Stale cookie: forget it so the browser stops sending it
        request.session.clear()
        return None

    return user


async def require_user(user: Optional[User] = Depends(get_current_user)) -> User:
    if not user:
        raise UnauthorizedError("Giriş edilməyib")
    return user


async def require_admin(user: Optional[User] = Depends(get_current_user)) -> User:
    """Guard for every /api/admin route; runs before any handler logic"""
    if not user:
        raise UnauthorizedError("Bu əməliyyat üçün giriş etməlisiniz")
    return user


def open_session(request: Request, db: Session, user: User) -> None:
    """Persist a session row and bind its id to the signed cookie.

    A session the browser already holds is replaced, not left behind.
    """
    store = SessionStore(db)
    previous = request.session.get(SESSION_KEY)
    if previous:
        store.destroy(previous)
    request.session.clear()
    request.session[SESSION_KEY] = store.create(user.id)


def close_session(request: Request, db: Session) -> None:
    sid = request.session.get(SESSION_KEY)
    if sid:
        SessionStore(db).destroy(sid)
    request.session.clear()
