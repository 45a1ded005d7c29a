"""Credential verification for admin login"""

import logging
from typing import Protocol

from sqlmodel import Session

from tedx_ndu.auth.passwords import verify_password
from tedx_ndu.errors import UnauthorizedError
from tedx_ndu.models.user import User
from tedx_ndu.services.user_service import UserService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "İstifadəçi adı və ya şifrə yanlışdır"


class Authenticator(Protocol):
    def verify(self, username: str, password: str) -> User:
        """Return the matching user or raise UnauthorizedError"""
        ...


class DatabaseAuthenticator:
    """Checks a username/password pair against the ``users`` table"""

    def __init__(self, db_session: Session):
        self.users = UserService(db_session)

    def verify(self, username: str, password: str) -> User:
        user = self.users.get_user_by_username(username) if username else None
        if not user or not password:
            logger.warning(f"Login failed for unknown user {username!r}")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        if not verify_password(password, user.password):
            logger.warning(f"Login failed for user {user.id}: bad password")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        return user
