"""User Service - Handles admin account database operations"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from tedx_ndu.auth.passwords import hash_password
from tedx_ndu.errors import ConflictError, ValidationError
from tedx_ndu.models.user import User

logger = logging.getLogger(__name__)

USERNAME_TAKEN = "Bu istifadəçi adı artıq mövcuddur"
CREDENTIALS_REQUIRED = "İstifadəçi adı və şifrə tələb olunur"


class UserService:
    """Service for handling admin user operations"""

    def __init__(self, db_session: Session):
        self.db = db_session

    def create_user(self, username: Optional[str], password: Optional[str]) -> User:
        """
        Create a new admin user with a hashed password

        Args:
            username: Unique login name
            password: Plain-text password, hashed before storage

        Returns:
            Created User object

        Raises:
            ValidationError: If username or password is empty
            ConflictError: If the username is already taken
        """
        if not username or not password:
            raise ValidationError(CREDENTIALS_REQUIRED)

        if self.get_user_by_username(username):
            raise ConflictError(USERNAME_TAKEN)

        user = User(username=username, password=hash_password(password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent request for the same username
            self.db.rollback()
            raise ConflictError(USERNAME_TAKEN)

        self.db.refresh(user)
        logger.info(f"Admin user created: {user.id}")
        return user

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by their numeric id"""
        return self.db.get(User, user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        """Get a user by username"""
        statement = select(User).where(User.username == username)
        return self.db.exec(statement).first()
