"""Session store backed by the ``session`` table"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlmodel import Session, delete

from tedx_ndu.models.session import AdminSession

logger = logging.getLogger(__name__)

SESSION_MAX_AGE = timedelta(days=30)


def _as_utc(value: datetime) -> datetime:
    # MySQL and SQLite hand back naive datetimes; everything is stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SessionStore:
    """Create, resolve and destroy persisted login sessions"""

    def __init__(self, db_session: Session, max_age: timedelta = SESSION_MAX_AGE):
        self.db = db_session
        self.max_age = max_age

    def create(self, user_id: int) -> str:
        """
        Persist a new session for the user

        Args:
            user_id: Numeric id of the authenticated user

        Returns:
            The generated session id to place in the cookie
        """
        now = datetime.now(timezone.utc)
        self.prune_expired(now)

        sid = secrets.token_urlsafe(32)
        row = AdminSession(
            sid=sid,
            user_id=user_id,
            created_at=now,
            expires_at=now + self.max_age,
        )
        self.db.add(row)
        self.db.commit()

        logger.info(f"Opened session for user {user_id}")
        return sid

    def resolve(self, sid: str) -> Optional[int]:
        """Return the user id for a live session, dropping it if expired"""
        row = self.db.get(AdminSession, sid)
        if not row:
            return None

        user_id = row.user_id
        if _as_utc(row.expires_at) <= datetime.now(timezone.utc):
            self.db.delete(row)
            self.db.commit()
            logger.info(f"Session for user {user_id} expired")
            return None

        return user_id

    def prune_expired(self, now: Optional[datetime] = None) -> int:
        """Delete every expired row; returns how many were removed"""
        now = now or datetime.now(timezone.utc)
        result = self.db.exec(delete(AdminSession).where(AdminSession.expires_at <= now))
        self.db.commit()
        if result.rowcount:
            logger.info(f"Pruned {result.rowcount} expired sessions")
        return result.rowcount

    def destroy(self, sid: str) -> None:
        row = self.db.get(AdminSession, sid)
        if row:
            self.db.delete(row)
            self.db.commit()
