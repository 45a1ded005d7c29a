"""SQLModel model for persisted admin login sessions"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import Field, SQLModel


class AdminSession(SQLModel, table=True):
    """Server-side half of a login session; the cookie only carries ``sid``"""

    __tablename__ = "session"

    sid: str = Field(primary_key=True, max_length=64)
    user_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    expires_at: datetime
