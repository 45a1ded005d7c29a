"""SQLModel Registration model"""

from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class Registration(SQLModel, table=True):
    """Event attendee registration submitted from the public form"""

    __tablename__ = "registrations"

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=255)
    last_name: str = Field(max_length=255)
    email: str = Field(max_length=255, unique=True)
    phone: str = Field(max_length=50)
    occupation: Optional[str] = Field(default=None, max_length=255)
    # Comma-joined list of topic ids picked on the form
    topics: Optional[str] = Field(default=None, max_length=1000)
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc), index=True
    )
