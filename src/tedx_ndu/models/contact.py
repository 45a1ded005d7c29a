"""SQLModel Contact model"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, Text, false
from sqlmodel import Field, SQLModel


class Contact(SQLModel, table=True):
    """Message sent through the public contact form.

    ``is_read`` only ever moves from False to True.
    """

    __tablename__ = "contacts"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    subject: str = Field(max_length=255)
    message: str = Field(sa_column=Column(Text, nullable=False))
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc), index=True
    )
    is_read: bool = Field(default=False, sa_column_kwargs={"server_default": false()})
