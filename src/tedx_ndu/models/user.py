"""SQLModel admin User model"""

from typing import Optional

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """Admin account. The password column holds ``<keyhex>.<salthex>``."""

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(max_length=255, unique=True)
    password: str = Field(max_length=255)
