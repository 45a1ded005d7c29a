"""Request and response schemas exchanged with the front end.

The React client speaks camelCase, so every schema aliases its snake_case
fields. Inbound models derive from ``SanitizedModel``, which neutralises
HTML angle brackets before any other validation runs.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def sanitize_value(value: Any) -> Any:
    """Escape ``<``/``>`` in strings (recursively inside lists) and trim them"""
    if isinstance(value, str):
        return value.strip().replace("<", "&lt;").replace(">", "&gt;")
    if isinstance(value, list):
        return [sanitize_value(item) for item in value]
    return value


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class SanitizedModel(CamelModel):
    """Base for request bodies coming from the public site"""

    @field_validator("*", mode="before")
    @classmethod
    def _sanitize(cls, value):
        return sanitize_value(value)


# Requests


class RegistrationCreate(SanitizedModel):
    # Everything is optional here; the service reports missing fields with
    # its own message instead of a schema error.
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    occupation: Optional[str] = None
    topics: Optional[list[str]] = None
    terms: Optional[bool] = None


class ContactCreate(SanitizedModel):
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class Credentials(CamelModel):
    username: Optional[str] = None
    # Compared, never rendered, so the password is left untouched
    password: Optional[str] = None

    @field_validator("username", mode="before")
    @classmethod
    def _sanitize_username(cls, value):
        return sanitize_value(value)


# Responses


class UserRead(CamelModel):
    id: int
    username: str


class RegistrationRead(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    occupation: Optional[str] = None
    topics: Optional[str] = None
    created_at: Optional[datetime] = None


class ContactRead(CamelModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    created_at: Optional[datetime] = None
    is_read: bool


class MessageResponse(BaseModel):
    message: str


class AdminStats(CamelModel):
    total_registrations: int
    total_contacts: int
    unread_contacts: int
    occupations: dict[str, int] = Field(default_factory=dict)


# Static content


class Speaker(CamelModel):
    id: int
    name: str
    title: str
    bio: str
    topic: str
    image: str


class ProgramSession(CamelModel):
    id: str
    name: str
    order: int


class ProgramItem(CamelModel):
    id: int
    time: str
    title: str
    description: str
    session: str
    speaker_id: Optional[int] = None
    order: int


class ProgramItemRead(ProgramItem):
    speaker: Optional[Speaker] = None


class Sponsor(CamelModel):
    id: int
    name: str
    logo: str
    website: Optional[str] = None
    level: str
    order: int
