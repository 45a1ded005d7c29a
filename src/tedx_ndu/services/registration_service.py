"""Registration service for handling event sign-ups"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from tedx_ndu.errors import ConflictError, NotFoundError, ValidationError
from tedx_ndu.models.registration import Registration
from tedx_ndu.models.schemas import RegistrationCreate

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "This email is already registered"


class RegistrationService:
    """Service for managing event registrations"""

    def __init__(self, db_session: Session):
        self.db = db_session

    def create_registration(self, data: RegistrationCreate) -> Registration:
        """
        Create a new registration from the public form.

        Args:
            data: Submitted fields; topics arrive as a list

        Returns:
            Registration: The created registration with its generated id

        Raises:
            ValidationError: If a required field is empty or terms not accepted
            ConflictError: If the email is already registered
        """
        required = (data.first_name, data.last_name, data.email, data.phone)
        if not all(required) or data.terms is not True:
            raise ValidationError("All required fields must be provided")

        if self.get_registration_by_email(data.email):
            raise ConflictError(EMAIL_TAKEN)

        registration = Registration(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone=data.phone,
            occupation=data.occupation or None,
            topics=",".join(data.topics) if data.topics else None,
        )

        self.db.add(registration)
        try:
            self.db.commit()
        except IntegrityError:
            # The unique index on email is the final word on duplicates
            self.db.rollback()
            raise ConflictError(EMAIL_TAKEN)
        self.db.refresh(registration)

        logger.info(f"Created registration {registration.id}")
        return registration

    def get_registration_by_email(self, email: str) -> Registration | None:
        stmt = select(Registration).where(Registration.email == email)
        return self.db.exec(stmt).first()

    def list_registrations(self) -> list[Registration]:
        """Get all registrations, newest first"""
        stmt = select(Registration).order_by(
            Registration.created_at.desc(), Registration.id.desc()
        )
        return list(self.db.exec(stmt).all())

    def delete_registration(self, registration_id: int) -> None:
        registration = self.db.get(Registration, registration_id)
        if not registration:
            raise NotFoundError("Qeydiyyat tapılmadı")

        self.db.delete(registration)
        self.db.commit()
        logger.info(f"Deleted registration {registration_id}")
