"""Contact service for messages sent through the public contact form"""

import logging

from sqlmodel import Session, select

from tedx_ndu.errors import NotFoundError, ValidationError
from tedx_ndu.models.contact import Contact
from tedx_ndu.models.schemas import ContactCreate

logger = logging.getLogger(__name__)

CONTACT_NOT_FOUND = "Əlaqə mesajı tapılmadı"


class ContactService:
    """Service for storing and triaging contact messages"""

    def __init__(self, db_session: Session):
        self.db = db_session

    def create_contact(self, data: ContactCreate) -> Contact:
        """
        Store a contact message as unread.

        Raises:
            ValidationError: If any of name, email, subject, message is empty
        """
        if not all((data.name, data.email, data.subject, data.message)):
            raise ValidationError("All fields are required")

        contact = Contact(
            name=data.name,
            email=data.email,
            subject=data.subject,
            message=data.message,
            is_read=False,
        )
        self.db.add(contact)
        self.db.commit()
        self.db.refresh(contact)

        logger.info(f"Created contact message {contact.id}")
        return contact

    def list_contacts(self) -> list[Contact]:
        """Get all contact messages, newest first"""
        stmt = select(Contact).order_by(Contact.created_at.desc(), Contact.id.desc())
        return list(self.db.exec(stmt).all())

    def mark_read(self, contact_id: int) -> Contact:
        """Mark a message read. Calling it again on a read message is a no-op."""
        contact = self.db.get(Contact, contact_id)
        if not contact:
            raise NotFoundError(CONTACT_NOT_FOUND)

        if not contact.is_read:
            contact.is_read = True
            self.db.add(contact)
            self.db.commit()
            self.db.refresh(contact)
            logger.info(f"Contact message {contact_id} marked read")

        return contact

    def delete_contact(self, contact_id: int) -> None:
        contact = self.db.get(Contact, contact_id)
        if not contact:
            raise NotFoundError(CONTACT_NOT_FOUND)

        self.db.delete(contact)
        self.db.commit()
        logger.info(f"Deleted contact message {contact_id}")
