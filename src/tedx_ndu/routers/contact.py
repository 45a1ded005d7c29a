from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from tedx_ndu.models.database import get_db
from tedx_ndu.models.schemas import ContactCreate, ContactRead
from tedx_ndu.services.contact_service import ContactService

router = APIRouter(prefix="/api", tags=["Contact"])


@router.post("/contact", response_model=ContactRead, status_code=status.HTTP_201_CREATED)
def submit_contact(data: ContactCreate, db: Session = Depends(get_db)):
    """Store a message from the public contact form"""
    contact = ContactService(db).create_contact(data)
    return ContactRead.model_validate(contact)
