"""Dashboard statistics for the admin panel"""

from sqlalchemy import func
from sqlmodel import Session, select

from tedx_ndu.models.contact import Contact
from tedx_ndu.models.registration import Registration
from tedx_ndu.models.schemas import AdminStats


class StatsService:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_stats(self) -> AdminStats:
        total_registrations = self.db.exec(
            select(func.count()).select_from(Registration)
        ).one()
        total_contacts = self.db.exec(select(func.count()).select_from(Contact)).one()
        unread_contacts = self.db.exec(
            select(func.count()).select_from(Contact).where(Contact.is_read == False)  # noqa: E712
        ).one()

        occupation_rows = self.db.exec(
            select(Registration.occupation, func.count())
            .where(Registration.occupation.is_not(None))
            .group_by(Registration.occupation)
        ).all()

        return AdminStats(
            total_registrations=total_registrations,
            total_contacts=total_contacts,
            unread_contacts=unread_contacts,
            occupations={occupation: count for occupation, count in occupation_rows},
        )
