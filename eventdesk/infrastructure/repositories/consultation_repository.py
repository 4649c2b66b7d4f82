"""Consultation and contact inquiry repositories backed by SQLAlchemy."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from structlog import get_logger

from eventdesk.core.exceptions import (
    ConsultationNotFoundError,
    ContactInquiryNotFoundError,
    DatabaseError,
    DuplicateBookingIdError,
)
from eventdesk.domain.entities.consultation import Consultation
from eventdesk.domain.entities.contact_inquiry import ContactInquiry
from eventdesk.domain.interfaces.repositories import IConsultationRepository, IContactInquiryRepository
from eventdesk.infrastructure.repositories.base import SQLRepository

logger = get_logger(__name__)


class ConsultationRepository(SQLRepository[Consultation], IConsultationRepository):
    """SQLAlchemy implementation of ``IConsultationRepository``."""

    model = Consultation
    not_found_error = ConsultationNotFoundError

    async def insert(self, consultation: Consultation) -> Consultation:
        booking_id = consultation.booking_id
        self.db_session.add(consultation)
        try:
            saved = await self._commit(consultation, "insert")
        except IntegrityError as e:
            # Only the booking id carries a unique constraint on this table
            # besides the primary key.
            if await self.get_by_booking_id(booking_id) is not None:
                logger.warning("Booking id collision", booking_id=booking_id)
                raise DuplicateBookingIdError() from e
            raise DatabaseError("Failed to save consultation") from e
        except SQLAlchemyError as e:
            raise DatabaseError("Failed to save consultation") from e
        logger.info("Consultation saved", consultation_id=saved.id, booking_id=saved.booking_id)
        return saved

    async def get_by_booking_id(self, booking_id: str) -> Optional[Consultation]:
        return await self._first(select(Consultation).where(Consultation.booking_id == booking_id))

    async def list_by_owner(self, user_id: int) -> List[Consultation]:
        return await self._all(self._ordered().where(Consultation.user_id == user_id))


class ContactInquiryRepository(SQLRepository[ContactInquiry], IContactInquiryRepository):
    """SQLAlchemy implementation of ``IContactInquiryRepository``."""

    model = ContactInquiry
    not_found_error = ContactInquiryNotFoundError

    async def insert(self, inquiry: ContactInquiry) -> ContactInquiry:
        self.db_session.add(inquiry)
        try:
            saved = await self._commit(inquiry, "insert")
        except SQLAlchemyError as e:
            raise DatabaseError("Failed to save contact inquiry") from e
        logger.info("Contact inquiry saved", inquiry_id=saved.id)
        return saved

    async def list_by_owner(self, user_id: int) -> List[ContactInquiry]:
        return await self._all(self._ordered().where(ContactInquiry.user_id == user_id))
