"""Booking and inquiry lifecycle.

Owns the status vocabularies, the booking id rule and every state change a
consultation or contact inquiry can go through:

- creation (anonymous or owned) with ``pending``/``unpaid`` or ``new`` status;
- administrator updates, where an omitted or empty status falls back to the
  initial status and an omitted scheduled time clears it, while the admin
  comment only changes when it is explicitly supplied;
- owner edits of the descriptive event fields;
- payment status changes.

Any known status may move to any other known status; unknown values are
rejected with ``ValidationError``.
"""

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Type

from structlog import get_logger
from tenacity import retry, retry_if_exception_type, stop_after_attempt

from eventdesk.core.exceptions import (
    ConsultationNotFoundError,
    ContactInquiryNotFoundError,
    DuplicateBookingIdError,
    PermissionError,
    ValidationError,
)
from eventdesk.core.logging import mask_email
from eventdesk.domain.entities.consultation import Consultation
from eventdesk.domain.entities.contact_inquiry import ContactInquiry
from eventdesk.domain.interfaces.repositories import IConsultationRepository, IContactInquiryRepository
from eventdesk.domain.services.booking.booking_id import BookingIdGenerator
from eventdesk.domain.value_objects.status import (
    ConsultationStatus,
    ContactStatus,
    PaymentStatus,
    parse_status,
)
from eventdesk.utils.i18n import get_translated_message

logger = get_logger(__name__)

BOOKING_ID_ATTEMPTS = 5


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()
"""Marks an optional update field that was not supplied at all."""


@dataclass(frozen=True)
class ConsultationInput:
    name: str
    email: str
    phone: str
    event_type: str
    event_date: str
    location: str
    budget: str
    details: Optional[str] = None


@dataclass(frozen=True)
class ContactInput:
    name: str
    email: str
    subject: str
    message: str


@dataclass(frozen=True)
class EventDetailsUpdate:
    """The descriptive fields an owner may change on their consultation."""

    event_type: str
    event_date: str
    location: str
    budget: str
    details: Optional[str] = None


def _validated_status(enum_cls: Type, value: str, language: str) -> str:
    try:
        return parse_status(enum_cls, value).value
    except ValueError as e:
        raise ValidationError(
            get_translated_message("invalid_status_value", language).format(value=value),
            field="status",
        ) from e


class BookingLifecycleService:
    """Creates and transitions consultations and contact inquiries."""

    def __init__(
        self,
        consultation_repository: IConsultationRepository,
        contact_repository: IContactInquiryRepository,
        booking_ids: BookingIdGenerator,
    ):
        self.consultations = consultation_repository
        self.contacts = contact_repository
        self.booking_ids = booking_ids

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    async def create_consultation(self, data: ConsultationInput, owner_id: Optional[int] = None) -> Consultation:
        """Stores a new consultation with a freshly assigned booking id.

        Booking id collisions with other processes are retried with a new id.

        Raises:
            DuplicateBookingIdError: If every attempt collided.
        """
        consultation = await self._insert_with_fresh_booking_id(data, owner_id)
        logger.info(
            "Consultation created",
            consultation_id=consultation.id,
            booking_id=consultation.booking_id,
            owner_id=owner_id,
            email=mask_email(consultation.email),
        )
        return consultation

    @retry(
        stop=stop_after_attempt(BOOKING_ID_ATTEMPTS),
        retry=retry_if_exception_type(DuplicateBookingIdError),
        reraise=True,
    )
    async def _insert_with_fresh_booking_id(self, data: ConsultationInput, owner_id: Optional[int]) -> Consultation:
        created_at = datetime.now(timezone.utc)
        consultation = Consultation(
            **asdict(data),
            status=ConsultationStatus.PENDING.value,
            payment_status=PaymentStatus.UNPAID.value,
            booking_id=self.booking_ids.next_id(created_at),
            user_id=owner_id,
            created_at=created_at,
        )
        return await self.consultations.insert(consultation)

    async def create_contact_inquiry(self, data: ContactInput, owner_id: Optional[int] = None) -> ContactInquiry:
        inquiry = ContactInquiry(**asdict(data), status=ContactStatus.NEW.value, user_id=owner_id)
        inquiry = await self.contacts.insert(inquiry)
        logger.info("Contact inquiry created", inquiry_id=inquiry.id, owner_id=owner_id)
        return inquiry

    # ------------------------------------------------------------------
    # Administrator operations
    # ------------------------------------------------------------------

    async def list_consultations(self) -> List[Consultation]:
        return await self.consultations.list_all()

    async def list_contacts(self) -> List[ContactInquiry]:
        return await self.contacts.list_all()

    async def get_consultation(self, consultation_id: int, language: str = "en") -> Consultation:
        consultation = await self.consultations.get_by_id(consultation_id)
        if consultation is None:
            raise ConsultationNotFoundError(get_translated_message("consultation_not_found", language))
        return consultation

    async def get_by_booking_id(self, booking_id: str, language: str = "en") -> Consultation:
        consultation = await self.consultations.get_by_booking_id(booking_id)
        if consultation is None:
            raise ConsultationNotFoundError(get_translated_message("consultation_not_found", language))
        return consultation

    async def admin_update_consultation(
        self,
        consultation_id: int,
        status: Optional[str] = None,
        scheduled_date_time: Optional[str] = None,
        admin_comment: Any = UNSET,
        language: str = "en",
    ) -> Consultation:
        """Applies an administrator update.

        ``status`` falls back to ``pending`` and ``scheduled_date_time`` to
        ``None`` when omitted or empty. ``admin_comment`` is only written when
        supplied; ``None`` clears it.
        """
        await self.get_consultation(consultation_id, language)
        fields: Dict[str, Any] = {
            "status": _validated_status(ConsultationStatus, status, language)
            if status
            else ConsultationStatus.PENDING.value,
            "scheduled_date_time": scheduled_date_time or None,
        }
        if admin_comment is not UNSET:
            fields["admin_comment"] = admin_comment
        updated = await self.consultations.update(consultation_id, fields)
        logger.info(
            "Consultation updated by admin",
            consultation_id=consultation_id,
            status=updated.status,
            comment_changed="admin_comment" in fields,
        )
        return updated

    async def admin_update_contact(
        self,
        inquiry_id: int,
        status: Optional[str] = None,
        admin_comment: Any = UNSET,
        language: str = "en",
    ) -> ContactInquiry:
        """Applies an administrator update; ``status`` falls back to ``new``."""
        if await self.contacts.get_by_id(inquiry_id) is None:
            raise ContactInquiryNotFoundError(get_translated_message("contact_not_found", language))
        fields: Dict[str, Any] = {
            "status": _validated_status(ContactStatus, status, language) if status else ContactStatus.NEW.value,
        }
        if admin_comment is not UNSET:
            fields["admin_comment"] = admin_comment
        updated = await self.contacts.update(inquiry_id, fields)
        logger.info("Contact inquiry updated by admin", inquiry_id=inquiry_id, status=updated.status)
        return updated

    async def update_payment(
        self,
        consultation_id: int,
        payment_status: str,
        payment_intent_id: Optional[str] = None,
        language: str = "en",
    ) -> Consultation:
        await self.get_consultation(consultation_id, language)
        fields: Dict[str, Any] = {
            "payment_status": _validated_status(PaymentStatus, payment_status, language),
        }
        if payment_intent_id is not None:
            fields["payment_intent_id"] = payment_intent_id
        updated = await self.consultations.update(consultation_id, fields)
        logger.info(
            "Consultation payment updated",
            consultation_id=consultation_id,
            payment_status=updated.payment_status,
        )
        return updated

    # ------------------------------------------------------------------
    # Owner operations
    # ------------------------------------------------------------------

    async def list_consultations_for_owner(self, user_id: int) -> List[Consultation]:
        return await self.consultations.list_by_owner(user_id)

    async def list_contacts_for_owner(self, user_id: int) -> List[ContactInquiry]:
        return await self.contacts.list_by_owner(user_id)

    async def owner_update_consultation(
        self,
        consultation_id: int,
        caller_id: int,
        update: EventDetailsUpdate,
        language: str = "en",
    ) -> Consultation:
        """Replaces the descriptive fields of a consultation owned by ``caller_id``.

        Raises:
            ConsultationNotFoundError: If the consultation does not exist.
            PermissionError: If ``caller_id`` does not own it. The record is
                left unchanged.
        """
        consultation = await self.get_consultation(consultation_id, language)
        if consultation.user_id is None or consultation.user_id != caller_id:
            logger.warning(
                "Consultation edit by non-owner refused",
                consultation_id=consultation_id,
                caller_id=caller_id,
            )
            raise PermissionError(get_translated_message("consultation_not_owned", language))
        updated = await self.consultations.update(consultation_id, asdict(update))
        logger.info("Consultation updated by owner", consultation_id=consultation_id, caller_id=caller_id)
        return updated
