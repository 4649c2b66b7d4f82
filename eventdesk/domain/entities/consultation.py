from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Text
from sqlmodel import Column, Field, SQLModel, String

from eventdesk.domain.entities.user import utc_now
from eventdesk.domain.value_objects.status import ConsultationStatus, PaymentStatus


class Consultation(SQLModel, table=True):
    """A consultation (event booking) request.

    Consultations are submitted anonymously or by a signed-in customer, then
    scheduled, annotated and marked paid by administrators. The owning
    customer may later edit the descriptive event fields.

    Attributes:
        id: Numeric primary key.
        name, email, phone: Contact details of the requester.
        event_type, event_date, location, budget: Descriptive event fields.
        details: Optional free-text details.
        status: One of ``ConsultationStatus``.
        admin_comment: Optional note left by an administrator.
        scheduled_date_time: Optional consultation slot set by an administrator.
        payment_status: One of ``PaymentStatus``.
        payment_intent_id: Optional reference to the payment provider's intent.
        booking_id: Human-readable identifier, unique and immutable.
        user_id: Owning customer, or ``None`` for anonymous submissions.
        created_at: Submission time.
    """

    __tablename__ = "consultations"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    phone: str = Field(max_length=64)
    event_type: str = Field(max_length=255)
    event_date: str = Field(max_length=64)
    location: str = Field(max_length=255)
    budget: str = Field(max_length=128)
    details: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    status: str = Field(default=ConsultationStatus.PENDING.value, max_length=32)
    admin_comment: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    scheduled_date_time: Optional[str] = Field(default=None, max_length=64)
    payment_status: str = Field(default=PaymentStatus.UNPAID.value, max_length=32)
    payment_intent_id: Optional[str] = Field(default=None, max_length=255)
    booking_id: str = Field(
        sa_column=Column(String(64), unique=True, index=True, nullable=False),
    )
    user_id: Optional[int] = Field(default=None, foreign_key="users.id", index=True)
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
