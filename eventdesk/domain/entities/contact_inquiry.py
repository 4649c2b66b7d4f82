from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Text
from sqlmodel import Column, Field, SQLModel

from eventdesk.domain.entities.user import utc_now
from eventdesk.domain.value_objects.status import ContactStatus


class ContactInquiry(SQLModel, table=True):
    """A contact-form message.

    Attributes:
        id: Numeric primary key.
        name, email, subject, message: Submitted form fields.
        status: One of ``ContactStatus``.
        admin_comment: Optional note left by an administrator.
        user_id: Owning customer, or ``None`` for anonymous submissions.
        created_at: Submission time.
    """

    __tablename__ = "contact_inquiries"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    subject: str = Field(max_length=255)
    message: str = Field(sa_column=Column(Text, nullable=False))
    status: str = Field(default=ContactStatus.NEW.value, max_length=32)
    admin_comment: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    user_id: Optional[int] = Field(default=None, foreign_key="users.id", index=True)
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
