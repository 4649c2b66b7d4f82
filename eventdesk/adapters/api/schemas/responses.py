from __future__ import annotations

"""Response Pydantic models."""

from datetime import datetime
from typing import List, Optional

from eventdesk.adapters.api.schemas.common import CamelModel, SuccessEnvelope
from eventdesk.domain.entities.user import Role

# ---------------------------------------------------------------------------
# Entity representations -----------------------------------------------------
# ---------------------------------------------------------------------------


class ConsultationOut(CamelModel):
    """Serialised representation of a consultation."""

    id: int
    name: str
    email: str
    phone: str
    event_type: str
    event_date: str
    location: str
    budget: str
    details: Optional[str] = None
    status: str
    admin_comment: Optional[str] = None
    scheduled_date_time: Optional[str] = None
    payment_status: str
    payment_intent_id: Optional[str] = None
    booking_id: str
    user_id: Optional[int] = None
    created_at: datetime


class ContactOut(CamelModel):
    """Serialised representation of a contact inquiry."""

    id: int
    name: str
    email: str
    subject: str
    message: str
    status: str
    admin_comment: Optional[str] = None
    user_id: Optional[int] = None
    created_at: datetime


class UserOut(CamelModel):
    """Public view of a customer account; never includes credentials."""

    id: int
    full_name: str
    email: str
    created_at: datetime
    role: Role


class AdminOut(CamelModel):
    id: int
    email: str
    full_name: Optional[str] = None


# ---------------------------------------------------------------------------
# Envelopes --------------------------------------------------------------------
# ---------------------------------------------------------------------------


class ConsultationCreatedResponse(SuccessEnvelope):
    message: str
    booking_id: str
    consultation: ConsultationOut


class ConsultationResponse(SuccessEnvelope):
    message: Optional[str] = None
    consultation: ConsultationOut


class ConsultationListResponse(SuccessEnvelope):
    consultations: List[ConsultationOut]


class ContactResponse(SuccessEnvelope):
    message: Optional[str] = None
    contact: ContactOut


class ContactListResponse(SuccessEnvelope):
    contacts: List[ContactOut]


class UserResponse(SuccessEnvelope):
    message: Optional[str] = None
    user: UserOut


class LoginResponse(SuccessEnvelope):
    token: str
    user: UserOut


class AdminLoginResponse(SuccessEnvelope):
    token: str
    admin: AdminOut


class HealthResponse(SuccessEnvelope):
    status: str
    env: str
    message: str
    timestamp: datetime


class DatabaseHealthResponse(SuccessEnvelope):
    database: str
    backend: str


class DatabaseTestResponse(SuccessEnvelope):
    message: str
    result: int
    backend: str
