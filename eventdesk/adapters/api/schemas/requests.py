from __future__ import annotations

"""Request-payload Pydantic models."""

from typing import Optional

from pydantic import EmailStr, Field, constr

from eventdesk.adapters.api.schemas.common import CamelModel
from eventdesk.core.config.settings import settings

# ---------------------------------------------------------------------------
# Shared / primitive types ---------------------------------------------------
# ---------------------------------------------------------------------------

RequiredStr = constr(strip_whitespace=True, min_length=1, max_length=255)
ShortStr = constr(strip_whitespace=True, min_length=1, max_length=64)
BudgetStr = constr(strip_whitespace=True, min_length=1, max_length=128)
TextStr = constr(strip_whitespace=True, min_length=1, max_length=5000)
PasswordStr = constr(min_length=settings.PASSWORD_MIN_LENGTH, max_length=128)

# ---------------------------------------------------------------------------
# Submissions -----------------------------------------------------------------
# ---------------------------------------------------------------------------


class ConsultationRequest(CamelModel):
    """Payload expected by ``POST /consultation``."""

    name: RequiredStr = Field(..., examples=["Jane Doe"])
    email: EmailStr = Field(..., examples=["jane@example.com"])
    phone: ShortStr = Field(..., examples=["+1 555 0100"])
    event_type: RequiredStr = Field(..., examples=["Wedding"])
    event_date: ShortStr = Field(..., examples=["2025-06-14"])
    location: RequiredStr = Field(..., examples=["Lisbon"])
    budget: BudgetStr = Field(..., examples=["10000-20000"])
    details: Optional[str] = Field(None, max_length=5000)


class ContactRequest(CamelModel):
    """Payload expected by ``POST /contact``."""

    name: RequiredStr
    email: EmailStr
    subject: RequiredStr
    message: TextStr


class EventDetailsRequest(CamelModel):
    """Payload expected by ``PATCH /my/consultations/{id}``."""

    event_type: RequiredStr
    event_date: ShortStr
    location: RequiredStr
    budget: BudgetStr
    details: Optional[str] = Field(None, max_length=5000)


# ---------------------------------------------------------------------------
# Administrator updates --------------------------------------------------------
# ---------------------------------------------------------------------------


class AdminConsultationUpdateRequest(CamelModel):
    """Payload expected by ``PATCH /admin/consultations/{id}``.

    Omitted ``status`` resets to ``pending`` and omitted
    ``scheduledDateTime`` clears the slot. ``adminComment`` is only changed
    when the key is present.
    """

    status: Optional[str] = Field(None, examples=["scheduled"])
    scheduled_date_time: Optional[str] = Field(None, examples=["2025-05-01T15:00"])
    admin_comment: Optional[str] = Field(None, max_length=5000)


class AdminContactUpdateRequest(CamelModel):
    """Payload expected by ``PATCH /admin/contacts/{id}``."""

    status: Optional[str] = Field(None, examples=["replied"])
    admin_comment: Optional[str] = Field(None, max_length=5000)


class PaymentUpdateRequest(CamelModel):
    """Payload expected by ``PATCH /admin/consultations/{id}/payment``."""

    payment_status: str = Field(..., examples=["paid"])
    payment_intent_id: Optional[str] = Field(None, max_length=255)


# ---------------------------------------------------------------------------
# Accounts -------------------------------------------------------------------
# ---------------------------------------------------------------------------


class SignupRequest(CamelModel):
    """Payload expected by ``POST /signup``."""

    full_name: RequiredStr = Field(..., examples=["Jane Doe"])
    email: EmailStr = Field(..., examples=["jane@example.com"])
    password: PasswordStr = Field(..., examples=["secret1"])


class LoginRequest(CamelModel):
    """Payload expected by ``POST /login``."""

    email: EmailStr = Field(..., examples=["jane@example.com"])
    password: str = Field(..., min_length=1, max_length=128)


class AdminLoginRequest(CamelModel):
    """Payload expected by ``POST /admin/login``."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)
    security_code: str = Field(..., min_length=1, max_length=255)


class PasswordResetRequestRequest(CamelModel):
    """Payload expected by ``POST /password-reset-request``."""

    email: EmailStr = Field(
        ...,
        examples=["jane@example.com"],
        description="Email address to send password reset instructions to",
    )


class PasswordResetRequest(CamelModel):
    """Payload expected by ``POST /password-reset``."""

    email: EmailStr
    token: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Password reset token received via email",
    )
    new_password: PasswordStr
