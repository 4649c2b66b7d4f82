from __future__ import annotations

"""API schemas package.

Request and response models are split into focused modules and re-exported
here so routes import from a single place.
"""

# flake8: noqa: F401 – re-export

from .common import CamelModel, ErrorResponse, MessageResponse, SuccessEnvelope
from .requests import (
    AdminConsultationUpdateRequest,
    AdminContactUpdateRequest,
    AdminLoginRequest,
    ConsultationRequest,
    ContactRequest,
    EventDetailsRequest,
    LoginRequest,
    PasswordResetRequest,
    PasswordResetRequestRequest,
    PaymentUpdateRequest,
    SignupRequest,
)
from .responses import (
    AdminLoginResponse,
    AdminOut,
    ConsultationCreatedResponse,
    ConsultationListResponse,
    ConsultationOut,
    ConsultationResponse,
    ContactListResponse,
    ContactOut,
    ContactResponse,
    DatabaseHealthResponse,
    DatabaseTestResponse,
    HealthResponse,
    LoginResponse,
    UserOut,
    UserResponse,
)
