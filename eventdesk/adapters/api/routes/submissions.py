"""Public submission endpoints: consultation requests and contact messages.

Both accept anonymous callers. When a valid customer token is supplied the
submission is linked to that account; an invalid token is ignored.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Request

from eventdesk.adapters.api.schemas import (
    ConsultationCreatedResponse,
    ConsultationOut,
    ConsultationRequest,
    ContactOut,
    ContactRequest,
    ContactResponse,
)
from eventdesk.core.dependencies.auth import OptionalPrincipal
from eventdesk.domain.services.booking import ConsultationInput, ContactInput
from eventdesk.domain.value_objects.principal import Principal
from eventdesk.infrastructure.dependency_injection.dependencies import LifecycleService
from eventdesk.utils.i18n import get_translated_message

logger = structlog.get_logger(__name__)
router = APIRouter()


def _owner_id(principal: Optional[Principal]) -> Optional[int]:
    """Only customer tokens link a submission to an account."""
    if principal is None or not principal.is_user:
        return None
    return principal.id


@router.post(
    "/consultation",
    response_model=ConsultationCreatedResponse,
    summary="Submit a consultation request",
)
async def submit_consultation(
    request: Request,
    payload: ConsultationRequest,
    principal: OptionalPrincipal,
    lifecycle: LifecycleService,
):
    consultation = await lifecycle.create_consultation(
        ConsultationInput(**payload.model_dump()),
        owner_id=_owner_id(principal),
    )
    return ConsultationCreatedResponse(
        message=get_translated_message("consultation_submitted", request.state.language),
        booking_id=consultation.booking_id,
        consultation=ConsultationOut.model_validate(consultation),
    )


@router.post(
    "/contact",
    response_model=ContactResponse,
    summary="Send a contact message",
)
async def submit_contact(
    request: Request,
    payload: ContactRequest,
    principal: OptionalPrincipal,
    lifecycle: LifecycleService,
):
    inquiry = await lifecycle.create_contact_inquiry(
        ContactInput(**payload.model_dump()),
        owner_id=_owner_id(principal),
    )
    return ContactResponse(
        message=get_translated_message("contact_submitted", request.state.language),
        contact=ContactOut.model_validate(inquiry),
    )
