"""Administrator endpoints.

Every route except ``POST /admin/login`` requires an admin bearer token.
"""

import uuid

import structlog
from fastapi import APIRouter, Request

from eventdesk.adapters.api.schemas import (
    AdminConsultationUpdateRequest,
    AdminContactUpdateRequest,
    AdminLoginRequest,
    AdminLoginResponse,
    AdminOut,
    ConsultationListResponse,
    ConsultationOut,
    ConsultationResponse,
    ContactListResponse,
    ContactOut,
    ContactResponse,
    PaymentUpdateRequest,
)
from eventdesk.core.dependencies.auth import CurrentAdmin
from eventdesk.core.logging import mask_email
from eventdesk.domain.services.booking import UNSET
from eventdesk.infrastructure.dependency_injection.dependencies import AdminAuthService, LifecycleService
from eventdesk.utils.i18n import get_translated_message

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/admin")


@router.post("/login", response_model=AdminLoginResponse, summary="Authenticate an administrator")
async def admin_login(request: Request, payload: AdminLoginRequest, auth_service: AdminAuthService):
    """Authenticate with email, password and the shared security code.

    Any mismatch yields the same 401 response.
    """
    request_logger = logger.bind(
        correlation_id=str(uuid.uuid4()),
        endpoint="admin_login",
        email=mask_email(payload.email),
    )
    request_logger.info("Admin login attempt initiated")
    admin, token = await auth_service.login(
        payload.email,
        payload.password,
        payload.security_code,
        language=request.state.language,
    )
    request_logger.info("Admin login succeeded", admin_id=admin.id)
    return AdminLoginResponse(token=token, admin=AdminOut.model_validate(admin))


@router.get("/consultations", response_model=ConsultationListResponse)
async def list_consultations(admin: CurrentAdmin, lifecycle: LifecycleService):
    consultations = await lifecycle.list_consultations()
    return ConsultationListResponse(consultations=[ConsultationOut.model_validate(c) for c in consultations])


@router.get("/contacts", response_model=ContactListResponse)
async def list_contacts(admin: CurrentAdmin, lifecycle: LifecycleService):
    contacts = await lifecycle.list_contacts()
    return ContactListResponse(contacts=[ContactOut.model_validate(c) for c in contacts])


@router.get("/consultations/booking/{booking_id}", response_model=ConsultationResponse)
async def get_consultation_by_booking_id(
    request: Request, booking_id: str, admin: CurrentAdmin, lifecycle: LifecycleService
):
    consultation = await lifecycle.get_by_booking_id(booking_id, language=request.state.language)
    return ConsultationResponse(consultation=ConsultationOut.model_validate(consultation))


@router.patch("/consultations/{consultation_id}", response_model=ConsultationResponse)
async def update_consultation(
    request: Request,
    consultation_id: int,
    payload: AdminConsultationUpdateRequest,
    admin: CurrentAdmin,
    lifecycle: LifecycleService,
):
    """Update status, schedule and comment of a consultation.

    An omitted status resets the consultation to ``pending`` and an omitted
    ``scheduledDateTime`` clears the slot. ``adminComment`` only changes when
    present in the body; ``null`` clears it.
    """
    consultation = await lifecycle.admin_update_consultation(
        consultation_id,
        status=payload.status,
        scheduled_date_time=payload.scheduled_date_time,
        admin_comment=payload.admin_comment if "admin_comment" in payload.model_fields_set else UNSET,
        language=request.state.language,
    )
    return ConsultationResponse(
        message=get_translated_message("consultation_updated", request.state.language),
        consultation=ConsultationOut.model_validate(consultation),
    )


@router.patch("/consultations/{consultation_id}/payment", response_model=ConsultationResponse)
async def update_consultation_payment(
    request: Request,
    consultation_id: int,
    payload: PaymentUpdateRequest,
    admin: CurrentAdmin,
    lifecycle: LifecycleService,
):
    consultation = await lifecycle.update_payment(
        consultation_id,
        payload.payment_status,
        payload.payment_intent_id,
        language=request.state.language,
    )
    return ConsultationResponse(
        message=get_translated_message("payment_updated", request.state.language),
        consultation=ConsultationOut.model_validate(consultation),
    )


@router.patch("/contacts/{inquiry_id}", response_model=ContactResponse)
async def update_contact(
    request: Request,
    inquiry_id: int,
    payload: AdminContactUpdateRequest,
    admin: CurrentAdmin,
    lifecycle: LifecycleService,
):
    """Update status and comment of a contact inquiry; status defaults to ``new``."""
    inquiry = await lifecycle.admin_update_contact(
        inquiry_id,
        status=payload.status,
        admin_comment=payload.admin_comment if "admin_comment" in payload.model_fields_set else UNSET,
        language=request.state.language,
    )
    return ContactResponse(
        message=get_translated_message("contact_updated", request.state.language),
        contact=ContactOut.model_validate(inquiry),
    )
