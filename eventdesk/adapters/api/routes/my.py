"""Customer endpoints for the caller's own submissions."""

from fastapi import APIRouter, Request

from eventdesk.adapters.api.schemas import (
    ConsultationListResponse,
    ConsultationOut,
    ConsultationResponse,
    ContactListResponse,
    ContactOut,
    EventDetailsRequest,
)
from eventdesk.core.dependencies.auth import CurrentUser
from eventdesk.domain.services.booking import EventDetailsUpdate
from eventdesk.infrastructure.dependency_injection.dependencies import LifecycleService
from eventdesk.utils.i18n import get_translated_message

router = APIRouter(prefix="/my")


@router.get("/consultations", response_model=ConsultationListResponse)
async def my_consultations(user: CurrentUser, lifecycle: LifecycleService):
    consultations = await lifecycle.list_consultations_for_owner(user.id)
    return ConsultationListResponse(consultations=[ConsultationOut.model_validate(c) for c in consultations])


@router.patch("/consultations/{consultation_id}", response_model=ConsultationResponse)
async def edit_my_consultation(
    request: Request,
    consultation_id: int,
    payload: EventDetailsRequest,
    user: CurrentUser,
    lifecycle: LifecycleService,
):
    """Replace the event details of one of the caller's consultations.

    Status, payment and booking id can not be changed here.
    """
    consultation = await lifecycle.owner_update_consultation(
        consultation_id,
        caller_id=user.id,
        update=EventDetailsUpdate(**payload.model_dump()),
        language=request.state.language,
    )
    return ConsultationResponse(
        message=get_translated_message("consultation_updated", request.state.language),
        consultation=ConsultationOut.model_validate(consultation),
    )


@router.get("/contacts", response_model=ContactListResponse)
async def my_contacts(user: CurrentUser, lifecycle: LifecycleService):
    contacts = await lifecycle.list_contacts_for_owner(user.id)
    return ContactListResponse(contacts=[ContactOut.model_validate(c) for c in contacts])
