"""Password reset endpoints.

``POST /password-reset-request`` always answers with the same success body so
it reveals nothing about which emails are registered.
"""

import uuid

import structlog
from fastapi import APIRouter, BackgroundTasks, Request

from eventdesk.adapters.api.schemas import MessageResponse, PasswordResetRequest, PasswordResetRequestRequest
from eventdesk.infrastructure.dependency_injection.dependencies import ResetRequestService, ResetService

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post("/password-reset-request", response_model=MessageResponse, summary="Request a password reset email")
async def request_password_reset(
    request: Request,
    payload: PasswordResetRequestRequest,
    background_tasks: BackgroundTasks,
    reset_request_service: ResetRequestService,
):
    correlation_id = str(uuid.uuid4())
    result = await reset_request_service.request_password_reset(
        payload.email,
        language=request.state.language,
        correlation_id=correlation_id,
        background_tasks=background_tasks,
    )
    return MessageResponse(message=result["message"])


@router.post("/password-reset", response_model=MessageResponse, summary="Set a new password with a reset token")
async def reset_password(request: Request, payload: PasswordResetRequest, reset_service: ResetService):
    """Invalid, expired or already used tokens yield 400."""
    result = await reset_service.reset_password(
        payload.email,
        payload.token,
        payload.new_password,
        language=request.state.language,
    )
    return MessageResponse(message=result["message"])
