"""Customer account endpoints: signup, login and profile."""

import uuid

import structlog
from fastapi import APIRouter, Request

from eventdesk.adapters.api.schemas import LoginRequest, LoginResponse, SignupRequest, UserOut, UserResponse
from eventdesk.core.dependencies.auth import CurrentUser
from eventdesk.core.logging import mask_email
from eventdesk.infrastructure.dependency_injection.dependencies import RegistrationService, UserAuthService
from eventdesk.utils.i18n import get_translated_message

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "/signup",
    response_model=UserResponse,
    summary="Create a customer account",
)
async def signup(request: Request, payload: SignupRequest, registration: RegistrationService):
    """Register a customer. A taken email yields 400."""
    user = await registration.register_user(
        payload.full_name,
        payload.email,
        payload.password,
        language=request.state.language,
    )
    return UserResponse(
        message=get_translated_message("signup_successful", request.state.language),
        user=UserOut.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse, summary="Authenticate a customer")
async def login(request: Request, payload: LoginRequest, auth_service: UserAuthService):
    """Authenticate with email and password and receive a bearer token.

    Unknown email and wrong password yield the same 401 response.
    """
    request_logger = logger.bind(
        correlation_id=str(uuid.uuid4()),
        endpoint="login",
        email=mask_email(payload.email),
    )
    request_logger.info("Login attempt initiated")
    user, token = await auth_service.login(payload.email, payload.password, language=request.state.language)
    request_logger.info("Login succeeded", user_id=user.id)
    return LoginResponse(token=token, user=UserOut.model_validate(user))


@router.get("/me", response_model=UserResponse, summary="Current customer profile")
async def me(user: CurrentUser):
    return UserResponse(user=UserOut.model_validate(user))
