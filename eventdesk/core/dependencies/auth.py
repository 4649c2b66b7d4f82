from __future__ import annotations

# FastAPI & typing
from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from structlog import get_logger

# Project imports
from eventdesk.core.exceptions import InvalidTokenError, PermissionError
from eventdesk.domain.entities.admin import Admin
from eventdesk.domain.entities.user import User
from eventdesk.domain.value_objects.principal import Principal, PrincipalKind
from eventdesk.infrastructure.dependency_injection.dependencies import AdminRepo, Credentials, UserRepo
from eventdesk.utils.i18n import get_translated_message

__all__ = [
    "get_optional_principal",
    "get_current_principal",
    "get_current_user",
    "get_current_admin",
    "OptionalPrincipal",
    "CurrentUser",
    "CurrentAdmin",
]

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Type-annotated dependency shortcuts
# ---------------------------------------------------------------------------


BearerCredentials = Annotated[
    Optional[HTTPAuthorizationCredentials], Depends(HTTPBearer(auto_error=False))
]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _language(request: Request) -> str:
    return getattr(request.state, "language", "en")


def _auth_fail(request: Request, key: str) -> InvalidTokenError:  # noqa: D401
    """Consistently shaped *401* UNAUTHORIZED error."""
    return InvalidTokenError(get_translated_message(key, _language(request)))


# ---------------------------------------------------------------------------
# Public dependencies
# ---------------------------------------------------------------------------


async def get_optional_principal(
    request: Request, credentials: BearerCredentials, credential_service: Credentials
) -> Optional[Principal]:
    """Return the caller's principal, or ``None`` for anonymous callers.

    Used by the public submission endpoints: an invalid or expired token is
    treated exactly like no token at all.
    """
    if credentials is None:
        return None
    try:
        claims = credential_service.verify_token(credentials.credentials, language=_language(request))
    except InvalidTokenError:
        logger.info("Ignoring invalid bearer token on public endpoint", path=request.url.path)
        return None
    return Principal.from_claims(claims)


async def get_current_principal(
    request: Request, credentials: BearerCredentials, credential_service: Credentials
) -> Principal:
    """Return the verified principal; missing or invalid tokens are a 401."""
    if credentials is None:
        raise _auth_fail(request, "missing_bearer_token")
    claims = credential_service.verify_token(credentials.credentials, language=_language(request))
    return Principal.from_claims(claims)


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


async def get_current_user(request: Request, principal: CurrentPrincipal, users: UserRepo) -> User:  # noqa: D401
    """Return the authenticated customer.

    Admin tokens are refused with 403 on customer routes. The account is
    re-read on every request, so a token for a removed account is a 401.
    """
    if principal.kind is not PrincipalKind.USER:
        raise PermissionError(get_translated_message("user_privileges_required", _language(request)))
    user = await users.get_by_id(principal.id)
    if user is None:
        raise _auth_fail(request, "user_not_found_or_inactive")
    return user


async def get_current_admin(request: Request, principal: CurrentPrincipal, admins: AdminRepo) -> Admin:  # noqa: D401
    """Ensure the authenticated principal is an administrator."""
    if not principal.is_admin:
        logger.warning("Admin route refused", principal_id=principal.id, kind=principal.kind.value)
        raise PermissionError(get_translated_message("admin_privileges_required", _language(request)))
    admin = await admins.get_by_id(principal.id)
    if admin is None:
        raise _auth_fail(request, "user_not_found_or_inactive")
    return admin


OptionalPrincipal = Annotated[Optional[Principal], Depends(get_optional_principal)]
CurrentUser = Annotated[User, Depends(get_current_user)]
CurrentAdmin = Annotated[Admin, Depends(get_current_admin)]
