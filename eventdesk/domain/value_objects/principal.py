"""Authenticated principal and bearer token claims.

A ``Principal`` is what the auth dependencies hand to route handlers and
services after a bearer token has been verified. It is passed explicitly
rather than attached to the request.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict


class PrincipalKind(str, Enum):
    """Identity class a bearer token was issued for."""

    USER = "user"
    ADMIN = "admin"


@dataclass(frozen=True)
class TokenClaims:
    """Verified claims decoded from a bearer token.

    Attributes:
        subject_id: The numeric id of the user or admin.
        email: Email address the token was issued for.
        kind: ``PrincipalKind.USER`` or ``PrincipalKind.ADMIN``.
        is_admin: True for tokens issued through the admin login.
        issued_at: Token issuance time.
        expires_at: Token expiry time.
        extra: Any additional non-reserved claims (for example ``role``).
    """

    subject_id: int
    email: str
    kind: PrincipalKind
    is_admin: bool
    issued_at: datetime
    expires_at: datetime
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Principal:
    """The authenticated caller of a request."""

    id: int
    email: str
    kind: PrincipalKind
    is_admin: bool = False
    role: str = "user"

    @classmethod
    def from_claims(cls, claims: TokenClaims) -> "Principal":
        return cls(
            id=claims.subject_id,
            email=claims.email,
            kind=claims.kind,
            is_admin=claims.is_admin,
            role=str(claims.extra.get("role", "admin" if claims.is_admin else "user")),
        )

    @property
    def is_user(self) -> bool:
        return self.kind is PrincipalKind.USER
