"""Credential primitives: password hashing, bearer tokens and reset tokens.

The service only holds configuration and a lazily built dummy hash, so a
single instance can be shared by every request.

Bearer tokens are HS256-signed JWTs carrying ``sub`` (numeric id as string),
``email``, ``kind`` (``user`` or ``admin``), ``isAdmin``, ``iat`` and ``exp``.
Reset tokens are opaque 64-character hex strings and are never JWTs, so the
two can not be confused for one another.
"""

import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional

import jwt
from passlib.context import CryptContext
from structlog import get_logger

from eventdesk.core.config.settings import settings
from eventdesk.core.exceptions import InvalidTokenError
from eventdesk.domain.value_objects.principal import PrincipalKind, TokenClaims
from eventdesk.domain.value_objects.reset_token import ResetToken
from eventdesk.utils.i18n import get_translated_message

logger = get_logger(__name__)

RESERVED_CLAIMS = frozenset({"sub", "email", "kind", "isAdmin", "iat", "exp"})


def _as_utc(value: datetime) -> datetime:
    """Treats naive datetimes as UTC; SQLite hands them back without tzinfo."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class CredentialService:
    """Hashes passwords and issues/verifies bearer and reset tokens.

    Attributes:
        pwd_context (CryptContext): Passlib context for bcrypt password hashing.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        token_ttl: Optional[timedelta] = None,
        reset_token_ttl: Optional[timedelta] = None,
        bcrypt_rounds: Optional[int] = None,
    ):
        self._secret_key = secret_key or settings.SECRET_KEY
        self._algorithm = algorithm or settings.JWT_ALGORITHM
        self._token_ttl = token_ttl or timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
        self._reset_token_ttl = reset_token_ttl or timedelta(
            minutes=settings.PASSWORD_RESET_TOKEN_EXPIRE_MINUTES
        )
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=bcrypt_rounds or settings.BCRYPT_WORK_FACTOR,
        )
        self._dummy_hash: Optional[str] = None

    # ------------------------------------------------------------------
    # Passwords
    # ------------------------------------------------------------------

    def hash_password(self, password: str) -> str:
        """Returns a salted bcrypt hash of ``password``."""
        return self.pwd_context.hash(password)

    def verify_password(self, password: str, hashed_password: str) -> bool:
        """Checks ``password`` against a stored hash in constant time.

        Malformed or unknown hashes are reported as a mismatch rather than an
        error.
        """
        try:
            return self.pwd_context.verify(password, hashed_password)
        except (ValueError, TypeError):
            logger.warning("Password verification against malformed hash")
            return False

    def verify_against_dummy(self, password: str) -> bool:
        """Runs one bcrypt verification against a throwaway hash; always False.

        Called when no account matches, so a login for an unknown email does
        the same bcrypt work as a wrong password. The dummy hash is built on
        first use and reused for the lifetime of this instance.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self.hash_password(secrets.token_hex(16))
        self.verify_password(password, self._dummy_hash)
        return False

    # ------------------------------------------------------------------
    # Bearer tokens
    # ------------------------------------------------------------------

    def issue_token(
        self,
        principal_id: int,
        email: str,
        kind: PrincipalKind,
        extra: Optional[Mapping[str, Any]] = None,
        now: Optional[datetime] = None,
    ) -> str:
        """Creates a signed bearer token valid for the configured lifetime.

        ``extra`` claims are merged in but may not override the reserved
        identity and timing claims.
        """
        issued_at = _as_utc(now) if now else datetime.now(timezone.utc)
        payload = {key: value for key, value in (extra or {}).items() if key not in RESERVED_CLAIMS}
        payload.update(
            {
                "sub": str(principal_id),
                "email": email,
                "kind": kind.value,
                "isAdmin": kind is PrincipalKind.ADMIN,
                "iat": int(issued_at.timestamp()),
                "exp": int((issued_at + self._token_ttl).timestamp()),
            }
        )
        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        logger.debug("Bearer token issued", principal_id=principal_id, kind=kind.value)
        return token

    def verify_token(self, token: str, now: Optional[datetime] = None, language: str = "en") -> TokenClaims:
        """Validates a bearer token and returns its claims.

        Raises:
            InvalidTokenError: If the signature is wrong, the payload is
                malformed or incomplete, or the token has expired.
        """
        message = get_translated_message("invalid_token", language)
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_exp": False, "require": ["sub", "exp", "iat"]},
            )
        except jwt.PyJWTError as e:
            logger.info("Bearer token rejected", reason=type(e).__name__)
            raise InvalidTokenError(message) from e

        try:
            kind = PrincipalKind(payload["kind"])
            claims = TokenClaims(
                subject_id=int(payload["sub"]),
                email=str(payload["email"]),
                kind=kind,
                is_admin=bool(payload.get("isAdmin", False)),
                issued_at=datetime.fromtimestamp(int(payload["iat"]), tz=timezone.utc),
                expires_at=datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc),
                extra={k: v for k, v in payload.items() if k not in RESERVED_CLAIMS},
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.info("Bearer token rejected", reason="malformed_claims")
            raise InvalidTokenError(message) from e

        if claims.is_admin != (kind is PrincipalKind.ADMIN):
            logger.info("Bearer token rejected", reason="inconsistent_kind")
            raise InvalidTokenError(message)

        current = _as_utc(now) if now else datetime.now(timezone.utc)
        if current >= claims.expires_at:
            logger.info("Bearer token rejected", reason="expired", principal_id=claims.subject_id)
            raise InvalidTokenError(message)

        return claims

    # ------------------------------------------------------------------
    # Reset tokens
    # ------------------------------------------------------------------

    def generate_reset_token(self, now: Optional[datetime] = None) -> ResetToken:
        """Generates a fresh single-use reset token and its expiry."""
        issued_at = _as_utc(now) if now else datetime.now(timezone.utc)
        return ResetToken(
            value=secrets.token_hex(ResetToken.TOKEN_BYTES),
            expires_at=issued_at + self._reset_token_ttl,
        )

    @staticmethod
    def is_reset_token_valid(
        stored_token: Optional[str],
        stored_expiry: Optional[datetime],
        supplied_token: str,
        now: Optional[datetime] = None,
    ) -> bool:
        """True iff a token is stored, matches ``supplied_token`` exactly and
        has not expired at ``now``."""
        if not stored_token or stored_expiry is None or not supplied_token:
            return False
        if not hmac.compare_digest(stored_token.encode(), supplied_token.encode()):
            return False
        current = _as_utc(now) if now else datetime.now(timezone.utc)
        return current < _as_utc(stored_expiry)
