"""Reset Token value object.

A reset token is an opaque 64-character hex string (32 random bytes) paired
with its expiry. It is never a JWT, so it can never be presented as a bearer
token and vice versa.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar


@dataclass(frozen=True)
class ResetToken:
    """Password reset token value object.

    Attributes:
        value: The token string (64 lowercase hex characters).
        expires_at: Token expiration timestamp (timezone-aware UTC).
    """

    value: str
    expires_at: datetime

    TOKEN_BYTES: ClassVar[int] = 32
    TOKEN_LENGTH: ClassVar[int] = 64

    def __post_init__(self) -> None:
        if len(self.value) != self.TOKEN_LENGTH:
            raise ValueError("Reset token must be 64 hex characters")
        try:
            int(self.value, 16)
        except ValueError:
            raise ValueError("Reset token must be hexadecimal") from None

    def mask_for_logging(self) -> str:
        """Returns a prefix of the token that is safe to log."""
        return f"{self.value[:8]}..."

    def __str__(self) -> str:
        return self.value
