"""Authentication and authorization settings.
"""

import logging
from typing import Optional

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class AuthSettings(BaseSettings):
    """Defines settings for bearer tokens, password hashing and the bootstrap admin.

    Bearer tokens are HMAC-signed (HS256) with ``SECRET_KEY`` and stay valid for
    ``ACCESS_TOKEN_EXPIRE_DAYS`` days. Admin accounts cannot sign up; the
    administrator described by ``ADMIN_EMAIL``/``ADMIN_PASSWORD``/
    ``ADMIN_SECURITY_CODE`` is created at startup when it does not exist yet.

    Security Note:
        - ADMIN_PASSWORD and ADMIN_SECURITY_CODE should never be committed to
          version control. Leave them unset to skip admin bootstrapping.
    """

    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = Field(ge=1, default=7)

    BCRYPT_WORK_FACTOR: int = Field(ge=4, le=31, default=12)
    PASSWORD_MIN_LENGTH: int = Field(ge=1, default=6)

    BOOKING_ID_PREFIX: str = "RGM"

    ADMIN_EMAIL: Optional[str] = None
    ADMIN_PASSWORD: Optional[SecretStr] = None
    ADMIN_SECURITY_CODE: Optional[SecretStr] = None
    ADMIN_FULL_NAME: str = "Administrator"

    @model_validator(mode="after")
    def _validate_bootstrap_admin(self) -> "AuthSettings":
        """Warns when the bootstrap admin is only partially configured.

        Returns:
            Self instance.
        """
        configured = [
            bool(self.ADMIN_EMAIL),
            bool(self.ADMIN_PASSWORD and self.ADMIN_PASSWORD.get_secret_value()),
            bool(self.ADMIN_SECURITY_CODE and self.ADMIN_SECURITY_CODE.get_secret_value()),
        ]
        if any(configured) and not all(configured):
            logger.warning(
                "Bootstrap admin is partially configured; ADMIN_EMAIL, ADMIN_PASSWORD "
                "and ADMIN_SECURITY_CODE are all required. Skipping admin bootstrap."
            )
        return self

    @property
    def bootstrap_admin_configured(self) -> bool:
        return bool(
            self.ADMIN_EMAIL
            and self.ADMIN_PASSWORD
            and self.ADMIN_PASSWORD.get_secret_value()
            and self.ADMIN_SECURITY_CODE
            and self.ADMIN_SECURITY_CODE.get_secret_value()
        )
