from datetime import datetime, timezone  # For timestamp fields
from enum import Enum  # For type-safe role enumeration
from typing import Optional  # For optional fields

from sqlalchemy import DateTime  # Explicit timezone-aware DateTime type
from sqlalchemy import Enum as SAEnum
from sqlmodel import Column, Field, SQLModel, String  # For ORM and table definition


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class Role(str, Enum):
    """Represents the role of a customer account.

    Attributes:
        ADMIN: Elevated customer account. Admin routes still require an admin
            token issued through the separate admin login.
        USER: Standard customer account.
    """

    ADMIN = "admin"
    USER = "user"


class User(SQLModel, table=True):
    """Represents a customer account.

    Customers sign up with a full name, email and password, log in to receive a
    bearer token, and can reset a forgotten password through a single-use,
    time-limited reset token stored on this record.

    Attributes:
        id: The unique identifier for the user (primary key).
        full_name: The customer's display name.
        email: A unique email address, compared exactly as stored.
        hashed_password: The bcrypt hash of the password. The raw password is never stored.
        role: The account role.
        created_at: When the account was created.
        updated_at: When the account was last modified.
        password_reset_token: A pending password reset token, if any.
        password_reset_token_expires_at: Expiry of the pending reset token.
    """

    __tablename__ = "users"

    id: Optional[int] = Field(
        default=None,
        primary_key=True,
        description="The unique identifier for the user.",
    )
    full_name: str = Field(
        max_length=255,
        description="The customer's full name.",
    )
    email: str = Field(
        sa_column=Column(String(255), unique=True, index=True, nullable=False),
        description="Unique email address used for login.",
    )
    hashed_password: str = Field(
        max_length=255,  # Sufficient for bcrypt hashes
        description="Bcrypt-hashed password.",
    )
    role: Role = Field(
        default=Role.USER,
        sa_column=Column(
            SAEnum(Role, name="user_role", values_callable=lambda enum: [m.value for m in enum]),
            default=Role.USER,
            nullable=False,
        ),
        description="The account role.",
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="The timestamp of when the user account was created.",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="The timestamp of the last update to the user's record.",
    )
    password_reset_token: Optional[str] = Field(
        default=None,
        max_length=64,  # 32 bytes hex encoded = 64 characters
        description="A secure token for verifying a password reset request.",
    )
    password_reset_token_expires_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True),
        description="The expiration timestamp for the password reset token.",
    )

    def set_password_reset_token(self, token: str, expires_at: datetime) -> None:
        """Stores a reset token together with its expiry.

        Any previously issued token is replaced.
        """
        self.password_reset_token = token
        self.password_reset_token_expires_at = expires_at
        self.updated_at = utc_now()

    def clear_password_reset_token(self) -> None:
        """Invalidates the pending reset token, if any."""
        self.password_reset_token = None
        self.password_reset_token_expires_at = None
        self.updated_at = utc_now()
