from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Column, Field, SQLModel, String

from eventdesk.domain.entities.user import utc_now


class Admin(SQLModel, table=True):
    """Represents an administrator.

    Administrators are a separate identity class from customers. They cannot
    sign up through the API and log in with their password *and* a shared
    security code, which is a static secret distinct from the password.

    Attributes:
        id: The unique identifier for the admin (primary key).
        email: A unique email address used for login.
        full_name: Optional display name.
        hashed_password: The bcrypt hash of the admin's password.
        security_code: The shared secret required alongside the password.
        created_at: When the admin record was created.
    """

    __tablename__ = "admins"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(
        sa_column=Column(String(255), unique=True, index=True, nullable=False),
    )
    full_name: Optional[str] = Field(default=None, max_length=255)
    hashed_password: str = Field(max_length=255)
    security_code: str = Field(max_length=255)
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
