"""Factory for generating fake user data for testing."""

from datetime import datetime, timezone
from typing import Optional

from faker import Faker

from eventdesk.domain.entities.admin import Admin
from eventdesk.domain.entities.user import Role, User

fake = Faker()


def create_fake_user(
    id: Optional[int] = None,
    full_name: Optional[str] = None,
    email: Optional[str] = None,
    hashed_password: Optional[str] = None,
    role: Role = Role.USER,
    created_at: Optional[datetime] = None,
) -> User:
    """Create a fake User entity for testing.

    Args:
        id (Optional[int]): User ID, left unset so repositories assign one.
        full_name (Optional[str]): Display name, defaults to a fake name.
        email (Optional[str]): Email, defaults to a fake email.
        hashed_password (Optional[str]): Stored hash, defaults to a placeholder.
        role (Role): User role, defaults to USER.
        created_at (Optional[datetime]): Creation timestamp, defaults to now.

    Returns:
        User: A fake User entity.
    """
    return User(
        id=id,
        full_name=full_name if full_name is not None else fake.name(),
        email=email if email is not None else fake.unique.email(domain="example.com"),
        hashed_password=hashed_password if hashed_password is not None else "not-a-real-hash",
        role=role,
        created_at=created_at if created_at is not None else datetime.now(timezone.utc),
    )


def create_fake_admin(
    email: Optional[str] = None,
    hashed_password: Optional[str] = None,
    security_code: str = "security-code",
) -> Admin:
    return Admin(
        email=email if email is not None else fake.unique.email(domain="example.com"),
        full_name=fake.name(),
        hashed_password=hashed_password if hashed_password is not None else "not-a-real-hash",
        security_code=security_code,
    )
