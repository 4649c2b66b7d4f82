"""Re-export factory functions for generating fake test data."""

# flake8: noqa: F401 – re-export

from .submission import (
    consultation_payload,
    contact_payload,
    create_consultation_input,
    create_contact_input,
    create_fake_consultation,
    create_fake_contact,
)
from .user import create_fake_admin, create_fake_user

__all__ = [
    "create_fake_user",
    "create_fake_admin",
    "consultation_payload",
    "contact_payload",
    "create_consultation_input",
    "create_contact_input",
    "create_fake_consultation",
    "create_fake_contact",
]
