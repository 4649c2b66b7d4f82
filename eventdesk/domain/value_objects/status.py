"""Status vocabularies for consultations and contact inquiries.

Statuses are persisted as plain strings; these enums are the single source of
the allowed values. Transitions between allowed values are unrestricted.
"""

from enum import Enum
from typing import Type, TypeVar

E = TypeVar("E", bound=Enum)


class ConsultationStatus(str, Enum):
    """Booking progress: ``pending`` → ``scheduled`` → ``confirmed`` → ``completed``."""

    PENDING = "pending"
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"


class PaymentStatus(str, Enum):
    """Payment progress: ``unpaid`` → ``paid`` → ``refunded``."""

    UNPAID = "unpaid"
    PAID = "paid"
    REFUNDED = "refunded"


class ContactStatus(str, Enum):
    """Contact inquiry progress: ``new`` → ``replied``."""

    NEW = "new"
    REPLIED = "replied"


def parse_status(enum_cls: Type[E], value: str) -> E:
    """Converts a raw status string into a member of ``enum_cls``.

    Raises:
        ValueError: If ``value`` is not part of the vocabulary.
    """
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"'{value}' is not a valid status; expected one of: {allowed}") from None
