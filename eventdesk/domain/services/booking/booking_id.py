"""Booking identifier generation.

Identifiers have the form ``<PREFIX>-<epoch milliseconds>``. Within a single
process identifiers are strictly increasing: when two consultations are
created in the same millisecond the second one is bumped past the first.
Across processes, uniqueness is enforced by the repository constraint and the
lifecycle service retries on collision.
"""

import threading
from datetime import datetime, timezone
from typing import Optional


def generate_booking_id(created_at: datetime, previous: Optional[int] = None, prefix: str = "RGM") -> str:
    """Builds a booking id for a record created at ``created_at``.

    Args:
        created_at: Creation time of the consultation. Naive values are UTC.
        previous: The numeric part of the last id issued by this process.
        prefix: Human-readable prefix.
    """
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    number = int(created_at.timestamp() * 1000)
    if previous is not None and previous >= number:
        number = previous + 1
    return f"{prefix}-{number}"


def booking_number(booking_id: str) -> int:
    """Extracts the numeric part of a booking id."""
    return int(booking_id.rsplit("-", 1)[1])


class BookingIdGenerator:
    """Issues strictly increasing booking ids for this process."""

    def __init__(self, prefix: str = "RGM"):
        self.prefix = prefix
        self._last: Optional[int] = None
        self._lock = threading.Lock()

    def next_id(self, created_at: Optional[datetime] = None) -> str:
        with self._lock:
            booking_id = generate_booking_id(
                created_at or datetime.now(timezone.utc), self._last, self.prefix
            )
            self._last = booking_number(booking_id)
            return booking_id
