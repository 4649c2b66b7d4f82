from .booking_id import BookingIdGenerator, generate_booking_id
from .lifecycle_service import (
    UNSET,
    BookingLifecycleService,
    ConsultationInput,
    ContactInput,
    EventDetailsUpdate,
)

__all__ = [
    "BookingIdGenerator",
    "generate_booking_id",
    "BookingLifecycleService",
    "ConsultationInput",
    "ContactInput",
    "EventDetailsUpdate",
    "UNSET",
]
