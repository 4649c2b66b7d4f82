"""Repository interfaces for abstracting data persistence in the domain layer.

These abstract base classes are the "ports" the domain services depend on.
Concrete adapters live in ``eventdesk.infrastructure.repositories``: one set
backed by SQLModel/SQLAlchemy and one backed by a process-local in-memory
store. Both must behave identically:

- ``insert`` assigns the numeric id and returns the stored record.
- ``list_all`` and ``list_by_owner`` return records ordered by creation time,
  ties broken by id.
- ``update`` applies a mapping of field names to values and returns the
  updated record, or raises the entity's not-found error.
- uniqueness violations raise ``DuplicateUserError`` (users, admins) or
  ``DuplicateBookingIdError`` (consultations).
"""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from eventdesk.domain.entities.admin import Admin
from eventdesk.domain.entities.consultation import Consultation
from eventdesk.domain.entities.contact_inquiry import ContactInquiry
from eventdesk.domain.entities.user import User


class IUserRepository(ABC):
    """Contract for customer account persistence."""

    @abstractmethod
    async def insert(self, user: User) -> User:
        """Stores a new user.

        Raises:
            DuplicateUserError: If the email is already registered.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Retrieves a user by id, or ``None`` if absent."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Retrieves a user by exact email match, or ``None`` if absent."""
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> List[User]:
        raise NotImplementedError

    @abstractmethod
    async def update(self, user_id: int, fields: Mapping[str, Any]) -> User:
        """Applies ``fields`` to the stored user.

        Raises:
            UserNotFoundError: If no user has ``user_id``.
        """
        raise NotImplementedError


class IAdminRepository(ABC):
    """Contract for administrator persistence."""

    @abstractmethod
    async def insert(self, admin: Admin) -> Admin:
        """Stores a new administrator.

        Raises:
            DuplicateUserError: If the email is already registered.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, admin_id: int) -> Optional[Admin]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Admin]:
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> List[Admin]:
        raise NotImplementedError

    @abstractmethod
    async def update(self, admin_id: int, fields: Mapping[str, Any]) -> Admin:
        raise NotImplementedError


class IConsultationRepository(ABC):
    """Contract for consultation (booking) persistence."""

    @abstractmethod
    async def insert(self, consultation: Consultation) -> Consultation:
        """Stores a new consultation.

        Raises:
            DuplicateBookingIdError: If the booking id is already taken.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, consultation_id: int) -> Optional[Consultation]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_booking_id(self, booking_id: str) -> Optional[Consultation]:
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> List[Consultation]:
        raise NotImplementedError

    @abstractmethod
    async def list_by_owner(self, user_id: int) -> List[Consultation]:
        """Returns the consultations whose ``user_id`` equals ``user_id``."""
        raise NotImplementedError

    @abstractmethod
    async def update(self, consultation_id: int, fields: Mapping[str, Any]) -> Consultation:
        """Applies ``fields`` to the stored consultation.

        Raises:
            ConsultationNotFoundError: If no consultation has ``consultation_id``.
        """
        raise NotImplementedError


class IContactInquiryRepository(ABC):
    """Contract for contact inquiry persistence."""

    @abstractmethod
    async def insert(self, inquiry: ContactInquiry) -> ContactInquiry:
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, inquiry_id: int) -> Optional[ContactInquiry]:
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> List[ContactInquiry]:
        raise NotImplementedError

    @abstractmethod
    async def list_by_owner(self, user_id: int) -> List[ContactInquiry]:
        raise NotImplementedError

    @abstractmethod
    async def update(self, inquiry_id: int, fields: Mapping[str, Any]) -> ContactInquiry:
        """Applies ``fields`` to the stored inquiry.

        Raises:
            ContactInquiryNotFoundError: If no inquiry has ``inquiry_id``.
        """
        raise NotImplementedError
