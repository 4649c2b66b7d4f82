"""Process-local in-memory repositories.

Used when ``REPOSITORY_BACKEND=memory`` and by the test-suite. They honour the
same contract as the SQL repositories: ids auto-increment from 1 per entity
kind, listings come back in creation order, and uniqueness violations raise
the same domain errors. The store lives on ``app.state`` so every request of a
running application shares it.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from sqlmodel import SQLModel
from structlog import get_logger

from eventdesk.core.exceptions import (
    ConsultationNotFoundError,
    ContactInquiryNotFoundError,
    DuplicateBookingIdError,
    DuplicateUserError,
    NotFoundError,
    UserNotFoundError,
)
from eventdesk.domain.entities.admin import Admin
from eventdesk.domain.entities.consultation import Consultation
from eventdesk.domain.entities.contact_inquiry import ContactInquiry
from eventdesk.domain.entities.user import User
from eventdesk.domain.interfaces.repositories import (
    IAdminRepository,
    IConsultationRepository,
    IContactInquiryRepository,
    IUserRepository,
)
from eventdesk.infrastructure.repositories.base import apply_fields

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


@dataclass
class _Table(Generic[ModelT]):
    rows: Dict[int, ModelT] = field(default_factory=dict)
    next_id: int = 1


class InMemoryStore:
    """Holds one table per entity kind plus a lock serialising writes."""

    def __init__(self) -> None:
        self.lock = asyncio.Lock()
        self.reset()

    def reset(self) -> None:
        """Drops every row and restarts id allocation at 1."""
        self.users: _Table[User] = _Table()
        self.admins: _Table[Admin] = _Table()
        self.consultations: _Table[Consultation] = _Table()
        self.contacts: _Table[ContactInquiry] = _Table()


class _MemoryRepository(Generic[ModelT]):
    not_found_error: Type[NotFoundError] = NotFoundError
    table_name: str

    def __init__(self, store: InMemoryStore):
        self.store = store

    @property
    def _table(self) -> _Table[ModelT]:
        return getattr(self.store, self.table_name)

    def _check_unique(self, record: ModelT) -> None:
        """Raises the entity's duplicate error if ``record`` clashes."""

    async def insert(self, record: ModelT) -> ModelT:
        async with self.store.lock:
            self._check_unique(record)
            table = self._table
            record.id = table.next_id
            table.next_id += 1
            table.rows[record.id] = record
        logger.debug("In-memory insert", table=self.table_name, record_id=record.id)
        return record

    async def get_by_id(self, record_id: int) -> Optional[ModelT]:
        return self._table.rows.get(record_id)

    def _sorted(self, predicate: Optional[Callable[[ModelT], bool]] = None) -> List[ModelT]:
        rows = [r for r in self._table.rows.values() if predicate is None or predicate(r)]
        return sorted(rows, key=lambda r: (r.created_at, r.id))

    async def list_all(self) -> List[ModelT]:
        return self._sorted()

    async def update(self, record_id: int, fields: Mapping[str, Any]) -> ModelT:
        async with self.store.lock:
            record = self._table.rows.get(record_id)
            if record is None:
                raise self.not_found_error()
            apply_fields(record, fields)
        return record


class InMemoryUserRepository(_MemoryRepository[User], IUserRepository):
    table_name = "users"
    not_found_error = UserNotFoundError

    def _check_unique(self, record: User) -> None:
        if any(u.email == record.email for u in self._table.rows.values()):
            raise DuplicateUserError("Email already registered")

    async def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._table.rows.values() if u.email == email), None)


class InMemoryAdminRepository(_MemoryRepository[Admin], IAdminRepository):
    table_name = "admins"

    def _check_unique(self, record: Admin) -> None:
        if any(a.email == record.email for a in self._table.rows.values()):
            raise DuplicateUserError("Email already registered")

    async def get_by_email(self, email: str) -> Optional[Admin]:
        return next((a for a in self._table.rows.values() if a.email == email), None)


class InMemoryConsultationRepository(_MemoryRepository[Consultation], IConsultationRepository):
    table_name = "consultations"
    not_found_error = ConsultationNotFoundError

    def _check_unique(self, record: Consultation) -> None:
        if any(c.booking_id == record.booking_id for c in self._table.rows.values()):
            raise DuplicateBookingIdError()

    async def get_by_booking_id(self, booking_id: str) -> Optional[Consultation]:
        return next((c for c in self._table.rows.values() if c.booking_id == booking_id), None)

    async def list_by_owner(self, user_id: int) -> List[Consultation]:
        return self._sorted(lambda c: c.user_id == user_id)


class InMemoryContactInquiryRepository(_MemoryRepository[ContactInquiry], IContactInquiryRepository):
    table_name = "contacts"
    not_found_error = ContactInquiryNotFoundError

    async def list_by_owner(self, user_id: int) -> List[ContactInquiry]:
        return self._sorted(lambda c: c.user_id == user_id)
