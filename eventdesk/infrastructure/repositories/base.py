"""Shared plumbing for the SQLAlchemy repositories.

Every SQL repository works on an injected ``AsyncSession`` and follows the
same transaction pattern: stage the change, commit, refresh, and roll back on
failure. Driver errors never leave the repository unwrapped: integrity
violations become the entity's duplicate error, anything else becomes
``DatabaseError``.
"""

from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel
from structlog import get_logger

from eventdesk.core.exceptions import DatabaseError, NotFoundError

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


def apply_fields(record: SQLModel, fields: Mapping[str, Any]) -> None:
    """Assigns ``fields`` onto ``record``, rejecting unknown attribute names."""
    model_fields = type(record).model_fields
    for name, value in fields.items():
        if name == "id" or name not in model_fields:
            raise ValueError(f"Cannot update field '{name}' on {type(record).__name__}")
        setattr(record, name, value)


class SQLRepository(Generic[ModelT]):
    """Common CRUD operations for a single SQLModel table."""

    model: Type[ModelT]
    not_found_error: Type[NotFoundError] = NotFoundError

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    @property
    def _entity(self) -> str:
        return self.model.__name__

    def _ordered(self):
        return select(self.model).order_by(self.model.created_at, self.model.id)

    async def _first(self, statement) -> Optional[ModelT]:
        try:
            result = await self.db_session.execute(statement)
            return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error("Database query failed", entity=self._entity, error=str(e))
            raise DatabaseError(f"Failed to query {self._entity}") from e

    async def _all(self, statement) -> List[ModelT]:
        try:
            result = await self.db_session.execute(statement)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database query failed", entity=self._entity, error=str(e))
            raise DatabaseError(f"Failed to query {self._entity}") from e

    async def _commit(self, record: ModelT, operation: str) -> ModelT:
        """Commits the pending change for ``record`` and refreshes it."""
        try:
            await self.db_session.commit()
            await self.db_session.refresh(record)
        except SQLAlchemyError:
            await self.db_session.rollback()
            logger.warning("Database write rolled back", entity=self._entity, operation=operation)
            raise
        logger.debug("Database write committed", entity=self._entity, operation=operation, record_id=record.id)
        return record

    async def get_by_id(self, record_id: int) -> Optional[ModelT]:
        return await self._first(select(self.model).where(self.model.id == record_id))

    async def list_all(self) -> List[ModelT]:
        return await self._all(self._ordered())

    async def update(self, record_id: int, fields: Mapping[str, Any]) -> ModelT:
        record = await self.get_by_id(record_id)
        if record is None:
            raise self.not_found_error()
        apply_fields(record, fields)
        self.db_session.add(record)
        try:
            return await self._commit(record, "update")
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to update {self._entity}") from e
