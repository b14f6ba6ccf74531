"""
Generic CRUD for the integer-keyed dashboard tables.

Rows are created, read and updated; therapists, patients and sessions are
never deleted, so there is no delete operation. Methods flush but never
commit; the caller owns the transaction.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from therapy_dashboard.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Operations shared by every model with an integer ``id`` primary key.

    Subclasses pass their model class and add table-specific queries.
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        """
        Insert a row and load its generated id.

        Args:
            session: Async database session
            **values: Column values

        Returns:
            The new instance, refreshed after flush
        """
        instance = self.model(**values)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: int) -> ModelT | None:
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        session: AsyncSession,
        *order_by: Any,
        limit: int | None = None,
    ) -> Sequence[ModelT]:
        """
        All rows, ordered by the given columns then by id.

        Args:
            session: Async database session
            *order_by: Ordering expressions, applied before the id tie-break
            limit: Maximum number of rows (None for all)
        """
        stmt = select(self.model).order_by(*order_by, self.model.id.asc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def update_by_id(self, session: AsyncSession, id: int, **values: Any) -> ModelT | None:
        """
        Set columns on one row.

        Returns:
            The refreshed instance, or None when no row has this id (nothing
            is flushed in that case)
        """
        instance = await self.get_by_id(session, id)
        if instance is None:
            return None
        for column, value in values.items():
            setattr(instance, column, value)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def exists(self, session: AsyncSession, id: int) -> bool:
        result = await session.execute(select(self.model.id).where(self.model.id == id))
        return result.scalar_one_or_none() is not None
