"""SQLAlchemy async adapter for deferred pagination.

Runs the count and the range fetch as two statements on the caller's
AsyncSession, so the database performs OFFSET/LIMIT instead of returning
every row.
"""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from simple_pagination.sources.base import DeferredQuery


class SQLAlchemyQuery(DeferredQuery[Any]):
    """DeferredQuery over a SQLAlchemy SELECT statement.

    The statement should already carry the caller's filters and ORDER BY.
    The session is only read from; transaction boundaries stay with the
    caller.

    Usage:
        stmt = select(Order).where(Order.user_id == user_id).order_by(Order.id)
        page = await paginate_async(SQLAlchemyQuery(db, stmt), 2, 25)

    Args:
        session: Async database session.
        statement: SELECT statement to paginate.
        scalars: If True (default), return the first column of each row,
            which yields ORM instances for select(Model). If False, return
            Row objects.
    """

    def __init__(
        self,
        session: AsyncSession,
        statement: Select[Any],
        *,
        scalars: bool = True,
    ) -> None:
        self._session = session
        self._statement = statement
        self._scalars = scalars

    def count_statement(self) -> Select[Any]:
        """Build the COUNT statement for the unmodified query.

        ORDER BY is dropped since it cannot change the count.

        Returns:
            SELECT count(*) FROM (<statement>) statement.
        """
        subquery = self._statement.order_by(None).subquery()
        return select(func.count()).select_from(subquery)

    def range_statement(self, skip: int, take: int | None) -> Select[Any]:
        """Build the statement fetching one range of rows.

        Args:
            skip: Rows to skip. 0 emits no OFFSET clause.
            take: Rows to return. None emits no LIMIT clause.

        Returns:
            The original statement with OFFSET/LIMIT applied.
        """
        stmt = self._statement
        if skip:
            stmt = stmt.offset(skip)
        if take is not None:
            stmt = stmt.limit(take)
        return stmt

    async def count(self) -> int:
        result = await self._session.execute(self.count_statement())
        return result.scalar_one()

    async def fetch_range(self, skip: int, take: int | None) -> Sequence[Any]:
        result = await self._session.execute(self.range_statement(skip, take))
        if self._scalars:
            return list(result.scalars().all())
        return list(result.all())
