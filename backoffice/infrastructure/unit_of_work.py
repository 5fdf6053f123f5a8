"""Unit of Work — one request's repositories bound to one AsyncSession, one commit.

Invariants:
    - All four repositories share the same session (same transaction)
    - Repository writes stay buffered in the session until commit()
    - A UnitOfWork lives for exactly one request and is discarded afterwards

Design Decisions:
    - The AsyncSession already is a unit of work; this class only names it and
      exposes the repositories, so services never touch SQLAlchemy directly
    - get_unit_of_work is the FastAPI dependency, layered on get_db so tests
      override a single dependency
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.infrastructure.database import get_db
from backoffice.repositories.customer_repository import SqlCustomerRepository
from backoffice.repositories.order_repository import SqlOrderRepository
from backoffice.repositories.product_repository import SqlProductRepository
from backoffice.repositories.report_repository import SqlReportRepository


class SqlAlchemyUnitOfWork:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.customers = SqlCustomerRepository(db)
        self.products = SqlProductRepository(db)
        self.orders = SqlOrderRepository(db)
        self.reports = SqlReportRepository(db)

    async def commit(self) -> None:
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()


async def get_unit_of_work(
    db: AsyncSession = Depends(get_db),
) -> AsyncGenerator[SqlAlchemyUnitOfWork, None]:
    """FastAPI dependency: one unit of work per request."""
    yield SqlAlchemyUnitOfWork(db)
