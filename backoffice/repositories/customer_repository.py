"""Customer Repository — customer lookups, uniqueness probe, and filtered search.

Invariants:
    - find_by_email is an exact match (uniqueness is exact, search is fuzzy)
    - search orders by name ascending
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.pagination import PageRequest
from backoffice.core.search_filters import FilterClause
from backoffice.models.customer import Customer
from backoffice.models.order import Order
from backoffice.repositories.query_filters import build_conditions, column

CUSTOMER_FIELDS = {
    "name": column(Customer.name),
    "email": column(Customer.email),
    "phone": column(Customer.phone),
}


class SqlCustomerRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, customer_id: UUID) -> Customer | None:
        return await self.db.get(Customer, customer_id)

    async def find_by_email(self, email: str) -> Customer | None:
        result = await self.db.execute(
            select(Customer).where(Customer.email == email),
        )
        return result.scalar_one_or_none()

    async def has_orders(self, customer_id: UUID) -> bool:
        result = await self.db.execute(
            select(Order.id).where(Order.customer_id == customer_id).limit(1),
        )
        return result.first() is not None

    def add(self, customer: Customer) -> None:
        self.db.add(customer)

    async def delete(self, customer: Customer) -> None:
        await self.db.delete(customer)

    async def search(
        self, filters: Sequence[FilterClause], page: PageRequest,
    ) -> tuple[list[Customer], int]:
        conditions = build_conditions(filters, CUSTOMER_FIELDS)
        total = await self.db.scalar(
            select(func.count()).select_from(Customer).where(*conditions),
        )
        result = await self.db.execute(
            select(Customer)
            .where(*conditions)
            .order_by(Customer.name.asc(), Customer.id.asc())
            .offset(page.offset)
            .limit(page.size),
        )
        return list(result.scalars().all()), total or 0
