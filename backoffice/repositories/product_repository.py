"""Product Repository — product lookups, batch resolution, and filtered search.

Invariants:
    - find_by_ids returns only existing products; callers compare counts
    - search orders by title ascending
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.pagination import PageRequest
from backoffice.core.search_filters import FilterClause
from backoffice.models.order_line import OrderLine
from backoffice.models.product import Product
from backoffice.repositories.query_filters import build_conditions, column

PRODUCT_FIELDS = {
    "title": column(Product.title),
    "description": column(Product.description),
    "slug": column(Product.slug),
    "price": column(Product.price),
}


class SqlProductRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, product_id: UUID) -> Product | None:
        return await self.db.get(Product, product_id)

    async def find_by_slug(self, slug: str) -> Product | None:
        result = await self.db.execute(
            select(Product).where(Product.slug == slug),
        )
        return result.scalar_one_or_none()

    async def find_by_ids(self, product_ids: set[UUID]) -> list[Product]:
        if not product_ids:
            return []
        result = await self.db.execute(
            select(Product).where(Product.id.in_(product_ids)),
        )
        return list(result.scalars().all())

    async def is_referenced(self, product_id: UUID) -> bool:
        result = await self.db.execute(
            select(OrderLine.id).where(OrderLine.product_id == product_id).limit(1),
        )
        return result.first() is not None

    def add(self, product: Product) -> None:
        self.db.add(product)

    async def delete(self, product: Product) -> None:
        await self.db.delete(product)

    async def search(
        self, filters: Sequence[FilterClause], page: PageRequest,
    ) -> tuple[list[Product], int]:
        conditions = build_conditions(filters, PRODUCT_FIELDS)
        total = await self.db.scalar(
            select(func.count()).select_from(Product).where(*conditions),
        )
        result = await self.db.execute(
            select(Product)
            .where(*conditions)
            .order_by(Product.title.asc(), Product.id.asc())
            .offset(page.offset)
            .limit(page.size),
        )
        return list(result.scalars().all()), total or 0
