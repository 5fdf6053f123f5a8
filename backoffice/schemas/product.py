"""Product Schemas — create/update payload, search parameters, responses."""

from decimal import Decimal
from uuid import UUID

from backoffice.schemas.common import CamelModel, MoneyOut, PageEnvelope


class ProductWrite(CamelModel):
    title: str | None = None
    description: str | None = None
    slug: str | None = None
    price: Decimal | None = None


class ProductSearch(CamelModel):
    title: str | None = None
    description: str | None = None
    slug: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    page_number: int | None = None
    page_size: int | None = None


class ProductResponse(CamelModel):
    id: UUID
    title: str
    description: str
    slug: str
    price: MoneyOut


class ProductListResponse(PageEnvelope):
    products: list[ProductResponse]
