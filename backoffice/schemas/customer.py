"""Customer Schemas — create/update payload, search parameters, responses."""

from datetime import date
from uuid import UUID

from backoffice.schemas.common import CamelModel, PageEnvelope


class CustomerWrite(CamelModel):
    """Create and update share one payload; update rewrites all four fields."""
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    birth_date: date | None = None


class CustomerSearch(CamelModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    page_number: int | None = None
    page_size: int | None = None


class CustomerResponse(CamelModel):
    id: UUID
    name: str
    email: str
    phone: str
    birth_date: date


class CustomerListResponse(PageEnvelope):
    customers: list[CustomerResponse]
