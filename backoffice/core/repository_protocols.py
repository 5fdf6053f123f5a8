"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Writes (add/delete) are buffered until UnitOfWork.commit()
    - search() returns (page of items, total count over the filtered set)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Entities are typed structurally (CustomerLike, ...) so services stay decoupled
      from the ORM models while still getting real type information
    - Async in Protocol: implementations do IO; core functions that consume the
      results are never async themselves
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Protocol, Sequence
from uuid import UUID

from backoffice.core.pagination import PageRequest
from backoffice.core.report_aggregation import CustomerSpend, MonthlyRevenue
from backoffice.core.search_filters import FilterClause


class CustomerLike(Protocol):
    id: UUID
    name: str
    email: str
    phone: str
    birth_date: date


class ProductLike(Protocol):
    id: UUID
    title: str
    description: str
    slug: str
    price: Decimal


class OrderLineLike(Protocol):
    id: UUID
    order_id: UUID
    product_id: UUID
    quantity: int
    unit_price: Decimal
    total: Decimal
    product: ProductLike


class OrderLike(Protocol):
    id: UUID
    customer_id: UUID
    created_at: datetime
    updated_at: datetime
    customer: CustomerLike
    lines: list


class CustomerRepository(Protocol):
    async def find_by_id(self, customer_id: UUID) -> CustomerLike | None: ...
    async def find_by_email(self, email: str) -> CustomerLike | None: ...
    async def has_orders(self, customer_id: UUID) -> bool: ...
    def add(self, customer: CustomerLike) -> None: ...
    async def delete(self, customer: CustomerLike) -> None: ...
    async def search(
        self, filters: Sequence[FilterClause], page: PageRequest,
    ) -> tuple[list[CustomerLike], int]: ...


class ProductRepository(Protocol):
    async def find_by_id(self, product_id: UUID) -> ProductLike | None: ...
    async def find_by_slug(self, slug: str) -> ProductLike | None: ...
    async def find_by_ids(self, product_ids: set[UUID]) -> list[ProductLike]: ...
    async def is_referenced(self, product_id: UUID) -> bool: ...
    def add(self, product: ProductLike) -> None: ...
    async def delete(self, product: ProductLike) -> None: ...
    async def search(
        self, filters: Sequence[FilterClause], page: PageRequest,
    ) -> tuple[list[ProductLike], int]: ...


class OrderRepository(Protocol):
    async def find_by_id(self, order_id: UUID) -> OrderLike | None: ...
    def add(self, order: OrderLike) -> None: ...
    async def search(
        self, filters: Sequence[FilterClause], page: PageRequest,
    ) -> tuple[list[OrderLike], int]: ...


class ReportRepository(Protocol):
    async def spend_by_customer(
        self, filters: Sequence[FilterClause],
    ) -> list[CustomerSpend]: ...
    async def revenue_by_month(
        self, created_from: datetime | None, created_to: datetime | None,
    ) -> list[MonthlyRevenue]: ...


class UnitOfWork(Protocol):
    """One request's transaction: repositories sharing a session, one commit."""
    customers: CustomerRepository
    products: ProductRepository
    orders: OrderRepository
    reports: ReportRepository

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
