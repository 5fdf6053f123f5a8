"""Customer Handlers — create, update, delete, get, search.

Invariants:
    - Field rules (core/enforce_customer.py) run before ANY store access
    - Update: fields → existence (404) → email ownership (409), in that order
    - Email conflicts exclude the customer's own id
    - Exactly one commit per write; nothing is committed when a check fails
    - Delete refuses customers that still have orders

Design Decisions:
    - Handlers depend on the UnitOfWork protocol, not on SQLAlchemy: the same code
      runs on any store that satisfies core/repository_protocols.py
"""

import logging
from uuid import UUID

from backoffice.core.enforce_customer import check_customer_fields, check_email_available
from backoffice.core.enforce_listing import check_pagination
from backoffice.core.errors import ConflictError, ResourceNotFoundError
from backoffice.core.pagination import clamp_page, total_pages
from backoffice.core.repository_protocols import UnitOfWork
from backoffice.core.search_filters import build_customer_filters
from backoffice.models.customer import Customer
from backoffice.schemas.customer import (
    CustomerListResponse, CustomerResponse, CustomerSearch, CustomerWrite,
)

logger = logging.getLogger(__name__)


class CustomerHandlers:
    """Customer use cases, one request-scoped unit of work each."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def create(self, body: CustomerWrite) -> CustomerResponse:
        check_customer_fields(body.name, body.email, body.phone, body.birth_date)
        owner = await self.uow.customers.find_by_email(body.email)
        check_email_available(owner.id if owner else None)

        customer = Customer(
            name=body.name,
            email=body.email,
            phone=body.phone,
            birth_date=body.birth_date,
        )
        self.uow.customers.add(customer)
        await self.uow.commit()
        logger.info("Customer created", extra={"customer_id": str(customer.id)})
        return CustomerResponse.model_validate(customer)

    async def update(self, customer_id: UUID, body: CustomerWrite) -> CustomerResponse:
        check_customer_fields(body.name, body.email, body.phone, body.birth_date)
        customer = await self._get_or_404(customer_id)
        owner = await self.uow.customers.find_by_email(body.email)
        check_email_available(owner.id if owner else None, customer.id)

        customer.name = body.name
        customer.email = body.email
        customer.phone = body.phone
        customer.birth_date = body.birth_date
        await self.uow.commit()
        logger.info("Customer updated", extra={"customer_id": str(customer.id)})
        return CustomerResponse.model_validate(customer)

    async def delete(self, customer_id: UUID) -> None:
        customer = await self._get_or_404(customer_id)
        if await self.uow.customers.has_orders(customer.id):
            raise ConflictError("Customer has existing orders")
        await self.uow.customers.delete(customer)
        await self.uow.commit()
        logger.info("Customer deleted", extra={"customer_id": str(customer_id)})

    async def get(self, customer_id: UUID) -> CustomerResponse:
        customer = await self._get_or_404(customer_id)
        return CustomerResponse.model_validate(customer)

    async def search(self, query: CustomerSearch) -> CustomerListResponse:
        check_pagination(query.page_number, query.page_size)
        page = clamp_page(query.page_number, query.page_size)
        filters = build_customer_filters(query.name, query.email, query.phone)
        customers, total = await self.uow.customers.search(filters, page)
        return CustomerListResponse(
            customers=[CustomerResponse.model_validate(c) for c in customers],
            page_number=page.number,
            page_size=page.size,
            total_count=total,
            total_pages=total_pages(total, page.size),
        )

    async def _get_or_404(self, customer_id: UUID):
        customer = await self.uow.customers.find_by_id(customer_id)
        if customer is None:
            raise ResourceNotFoundError("Customer", str(customer_id))
        return customer
