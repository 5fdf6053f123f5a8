"""Customer Routes — CRUD and search over customers.

Invariants:
    - Routes never contain business logic (delegate to CustomerHandlers)
    - Query parameters are camelCase, matching the JSON bodies
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from backoffice.infrastructure.unit_of_work import SqlAlchemyUnitOfWork, get_unit_of_work
from backoffice.schemas.customer import (
    CustomerListResponse, CustomerResponse, CustomerSearch, CustomerWrite,
)
from backoffice.services.handle_customers import CustomerHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/customers", tags=["customers"])


def get_handlers(
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
) -> CustomerHandlers:
    return CustomerHandlers(uow)


@router.get("", response_model=CustomerListResponse)
async def search_customers(
    name: str | None = Query(None),
    email: str | None = Query(None),
    phone: str | None = Query(None),
    page_number: int | None = Query(None, alias="pageNumber"),
    page_size: int | None = Query(None, alias="pageSize"),
    handlers: CustomerHandlers = Depends(get_handlers),
):
    """Search customers by name/email/phone fragments, ordered by name."""
    return await handlers.search(CustomerSearch(
        name=name, email=email, phone=phone,
        page_number=page_number, page_size=page_size,
    ))


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: UUID, handlers: CustomerHandlers = Depends(get_handlers),
):
    return await handlers.get(customer_id)


@router.post(
    "", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED,
)
async def create_customer(
    body: CustomerWrite,
    response: Response,
    handlers: CustomerHandlers = Depends(get_handlers),
):
    created = await handlers.create(body)
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return created


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: UUID,
    body: CustomerWrite,
    handlers: CustomerHandlers = Depends(get_handlers),
):
    return await handlers.update(customer_id, body)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    customer_id: UUID, handlers: CustomerHandlers = Depends(get_handlers),
):
    await handlers.delete(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
