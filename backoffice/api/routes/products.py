"""Product Routes — CRUD and search over the catalog.

Invariants:
    - Routes never contain business logic (delegate to ProductHandlers)
"""

import logging
from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from backoffice.infrastructure.unit_of_work import SqlAlchemyUnitOfWork, get_unit_of_work
from backoffice.schemas.product import (
    ProductListResponse, ProductResponse, ProductSearch, ProductWrite,
)
from backoffice.services.handle_products import ProductHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/products", tags=["products"])


def get_handlers(
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
) -> ProductHandlers:
    return ProductHandlers(uow)


@router.get("", response_model=ProductListResponse)
async def search_products(
    title: str | None = Query(None),
    description: str | None = Query(None),
    slug: str | None = Query(None),
    min_price: Decimal | None = Query(None, alias="minPrice"),
    max_price: Decimal | None = Query(None, alias="maxPrice"),
    page_number: int | None = Query(None, alias="pageNumber"),
    page_size: int | None = Query(None, alias="pageSize"),
    handlers: ProductHandlers = Depends(get_handlers),
):
    """Search products by text fragments and price range, ordered by title."""
    return await handlers.search(ProductSearch(
        title=title, description=description, slug=slug,
        min_price=min_price, max_price=max_price,
        page_number=page_number, page_size=page_size,
    ))


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: UUID, handlers: ProductHandlers = Depends(get_handlers),
):
    return await handlers.get(product_id)


@router.post(
    "", response_model=ProductResponse, status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductWrite,
    response: Response,
    handlers: ProductHandlers = Depends(get_handlers),
):
    created = await handlers.create(body)
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return created


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: UUID,
    body: ProductWrite,
    handlers: ProductHandlers = Depends(get_handlers),
):
    return await handlers.update(product_id, body)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: UUID, handlers: ProductHandlers = Depends(get_handlers),
):
    await handlers.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
