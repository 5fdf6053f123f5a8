"""Product Handlers — create, update, delete, get, search.

Invariants:
    - Field rules (core/enforce_product.py) run before ANY store access
    - Slug conflicts exclude the product's own id
    - Price changes never touch existing order lines (their prices are frozen)
    - Delete refuses products referenced by any order line
"""

import logging
from uuid import UUID

from backoffice.core.enforce_listing import BoundedRange, check_pagination, check_ranges
from backoffice.core.enforce_product import check_product_fields, check_slug_available
from backoffice.core.errors import ConflictError, ResourceNotFoundError
from backoffice.core.pagination import clamp_page, total_pages
from backoffice.core.repository_protocols import UnitOfWork
from backoffice.core.search_filters import build_product_filters
from backoffice.models.product import Product
from backoffice.schemas.product import (
    ProductListResponse, ProductResponse, ProductSearch, ProductWrite,
)

logger = logging.getLogger(__name__)


class ProductHandlers:
    """Product use cases, one request-scoped unit of work each."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def create(self, body: ProductWrite) -> ProductResponse:
        check_product_fields(body.title, body.description, body.slug, body.price)
        owner = await self.uow.products.find_by_slug(body.slug)
        check_slug_available(owner.id if owner else None)

        product = Product(
            title=body.title,
            description=body.description,
            slug=body.slug,
            price=body.price,
        )
        self.uow.products.add(product)
        await self.uow.commit()
        logger.info("Product created", extra={"product_id": str(product.id)})
        return ProductResponse.model_validate(product)

    async def update(self, product_id: UUID, body: ProductWrite) -> ProductResponse:
        check_product_fields(body.title, body.description, body.slug, body.price)
        product = await self._get_or_404(product_id)
        owner = await self.uow.products.find_by_slug(body.slug)
        check_slug_available(owner.id if owner else None, product.id)

        product.title = body.title
        product.description = body.description
        product.slug = body.slug
        product.price = body.price
        await self.uow.commit()
        logger.info("Product updated", extra={"product_id": str(product.id)})
        return ProductResponse.model_validate(product)

    async def delete(self, product_id: UUID) -> None:
        product = await self._get_or_404(product_id)
        if await self.uow.products.is_referenced(product.id):
            raise ConflictError("Product is referenced by existing orders")
        await self.uow.products.delete(product)
        await self.uow.commit()
        logger.info("Product deleted", extra={"product_id": str(product_id)})

    async def get(self, product_id: UUID) -> ProductResponse:
        product = await self._get_or_404(product_id)
        return ProductResponse.model_validate(product)

    async def search(self, query: ProductSearch) -> ProductListResponse:
        check_ranges(BoundedRange("price", query.min_price, query.max_price))
        check_pagination(query.page_number, query.page_size)
        page = clamp_page(query.page_number, query.page_size)
        filters = build_product_filters(
            query.title, query.description, query.slug,
            query.min_price, query.max_price,
        )
        products, total = await self.uow.products.search(filters, page)
        return ProductListResponse(
            products=[ProductResponse.model_validate(p) for p in products],
            page_number=page.number,
            page_size=page.size,
            total_count=total,
            total_pages=total_pages(total, page.size),
        )

    async def _get_or_404(self, product_id: UUID):
        product = await self.uow.products.find_by_id(product_id)
        if product is None:
            raise ResourceNotFoundError("Product", str(product_id))
        return product
