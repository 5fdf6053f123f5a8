"""Product Enforcement — field rules for product create/update.

Invariants:
    - title, description, slug required (in that order), then price
    - price is present, has at most MONEY_PLACES decimal places, and is > 0;
      the places check runs first so a sub-cent price is never stored rounded
    - Slug uniqueness checked after field rules; a product never conflicts with itself
"""

from decimal import Decimal
from uuid import UUID

from backoffice.core.errors import ConflictError, RequestValidationFailedError

# Scale of the price column (Numeric(12, 2))
MONEY_PLACES = 2


def check_product_fields(
    title: str | None,
    description: str | None,
    slug: str | None,
    price: Decimal | None,
) -> None:
    """Validate a product payload. Raises on the first violated rule."""
    for field_name, label, value in (
        ("title", "Title", title),
        ("description", "Description", description),
        ("slug", "Slug", slug),
    ):
        if value is None or not value.strip():
            raise RequestValidationFailedError(
                f"{label} is required", field=field_name,
            )
    if price is None:
        raise RequestValidationFailedError(
            "Price must be greater than zero", field="price",
        )
    if decimal_places(price) > MONEY_PLACES:
        raise RequestValidationFailedError(
            f"Price must have at most {MONEY_PLACES} decimal places",
            field="price", details={"price": price},
        )
    if price <= 0:
        raise RequestValidationFailedError(
            "Price must be greater than zero", field="price",
        )


def decimal_places(value: Decimal) -> int:
    """Significant decimal places: 10.500 has 1, 1E+2 has 0."""
    exponent = value.normalize().as_tuple().exponent
    return max(0, -exponent)


def check_slug_available(owner_id: UUID | None, product_id: UUID | None = None) -> None:
    if owner_id is not None and owner_id != product_id:
        raise ConflictError("Slug already in use")
