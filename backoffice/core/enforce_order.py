"""Order Enforcement — validation steps of the order-creation workflow.

Invariants:
    - customerId required (None or the nil UUID are both "missing")
    - At least one line
    - Customer existence is checked by the caller BETWEEN check_order_header
      and check_line_quantities
    - Every quantity > 0
    - Products are resolved once, as a batch over the DISTINCT requested ids;
      fewer resolved products than distinct ids means at least one is missing

Design Decisions:
    - Split into steps rather than one function: the workflow interleaves a store
      lookup (customer) between them and the failure order is part of the contract
    - Duplicate product ids across lines are allowed; each line stays independent
"""

from typing import Protocol, Sequence
from uuid import UUID

from backoffice.core.errors import RequestValidationFailedError, ResourceNotFoundError

NIL_UUID = UUID(int=0)


class OrderLineInput(Protocol):
    product_id: UUID | None
    quantity: int | None


def check_order_header(
    customer_id: UUID | None, lines: Sequence[OrderLineInput] | None,
) -> None:
    if customer_id is None or customer_id == NIL_UUID:
        raise RequestValidationFailedError(
            "CustomerId is required", field="customerId",
        )
    if not lines:
        raise RequestValidationFailedError(
            "Order must have at least one line", field="lines",
        )


def check_line_quantities(lines: Sequence[OrderLineInput]) -> None:
    for line in lines:
        if line.quantity is None or line.quantity <= 0:
            raise RequestValidationFailedError(
                "Quantity must be greater than zero", field="quantity",
            )


def distinct_product_ids(lines: Sequence[OrderLineInput]) -> set[UUID | None]:
    return {line.product_id for line in lines}


def check_products_resolved(requested: set, resolved_count: int) -> None:
    if resolved_count < len(requested):
        raise ResourceNotFoundError(
            "Product", message="One or more products not found",
        )
