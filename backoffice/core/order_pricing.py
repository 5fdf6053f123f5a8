"""Order Pricing — freezes unit prices and computes line and order totals.

Invariants:
    - line total = unit price at order time x quantity, computed once
    - Priced lines keep request order
    - Decimal arithmetic only

Design Decisions:
    - PricedLine carries the product title too, so the creation response needs no re-read
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping, Protocol, Sequence
from uuid import UUID

from backoffice.core.enforce_order import OrderLineInput


class PricedProduct(Protocol):
    id: UUID
    title: str
    price: Decimal


@dataclass(frozen=True)
class PricedLine:
    product_id: UUID
    product_title: str
    quantity: int
    unit_price: Decimal
    total: Decimal


def price_lines(
    lines: Sequence[OrderLineInput],
    products_by_id: Mapping[UUID, PricedProduct],
) -> list[PricedLine]:
    priced = []
    for line in lines:
        product = products_by_id[line.product_id]
        priced.append(PricedLine(
            product_id=product.id,
            product_title=product.title,
            quantity=line.quantity,
            unit_price=product.price,
            total=product.price * line.quantity,
        ))
    return priced


def order_total(line_totals: Sequence[Decimal]) -> Decimal:
    return sum(line_totals, Decimal("0"))
