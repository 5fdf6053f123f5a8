"""Order Pricing — tests for line pricing and order totals."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID, uuid4

from backoffice.core.order_pricing import order_total, price_lines


@dataclass
class Product:
    id: UUID
    title: str
    price: Decimal


@dataclass
class Line:
    product_id: UUID
    quantity: int


def test_line_total_is_price_times_quantity():
    mug = Product(uuid4(), "Mug", Decimal("100.00"))
    [line] = price_lines([Line(mug.id, 2)], {mug.id: mug})
    assert line.unit_price == Decimal("100.00")
    assert line.total == Decimal("200.00")
    assert line.product_title == "Mug"


def test_lines_keep_request_order_with_duplicate_products():
    mug = Product(uuid4(), "Mug", Decimal("5.00"))
    pen = Product(uuid4(), "Pen", Decimal("1.25"))
    priced = price_lines(
        [Line(pen.id, 4), Line(mug.id, 1), Line(pen.id, 2)],
        {mug.id: mug, pen.id: pen},
    )
    assert [p.product_title for p in priced] == ["Pen", "Mug", "Pen"]
    assert [p.total for p in priced] == [
        Decimal("5.00"), Decimal("5.00"), Decimal("2.50"),
    ]


def test_order_total_sums_line_totals():
    assert order_total([Decimal("200.00"), Decimal("0.10")]) == Decimal("200.10")


def test_order_total_of_no_lines_is_zero():
    assert order_total([]) == Decimal("0")
