"""Search Filters — tests for building filter clauses from search parameters."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from backoffice.core.search_filters import (
    FilterClause,
    FilterOp,
    build_best_customer_filters,
    build_customer_filters,
    build_order_filters,
    build_product_filters,
    contains,
)


def test_contains_trims_and_case_folds():
    assert contains("name", "  AnN ") == FilterClause("name", FilterOp.CONTAINS, "ann")


def test_blank_contains_is_no_filter():
    assert contains("name", "   ") is None
    assert contains("name", None) is None


def test_no_parameters_build_no_clauses():
    assert build_customer_filters() == []
    assert build_product_filters() == []
    assert build_order_filters() == []
    assert build_best_customer_filters() == []


def test_customer_filters():
    clauses = build_customer_filters(name="Ann", phone="555")
    assert clauses == [
        FilterClause("name", FilterOp.CONTAINS, "ann"),
        FilterClause("phone", FilterOp.CONTAINS, "555"),
    ]


def test_product_price_bounds():
    clauses = build_product_filters(min_price=Decimal("10"), max_price=Decimal("20"))
    assert clauses == [
        FilterClause("price", FilterOp.GTE, Decimal("10")),
        FilterClause("price", FilterOp.LTE, Decimal("20")),
    ]


def test_order_filters_use_logical_fields():
    order_id = uuid4()
    since = datetime(2024, 1, 1, tzinfo=timezone.utc)
    clauses = build_order_filters(
        order_id=order_id,
        customer_email="@Example.com",
        product_slug="mug",
        product_price_start=Decimal("5"),
        created_at_start=since,
    )
    assert clauses == [
        FilterClause("id", FilterOp.EQ, order_id),
        FilterClause("customer.email", FilterOp.CONTAINS, "@example.com"),
        FilterClause("product.slug", FilterOp.CONTAINS, "mug"),
        FilterClause("product.price", FilterOp.GTE, Decimal("5")),
        FilterClause("created_at", FilterOp.GTE, since),
    ]


def test_best_customer_filters():
    assert build_best_customer_filters(customer_name="Bo") == [
        FilterClause("customer.name", FilterOp.CONTAINS, "bo"),
    ]
