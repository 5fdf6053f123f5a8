"""Product Enforcement — tests for product field rules and slug ownership."""

from decimal import Decimal
from uuid import uuid4

import pytest

from backoffice.core.errors import ConflictError, RequestValidationFailedError
from backoffice.core.enforce_product import check_product_fields, check_slug_available


def _check(**overrides):
    fields = {
        "title": "Mug",
        "description": "A ceramic mug",
        "slug": "mug",
        "price": Decimal("9.90"),
    }
    fields.update(overrides)
    check_product_fields(**fields)


def test_valid_product_passes():
    _check()


@pytest.mark.parametrize("field,label", [
    ("title", "Title"),
    ("description", "Description"),
    ("slug", "Slug"),
])
def test_text_fields_are_required(field, label):
    with pytest.raises(RequestValidationFailedError) as exc:
        _check(**{field: "  "})
    assert exc.value.message == f"{label} is required"
    assert exc.value.field == field


def test_title_reported_before_slug():
    with pytest.raises(RequestValidationFailedError) as exc:
        _check(title=None, slug=None)
    assert exc.value.message == "Title is required"


@pytest.mark.parametrize("price", [None, Decimal("0"), Decimal("-1.50")])
def test_price_must_be_positive(price):
    with pytest.raises(RequestValidationFailedError) as exc:
        _check(price=price)
    assert exc.value.message == "Price must be greater than zero"


def test_missing_text_reported_before_bad_price():
    with pytest.raises(RequestValidationFailedError) as exc:
        _check(description="", price=Decimal("0"))
    assert exc.value.message == "Description is required"


def test_slug_owned_by_other_product_conflicts():
    with pytest.raises(ConflictError) as exc:
        check_slug_available(uuid4(), uuid4())
    assert exc.value.message == "Slug already in use"


def test_slug_owned_by_same_product_is_available():
    own = uuid4()
    check_slug_available(own, own)
    check_slug_available(None, own)


# ─── price scale ─────────────────────────────────────────────────

@pytest.mark.parametrize("price", ["0.001", "10.005", "1.999"])
def test_sub_cent_price_rejected(price):
    with pytest.raises(RequestValidationFailedError) as exc:
        _check(price=Decimal(price))
    assert exc.value.message == "Price must have at most 2 decimal places"
    assert exc.value.field == "price"


@pytest.mark.parametrize("price", ["10", "10.5", "10.50", "10.500", "1E+2"])
def test_price_with_two_or_fewer_places_passes(price):
    _check(price=Decimal(price))


def test_price_scale_checked_before_sign():
    with pytest.raises(RequestValidationFailedError) as exc:
        _check(price=Decimal("-0.001"))
    assert exc.value.message == "Price must have at most 2 decimal places"
