"""Report API — HTTP tests for best customers and revenue by period.

Tests cover:
    - Best customers ranked by spend, bounded by order count
    - Revenue grouped by calendar month, chronological by default
    - Period window narrows the months considered
    - Malformed and inverted periods rejected before the store is queried
"""

from datetime import datetime, timezone

import pytest

BEST = "/api/v1/reports/best-customers"
REVENUE = "/api/v1/reports/revenue-by-period"


@pytest.fixture
async def two_big_spenders(make_customer, make_product, place_order):
    """Cid spends 700.00 over 3 orders, Dee 500.00 over 2, Eve has none."""
    cid = await make_customer(name="Cid", email="cid@example.com")
    dee = await make_customer(name="Dee", email="dee@example.com")
    await make_customer(name="Eve", email="eve@example.com")
    widget = await make_product(price="100.00")
    gadget = await make_product(price="50.00")
    await place_order(cid, (widget, 2))
    await place_order(cid, (widget, 2))
    await place_order(cid, (widget, 3))
    await place_order(dee, (gadget, 5))
    await place_order(dee, (gadget, 3), (widget, 1))
    return cid, dee


async def test_best_customers_default_by_spend(client, two_big_spenders):
    body = (await client.get(BEST)).json()
    rows = body["customers"]
    assert [(r["customerName"], r["totalOrders"], r["spentAmount"]) for r in rows] == [
        ("Cid", 3, 700.0),
        ("Dee", 2, 500.0),
    ]
    assert body["totalCount"] == 2
    assert body["pageNumber"] == 1
    assert body["pageSize"] == 10


async def test_best_customers_min_orders(client, two_big_spenders):
    body = (await client.get(BEST, params={"minOrders": 3})).json()
    assert [r["customerEmail"] for r in body["customers"]] == ["cid@example.com"]
    assert body["totalCount"] == 1


async def test_best_customers_by_orders_ascending(client, two_big_spenders):
    body = (await client.get(
        BEST, params={"orderBy": "totalOrders", "orderDirection": "asc"},
    )).json()
    assert [r["customerName"] for r in body["customers"]] == ["Dee", "Cid"]


async def test_best_customers_name_filter(client, two_big_spenders):
    body = (await client.get(BEST, params={"customerName": "DE"})).json()
    assert [r["customerName"] for r in body["customers"]] == ["Dee"]


async def test_best_customers_paging(client, two_big_spenders):
    body = (await client.get(BEST, params={"pageNumber": 2, "pageSize": 1})).json()
    assert [r["customerName"] for r in body["customers"]] == ["Dee"]
    assert body["totalCount"] == 2
    assert body["totalPages"] == 2


async def test_best_customers_inverted_bounds(client):
    resp = await client.get(BEST, params={
        "minOrders": 5, "maxOrders": 1, "minSpent": "10", "maxSpent": "1",
    })
    assert resp.status_code == 400
    details = resp.json()["error"]["details"]
    assert details["orders"] == {"min": 5, "max": 1}
    assert details["spent"] == {"min": 10, "max": 1}


# ─── revenue by period ───────────────────────────────────────────

@pytest.fixture
async def jan_feb_orders(make_customer, make_product, place_order, backdate_order):
    """Two orders in January 2024 (300.00), one in February 2024 (40.00)."""
    customer = await make_customer()
    item = await make_product(price="20.00")
    jan_a = await place_order(customer, (item, 10))
    jan_b = await place_order(customer, (item, 5))
    feb = await place_order(customer, (item, 2))
    await backdate_order(jan_a, datetime(2024, 1, 3, 9, 0, tzinfo=timezone.utc))
    await backdate_order(jan_b, datetime(2024, 1, 31, 23, 30, tzinfo=timezone.utc))
    await backdate_order(feb, datetime(2024, 2, 14, 12, 0, tzinfo=timezone.utc))


async def test_revenue_grouped_by_month(client, jan_feb_orders):
    body = (await client.get(REVENUE)).json()
    assert body["items"] == [
        {"year": 2024, "month": "January", "totalOrders": 2, "totalRevenue": 300.0},
        {"year": 2024, "month": "February", "totalOrders": 1, "totalRevenue": 40.0},
    ]
    assert body["totalCount"] == 2


async def test_revenue_start_period(client, jan_feb_orders):
    body = (await client.get(REVENUE, params={"startPeriod": "2024-02"})).json()
    assert [i["month"] for i in body["items"]] == ["February"]


async def test_revenue_end_period_includes_last_day(client, jan_feb_orders):
    body = (await client.get(REVENUE, params={"endPeriod": "2024-01"})).json()
    assert body["items"][0]["totalOrders"] == 2
    assert body["totalCount"] == 1


async def test_revenue_by_revenue_descending(client, jan_feb_orders):
    body = (await client.get(
        REVENUE, params={"orderBy": "totalRevenue", "orderDirection": "desc"},
    )).json()
    assert [i["month"] for i in body["items"]] == ["January", "February"]

    body = (await client.get(REVENUE, params={"orderDirection": "desc"})).json()
    assert [i["month"] for i in body["items"]] == ["February", "January"]


async def test_revenue_min_revenue(client, jan_feb_orders):
    body = (await client.get(REVENUE, params={"minRevenue": "100"})).json()
    assert [i["month"] for i in body["items"]] == ["January"]


@pytest.mark.parametrize("period", ["2024-13", "2024", "24-1-1", "May-2024"])
async def test_revenue_rejects_malformed_period(client, period):
    resp = await client.get(REVENUE, params={"startPeriod": period})
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["message"] == (
        "Invalid period format. Use YYYY-MM for startPeriod/endPeriod."
    )
    assert error["details"]["startPeriod"] == period


async def test_revenue_rejects_inverted_period(client):
    resp = await client.get(
        REVENUE, params={"startPeriod": "2024-03", "endPeriod": "2024-01"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["details"]["period"] == {
        "start": "2024-03", "end": "2024-01",
    }


async def test_revenue_paging_checked_before_period(client):
    resp = await client.get(REVENUE, params={"pageNumber": 0, "startPeriod": "bad"})
    assert resp.status_code == 400
    assert resp.json()["error"]["details"] == {"pageNumber": 0}


async def test_revenue_empty(client):
    body = (await client.get(REVENUE)).json()
    assert body["items"] == []
    assert body["totalPages"] == 0


async def test_best_customers_far_past_last_page_is_empty(client, two_big_spenders):
    body = (await client.get(BEST, params={"pageNumber": 10**19})).json()
    assert body["customers"] == []
    assert body["totalCount"] == 2
