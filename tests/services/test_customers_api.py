"""Customer API — HTTP tests for customer CRUD, uniqueness and search.

Tests cover:
    - Create returns 201, Location header and camelCase body
    - Field validation messages surface as 400
    - Email uniqueness on create and update (a customer never conflicts with itself)
    - Delete is blocked while the customer has orders
    - Search by fragment, default paging and page-parameter rejection
"""

import pytest

BASE = "/api/v1/customers"


def _payload(**overrides):
    payload = {
        "name": "Ann Lee",
        "email": "ann@example.com",
        "phone": "555-0100",
        "birthDate": "1990-05-17",
    }
    payload.update(overrides)
    return payload


async def test_create_customer(client):
    resp = await client.post(BASE, json=_payload())
    assert resp.status_code == 201
    body = resp.json()
    assert body["name"] == "Ann Lee"
    assert body["birthDate"] == "1990-05-17"
    assert resp.headers["location"] == f"{BASE}/{body['id']}"

    fetched = await client.get(resp.headers["location"])
    assert fetched.status_code == 200
    assert fetched.json() == body


async def test_create_requires_name(client):
    resp = await client.post(BASE, json=_payload(name=""))
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["message"] == "Name is required"


async def test_create_rejects_future_birth_date(client):
    resp = await client.post(BASE, json=_payload(birthDate="2999-01-01"))
    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "BirthDate cannot be in the future"


async def test_create_rejects_invalid_email(client):
    resp = await client.post(BASE, json=_payload(email="ann-at-example"))
    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Email is invalid"


async def test_duplicate_email_conflicts(client, make_customer):
    await make_customer(email="taken@example.com")
    resp = await client.post(BASE, json=_payload(email="taken@example.com"))
    assert resp.status_code == 409
    assert resp.json()["error"]["message"] == "Email already in use"


async def test_update_keeps_own_email(client, make_customer):
    customer = await make_customer(email="own@example.com")
    resp = await client.put(
        f"{BASE}/{customer['id']}",
        json=_payload(name="Renamed", email="own@example.com"),
    )
    assert resp.status_code == 200
    assert resp.json()["name"] == "Renamed"


async def test_update_to_other_customers_email_conflicts(client, make_customer):
    await make_customer(email="first@example.com")
    second = await make_customer(email="second@example.com")
    resp = await client.put(
        f"{BASE}/{second['id']}", json=_payload(email="first@example.com"),
    )
    assert resp.status_code == 409


async def test_update_validates_before_lookup(client):
    resp = await client.put(
        f"{BASE}/00000000-0000-0000-0000-000000000001", json=_payload(phone=""),
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Phone is required"


async def test_update_unknown_customer_is_404(client):
    resp = await client.put(
        f"{BASE}/00000000-0000-0000-0000-000000000001", json=_payload(),
    )
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Customer not found"


async def test_delete_customer(client, make_customer):
    customer = await make_customer()
    resp = await client.delete(f"{BASE}/{customer['id']}")
    assert resp.status_code == 204
    assert (await client.get(f"{BASE}/{customer['id']}")).status_code == 404
    assert (await client.delete(f"{BASE}/{customer['id']}")).status_code == 404


async def test_delete_customer_with_orders_conflicts(
    client, make_customer, make_product, place_order,
):
    customer = await make_customer()
    product = await make_product()
    await place_order(customer, (product, 1))
    resp = await client.delete(f"{BASE}/{customer['id']}")
    assert resp.status_code == 409
    assert resp.json()["error"]["message"] == "Customer has existing orders"


async def test_get_unknown_customer_is_404(client):
    resp = await client.get(f"{BASE}/00000000-0000-0000-0000-000000000002")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


# ─── search ──────────────────────────────────────────────────────

async def test_search_defaults_and_ordering(client, make_customer):
    await make_customer(name="Zoe")
    await make_customer(name="Adam")
    await make_customer(name="Mia")
    resp = await client.get(BASE)
    assert resp.status_code == 200
    body = resp.json()
    assert body["pageNumber"] == 1
    assert body["pageSize"] == 10
    assert body["totalCount"] == 3
    assert body["totalPages"] == 1
    assert [c["name"] for c in body["customers"]] == ["Adam", "Mia", "Zoe"]


async def test_search_by_fragment_is_case_insensitive(client, make_customer):
    await make_customer(name="Ann Lee", email="ann@example.com")
    await make_customer(name="Bob Ray", email="bob@example.com")
    resp = await client.get(BASE, params={"name": "  ANN "})
    body = resp.json()
    assert body["totalCount"] == 1
    assert body["customers"][0]["email"] == "ann@example.com"


async def test_search_empty_result(client):
    body = (await client.get(BASE, params={"email": "nobody"})).json()
    assert body["customers"] == []
    assert body["totalCount"] == 0
    assert body["totalPages"] == 0


async def test_search_pages(client, make_customer):
    for _ in range(3):
        await make_customer()
    body = (await client.get(BASE, params={"pageNumber": 2, "pageSize": 2})).json()
    assert len(body["customers"]) == 1
    assert body["totalCount"] == 3
    assert body["totalPages"] == 2


@pytest.mark.parametrize("params,details", [
    ({"pageNumber": 0}, {"pageNumber": 0}),
    ({"pageSize": 101}, {"pageSize": 101}),
    ({"pageNumber": -1, "pageSize": 0}, {"pageNumber": -1, "pageSize": 0}),
])
async def test_search_rejects_bad_paging(client, params, details):
    resp = await client.get(BASE, params=params)
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["message"].startswith("Invalid pagination parameters.")
    assert error["details"] == details


async def test_search_far_past_last_page_is_empty(client, make_customer):
    await make_customer()
    resp = await client.get(BASE, params={"pageNumber": 10**19, "pageSize": 100})
    assert resp.status_code == 200
    body = resp.json()
    assert body["customers"] == []
    assert body["totalCount"] == 1
