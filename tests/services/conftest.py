"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db overridden to hand out sessions from a DatabaseSessionManager
      bound to the test engine, so store-error mapping runs as in production
    - db_manager patched so readiness probes hit the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so every session
      of a test sees the same database
    - Factories create records through the HTTP API, exercising the same path
      as real callers
"""

from datetime import datetime
from uuid import UUID

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

import backoffice.infrastructure.database as db_module
from backoffice.db.base import Base
from backoffice.infrastructure.database import DatabaseSessionManager, get_db
from backoffice.main import app
from backoffice.models.order import Order


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def test_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the test engine (no pool options on SQLite)."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_manager):
    """FastAPI test client; requests get sessions from the test manager."""
    async def override_get_db():
        async with test_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def make_customer(client):
    """Create a customer through the API and return its JSON."""
    counter = {"n": 0}

    async def _make(name: str | None = None, email: str | None = None, **extra):
        counter["n"] += 1
        n = counter["n"]
        payload = {
            "name": name or f"Customer {n}",
            "email": email or f"customer{n}@example.com",
            "phone": f"555-01{n:02d}",
            "birthDate": "1990-05-17",
        }
        payload.update(extra)
        resp = await client.post("/api/v1/customers", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture
def make_product(client):
    """Create a product through the API and return its JSON."""
    counter = {"n": 0}

    async def _make(price: str = "10.00", title: str | None = None, **extra):
        counter["n"] += 1
        n = counter["n"]
        payload = {
            "title": title or f"Product {n}",
            "description": f"Description of product {n}",
            "slug": f"product-{n}",
            "price": price,
        }
        payload.update(extra)
        resp = await client.post("/api/v1/products", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture
def place_order(client):
    """Create an order through the API and return its JSON."""
    async def _place(customer: dict, *lines: tuple[dict, int]):
        resp = await client.post("/api/v1/orders", json={
            "customerId": customer["id"],
            "lines": [
                {"productId": product["id"], "quantity": qty}
                for product, qty in lines
            ],
        })
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _place


@pytest.fixture
def backdate_order(test_session_factory):
    """Move an order's created_at to a fixed instant (reports group by it)."""
    async def _backdate(order_json: dict, when: datetime):
        async with test_session_factory() as session:
            order = await session.get(Order, UUID(order_json["id"]))
            order.created_at = when
            order.updated_at = when
            await session.commit()

    return _backdate
