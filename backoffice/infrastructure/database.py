"""Back-office database access — pooled async engine, request sessions, store-error mapping.

Invariants:
    - Every session rolls back on exception; a failed request never half-commits
    - A violated unique index on customers.email / products.slug surfaces as the
      same ConflictError the handlers raise ("Email already in use", "Slug already
      in use"), so a concurrent duplicate that slips past the lookup stays a 409
    - Any other store failure surfaces as DatabaseError (503)
    - PostgreSQL sessions run in UTC, so month grouping in reports agrees with the
      UTC period window

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
      (no global import side effects)
    - expire_on_commit=False: created orders are read back for the response after commit
    - Unique violations matched by index name (PostgreSQL) or table.column (SQLite)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from backoffice.core.errors import BackofficeError, ConflictError, DatabaseError

logger = logging.getLogger(__name__)

# (index name, sqlite table.column) → conflict message
UNIQUE_CONFLICTS = (
    (("ix_customers_email", "customers.email"), "Email already in use"),
    (("ix_products_slug", "products.slug"), "Slug already in use"),
)


def translate_integrity_error(error: IntegrityError) -> BackofficeError:
    """Map a constraint violation to the domain error a caller would expect."""
    detail = str(error.orig)
    for markers, message in UNIQUE_CONFLICTS:
        if any(marker in detail for marker in markers):
            return ConflictError(message)
    return DatabaseError("Integrity constraint violated", "commit")


def engine_options(database_url: str) -> dict:
    """Driver-specific engine options for the configured URL."""
    if database_url.startswith("postgresql+asyncpg"):
        return {"connect_args": {"server_settings": {"timezone": "UTC"}}}
    return {}


class DatabaseSessionManager:
    """Owns the engine and hands out one AsyncSession per request."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
            **engine_options(database_url),
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Request session; store errors leave as BackofficeError subclasses."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            translated = translate_integrity_error(e)
            logger.warning(
                f"DB integrity error: {e.orig}",
                extra={"error_code": translated.code},
            )
            raise translated from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown")
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """SELECT 1 through a fresh session (readiness probe)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one managed session per request."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
