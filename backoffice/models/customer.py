"""Customer ORM — persists a buyer account.

Invariants:
    - id is UUID primary key (client-side default)
    - email is unique across all customers (DB constraint backs the Conflict check)
    - All four fields are non-nullable and rewritten together on update

Design Decisions:
    - No relationship() to orders: deleting a customer with orders is refused by
      the service, and loading a customer never pulls its order history
"""

import uuid
from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from backoffice.db.base import Base


class Customer(Base):
    """Customer entity."""
    __tablename__ = "customers"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
