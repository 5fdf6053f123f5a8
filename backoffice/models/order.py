"""Order ORM — persists an order header; owns its lines.

Invariants:
    - customer_id references an existing customer
    - created_at == updated_at at creation; only updated_at moves afterwards
    - Always >= 1 line (enforced by the creation workflow)
    - Lines cascade-delete with their order and load in submission order

Design Decisions:
    - lazy="selectin" on customer and lines: order responses always need both,
      and async sessions cannot lazy-load on attribute access
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from backoffice.db.base import Base


class Order(Base):
    """Order aggregate root — owns its OrderLines."""
    __tablename__ = "orders"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    customer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("customers.id"), nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    customer: Mapped["Customer"] = relationship("Customer", lazy="selectin")
    lines: Mapped[list["OrderLine"]] = relationship(
        "OrderLine", back_populates="order",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="OrderLine.position",
    )
