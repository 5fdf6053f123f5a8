"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Order is the aggregate root for OrderLine; Customer and Product stand alone

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (standard SQLAlchemy pattern)
"""

from backoffice.models.customer import Customer  # noqa: F401
from backoffice.models.product import Product  # noqa: F401
from backoffice.models.order import Order  # noqa: F401
from backoffice.models.order_line import OrderLine  # noqa: F401
