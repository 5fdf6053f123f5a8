"""Services Layer — one handler class per resource, one unit of work per request.

Invariants:
    - Handlers run core checks before touching the store
    - Every write ends in exactly one commit

Design Decisions:
    - Handlers depend on the UnitOfWork protocol, not on SQLAlchemy
"""
