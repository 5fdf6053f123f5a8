"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - JSON field names are camelCase on the wire, snake_case in Python
    - Write payload fields are all optional here: presence and business rules are
      checked by core/enforce_*.py so failures carry the documented messages
    - Money fields are Decimal in Python and plain JSON numbers on the wire

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
