"""Repositories — SQLAlchemy implementations of the core/repository_protocols.py contracts.

Invariants:
    - Repositories never commit; the unit of work does
    - Search results are (page of entities, total count before paging)

Design Decisions:
    - One repository per aggregate, plus a read-only report repository
"""
