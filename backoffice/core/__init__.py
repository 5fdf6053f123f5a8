"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, repositories/, infrastructure/, or db/
    - All functions are pure and deterministic (clock injectable where used)

Design Decisions:
    - Functional core separated from imperative shell: validation, filter building,
      pricing and report ranking live here; the shell only does IO around them
"""
