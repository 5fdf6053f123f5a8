"""Infrastructure Layer — database sessions, unit of work, and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Store failures leave this layer only as DatabaseError

Design Decisions:
    - Session lifecycle owned here, repositories only borrow the session
"""
