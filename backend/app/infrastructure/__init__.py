"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols, never the other way around
    - All SQLAlchemy errors mapped to core DatabaseError at the session boundary
"""
