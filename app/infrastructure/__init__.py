"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - All SQLAlchemy errors mapped to DatabaseError before leaving this layer

Design Decisions:
    - Repository implementations live here; their contracts live in core/
"""
