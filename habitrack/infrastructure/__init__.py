"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports route or service code
    - All database failures mapped to core.errors.DatabaseError
"""
