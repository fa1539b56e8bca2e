"""Services Layer — habit operations and their SQLAlchemy repository.

Invariants:
    - Services receive the repository and the current time from the caller
    - Only habit_repository.py touches the ORM
"""
