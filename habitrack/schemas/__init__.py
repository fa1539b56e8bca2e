"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary; handlers only ever see valid input
    - Wire names are camelCase aliases (weekDays, possibleHabits, ...)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
