"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Calendar helpers are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: routes and services do the IO
"""
