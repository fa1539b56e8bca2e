"""Habitrack — habit-tracking REST backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
