"""Core Layer — pure reshaping logic, no IO, no async.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
