"""Core Layer — pure domain logic, no IO, no async, no DB sessions.

Invariants:
    - No module in core/ imports from features/, services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (validation reads today's date as an input)

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
