"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Schemas describe the wire format only; business rules live in core/

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
