"""API Layer — FastAPI routes, dependencies and the error translator.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error responses share the problem-details shape

Design Decisions:
    - Thin routes delegate to the pipeline (ADR: ExMA impureim sandwich)
"""
