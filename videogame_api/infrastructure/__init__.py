"""Infrastructure Layer — persistence, logging and other process-level concerns.

Invariants:
    - Infrastructure may raise core errors but never contains domain rules
    - Lifecycles (engine, log handler) are started and stopped by main.py's lifespan

Design Decisions:
    - Thin wrappers over SQLAlchemy and logging (ADR: ExMA single responsibility)
"""
