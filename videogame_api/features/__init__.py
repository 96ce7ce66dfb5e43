"""Feature Slices — one module per use case (command + validator + handler).

Invariants:
    - A slice never imports another slice
    - Handlers receive already-validated commands and never translate errors

Design Decisions:
    - Vertical slices over layered services: a use case is readable in one file
      (ADR: ExMA max 3-4 files to understand a feature)
"""
