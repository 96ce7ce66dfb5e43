"""Services Layer — the command pipeline and its dispatch wiring.

Invariants:
    - Stage order and command->handler mapping are explicit (no auto-discovery)

Design Decisions:
    - Pipeline mechanics (pipeline.py) separate from what is registered (dispatch.py)
"""
