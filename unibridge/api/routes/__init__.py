"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never contain store logic: they call services/operations.py and render()

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
