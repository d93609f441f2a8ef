"""API Layer: FastAPI routes, dependencies, outcome rendering and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - HTTP status codes for operations chosen only in responses.render()

Design Decisions:
    - Thin routes delegate to services/operations.py
"""
