"""Core Layer: errors, outcomes and contracts; no IO, no async execution, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Everything here is importable without a running database

Design Decisions:
    - Pure layer separated from the imperative shell (routes, store)
"""
