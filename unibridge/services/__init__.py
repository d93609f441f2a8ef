"""Services Layer: statement builders and the operation catalog.

Invariants:
    - statements.py builds, operations.py executes; neither knows about HTTP
    - Operations reach the store only through the UniversityStore protocol

Design Decisions:
    - Explicit module-level functions per operation (no dispatch table, no auto-discovery)
"""
