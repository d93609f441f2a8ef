"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Request schemas validate at the system boundary, before any statement is built
    - Response schemas fix the key order of every record returned to clients

Design Decisions:
    - Separate from models: schemas are API contracts, models describe persistence
"""
