"""Infrastructure Layer: store access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every store failure leaves this layer as DatabaseError

Design Decisions:
    - Thin wrapper over SQLAlchemy's async engine; no retries (one statement, one attempt)
"""
