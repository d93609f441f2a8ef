"""Database Metadata: declarative Base shared by models and migrations.

Invariants:
    - Table metadata lives on db.base.Base only

Design Decisions:
    - Engine and pool live in infrastructure/database.py, not here
"""
