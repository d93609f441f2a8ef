"""UniBridge: HTTP bridge over the university database.

Invariants:
    - Package root contains no executable code beyond the version string
"""

__version__ = "1.0.0"
