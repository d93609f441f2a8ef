"""Root conftest: shared test configuration."""

import os

# Never point tests at a real MySQL server through a developer's environment
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")
