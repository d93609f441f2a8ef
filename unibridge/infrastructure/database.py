"""Database Session Manager: async connection pool with rollback and error mapping.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - One statement per fetch_*/execute call; the connection goes back to the pool on return

Design Decisions:
    - Constructed by the app lifespan (or injected by tests) and kept on app.state:
      no module-level singleton
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Rows returned as plain dicts keyed by column name, in store order
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy.engine import URL
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.sql.base import Executable

from unibridge.core.errors import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Pooled async access to the university store."""

    def __init__(
        self,
        database_url: str | URL,
        pool_size: int = 10,
        max_overflow: int = 5,
        echo: bool = False,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
            echo=echo,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise DatabaseError("Integrity constraint violated", "commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown") from e
        finally:
            await session.close()

    async def fetch_all(self, statement: Executable) -> list[dict[str, Any]]:
        """Run a SELECT and return every row as a column-name mapping."""
        async with self.session() as db:
            result = await db.execute(statement)
            return [dict(row) for row in result.mappings().all()]

    async def fetch_scalar(self, statement: Executable) -> Any:
        """Run a SELECT that yields a single value."""
        async with self.session() as db:
            result = await db.execute(statement)
            return result.scalar_one()

    async def execute(self, statement: Executable) -> int:
        """Run and commit a single INSERT/UPDATE/DELETE. Returns affected rows."""
        async with self.session() as db:
            result = await db.execute(statement)
            await db.commit()
            return result.rowcount

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
