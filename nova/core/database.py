"""
Async database manager for the contact store with SQLAlchemy
- Opens (or creates) the store on startup
- Idempotent table creation for every registered model
- Session handling with commit/rollback
"""
import logging
from importlib import import_module
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional
from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
    AsyncEngine
)
from nova.core.config import settings
from nova.core.exceptions import StorageError
from nova.models.base import Base

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Owns the engine and session factory for one application instance."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker] = None

    async def init(self):
        """Open the store and make sure the schema exists."""
        try:
            self.engine = create_async_engine(
                self.database_url,
                echo=self.echo,
                pool_pre_ping=True,
            )
            async with self.engine.begin() as conn:
                await self._setup_database(conn)

            self.session_factory = async_sessionmaker(
                bind=self.engine,
                expire_on_commit=False,
                autoflush=False
            )
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"❌ Database initialization failed: {e}")
            await self.close()
            raise StorageError("Failed to initialize database") from e

    async def _setup_database(self, conn):
        """Initialize database schema"""
        await conn.execute(text("SELECT 1"))
        for model in settings.DB_MODELS:
            import_module(model)

        await conn.run_sync(Base.metadata.create_all)
        logger.info(f"📝 Tables ready: {list(Base.metadata.tables.keys())}")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Context manager for safe session handling"""
        if not self.session_factory:
            raise RuntimeError("DatabaseSessionManager not initialized")
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def close(self):
        """Cleanup connection pool"""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None


async def aget_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions
    Usage:
    @router.get("/")
    async def endpoint(db: AsyncSession = Depends(aget_db)):
        ...
    """
    session_manager: DatabaseSessionManager = request.app.state.db
    async with session_manager.get_session() as session:
        yield session
