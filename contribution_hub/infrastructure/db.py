"""Database infrastructure for the contribution hub.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine backing the collection store. It belongs to the infrastructure layer
because it deals with external systems.
"""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool, StaticPool

from contribution_hub.application.ports.database import DatabaseEnginePort
from contribution_hub.infrastructure.settings import HubSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine. Server databases get a small connection
        pool with health checks; in-memory SQLite shares one connection so
        every session sees the same data.
    """
    if db_url.startswith("sqlite"):
        if db_url in ("sqlite://", "sqlite:///:memory:"):
            return create_engine(
                db_url,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
                future=True,
            )
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            future=True,
        )
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the collection store.

    Returns:
        Engine: Lazily initialized engine connected to the portal database.
    """
    global _engine
    if _engine is None:
        _engine = _create_engine(HubSettings.from_env().db_url)
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so repositories can depend only on the protocol.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        """Initialize the adapter.

        Args:
            engine: Optional engine to use instead of the shared one.
        """
        self._engine = engine

    def get_engine(self) -> Engine:
        """Get the engine for the portal database.

        Returns:
            Engine: SQLAlchemy engine connected to the collection store.
        """
        if self._engine is not None:
            return self._engine
        return get_engine()


__all__ = ["get_engine", "SqlAlchemyDatabaseEngineAdapter"]
