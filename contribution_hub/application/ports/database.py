"""Database port for the contribution hub.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide a
concrete adapter that satisfies this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine backing the collection store."""

    def get_engine(self) -> Engine:
        """Get the engine for the portal database.

        Returns:
            Engine: SQLAlchemy engine connected to the portal store.
        """


__all__ = ["DatabaseEnginePort"]
