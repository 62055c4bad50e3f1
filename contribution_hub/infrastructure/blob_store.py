"""Key-value blob store persisted through SQLAlchemy.

Each collection lives in one row as a JSON document. Writes replace the
whole document inside a single transaction, so a failed write leaves the
previous document intact. Concurrent writers are last-writer-wins.
"""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from contribution_hub.application.ports.blob_store import BlobStorePort
from contribution_hub.application.ports.database import DatabaseEnginePort
from contribution_hub.domain.errors import StorageFailure


CREATE_COLLECTIONS_SQL = """
CREATE TABLE IF NOT EXISTS hub_collections (
    collection_key VARCHAR(64) PRIMARY KEY,
    payload TEXT NOT NULL
)
"""

SELECT_PAYLOAD_SQL = text(
    """
    SELECT payload
    FROM hub_collections
    WHERE collection_key = :collection_key
    """
)

DELETE_PAYLOAD_SQL = text(
    """
    DELETE FROM hub_collections
    WHERE collection_key = :collection_key
    """
)

INSERT_PAYLOAD_SQL = text(
    """
    INSERT INTO hub_collections (collection_key, payload)
    VALUES (:collection_key, :payload)
    """
)


class SqlAlchemyBlobStore(BlobStorePort):
    """Blob store backed by the ``hub_collections`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the portal engine.
        """
        self._db_port = db_port
        self._prepared = False

    def load(self, key: str) -> str | None:
        """Return the payload stored under ``key``.

        Args:
            key: Collection key.

        Returns:
            str | None: Stored JSON document, or None when never written.
        """
        self._ensure_table()
        try:
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_PAYLOAD_SQL,
                    {"collection_key": key},
                ).first()
        except SQLAlchemyError as exc:
            raise StorageFailure(f"Could not read {key}: {exc}") from exc
        return row.payload if row is not None else None

    def save(self, key: str, payload: str) -> None:
        """Replace the payload stored under ``key``.

        Args:
            key: Collection key.
            payload: JSON document to store.
        """
        self._ensure_table()
        params = {"collection_key": key, "payload": payload}
        try:
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                conn.execute(DELETE_PAYLOAD_SQL, params)
                conn.execute(INSERT_PAYLOAD_SQL, params)
        except SQLAlchemyError as exc:
            raise StorageFailure(f"Could not write {key}: {exc}") from exc

    def _ensure_table(self) -> None:
        """Create the collections table the first time it is needed."""
        if self._prepared:
            return
        try:
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_COLLECTIONS_SQL)
        except SQLAlchemyError as exc:
            raise StorageFailure(
                f"Could not prepare collection store: {exc}"
            ) from exc
        self._prepared = True


__all__ = [
    "SqlAlchemyBlobStore",
    "CREATE_COLLECTIONS_SQL",
    "SELECT_PAYLOAD_SQL",
    "DELETE_PAYLOAD_SQL",
    "INSERT_PAYLOAD_SQL",
]
