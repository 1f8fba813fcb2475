"""PostgreSQL record store: connection management and row inserts."""

import logging
from typing import Any

import psycopg
from psycopg import sql
from psycopg.rows import dict_row

from core.config import Config
from core.errors import StoreError

logger = logging.getLogger(__name__)


def _store_error(e: psycopg.Error) -> StoreError:
    """Translate a psycopg error, keeping the server's message, hint and SQLSTATE."""
    diag = e.diag
    message = diag.message_primary or str(e).strip()
    return StoreError(message, hint=diag.message_hint, sqlstate=e.sqlstate)


class RecordStore:
    def __init__(self, config: Config) -> None:
        self._config = config
        self._conn: psycopg.Connection[dict[str, Any]] | None = None

    def connect(self) -> None:
        kwargs: dict[str, Any] = {"autocommit": True, "row_factory": dict_row}
        if self._config.database_password:
            kwargs["password"] = self._config.database_password
        try:
            self._conn = psycopg.connect(self._config.database_url, **kwargs)
        except psycopg.Error as e:
            raise _store_error(e) from e

    def disconnect(self) -> None:
        if self._conn and not self._conn.closed:
            self._conn.close()
        self._conn = None

    def _require_connection(self) -> psycopg.Connection[dict[str, Any]]:
        """Return the active connection or raise if not connected."""
        if self._conn is None or self._conn.closed:
            raise StoreError("RecordStore is not connected. Call connect() first.")
        return self._conn

    def insert(self, table: str, record: dict[str, Any]) -> list[dict[str, Any]]:
        """Insert one row and return the stored rows as the database sees them."""
        conn = self._require_connection()
        columns = list(record)
        query = sql.SQL("INSERT INTO {table} ({columns}) VALUES ({values}) RETURNING *").format(
            table=sql.Identifier(table),
            columns=sql.SQL(", ").join(map(sql.Identifier, columns)),
            values=sql.SQL(", ").join(sql.Placeholder() * len(columns)),
        )
        try:
            with conn.cursor() as cur:
                cur.execute(query, [record[c] for c in columns])
                rows = cur.fetchall()
        except psycopg.Error as e:
            raise _store_error(e) from e

        logger.debug("Inserted %d row(s) into %s", len(rows), table)
        return rows

    def __enter__(self) -> "RecordStore":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()
