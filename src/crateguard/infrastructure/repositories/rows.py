"""Generic lookup-by-identifier over the tables in :data:`schema.metadata`."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.engine import Engine

from crateguard.infrastructure.database.schema import metadata


class RowRepository:
    """Encapsulates the single-row reads used by the download projections."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def fetch_row(self, table_name: str, row_id: int) -> dict[str, Any] | None:
        """Return the row of *table_name* whose ``id`` is *row_id*, or None.

        One blocking round trip; no retry or timeout of its own.

        Raises:
            KeyError: If *table_name* is not a known table.
        """
        table = metadata.tables[table_name]
        stmt = select(table).where(table.c.id == row_id)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return dict(row) if row is not None else None
