"""RegistryStore — the single storage dependency injected into every service.

Owns the settings and a lazily created database engine, so commands that
never touch storage (``--help``, ``check``) never open the database. Only
:meth:`RegistryStore.initialize` creates the database file and its tables;
reads never do.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from crateguard.infrastructure.database.engine import create_db_engine, init_database
from crateguard.infrastructure.database.schema import metadata
from crateguard.infrastructure.repositories.rows import RowRepository

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.engine import Engine

    from crateguard.config.settings import CrateguardSettings

logger = logging.getLogger(__name__)


class RegistryStore:
    """Lazy holder for the database engine and row repository."""

    def __init__(self, settings: CrateguardSettings, *, engine: Engine | None = None) -> None:
        self.settings = settings
        self._engine = engine
        self._rows: RowRepository | None = None

    @property
    def exists(self) -> bool:
        """Whether there is a database to read from."""
        return self._engine is not None or self.settings.db_path.is_file()

    @property
    def engine(self) -> Engine:
        """The database engine (created on first access, without touching the schema)."""
        if self._engine is None:
            logger.debug("Opening database at %s", self.settings.db_path)
            self._engine = create_db_engine(self.settings.db_path)
        return self._engine

    def initialize(self) -> Path:
        """Create the database and its tables if needed; return its path."""
        if self._engine is None:
            self._engine = init_database(self.settings.db_path)
        else:
            metadata.create_all(self._engine)
        return self.settings.db_path

    @property
    def rows(self) -> RowRepository:
        if self._rows is None:
            self._rows = RowRepository(self.engine)
        return self._rows

    def close(self) -> None:
        """Dispose of the engine if one was opened."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._rows = None
