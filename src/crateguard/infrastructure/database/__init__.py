"""SQLite database engine and schema via SQLAlchemy Core."""

from crateguard.infrastructure.database.engine import create_db_engine, init_database
from crateguard.infrastructure.database.schema import (
    crate_downloads,
    metadata,
    version_downloads,
)

__all__ = [
    "crate_downloads",
    "create_db_engine",
    "init_database",
    "metadata",
    "version_downloads",
]
