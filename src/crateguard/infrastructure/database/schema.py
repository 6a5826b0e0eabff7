"""SQLAlchemy Core table definitions for the download counters.

``version_downloads`` holds one row per version per day; ``counted`` is
the share of ``downloads`` already folded into the aggregate totals.
``crate_downloads`` holds the per-package daily rollup.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    Table,
)

metadata = MetaData()

version_downloads = Table(
    "version_downloads",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("version_id", Integer, nullable=False),
    Column("downloads", Integer, nullable=False, default=1, server_default="1"),
    Column("counted", Integer, nullable=False, default=0, server_default="0"),
    Column("date", DateTime, nullable=False),
)

crate_downloads = Table(
    "crate_downloads",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("crate_id", Integer, nullable=False),
    Column("downloads", Integer, nullable=False, default=0, server_default="0"),
    Column("date", DateTime, nullable=False),
)

# ---------------------------------------------------------------------------
# Indexes for frequently filtered columns
# ---------------------------------------------------------------------------

Index("ix_version_downloads_version", version_downloads.c.version_id)
Index("ix_crate_downloads_crate", crate_downloads.c.crate_id)
