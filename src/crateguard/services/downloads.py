"""DownloadService — single-record download reports.

Read-only; each call is one lookup through :attr:`RegistryStore.rows`.
A missing database is reported as ``NO_DATABASE`` rather than created.
"""

from __future__ import annotations

import logging

from crateguard.domain.downloads import CrateDownload, VersionDownload
from crateguard.domain.errors import NotFound, RegistryError, RowMappingError
from crateguard.services.base import BaseService
from crateguard.services.result import ServiceResult

logger = logging.getLogger(__name__)


class DownloadService(BaseService):
    """Looks up download projections and renders their reporting form."""

    def version_download(self, download_id: int) -> ServiceResult:
        """Report one version-download row in its external form."""
        op = "version_download"
        if not self._store.exists:
            return self._no_database(op)
        try:
            record = VersionDownload.find(self._store.rows, download_id)
        except (NotFound, RowMappingError) as exc:
            return self._lookup_failure(op, VersionDownload.table_name, download_id, exc)
        return ServiceResult(ok=True, op=op, data=record.to_external().model_dump())

    def crate_download(self, download_id: int) -> ServiceResult:
        """Report one crate-download row."""
        op = "crate_download"
        if not self._store.exists:
            return self._no_database(op)
        try:
            record = CrateDownload.find(self._store.rows, download_id)
        except (NotFound, RowMappingError) as exc:
            return self._lookup_failure(op, CrateDownload.table_name, download_id, exc)
        return ServiceResult(ok=True, op=op, data=record.model_dump(mode="json"))

    def _no_database(self, op: str) -> ServiceResult:
        path = self._store.settings.db_path
        return ServiceResult.failure(
            op,
            "NO_DATABASE",
            f"no database at {path}; run `crateguard init` first",
            path=str(path),
        )

    @staticmethod
    def _lookup_failure(
        op: str, table: str, download_id: int, exc: RegistryError
    ) -> ServiceResult:
        if isinstance(exc, RowMappingError):
            logger.warning("Malformed %s row %s: %s", table, download_id, exc.message)
        return ServiceResult.failure(op, exc.code, exc.message, id=download_id)
