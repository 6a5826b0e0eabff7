"""BaseService — shared foundation for crateguard services.

Every service receives a :class:`RegistryStore` at construction time. The
store exposes the settings and lazily opens the database.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crateguard.infrastructure.store import RegistryStore


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class DownloadService(BaseService):
            def version_download(self, download_id: int) -> ServiceResult:
                record = VersionDownload.find(self._store.rows, download_id)
                ...
    """

    def __init__(self, store: RegistryStore) -> None:
        self._store = store
