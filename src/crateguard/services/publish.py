"""PublishService — validate an inbound publish payload.

Decoding is delegated entirely to :func:`decode_new_crate`; this service
only picks the naming policy from settings and turns the outcome into a
:class:`ServiceResult`.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

from crateguard.domain.errors import DecodeError
from crateguard.domain.upload import NewCrate, decode_new_crate
from crateguard.services.base import BaseService
from crateguard.services.result import ServiceResult

logger = logging.getLogger(__name__)


def summarize(krate: NewCrate) -> dict[str, Any]:
    """Flatten a decoded payload into the fields a publisher wants echoed back."""
    return {
        "name": krate.name.value,
        "version": krate.vers.encode(),
        "dependencies": len(krate.deps),
        "features": sorted(name.value for name in krate.features),
        "keywords": krate.keywords.encode() if krate.keywords is not None else [],
        "payload": krate.encode(),
    }


class PublishService(BaseService):
    """Checks publish payloads against the registry rules."""

    def check(self, payload: bytes | str | Mapping[str, Any]) -> ServiceResult:
        """Decode *payload* and report the first violated rule, if any."""
        op = "check_publish"
        policy = self._store.settings.naming.build_policy()
        started = time.perf_counter()
        try:
            krate = decode_new_crate(payload, policy=policy)
        except DecodeError as exc:
            logger.info("Rejected publish payload: %s (%s)", exc, exc.code)
            return ServiceResult.failure(
                op,
                exc.code,
                exc.message,
                location=exc.location,
                value=exc.value if _is_plain(exc.value) else repr(exc.value),
            )

        elapsed_ms = round((time.perf_counter() - started) * 1000, 3)
        logger.debug("Accepted %s %s", krate.name.value, krate.vers.encode())
        return ServiceResult(
            ok=True,
            op=op,
            data=summarize(krate),
            meta={"duration_ms": elapsed_ms},
        )


def _is_plain(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float, bool, list, dict))
