"""The publish payload aggregate and its fail-fast decoder.

:func:`decode_new_crate` lets pydantic do the structural work and the
scalar types do the registry rules. Fields are decoded in declaration
order (list elements by index, mapping entries in payload order), and only
the first failure in that order is reported. No partially valid
:class:`NewCrate` is ever returned.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from crateguard.domain.codec import POLICY_CONTEXT_KEY
from crateguard.domain.dependency import CrateDependency
from crateguard.domain.errors import DecodeError, MalformedPayload
from crateguard.domain.naming import NamingPolicy
from crateguard.domain.scalars import Feature, KeywordList, PackageName, PackageVersion


class NewCrate(BaseModel):
    """Everything a publisher submits to register one version of a package."""

    model_config = {"frozen": True}

    name: PackageName
    vers: PackageVersion
    deps: tuple[CrateDependency, ...]
    features: dict[PackageName, tuple[Feature, ...]]
    authors: tuple[str, ...]
    description: str | None = None
    homepage: str | None = None
    documentation: str | None = None
    readme: str | None = None
    keywords: KeywordList | None = None
    license: str | None = None
    license_file: str | None = None
    repository: str | None = None

    def encode(self) -> dict[str, Any]:
        """Render the payload back to its JSON-compatible wire form."""
        return self.model_dump(mode="json")

    def encode_json(self) -> bytes:
        return self.model_dump_json().encode("utf-8")


def _location(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc)


def first_decode_error(exc: ValidationError) -> DecodeError:
    """Translate the first error of a ``ValidationError`` into a :class:`DecodeError`.

    Errors raised by the scalar types are returned as-is (with their
    payload location recorded); structural errors reported by pydantic
    itself become :class:`MalformedPayload`.
    """
    first = exc.errors(include_url=False)[0]
    location = _location(first["loc"])
    cause = first.get("ctx", {}).get("error")
    if isinstance(cause, DecodeError):
        return cause.at(location) if location else cause
    error = MalformedPayload(first["msg"], value=first.get("input"))
    return error.at(location) if location else error


def decode_new_crate(
    payload: bytes | str | Mapping[str, Any],
    *,
    policy: NamingPolicy | None = None,
) -> NewCrate:
    """Decode an untrusted publish payload into a fully valid :class:`NewCrate`.

    Args:
        payload: JSON text/bytes, or an already-parsed mapping.
        policy: Naming policy to enforce; the default policy when omitted.

    Raises:
        DecodeError: The first violated rule, carrying its payload location.
    """
    context = {POLICY_CONTEXT_KEY: policy} if policy is not None else None
    try:
        if isinstance(payload, (bytes, str)):
            return NewCrate.model_validate_json(payload, context=context)
        return NewCrate.model_validate(payload, context=context)
    except ValidationError as exc:
        raise first_decode_error(exc) from None
