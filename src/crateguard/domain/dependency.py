"""Dependency descriptors declared by a release.

:class:`DependencyKind` values double as the wire table: decode matches
a string against them and encode returns them, so the two cannot drift.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, StrictBool

from crateguard.domain.codec import wire_schema
from crateguard.domain.errors import InvalidDependencyKind
from crateguard.domain.naming import DEFAULT_NAMING_POLICY, NamingPolicy
from crateguard.domain.scalars import Feature, PackageName, PackageVersionReq

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import core_schema


class DependencyKind(Enum):
    """How a dependency is used: at runtime, by the build script, or in dev."""

    NORMAL = "normal"
    BUILD = "build"
    DEV = "dev"

    @classmethod
    def decode(
        cls,
        raw: Any,
        *,
        policy: NamingPolicy = DEFAULT_NAMING_POLICY,
    ) -> DependencyKind:
        """Match *raw* case-sensitively against the three legal kinds."""
        if isinstance(raw, str):
            for kind in cls:
                if kind.value == raw:
                    return kind
        raise InvalidDependencyKind(raw)

    def encode(self) -> str:
        return self.value

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source: type[Any],
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return wire_schema(cls)


class CrateDependency(BaseModel):
    """One dependency edge of the release being published.

    Decoding is all-or-nothing: the first invalid field aborts the whole
    descriptor with that field's error.
    """

    model_config = {"frozen": True}

    optional: StrictBool
    default_features: StrictBool
    name: PackageName
    features: tuple[Feature, ...]
    version_req: PackageVersionReq
    target: str | None = None
    kind: DependencyKind | None = None
