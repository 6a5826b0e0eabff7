"""Validated scalar types for publish payloads.

Each type wraps exactly one underlying value, reachable through ``.value``.
Validation happens once, in ``decode``; any code holding an instance may
assume the value passed its rule.

INVARIANT: ``T.decode(v.encode()) == v`` for every decoded ``v``. Versions
and requirements are re-rendered in canonical form, so ``encode`` is not
guaranteed to return the exact input string.

INVARIANT: a :class:`KeywordList` never holds more than
:data:`MAX_KEYWORDS` keywords or a keyword of :data:`MAX_KEYWORD_LENGTH`
characters or more, however it was constructed.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Self

from semantic_version import SimpleSpec, Version

from crateguard.domain.codec import WireScalar, read_str
from crateguard.domain.errors import (
    InvalidFeatureName,
    InvalidKeyword,
    InvalidName,
    InvalidSemver,
    InvalidVersionReq,
    KeywordTooLong,
    MalformedPayload,
    TooManyKeywords,
)
from crateguard.domain.naming import DEFAULT_NAMING_POLICY, NamingPolicy
from crateguard.domain.versions import (
    parse_version,
    parse_version_req,
    render_version,
    render_version_req,
)

MAX_KEYWORDS = 5
MAX_KEYWORD_LENGTH = 20

# ---------------------------------------------------------------------------
# Policy-checked strings
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PackageName(WireScalar):
    """A package name accepted by the naming policy. Never normalized."""

    value: str

    @classmethod
    def decode(cls, raw: Any, *, policy: NamingPolicy = DEFAULT_NAMING_POLICY) -> Self:
        s = read_str(raw, "crate name")
        if not policy.valid_name(s):
            raise InvalidName(s)
        return cls(s)

    def encode(self) -> str:
        return self.value


@dataclass(frozen=True)
class Keyword(WireScalar):
    """A keyword accepted by the naming policy."""

    value: str

    @classmethod
    def decode(cls, raw: Any, *, policy: NamingPolicy = DEFAULT_NAMING_POLICY) -> Self:
        s = read_str(raw, "keyword")
        if not policy.valid_keyword(s):
            raise InvalidKeyword(s)
        return cls(s)

    def encode(self) -> str:
        return self.value


@dataclass(frozen=True)
class Feature(WireScalar):
    """A feature name (``feat`` or ``dep/feat``) accepted by the naming policy."""

    value: str

    @classmethod
    def decode(cls, raw: Any, *, policy: NamingPolicy = DEFAULT_NAMING_POLICY) -> Self:
        s = read_str(raw, "feature name")
        if not policy.valid_feature_name(s):
            raise InvalidFeatureName(s)
        return cls(s)

    def encode(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Semver-backed values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PackageVersion(WireScalar):
    """A parsed semantic version."""

    value: Version

    @classmethod
    def decode(cls, raw: Any, *, policy: NamingPolicy = DEFAULT_NAMING_POLICY) -> Self:
        s = read_str(raw, "version")
        try:
            return cls(parse_version(s))
        except ValueError as exc:
            raise InvalidSemver(s) from exc

    def encode(self) -> str:
        return render_version(self.value)


@dataclass(frozen=True)
class PackageVersionReq(WireScalar):
    """A parsed version-requirement expression."""

    value: SimpleSpec

    @classmethod
    def decode(cls, raw: Any, *, policy: NamingPolicy = DEFAULT_NAMING_POLICY) -> Self:
        s = read_str(raw, "version requirement")
        try:
            return cls(parse_version_req(s))
        except ValueError as exc:
            raise InvalidVersionReq(s) from exc

    def encode(self) -> str:
        return render_version_req(self.value)


# ---------------------------------------------------------------------------
# Keyword list
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeywordList(WireScalar):
    """Up to five keywords, each shorter than twenty characters."""

    value: tuple[Keyword, ...]

    def __post_init__(self) -> None:
        if len(self.value) > MAX_KEYWORDS:
            raise TooManyKeywords([kw.value for kw in self.value])
        for kw in self.value:
            if len(kw.value) >= MAX_KEYWORD_LENGTH:
                raise KeywordTooLong(kw.value)

    @classmethod
    def decode(cls, raw: Any, *, policy: NamingPolicy = DEFAULT_NAMING_POLICY) -> Self:
        if isinstance(raw, str) or not isinstance(raw, Sequence):
            msg = f"expected a list of keywords, found {type(raw).__name__}"
            raise MalformedPayload(msg, value=raw)
        # Element rules first; the first invalid keyword short-circuits.
        keywords = tuple(Keyword.decode(item, policy=policy) for item in raw)
        return cls(keywords)

    def encode(self) -> list[str]:
        return [kw.encode() for kw in self.value]

    def __len__(self) -> int:
        return len(self.value)
