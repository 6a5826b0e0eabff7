"""Naming policy — which strings are legal package names, keywords, features.

The scalar types consult a :class:`NamingPolicy` at decode time. The
default :class:`CratesNamingPolicy` follows the registry's rules:

- Identifiers start with an ASCII letter and contain only ASCII
  alphanumerics, ``-`` and ``_``.
- Package names are identifiers of at most ``max_name_length`` characters.
- Keywords start with an alphanumeric character and contain only
  alphanumerics, ``-`` and ``_``.
- Feature names are ``ident`` or ``ident/ident``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

DEFAULT_MAX_NAME_LENGTH = 64


@runtime_checkable
class NamingPolicy(Protocol):
    """Predicates deciding the syntactic validity of registry strings."""

    def valid_name(self, name: str) -> bool: ...

    def valid_keyword(self, keyword: str) -> bool: ...

    def valid_feature_name(self, name: str) -> bool: ...


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def valid_ident(name: str) -> bool:
    """Check whether *name* is a registry identifier.

    Examples:
        >>> valid_ident("serde_json")
        True
        >>> valid_ident("1password")
        False
        >>> valid_ident("")
        False
    """
    if not name:
        return False
    first = name[0]
    if not (first.isascii() and first.isalpha()):
        return False
    return all(_is_ascii_alnum(ch) or ch in "-_" for ch in name)


@dataclass(frozen=True)
class CratesNamingPolicy:
    """Default naming rules for package names, keywords and feature names."""

    max_name_length: int = DEFAULT_MAX_NAME_LENGTH

    def valid_name(self, name: str) -> bool:
        return valid_ident(name) and len(name) <= self.max_name_length

    def valid_keyword(self, keyword: str) -> bool:
        if not keyword or not keyword[0].isalnum():
            return False
        return all(ch.isalnum() or ch in "-_" for ch in keyword)

    def valid_feature_name(self, name: str) -> bool:
        # "ident" or "ident/ident"; split() always yields at least one part.
        parts = name.split("/")
        if len(parts) > 2:
            return False
        return all(valid_ident(part) for part in parts)


DEFAULT_NAMING_POLICY: NamingPolicy = CratesNamingPolicy()
