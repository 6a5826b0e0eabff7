"""Semantic-version parsing, delegated to ``semantic_version``.

Versions are strict ``MAJOR.MINOR.PATCH[-pre][+build]`` strings.
Requirements use Cargo's grammar (``^1.2``, ``~0.3``, ``>=1.0, <2.0``,
``*``) mapped onto ``SimpleSpec``:

* whitespace around operators and commas is dropped; any other
  whitespace makes the requirement invalid;
* a clause with no operator is a caret requirement, so ``1.2.3`` means
  ``^1.2.3``.

The normalized expression is the canonical encoding.
"""

from __future__ import annotations

import re

from semantic_version import SimpleSpec, Version

_OPERATOR_SPACING = re.compile(r"\s*([,<>=^~!])\s*")
_HAS_OPERATOR = re.compile(r"^[<>=^~!]")


def parse_version(raw: str) -> Version:
    """Parse a semantic version string.

    Raises:
        ValueError: If *raw* is not a valid semantic version.
    """
    return Version(raw)


def _clause(clause: str) -> str:
    if _HAS_OPERATOR.match(clause) or "*" in clause:
        return clause
    return f"^{clause}"


def parse_version_req(raw: str) -> SimpleSpec:
    """Parse a version-requirement expression.

    Raises:
        ValueError: If *raw* is empty, has whitespace inside a version, or
            is not a valid requirement.
    """
    expression = _OPERATOR_SPACING.sub(r"\1", raw.strip())
    if not expression:
        msg = "empty version requirement"
        raise ValueError(msg)
    if any(ch.isspace() for ch in expression):
        msg = f"unexpected whitespace in version requirement {raw!r}"
        raise ValueError(msg)
    return SimpleSpec(",".join(_clause(c) for c in expression.split(",")))


def render_version(version: Version) -> str:
    return str(version)


def render_version_req(req: SimpleSpec) -> str:
    return str(req.expression)
