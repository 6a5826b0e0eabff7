"""Error taxonomy for publish-payload decoding and download lookups.

Decode failures subclass ``ValueError`` so that pydantic validators can
raise them directly; the aggregate decoder unwraps the first one from the
resulting ``ValidationError`` and re-raises it unchanged.
"""

from __future__ import annotations

from typing import Any


class RegistryError(Exception):
    """Base for every failure surfaced by this layer.

    Attributes:
        code: Stable machine-readable error code.
        message: Human-readable description.
        value: The offending raw value, when there is one.
    """

    code: str = "REGISTRY_ERROR"

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value


class DecodeError(RegistryError, ValueError):
    """A value in an inbound payload violated a registry rule."""

    code = "DECODE_ERROR"

    def __init__(self, message: str, *, value: Any = None, location: str | None = None) -> None:
        super().__init__(message, value=value)
        self.location = location

    def at(self, location: str) -> DecodeError:
        """Record the dotted payload path of the failing field and return self."""
        self.location = location
        return self

    def __str__(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


class MalformedPayload(DecodeError):
    """The payload does not have the expected structure."""

    code = "MALFORMED_PAYLOAD"


class InvalidName(DecodeError):
    code = "INVALID_NAME"

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid crate name specified: {value}", value=value)


class InvalidKeyword(DecodeError):
    code = "INVALID_KEYWORD"

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid keyword specified: {value}", value=value)


class InvalidFeatureName(DecodeError):
    code = "INVALID_FEATURE_NAME"

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid feature name specified: {value}", value=value)


class InvalidSemver(DecodeError):
    code = "INVALID_SEMVER"

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid semver: {value}", value=value)


class InvalidVersionReq(DecodeError):
    code = "INVALID_VERSION_REQ"

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid version req: {value}", value=value)


class TooManyKeywords(DecodeError):
    code = "TOO_MANY_KEYWORDS"

    def __init__(self, value: Any = None) -> None:
        super().__init__("a maximum of 5 keywords per crate are allowed", value=value)


class KeywordTooLong(DecodeError):
    code = "KEYWORD_TOO_LONG"

    def __init__(self, value: str) -> None:
        super().__init__("keywords must contain less than 20 characters", value=value)


class InvalidDependencyKind(DecodeError):
    code = "INVALID_DEPENDENCY_KIND"

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"invalid dependency kind `{value}`, must be one of dev, build, or normal",
            value=value,
        )


class NotFound(RegistryError, LookupError):
    """A lookup-by-identifier found no row."""

    code = "NOT_FOUND"

    def __init__(self, table: str, row_id: int) -> None:
        super().__init__(f"no row in {table} with id {row_id}", value=row_id)
        self.table = table


class RowMappingError(RegistryError):
    """A storage row is missing a column or holds a value of the wrong shape."""

    code = "ROW_MAPPING"
