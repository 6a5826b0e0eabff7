"""Wire codec capability shared by every validated scalar.

A :class:`WireScalar` knows how to produce itself from a raw structured
value (``decode``) and how to render itself back (``encode``). The
pydantic hook below routes model validation and serialization through
those two methods, so the rule lives with the type and is reused by every
input format pydantic accepts (JSON bytes, Python mappings).

The naming policy travels in pydantic's validation context under
:data:`POLICY_CONTEXT_KEY`; without one, the default policy applies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Self

from pydantic_core import core_schema

from crateguard.domain.errors import MalformedPayload
from crateguard.domain.naming import DEFAULT_NAMING_POLICY, NamingPolicy

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler

POLICY_CONTEXT_KEY = "naming_policy"


def policy_from_info(info: core_schema.ValidationInfo) -> NamingPolicy:
    """Return the naming policy carried by a pydantic validation context."""
    context = info.context
    if isinstance(context, dict):
        policy = context.get(POLICY_CONTEXT_KEY)
        if policy is not None:
            return policy
    return DEFAULT_NAMING_POLICY


def read_str(raw: Any, what: str) -> str:
    """Read a string from a raw payload value or fail structurally."""
    if not isinstance(raw, str):
        msg = f"expected a string for {what}, found {type(raw).__name__}"
        raise MalformedPayload(msg, value=raw)
    return raw


def wire_schema(cls: type[Any]) -> core_schema.CoreSchema:
    """Build the pydantic core schema that decodes and encodes *cls* on the wire.

    Already-constructed instances are re-decoded from their encoded form, so
    they meet the same policy as raw values.
    """

    def validate(raw: Any, info: core_schema.ValidationInfo) -> Any:
        if isinstance(raw, cls):
            raw = raw.encode()
        return cls.decode(raw, policy=policy_from_info(info))

    return core_schema.with_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(lambda v: v.encode()),
    )


class WireScalar(ABC):
    """A value that validates itself on decode and renders itself on encode."""

    @classmethod
    @abstractmethod
    def decode(cls, raw: Any, *, policy: NamingPolicy = DEFAULT_NAMING_POLICY) -> Self:
        """Produce a validated instance from a raw payload value.

        Raises:
            DecodeError: If *raw* violates the type's rule.
        """

    @abstractmethod
    def encode(self) -> Any:
        """Render the canonical raw form accepted by :meth:`decode`."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source: type[Any],
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return wire_schema(cls)
