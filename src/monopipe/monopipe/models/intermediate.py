# ABOUTME: Intermediate wrapper model used by IntermediatePipeline
# ABOUTME: Carries a payload under a well-known field next to arbitrary companion fields

import dataclasses
from collections.abc import Mapping, MutableMapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from monopipe.exceptions import UnwritableContextError

T = TypeVar("T")

PAYLOAD_FIELD = "intermediate"

# Values that are never treated as composite contexts
SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, bool)


def is_intermediate(x: Any) -> bool:
    """
    Structural test for intermediate-shaped values.

    A value is intermediate-shaped when it is a non-null composite exposing
    the payload field: a mapping with an ``"intermediate"`` key, or any other
    object with an ``intermediate`` attribute. How the value was constructed
    does not matter.

    Args:
        x: Value to test.

    Returns:
        bool: True if ``x`` exposes the payload field.
    """
    if x is None or isinstance(x, SCALAR_TYPES):
        return False
    if isinstance(x, Mapping):
        return PAYLOAD_FIELD in x
    return hasattr(x, PAYLOAD_FIELD)


def get_payload(wrapper: Any) -> Any:
    """Read the payload field of an intermediate-shaped value."""
    if isinstance(wrapper, Mapping):
        return wrapper[PAYLOAD_FIELD]
    return getattr(wrapper, PAYLOAD_FIELD)


def set_payload(wrapper: Any, value: Any) -> None:
    """Overwrite the payload field of an intermediate-shaped value, and nothing else."""
    if isinstance(wrapper, MutableMapping):
        wrapper[PAYLOAD_FIELD] = value
    else:
        setattr(wrapper, PAYLOAD_FIELD, value)


class Intermediate(BaseModel, Generic[T]):
    """
    Wrapper holding a payload under the ``intermediate`` field.

    Companion fields (request objects, connections, anything a middleware
    needs next to the data) can be set as extra attributes and are kept apart
    from the payload. Middleware read the payload from ``ctx.intermediate``;
    IntermediatePipeline writes middleware results back to that field only.
    """

    intermediate: T

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        extra="allow",
    )

    @classmethod
    def of(cls, value: T) -> "Intermediate[T]":
        """
        Wrap a value.

        Args:
            value: Payload to store under ``intermediate``.

        Returns:
            Intermediate: A new wrapper holding ``value``.
        """
        return cls(intermediate=value)

    @staticmethod
    def is_intermediate(x: Any) -> bool:
        """Structural test, see :func:`is_intermediate`."""
        return is_intermediate(x)


def _wrapper_fields(wrapper: Any) -> dict:
    if isinstance(wrapper, BaseModel):
        fields = dict(wrapper)
    elif dataclasses.is_dataclass(wrapper):
        fields = {f.name: getattr(wrapper, f.name) for f in dataclasses.fields(wrapper)}
    elif hasattr(wrapper, "_asdict"):
        fields = dict(wrapper._asdict())
    elif hasattr(wrapper, "__dict__"):
        fields = dict(vars(wrapper))
    else:
        raise UnwritableContextError(wrapper)

    fields[PAYLOAD_FIELD] = get_payload(wrapper)
    return fields


def writable_wrapper(wrapper: Any) -> Any:
    """
    Return an intermediate-shaped value whose payload field can be written.

    Mutable mappings and objects accepting ``setattr`` are returned as they
    are. Read-only mappings are copied into a ``dict``. Objects rejecting
    assignment (frozen dataclasses, named tuples, frozen models) are rebuilt
    as an ``Intermediate`` holding the same fields, so companion data survives.

    The value is written back to itself to test writability, so callers
    pass their own working copy, never the caller's object.

    Args:
        wrapper: Intermediate-shaped value.

    Raises:
        UnwritableContextError: If the object rejects assignment and its
            fields cannot be enumerated.
    """
    if isinstance(wrapper, MutableMapping):
        return wrapper
    if isinstance(wrapper, Mapping):
        return dict(wrapper)

    try:
        set_payload(wrapper, get_payload(wrapper))
    except (AttributeError, TypeError, ValueError):
        return Intermediate(**_wrapper_fields(wrapper))
    return wrapper
