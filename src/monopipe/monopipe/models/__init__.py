# ABOUTME: Models package for the monopipe library
# ABOUTME: Exports the Intermediate wrapper and its structural helpers

from .intermediate import (
    PAYLOAD_FIELD,
    SCALAR_TYPES,
    Intermediate,
    get_payload,
    is_intermediate,
    set_payload,
    writable_wrapper,
)

__all__ = [
    "PAYLOAD_FIELD",
    "SCALAR_TYPES",
    "Intermediate",
    "get_payload",
    "is_intermediate",
    "set_payload",
    "writable_wrapper",
]
