# ABOUTME: Exceptions package exports
# ABOUTME: Exports the base exception and middleware-specific errors

from monopipe.exceptions.base import (
    PipelineException,
    ConfigurationException,
)

from monopipe.exceptions.middleware import (
    MiddlewareError,
    InvalidMiddlewareError,
    MiddlewarePipelineError,
    IncompatiblePipelineError,
    UnwritableContextError,
)

__all__ = [
    "PipelineException",
    "ConfigurationException",
    # Middleware exceptions
    "MiddlewareError",
    "InvalidMiddlewareError",
    "MiddlewarePipelineError",
    "IncompatiblePipelineError",
    "UnwritableContextError",
]
