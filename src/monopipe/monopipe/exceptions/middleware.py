# ABOUTME: Middleware-specific exception classes for error handling
# ABOUTME: Covers invalid middleware entries and unsupported pipeline composition

from monopipe.exceptions.base import PipelineException


class MiddlewareError(PipelineException):
    """Base exception class for middleware-related errors.

    Should be used as a base for more specific middleware exceptions
    rather than being raised directly.
    """

    pass


class InvalidMiddlewareError(MiddlewareError, TypeError):
    """Exception raised when `process` reaches an entry that is not callable.

    Pipelines accept any value at construction and composition time; the
    check happens only when execution reaches the entry, and execution stops
    there. It is also a `TypeError`, so callers treating the failure as a
    plain type error keep working.

    Details include the sequence `index`, the `middleware_type` name of the
    offending entry and the pipeline `variant`.
    """

    def __init__(self, index: int, middleware: object, variant: str):
        super().__init__(
            "Middleware must be a function",
            code="INVALID_MIDDLEWARE",
            details={
                "index": index,
                "middleware_type": type(middleware).__name__,
                "variant": variant,
            },
        )


class MiddlewarePipelineError(MiddlewareError):
    """Exception raised for pipeline composition errors.

    Should include details about the pipeline operation that failed.
    """

    pass


class IncompatiblePipelineError(MiddlewarePipelineError, TypeError):
    """Exception raised when pipelines of different variants are concatenated."""

    def __init__(self, left: str, right: str):
        super().__init__(
            f"Cannot concat a '{right}' pipeline onto a '{left}' pipeline",
            code="INCOMPATIBLE_PIPELINE",
            details={"left": left, "right": right},
        )


class UnwritableContextError(MiddlewarePipelineError, TypeError):
    """Exception raised when a wrapped context cannot carry middleware results.

    IntermediatePipeline rebuilds read-only wrappers (frozen dataclasses,
    named tuples, frozen models) as a writable ``Intermediate`` before the
    first step. Only wrappers whose fields cannot be enumerated end up here,
    and no middleware has run when it is raised.
    """

    def __init__(self, context: object):
        super().__init__(
            f"Cannot write the payload of a '{type(context).__name__}' context",
            code="UNWRITABLE_CONTEXT",
            details={"context_type": type(context).__name__},
        )
