# ABOUTME: Shared pipeline container for every execution strategy
# ABOUTME: Stores the middleware tuple and implements the variant-agnostic monoid operations

import copy
from typing import Any, ClassVar, Generic, Iterable, Iterator, List, Self, Tuple, TypeVar

from loguru import logger

from monopipe.config.settings import get_settings
from monopipe.exceptions import IncompatiblePipelineError, InvalidMiddlewareError
from monopipe.interfaces import AbstractPipeline, Middleware, PipelineFactory
from monopipe.models import SCALAR_TYPES

TIn = TypeVar("TIn")
TOut = TypeVar("TOut")


def copy_context(ctx: Any) -> Any:
    """
    Make the working copy of a context handed to ``process``.

    Scalars and ``None`` are immutable and returned as they are. Lists,
    dicts, sets and general objects get a shallow copy: the top level is
    new, nested structures stay shared with the caller.

    Lists, including list subclasses, are copied into a plain ``list``.
    Every other type goes through ``copy.copy`` and keeps its own type, so
    dict and set subclasses come back as the same subclass.

    Args:
        ctx: Context passed to ``process``.

    Returns:
        The working copy.
    """
    if ctx is None or isinstance(ctx, SCALAR_TYPES):
        return ctx
    if isinstance(ctx, list):
        return list(ctx)
    return copy.copy(ctx)


def middleware_name(middleware: Any) -> str:
    """Readable name of a middleware for log records."""
    return getattr(middleware, "__qualname__", None) or type(middleware).__name__


class BasePipeline(AbstractPipeline, Generic[TIn, TOut]):
    """
    Shared pipeline code.

    Concrete variants add a ``process`` algorithm and register their
    ``factory`` right after the class body. Every constructor and composition
    operation goes through that factory, which is what keeps the variant of a
    pipeline fixed across ``of``, ``from_``, ``empty``, ``concat`` and ``pipe``.

    Construction never validates middleware: ``None`` or any other value may
    be stored, and only fails once ``process`` reaches it. Construction and
    composition do not read settings either; those are loaded by ``process``.

    A subclass of a variant inherits its parent's ``factory``, so
    ``MyPipeline.of(f)`` builds the parent variant. Subclasses that should
    compose into themselves must register their own ``PipelineFactory``.
    """

    factory: ClassVar[PipelineFactory]

    def __init__(self, middleware: Iterable[Middleware] = ()):
        """
        Initialize the pipeline.

        Args:
            middleware: Middleware in execution order.
        """
        self._middleware: Tuple[Middleware, ...] = tuple(middleware)

    @classmethod
    def of(cls, *middleware: Middleware) -> Self:
        """
        Lift the given middleware into a pipeline of this variant.

        Args:
            *middleware: Middleware in execution order.
        """
        return cls.factory.of(*middleware)

    @classmethod
    def from_(cls, middleware: Iterable[Middleware]) -> Self:
        """
        Create a pipeline of this variant from an ordered iterable of middleware.

        Args:
            middleware: Middleware in execution order.
        """
        return cls.factory.from_(middleware)

    @classmethod
    def empty(cls) -> Self:
        """
        Create a pipeline of this variant without middleware.

        Works on the class and on an instance, so code holding any pipeline
        can get the identity element of the same variant.
        """
        return cls.factory.empty()

    @property
    def middleware(self) -> Tuple[Middleware, ...]:
        return self._middleware

    @property
    def is_empty(self) -> bool:
        return not self._middleware

    def to_array(self) -> List[Middleware]:
        return list(self._middleware)

    def concat(self, other: "BasePipeline") -> Self:
        """
        Create a new pipeline containing the middleware of this pipeline followed
        by the middleware of ``other``.

        Args:
            other: Pipeline of the same variant.

        Raises:
            IncompatiblePipelineError: If ``other`` is a different variant.
        """
        other_factory = getattr(other, "factory", None)
        if not isinstance(other, BasePipeline) or other_factory is not self.factory:
            right = other_factory.variant if isinstance(other_factory, PipelineFactory) else type(other).__name__
            raise IncompatiblePipelineError(self.factory.variant, right)
        return self.factory.from_(self._middleware + other.middleware)

    def pipe(self, middleware: Middleware) -> Self:
        """
        Create a new pipeline with ``middleware`` appended to the end.

        Args:
            middleware: Middleware to append.
        """
        return self.factory.from_(self._middleware + (middleware,))

    def _get_logger(self):
        """Logger bound to the configured pipeline name and this variant."""
        return logger.bind(name=get_settings().PIPELINE_LOGGER_NAME, variant=self.factory.variant)

    def _steps(self) -> Iterator[Tuple[int, Middleware]]:
        """
        Yield ``(index, middleware)`` pairs in execution order.

        The callability check runs when a step is reached, not before, so
        earlier middleware still run when a later entry is invalid.

        Raises:
            InvalidMiddlewareError: When the entry about to run is not callable.
        """
        step_logging = get_settings().PIPELINE_STEP_LOGGING
        log = self._get_logger()
        total = len(self._middleware)
        log.debug(f"Processing {total} middleware")

        for index, middleware in enumerate(self._middleware):
            if not callable(middleware):
                log.debug(f"Step {index + 1}/{total} is not callable: {type(middleware).__name__}")
                raise InvalidMiddlewareError(index, middleware, self.factory.variant)
            if step_logging:
                log.debug(f"Step {index + 1}/{total}: {middleware_name(middleware)}")
            yield index, middleware

        log.debug(f"Processed {total} middleware")

    def _log_failure(self, index: int) -> None:
        self._get_logger().debug(
            f"Step {index + 1}/{len(self._middleware)} ({middleware_name(self._middleware[index])}) raised, aborting"
        )

    def __add__(self, other: Any) -> Self:
        if not isinstance(other, BasePipeline):
            return NotImplemented
        return self.concat(other)

    def __len__(self) -> int:
        return len(self._middleware)

    def __iter__(self) -> Iterator[Middleware]:
        return iter(self._middleware)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BasePipeline):
            return NotImplemented
        return self.factory is other.factory and self._middleware == other.middleware

    def __hash__(self) -> int:
        return hash((self.factory.variant, self._middleware))

    def __repr__(self) -> str:
        names = ", ".join(middleware_name(m) for m in self._middleware)
        return f"{self.__class__.__name__}([{names}])"
