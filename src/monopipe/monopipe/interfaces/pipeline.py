# ABOUTME: Abstract pipeline interface and the per-variant factory record
# ABOUTME: Defines the query, composition and execution contract of every pipeline variant

from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Self, Tuple, TypeVar

from .middleware import Middleware
from .monoid import AbstractMonoid

P = TypeVar("P", bound="AbstractPipeline")


class AbstractPipeline(AbstractMonoid):
    """
    Abstract base class for pipeline variants.

    A pipeline is an immutable, ordered sequence of middleware plus an
    execution strategy. Composition never mutates a pipeline; it always
    returns a new one of the same variant.
    """

    @property
    @abstractmethod
    def middleware(self) -> Tuple[Middleware, ...]:
        """
        Middleware stored in the pipeline, in execution order.
        """
        pass

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        """
        Whether the pipeline has no middleware.
        """
        pass

    @abstractmethod
    def to_array(self) -> List[Middleware]:
        """
        Get the stored middleware as a new list, in execution order.
        """
        pass

    @abstractmethod
    def pipe(self, middleware: Middleware) -> Self:
        """
        Create a new pipeline with the middleware appended to the end.

        Args:
            middleware: Middleware to append. It is not validated here.

        Returns:
            A new pipeline of the same variant.
        """
        pass

    @abstractmethod
    def process(self, ctx: Any) -> Any:
        """
        Sequentially call the stored middleware starting with ``ctx``.

        Args:
            ctx: Initial context value.

        Returns:
            The final context, or an awaitable of it for asynchronous variants.

        Raises:
            InvalidMiddlewareError: If a non-callable entry is reached.
            Exception: Whatever a middleware raises, propagated unchanged.
        """
        pass


@dataclass(frozen=True)
class PipelineFactory(Generic[P]):
    """
    Constructors of one pipeline variant.

    Each variant registers exactly one factory. Composition on an instance
    goes through the factory it was built with, so ``empty``, ``concat`` and
    ``pipe`` always produce the same variant, and two pipelines are the same
    variant exactly when they share a factory.

    Attributes:
        variant: Human-readable variant name used in logs and errors.
        build: Callable turning a tuple of middleware into a pipeline.
    """

    variant: str
    build: Callable[[Tuple[Middleware, ...]], P]

    def of(self, *middleware: Middleware) -> P:
        """Lift the given middleware, in argument order, into a pipeline."""
        return self.build(tuple(middleware))

    def from_(self, middleware: Iterable[Middleware]) -> P:
        """Create a pipeline from an ordered iterable of middleware."""
        return self.build(tuple(middleware))

    def empty(self) -> P:
        """Create a pipeline without middleware."""
        return self.build(())
