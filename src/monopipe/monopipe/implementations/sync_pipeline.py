# ABOUTME: SyncPipeline executes middleware on the caller's stack
# ABOUTME: Left fold with null-propagation and no suspension points

from typing import Any, TypeVar

from monopipe.interfaces import PipelineFactory

from .base import BasePipeline, copy_context

T = TypeVar("T")


class SyncPipeline(BasePipeline[T, T]):
    """
    Pipeline is an inverted monoid that stores a sequence of middleware to be
    applied to the value passed to ``process``.

    Unlike Pipeline, SyncPipeline never awaits anything: if a middleware
    returns an awaitable, that awaitable is what the next middleware receives.

    **NOTE**: SyncPipeline creates a shallow copy of the context argument
    before passing it to the first middleware. Nested objects stay shared.

    Example:
        >>> SyncPipeline.from_([lambda x: x + 1, lambda x: None, lambda x: x * 2]).process(1)
        4
    """

    def process(self, ctx: T) -> Any:
        """
        Sequentially call the stored middleware starting with ``ctx``.

        The value returned by a middleware is passed to the next one. If a
        middleware returns ``None``, the context it received is passed on
        unmodified.

        Args:
            ctx: Initial context.

        Returns:
            The transformed context.

        Raises:
            InvalidMiddlewareError: If a non-callable entry is reached.
        """
        result = copy_context(ctx)

        for index, middleware in self._steps():
            try:
                done = middleware(result)
            except Exception:
                self._log_failure(index)
                raise

            if done is not None:
                result = done

        return result


SyncPipeline.factory = PipelineFactory("sync", SyncPipeline)
