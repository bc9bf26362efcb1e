# ABOUTME: Pipeline executes middleware over the raw context, awaiting each step
# ABOUTME: Middleware may be plain functions or coroutine functions in any mix

import inspect
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from monopipe.interfaces import PipelineFactory

from .base import BasePipeline, TIn, TOut, copy_context

TNew = TypeVar("TNew")


class Pipeline(BasePipeline[TIn, TOut]):
    """
    Pipeline is an inverted monoid that stores a sequence of middleware to be
    applied to the value passed to ``process``.

    The result of every middleware is awaited when it is awaitable, so
    synchronous and ``async def`` middleware can be mixed freely. Steps never
    overlap: each one is fully resolved before the next starts.

    **NOTE**: Pipeline creates a shallow copy of the context argument before
    passing it to the first middleware.
    """

    def concat(self, other: "Pipeline[TOut, TNew]") -> "Pipeline[TIn, TNew]":
        return super().concat(other)

    def pipe(
        self, middleware: Callable[[TOut], Union[Optional[TNew], Awaitable[Optional[TNew]]]]
    ) -> "Pipeline[TIn, TNew]":
        return super().pipe(middleware)

    async def process(self, ctx: TIn) -> TOut:
        """
        Sequentially call the stored middleware starting with ``ctx``.

        Values returned from middleware are passed to the next middleware. If a
        middleware returns ``None`` (or an awaitable resolving to ``None``), the
        context it received is passed on unmodified.

        Errors raised by a middleware, or by the awaitable it returned,
        propagate unchanged and stop the pipeline.

        Args:
            ctx: Initial context.

        Returns:
            The transformed context.

        Raises:
            InvalidMiddlewareError: If a non-callable entry is reached.
        """
        result: Any = copy_context(ctx)

        for index, middleware in self._steps():
            try:
                done = middleware(result)
                if inspect.isawaitable(done):
                    done = await done
            except Exception:
                self._log_failure(index)
                raise

            if done is not None:
                result = done

        return result


Pipeline.factory = PipelineFactory("async", Pipeline)
