# ABOUTME: IntermediatePipeline executes middleware over an Intermediate-wrapped context
# ABOUTME: Lets companion data travel next to the payload without being overwritten by it

import inspect
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from monopipe.interfaces import PipelineFactory
from monopipe.models import Intermediate, get_payload, is_intermediate, set_payload, writable_wrapper

from .base import BasePipeline, TIn, TOut, copy_context

TNew = TypeVar("TNew")


class IntermediatePipeline(BasePipeline[TIn, TOut]):
    """
    Pipeline is an inverted monoid that stores a sequence of middleware to be
    applied to the value passed to ``process``.

    IntermediatePipeline wraps the value passed to ``process`` into an
    Intermediate, so middleware read the data from the ``intermediate`` field
    of their argument. Anything else travelling with the data sits next to it
    and is never mixed up with it. For example, an HTTP request and response
    can be passed along with the payload:

        {
            "request": request,
            "response": response,
            "intermediate": payload,
        }

    Any mapping with an ``"intermediate"`` key, or object with an
    ``intermediate`` attribute, is used as the wrapper directly. Any other
    value is wrapped with ``Intermediate.of``. Read-only wrappers are turned
    into writable ones first: mappings become a ``dict``, frozen objects are
    rebuilt as an ``Intermediate`` with the same fields.

    **NOTE**: IntermediatePipeline creates a shallow copy of the context
    argument. Objects passed along with the payload stay MUTABLE.
    """

    def concat(self, other: "IntermediatePipeline[TOut, TNew]") -> "IntermediatePipeline[TIn, TNew]":
        return super().concat(other)

    def pipe(
        self, middleware: Callable[[Any], Union[Optional[TNew], Awaitable[Optional[TNew]]]]
    ) -> "IntermediatePipeline[TIn, TNew]":
        return super().pipe(middleware)

    async def process(self, ctx: TIn) -> TOut:
        """
        Sequentially call the stored middleware with the wrapper built from ``ctx``.

        Values returned from middleware are assigned to the ``intermediate``
        field of the wrapper; other fields are left alone. A ``None`` result
        leaves the payload unchanged. Awaitable results are resolved before
        the next middleware runs.

        Args:
            ctx: Payload, or a wrapper containing ``intermediate``.

        Returns:
            The final contents of ``intermediate``.

        Raises:
            InvalidMiddlewareError: If a non-callable entry is reached.
            UnwritableContextError: If a read-only wrapper cannot be rebuilt.
        """
        wrapper: Any = copy_context(ctx)

        if is_intermediate(wrapper):
            wrapper = writable_wrapper(wrapper)
        else:
            wrapper = Intermediate.of(wrapper)

        for index, middleware in self._steps():
            try:
                done = middleware(wrapper)
                if inspect.isawaitable(done):
                    done = await done
            except Exception:
                self._log_failure(index)
                raise

            if done is not None:
                set_payload(wrapper, done)

        return get_payload(wrapper)


IntermediatePipeline.factory = PipelineFactory("intermediate", IntermediatePipeline)
