# ABOUTME: Middleware contract shared by every pipeline variant
# ABOUTME: A middleware is any one-argument callable; only its callability is ever checked

from typing import Any, Awaitable, Optional, Protocol, TypeVar, Union, runtime_checkable

TContext = TypeVar("TContext", contravariant=True)
TResult = TypeVar("TResult", covariant=True)

MiddlewareResult = Union[Optional[TResult], Awaitable[Optional[TResult]]]
"""What a middleware may return: a value, ``None`` (leave the context unchanged), or an awaitable of either."""


@runtime_checkable
class Middleware(Protocol[TContext, TResult]):
    """
    Middleware function contract.

    A middleware receives the current context as its only argument and
    returns the next context, ``None`` to pass the current context on
    unmodified, or an awaitable resolving to either. Asynchronous pipelines
    await the awaitable; the synchronous pipeline passes it on as a value.
    """

    def __call__(self, ctx: TContext) -> Any: ...
