# ABOUTME: Interfaces package exports
# ABOUTME: Exports the monoid laws, the middleware contract and the pipeline interface

from .monoid import AbstractMonoid, AbstractSemigroup
from .middleware import Middleware, MiddlewareResult
from .pipeline import AbstractPipeline, PipelineFactory

__all__ = [
    "AbstractSemigroup",
    "AbstractMonoid",
    "Middleware",
    "MiddlewareResult",
    "AbstractPipeline",
    "PipelineFactory",
]
