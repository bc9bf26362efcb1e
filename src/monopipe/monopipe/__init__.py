# ABOUTME: monopipe package initialization
# ABOUTME: Exposes the pipeline variants, the Intermediate wrapper and the exception hierarchy

"""
Composable middleware pipelines.

A pipeline is an immutable, ordered sequence of middleware that forms a
monoid under ``concat`` with ``empty`` as its identity. Three execution
strategies are provided:

- ``SyncPipeline``: runs middleware on the caller's stack.
- ``Pipeline``: awaits each middleware result over the raw context.
- ``IntermediatePipeline``: awaits each middleware result over an
  ``Intermediate``-wrapped context that can carry companion data.

The library logs through loguru under the ``monopipe`` namespace, which is
disabled until an application calls ``monopipe.config.setup_logging`` or
``logger.enable("monopipe")``.
"""

from loguru import logger

from monopipe.exceptions import (
    IncompatiblePipelineError,
    InvalidMiddlewareError,
    MiddlewareError,
    MiddlewarePipelineError,
    PipelineException,
    UnwritableContextError,
)
from monopipe.implementations import BasePipeline, IntermediatePipeline, Pipeline, SyncPipeline
from monopipe.interfaces import Middleware, PipelineFactory
from monopipe.models import Intermediate, is_intermediate

__version__ = "0.1.0"

logger.disable("monopipe")

__all__ = [
    "BasePipeline",
    "SyncPipeline",
    "Pipeline",
    "IntermediatePipeline",
    "PipelineFactory",
    "Middleware",
    "Intermediate",
    "is_intermediate",
    "PipelineException",
    "MiddlewareError",
    "InvalidMiddlewareError",
    "MiddlewarePipelineError",
    "IncompatiblePipelineError",
    "UnwritableContextError",
]
