# ABOUTME: Pipeline implementations package exports
# ABOUTME: Contains the shared container and the three execution strategies

from .base import BasePipeline, copy_context
from .sync_pipeline import SyncPipeline
from .async_pipeline import Pipeline
from .intermediate_pipeline import IntermediatePipeline

__all__ = [
    "BasePipeline",
    "copy_context",
    "SyncPipeline",
    "Pipeline",
    "IntermediatePipeline",
]
