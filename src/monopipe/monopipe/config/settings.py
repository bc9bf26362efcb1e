# ABOUTME: Main configuration composition for the monopipe library
# ABOUTME: Adds pipeline execution settings on top of the base settings

from functools import lru_cache

from pydantic import Field

from ._base import BasePipelineSettings


class PipelineSettings(BasePipelineSettings):
    """Represents the complete configuration used by pipeline execution.

    Inherits the foundational settings from `BasePipelineSettings` and adds the
    knobs read by the execution strategies, loaded from `MONOPIPE_PIPELINE_STEP_LOGGING`
    and `MONOPIPE_PIPELINE_LOGGER_NAME`. Extend it by inheritance when an
    application needs its own fields:

        class AppSettings(PipelineSettings):
            CUSTOM_FIELD: str = "value"

    The `get_settings` function provides a cached instance of this class.

    Attributes:
        PIPELINE_STEP_LOGGING: Emit a debug record for every middleware step during `process`.
        PIPELINE_LOGGER_NAME: Name bound to the loguru logger used by pipelines.
    """

    PIPELINE_STEP_LOGGING: bool = Field(
        default=False,
        description="Log every middleware invocation at debug level while processing.",
    )
    PIPELINE_LOGGER_NAME: str = Field(
        default="monopipe.pipeline",
        description="Name bound to the logger used by pipeline implementations.",
    )


@lru_cache
def get_settings() -> PipelineSettings:
    """Provides a cached instance of the pipeline settings.

    Environment variables and the `.env` file are read once; call
    `get_settings.cache_clear()` to force a reload.

    Returns:
        A single, cached instance of PipelineSettings.
    """
    return PipelineSettings()
