# ABOUTME: Configuration package initialization
# ABOUTME: Exports configuration classes and utilities for the monopipe library

from monopipe.config._base import BasePipelineSettings
from monopipe.config.settings import PipelineSettings, get_settings
from monopipe.config.logging import (
    LIBRARY_NAMESPACE,
    LoggerConfig,
    setup_logging,
    get_logger,
    configure_for_testing,
    configure_for_production,
    configure_for_development,
    configure_from_environment,
)

__all__ = [
    "BasePipelineSettings",
    "PipelineSettings",
    "get_settings",
    "LIBRARY_NAMESPACE",
    "LoggerConfig",
    "setup_logging",
    "get_logger",
    "configure_for_testing",
    "configure_for_production",
    "configure_for_development",
    "configure_from_environment",
]
