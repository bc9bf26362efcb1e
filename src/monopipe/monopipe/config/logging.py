# ABOUTME: Loguru configuration for the monopipe library
# ABOUTME: Provides opt-in logging setup with console colorization and optional file output

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger
from pydantic import BaseModel

from monopipe.config.settings import get_settings
from monopipe.exceptions.base import ConfigurationException

LIBRARY_NAMESPACE = "monopipe"


class LoggerConfig(BaseModel):
    """Configuration for loguru logger."""

    # Console output configuration
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )
    console_colorize: bool = True
    console_serialize: bool = False
    console_backtrace: bool = True
    console_diagnose: bool = True

    # File output configuration
    file_enabled: bool = False
    file_level: str = "DEBUG"
    file_path: Union[str, Path] = "logs/monopipe.log"
    file_format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"
    file_rotation: str = "100 MB"
    file_retention: str = "30 days"
    file_compression: str = "gz"
    file_serialize: bool = False

    # Performance settings
    enqueue: bool = False
    catch: bool = True


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Setup loguru logger with the specified configuration.

    The library namespace is disabled on import; calling this function
    re-enables it so pipeline records reach the configured sinks.

    Args:
        config: Logger configuration. If None, built from the MONOPIPE_LOG_* settings.
    """
    if config is None:
        settings = get_settings()
        structured = settings.LOG_FORMAT == "json"
        config = LoggerConfig(
            console_level=settings.LOG_LEVEL,
            console_colorize=settings.LOG_CONSOLE_COLORIZE and not structured,
            console_serialize=structured,
            file_enabled=settings.LOG_FILE_ENABLED,
            file_path=settings.LOG_FILE_PATH,
            file_level=settings.LOG_LEVEL,
            file_serialize=structured,
        )

    # Remove default handler
    logger.remove()

    if config.console_enabled:
        logger.add(
            sys.stdout,
            level=config.console_level,
            format=config.console_format,
            colorize=config.console_colorize,
            serialize=config.console_serialize,
            backtrace=config.console_backtrace,
            diagnose=config.console_diagnose,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    if config.file_enabled:
        # Ensure log directory exists
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.file_path,
            level=config.file_level,
            format=config.file_format,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.file_compression,
            serialize=config.file_serialize,
            enqueue=config.enqueue,
            catch=config.catch,
        )

    logger.enable(LIBRARY_NAMESPACE)


def get_logger(name: str):
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance bound to the specified name
    """
    return logger.bind(name=name)


def configure_for_testing() -> None:
    """Configure logging for testing environment."""
    logger.remove()
    logger.add(
        sys.stdout,
        level="DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <5}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        colorize=True,
        backtrace=False,
        diagnose=False,
        enqueue=False,
        catch=False,
    )
    logger.enable(LIBRARY_NAMESPACE)


def configure_for_production() -> None:
    """Configure logging for production environment."""
    config = LoggerConfig(
        console_level="INFO",
        console_colorize=False,
        console_serialize=True,
        console_backtrace=False,
        console_diagnose=False,
    )
    setup_logging(config)


def configure_for_development() -> None:
    """Configure logging for development environment."""
    config = LoggerConfig(
        console_level="DEBUG",
        console_colorize=True,
        console_backtrace=True,
        console_diagnose=True,
    )
    setup_logging(config)


def configure_from_environment(env: Optional[str] = None) -> None:
    """
    Apply the logging preset that matches a runtime environment.

    Args:
        env: Normalized environment name. Defaults to the MONOPIPE_ENV setting.

    Raises:
        ConfigurationException: If no preset exists for the environment.
    """
    if env is None:
        env = get_settings().ENV

    presets = {
        "production": configure_for_production,
        "staging": configure_for_production,
        "development": configure_for_development,
    }
    preset = presets.get(env)
    if preset is None:
        raise ConfigurationException(
            f"Unknown environment '{env}'",
            code="UNKNOWN_ENVIRONMENT",
            details={"env": env, "expected": sorted(presets)},
        )
    preset()
