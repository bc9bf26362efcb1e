# ABOUTME: Base configuration classes for the monopipe library
# ABOUTME: Provides the MONOPIPE_-prefixed environment and logging settings with validation logic

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "MONOPIPE_"


class BasePipelineSettings(BaseSettings):
    """Defines the foundational configuration shared by every monopipe component.

    Settings are loaded by `pydantic-settings` from `MONOPIPE_`-prefixed
    environment variables or an `.env` file, so variables an application
    uses for its own purposes (`ENV`, `LOG_LEVEL`, ...) are never read.
    They are not pipeline-specific and are meant to be inherited by more
    specific settings classes.

    Attributes:
        ENV: The runtime environment, which selects the logging preset.
        LOG_LEVEL: The minimum level for log messages to be processed.
        LOG_FORMAT: The format for log output, structured (JSON) or human-readable (txt).
        LOG_FILE_ENABLED: Also write log records to `LOG_FILE_PATH`.
        LOG_FILE_PATH: Destination of the file sink.
        LOG_CONSOLE_COLORIZE: Colorize the console sink (ignored for JSON output).
        model_config: Pydantic's configuration dictionary, specifying how settings are loaded.
    """

    ENV: Literal["development", "staging", "production"] = Field(
        default="development",
        description="The runtime environment. Selects the logging preset.",
    )

    LOG_LEVEL: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="The minimum level for log messages to be processed.",
    )
    LOG_FORMAT: Literal["json", "txt"] = Field(
        default="txt",
        description="The output format for logs. Use 'json' for production environments.",
    )
    LOG_FILE_ENABLED: bool = Field(
        default=False,
        description="Write log records to a rotating file in addition to the console.",
    )
    LOG_FILE_PATH: str = Field(
        default="logs/monopipe.log",
        description="Path of the log file when file output is enabled.",
    )
    LOG_CONSOLE_COLORIZE: bool = Field(
        default=True,
        description="Colorize console output. Has no effect on JSON output.",
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("ENV", mode="before")
    @classmethod
    def validate_env_case_insensitive(cls, v: str) -> str:
        """Validate ENV field with case-insensitive mapping.

        Accepts common environment aliases and normalizes them:
        - dev, develop -> development
        - prod -> production
        - stage -> staging
        """
        if isinstance(v, str):
            v_lower = v.lower().strip()
            env_mapping = {
                "dev": "development",
                "develop": "development",
                "development": "development",
                "stage": "staging",
                "staging": "staging",
                "prod": "production",
                "production": "production",
            }
            return env_mapping.get(v_lower, v_lower)
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level_case_insensitive(cls, v: str) -> str:
        """Validate LOG_LEVEL field with case-insensitive normalization."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def validate_log_format_case_insensitive(cls, v: str) -> str:
        if isinstance(v, str):
            v_lower = v.lower().strip()
            format_mapping = {
                "json": "json",
                "structured": "json",
                "txt": "txt",
                "text": "txt",
            }
            return format_mapping.get(v_lower, v_lower)
        return v
