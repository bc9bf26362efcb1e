# ABOUTME: Core exception classes for the monopipe library
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class PipelineException(Exception):
    """Base exception class for the monopipe library.

    Provides structured error handling with optional error codes and contextual
    details. Every exception raised by the library itself inherits from this
    class. Errors raised by user middleware are never wrapped in it.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize PipelineException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ConfigurationException(PipelineException):
    """Exception raised for configuration errors.

    Used when library configuration is invalid, such as:
    - Unknown environment names passed to logging presets
    - Invalid configuration values

    Should include details about the configuration issue.
    """

    pass
