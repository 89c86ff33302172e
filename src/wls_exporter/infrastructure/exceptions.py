"""
Structured Exception Hierarchy

Provides the exception hierarchy for the exporter configuration library,
carrying error codes and contextual information for diagnostics.
"""

from typing import Dict, Any, Optional
import uuid
from datetime import datetime, timezone


class WlsExporterException(Exception):
    """
    Base exception class for all exporter-specific exceptions.

    Provides structured error information including error codes,
    context data, and correlation IDs for tracing.
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        correlation_id: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.cause = cause
        self.correlation_id = correlation_id or str(uuid.uuid4())
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "correlation_id": self.correlation_id,
            "timestamp": self.timestamp.isoformat(),
            "cause": str(self.cause) if self.cause else None
        }


class ConfigurationError(WlsExporterException):
    """Raised when configuration-related errors occur."""

    def __init__(
        self,
        message: str,
        error_code: str = "CONFIG_ERROR",
        context: Optional[Dict[str, Any]] = None,
        config_path: Optional[str] = None,
        **kwargs
    ):
        context = dict(context or {})
        if config_path:
            context['config_path'] = config_path

        super().__init__(
            message=message,
            error_code=error_code,
            context=context,
            **kwargs
        )


class InvalidConfigurationValue(ConfigurationError):
    """
    Raised when a configuration value cannot be coerced to its field type,
    or when the document structure does not describe a selector tree.
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        value: Any = None,
        **kwargs
    ):
        context = kwargs.pop('context', {})
        if field_name:
            context['field_name'] = field_name
        if value is not None:
            context['value'] = repr(value)

        super().__init__(
            message=message,
            error_code="INVALID_CONFIGURATION_VALUE",
            context=context,
            **kwargs
        )
        self.field_name = field_name
        self.value = value
