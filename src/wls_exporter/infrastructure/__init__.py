"""
Infrastructure Layer - Cross-cutting concerns

Exception hierarchy and logging setup shared by the configuration and
scraping packages.
"""

from .exceptions import WlsExporterException, ConfigurationError, InvalidConfigurationValue
from .logging_setup import LogFormat, setup_logging

__all__ = [
    "WlsExporterException",
    "ConfigurationError",
    "InvalidConfigurationValue",
    "LogFormat",
    "setup_logging",
]
