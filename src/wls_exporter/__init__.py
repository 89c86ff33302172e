"""
wls_exporter - selector-tree configuration for a WebLogic metrics exporter

Loads, combines and serializes the YAML configuration that tells the
exporter which MBean attributes to read and how to name the metrics.
"""

__version__ = "0.1.0"

from .configuration import ExporterConfig, MBeanSelector, ConfigSerializer
from .infrastructure.exceptions import WlsExporterException, ConfigurationError, InvalidConfigurationValue

__all__ = [
    "ExporterConfig",
    "MBeanSelector",
    "ConfigSerializer",
    "WlsExporterException",
    "ConfigurationError",
    "InvalidConfigurationValue",
]
