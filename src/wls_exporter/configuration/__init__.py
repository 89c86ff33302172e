"""
Configuration Management System

Selector-tree configuration for the exporter: value coercion, recursive
selector parsing, append/replace combination of configurations, YAML
sources, and serialization back to YAML.
"""

from .coercion import (
    coerce_int,
    coerce_string,
    coerce_string_list
)

from .models import (
    ConnectionSettings,
    DEFAULT_HOST,
    DEFAULT_PORT
)

from .selector import (
    MBeanSelector,
    parse_selector,
    parse_query,
    parse_queries
)

from .core import ExporterConfig

from .serializer import ConfigSerializer

from .sources import (
    ConfigurationSource,
    YAMLConfigurationSource,
    YAMLStringConfigurationSource,
    DictConfigurationSource
)

from .builder import ConfigurationBuilder, MergeMode

from .utils import (
    load_configuration_from_file,
    load_configuration_from_string,
    create_configuration_builder
)

__all__ = [
    # Coercion
    'coerce_int',
    'coerce_string',
    'coerce_string_list',

    # Models
    'ConnectionSettings',
    'DEFAULT_HOST',
    'DEFAULT_PORT',

    # Selectors
    'MBeanSelector',
    'parse_selector',
    'parse_query',
    'parse_queries',

    # Core
    'ExporterConfig',
    'ConfigSerializer',

    # Sources
    'ConfigurationSource',
    'YAMLConfigurationSource',
    'YAMLStringConfigurationSource',
    'DictConfigurationSource',

    # Builder
    'ConfigurationBuilder',
    'MergeMode',

    # Utilities
    'load_configuration_from_file',
    'load_configuration_from_string',
    'create_configuration_builder'
]
