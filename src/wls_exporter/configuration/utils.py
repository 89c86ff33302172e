"""
Utility functions for common configuration patterns.
"""

from typing import Union
from pathlib import Path

from .builder import ConfigurationBuilder
from .core import ExporterConfig


def load_configuration_from_file(file_path: Union[str, Path]) -> ExporterConfig:
    """
    Load configuration from a single YAML file.

    Args:
        file_path: Path to the YAML configuration file

    Returns:
        ExporterConfig instance
    """
    return ConfigurationBuilder().add_yaml_source(file_path).build()


def load_configuration_from_string(text: str) -> ExporterConfig:
    """
    Load configuration from YAML text. Empty text yields the defaults.

    Args:
        text: YAML document

    Returns:
        ExporterConfig instance
    """
    return ConfigurationBuilder().add_yaml_string(text).build()


def create_configuration_builder() -> ConfigurationBuilder:
    """
    Create a new configuration builder.

    Returns:
        ConfigurationBuilder instance
    """
    return ConfigurationBuilder()
