"""
Configuration builder for combining several configuration sources.
"""

import logging
from enum import Enum
from typing import List, Tuple, Union
from pathlib import Path

from .core import ExporterConfig
from .sources import (
    ConfigurationSource,
    DictConfigurationSource,
    YAMLConfigurationSource,
    YAMLStringConfigurationSource,
)

logger = logging.getLogger(__name__)


class MergeMode(Enum):
    """How a source's queries combine with those loaded before it."""
    APPEND = "append"
    REPLACE = "replace"


class ConfigurationBuilder:
    """
    Builder for ExporterConfig instances assembled from multiple sources.

    The first source supplies the connection settings. Every later source
    only contributes queries, appended to or replacing the queries gathered
    so far, in the order the sources were added.
    """

    def __init__(self):
        self._sources: List[Tuple[ConfigurationSource, MergeMode]] = []

    def add_source(self, source: ConfigurationSource, mode: MergeMode = MergeMode.APPEND) -> 'ConfigurationBuilder':
        """Add a custom configuration source."""
        self._sources.append((source, MergeMode(mode)))
        return self

    def add_yaml_source(self, path: Union[str, Path], mode: MergeMode = MergeMode.APPEND) -> 'ConfigurationBuilder':
        """
        Add a YAML configuration file.

        Args:
            path: Path to the YAML configuration file
            mode: How its queries combine with earlier sources
        """
        return self.add_source(YAMLConfigurationSource(path), mode)

    def add_yaml_string(self, text: str, mode: MergeMode = MergeMode.APPEND) -> 'ConfigurationBuilder':
        """Add YAML configuration text."""
        return self.add_source(YAMLStringConfigurationSource(text), mode)

    def add_document(self, document: dict, mode: MergeMode = MergeMode.APPEND) -> 'ConfigurationBuilder':
        """Add an already-parsed configuration document."""
        return self.add_source(DictConfigurationSource(document), mode)

    def build(self) -> ExporterConfig:
        """
        Load every source and fold them into one configuration.

        Returns:
            The combined configuration; the default configuration when no
            sources were added
        """
        if not self._sources:
            return ExporterConfig.load_config(None)

        (first, _), rest = self._sources[0], self._sources[1:]
        config = self._load(first)
        for source, mode in rest:
            other = self._load(source)
            if mode is MergeMode.REPLACE:
                config.replace(other)
            else:
                config.append(other)
            logger.info(f"Applied {source.describe()} ({mode.value}), {len(config.queries)} queries")
        return config

    @staticmethod
    def _load(source: ConfigurationSource) -> ExporterConfig:
        try:
            return ExporterConfig.load_config(source.load())
        except Exception as e:
            logger.error(f"Failed to load configuration from {source.describe()}: {e}")
            raise
