"""
Configuration sources for loading configuration documents.
"""

import yaml
from abc import ABC, abstractmethod
from typing import Dict, Any, Mapping, Optional, Union
from pathlib import Path

from ..infrastructure.exceptions import ConfigurationError, InvalidConfigurationValue


def _as_document(data: Any, origin: str) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise InvalidConfigurationValue(
            f"Configuration in {origin} must be a mapping, got {type(data).__name__}",
            value=data,
        )
    return dict(data)


class ConfigurationSource(ABC):
    """Abstract base class for configuration sources."""

    @abstractmethod
    def load(self) -> Dict[str, Any]:
        """Load the configuration document from the source."""
        pass

    @abstractmethod
    def describe(self) -> str:
        """Short description of the source for log and error messages."""
        pass


class YAMLConfigurationSource(ConfigurationSource):
    """YAML file configuration source."""

    def __init__(self, file_path: Union[str, Path]):
        self.file_path = Path(file_path)

    def load(self) -> Dict[str, Any]:
        """Load configuration from YAML file. An empty file is an empty document."""
        if not self.file_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {self.file_path}",
                "CONFIG_FILE_NOT_FOUND",
                {"file_path": str(self.file_path)}
            )

        try:
            with open(self.file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {self.file_path}",
                "INVALID_YAML",
                {"file_path": str(self.file_path), "yaml_error": str(e)},
                cause=e,
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f"Error reading configuration file: {self.file_path}",
                "CONFIG_READ_ERROR",
                {"file_path": str(self.file_path), "error": str(e)},
                cause=e,
            ) from e

        return _as_document(data, str(self.file_path))

    def describe(self) -> str:
        return str(self.file_path)


class YAMLStringConfigurationSource(ConfigurationSource):
    """YAML text configuration source, e.g. a document posted to the exporter."""

    def __init__(self, text: str, name: str = "<string>"):
        self.text = text
        self.name = name

    def load(self) -> Dict[str, Any]:
        try:
            data = yaml.safe_load(self.text)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration {self.name}",
                "INVALID_YAML",
                {"source": self.name, "yaml_error": str(e)},
                cause=e,
            ) from e
        return _as_document(data, self.name)

    def describe(self) -> str:
        return self.name


class DictConfigurationSource(ConfigurationSource):
    """Already-parsed configuration document."""

    def __init__(self, data: Optional[Mapping[str, Any]], name: str = "<dict>"):
        self.data = data
        self.name = name

    def load(self) -> Dict[str, Any]:
        return _as_document(self.data, self.name)

    def describe(self) -> str:
        return self.name
