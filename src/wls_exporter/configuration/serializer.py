"""
Rendering of exporter configurations back into YAML documents.

The emitted document re-parses into a configuration equal to the one it was
produced from: keys keep their insertion order, selectors list their reserved
keys before their nested selectors, and attribute lists are written in flow
style (``values: [a, b]``) as they usually appear in hand-written files.
"""

from typing import TYPE_CHECKING, Any, Dict, List

import yaml

from .models import ConnectionSettings
from .selector import MBeanSelector

if TYPE_CHECKING:
    from .core import ExporterConfig


class _ConfigDumper(yaml.SafeDumper):
    """SafeDumper that writes scalar-only lists inline."""


def _represent_list(dumper: yaml.SafeDumper, data: List[Any]) -> yaml.Node:
    flow = all(not isinstance(item, (dict, list)) for item in data)
    return dumper.represent_sequence("tag:yaml.org,2002:seq", data, flow_style=flow)


_ConfigDumper.add_representer(list, _represent_list)


class ConfigSerializer:
    """Converts configurations and selector trees to plain documents and YAML text."""

    # Settings emitted even when they hold their default value
    ALWAYS_EMITTED = ("host", "port")

    @staticmethod
    def selector_to_document(selector: MBeanSelector) -> Dict[str, Any]:
        document: Dict[str, Any] = {}
        if selector.type is not None:
            document[MBeanSelector.TYPE] = selector.type
        if selector.prefix is not None:
            document[MBeanSelector.PREFIX] = selector.prefix
        if selector.key is not None:
            document[MBeanSelector.KEY] = selector.key
        if selector.values:
            document[MBeanSelector.VALUES] = list(selector.values)
        for name, nested in selector.nested_selectors.items():
            document[name] = ConfigSerializer.selector_to_document(nested)
        return document

    @staticmethod
    def to_document(config: "ExporterConfig") -> Dict[str, Any]:
        """
        Convert a configuration to the mapping ``load_config`` accepts.

        ``host`` and ``port`` are always present; the other settings only
        when they differ from their defaults; ``queries`` only when there
        are any.
        """
        settings = config.settings
        defaults = ConnectionSettings()
        document: Dict[str, Any] = {}

        for field_name in ConnectionSettings.model_fields:
            value = getattr(settings, field_name)
            key = ConnectionSettings.document_key(field_name)
            if key in ConfigSerializer.ALWAYS_EMITTED or value != getattr(defaults, field_name):
                document[key] = value

        queries = config.queries
        if queries:
            document["queries"] = [ConfigSerializer.selector_to_document(query) for query in queries]
        return document

    @staticmethod
    def dump(config: "ExporterConfig") -> str:
        """Render a configuration as YAML text, starting with a ``---`` marker."""
        return yaml.dump(
            ConfigSerializer.to_document(config),
            Dumper=_ConfigDumper,
            default_flow_style=False,
            explicit_start=True,
            sort_keys=False,
            allow_unicode=True,
            width=float("inf"),
        )
