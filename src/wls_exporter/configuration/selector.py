"""
MBean selector trees.

A selector describes one level of the managed-object hierarchy: which
attributes to read, which attribute identifies each instance, and the prefix
used to name the resulting metrics. Any key of a selector mapping that is not
reserved names a nested selector, so a document such as::

    applicationRuntimes:
      key: name
      componentRuntimes:
        prefix: webapp_config_
        key: name
        values: [openSessionsCurrentCount]

parses into ``applicationRuntimes -> componentRuntimes``.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..infrastructure.exceptions import InvalidConfigurationValue
from .coercion import coerce_string, coerce_string_list


@dataclass(eq=False)
class MBeanSelector:
    """One node of a selector tree. Owns its nested selectors exclusively."""

    TYPE = "type"
    PREFIX = "prefix"
    KEY = "key"
    VALUES = "values"
    RESERVED_KEYS = (TYPE, PREFIX, KEY, VALUES)

    name: Optional[str] = None
    type: Optional[str] = None
    prefix: Optional[str] = None
    key: Optional[str] = None
    values: List[str] = field(default_factory=list)
    nested_selectors: Dict[str, "MBeanSelector"] = field(default_factory=dict)

    @classmethod
    def from_document(cls, document: Optional[Mapping[str, Any]], name: Optional[str] = None) -> "MBeanSelector":
        """Parse a selector mapping; see :func:`parse_selector`."""
        return parse_selector(document, name)

    @property
    def query_name(self) -> Optional[str]:
        """
        Name of the tree this selector represents.

        For a query root (an unnamed wrapper holding exactly one nested
        selector) this is the name of that nested selector.
        """
        if self.name is None and len(self.nested_selectors) == 1:
            return next(iter(self.nested_selectors))
        return self.name

    def is_empty(self) -> bool:
        return (
            self.type is None
            and self.prefix is None
            and self.key is None
            and not self.values
            and not self.nested_selectors
        )

    def copy(self) -> "MBeanSelector":
        """Deep copy of the whole subtree."""
        return copy.deepcopy(self)

    def _signature(self) -> Tuple[Any, ...]:
        return (
            self.name,
            self.type,
            self.prefix,
            self.key,
            tuple(self.values),
            tuple(self.nested_selectors.items()),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MBeanSelector):
            return NotImplemented
        return self._signature() == other._signature()

    __hash__ = None


def _describe(path: str, child: str) -> str:
    return f"{path}.{child}" if path else child


def parse_selector(
    document: Optional[Mapping[str, Any]],
    name: Optional[str] = None,
    path: str = "",
) -> MBeanSelector:
    """
    Build a selector from its document mapping.

    Reserved keys become the selector's own fields, every other key is parsed
    recursively as a nested selector, in document order. ``None`` or an empty
    mapping yields an empty selector.

    Raises:
        InvalidConfigurationValue: If the document, or any nested selector
            body, is not a mapping, or a reserved key holds the wrong kind of
            value.
    """
    path = path or (name or "")
    if document is None:
        return MBeanSelector(name=name)
    if not isinstance(document, Mapping):
        raise InvalidConfigurationValue(
            f"Selector '{path or '<root>'}' must be a mapping, got {type(document).__name__}",
            field_name=path or None,
            value=document,
        )

    selector = MBeanSelector(name=name)
    for raw_key, raw_value in document.items():
        key = coerce_string(raw_key, path or "<root>")
        key_path = _describe(path, key)

        if key == MBeanSelector.VALUES:
            selector.values = coerce_string_list(raw_value, key_path)
        elif key in MBeanSelector.RESERVED_KEYS:
            value = None if raw_value is None else coerce_string(raw_value, key_path)
            setattr(selector, key, value)
        else:
            selector.nested_selectors[key] = parse_selector(raw_value, key, key_path)

    return selector


def parse_query(entry: Any, index: int) -> MBeanSelector:
    """
    Parse one element of the ``queries`` list.

    The element must be a mapping with a single, non-reserved key. The result
    is an unnamed root selector whose only nested selector is that key.
    """
    field_name = f"queries[{index}]"
    if not isinstance(entry, Mapping):
        raise InvalidConfigurationValue(
            f"Entry {field_name} must be a mapping, got {type(entry).__name__}",
            field_name=field_name,
            value=entry,
        )
    if len(entry) != 1:
        raise InvalidConfigurationValue(
            f"Entry {field_name} must have exactly one top-level selector, found {len(entry)}",
            field_name=field_name,
            value=list(entry.keys()),
        )

    raw_key, body = next(iter(entry.items()))
    top_name = coerce_string(raw_key, field_name)
    if top_name in MBeanSelector.RESERVED_KEYS:
        raise InvalidConfigurationValue(
            f"Entry {field_name} must name a selector, not the reserved key '{top_name}'",
            field_name=field_name,
            value=top_name,
        )

    top = parse_selector(body, top_name, _describe(field_name, top_name))
    return MBeanSelector(nested_selectors={top_name: top})


def parse_queries(raw_queries: Any) -> List[MBeanSelector]:
    """Parse the ``queries`` list, preserving document order."""
    if raw_queries is None:
        return []
    if not isinstance(raw_queries, (list, tuple)):
        raise InvalidConfigurationValue(
            f"'queries' must be a list, got {type(raw_queries).__name__}",
            field_name="queries",
            value=raw_queries,
        )
    return [parse_query(entry, index) for index, entry in enumerate(raw_queries)]
