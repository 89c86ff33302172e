"""
Interpretation of management server responses through a selector tree.

The response to a search request mirrors the request: each child collection
appears under its selector name, either as ``{"items": [...]}`` or as a
single object. Walking the response alongside the selector tree yields one
sample per exported numeric attribute, labelled by the key attributes of the
objects on the path to it.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Union

from ..configuration.selector import MBeanSelector
from .request import TYPE_FIELD, reads_all_attributes

logger = logging.getLogger(__name__)

Number = Union[int, float]


@dataclass(frozen=True)
class MetricSample:
    """A single scraped value."""
    name: str
    value: Number
    labels: Dict[str, str] = field(default_factory=dict)

    @property
    def qualified_name(self) -> str:
        """Metric name followed by its labels, e.g. ``servlet_invocations{app="a"}``."""
        if not self.labels:
            return self.name
        rendered = ",".join(f'{k}="{_escape_label_value(v)}"' for k, v in self.labels.items())
        return f"{self.name}{{{rendered}}}"


def _escape_label_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\"", "\\\"").replace("\n", "\\n")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _items(response: Any) -> List[Mapping[str, Any]]:
    if isinstance(response, Mapping):
        items = response.get("items")
        if isinstance(items, list):
            return [item for item in items if isinstance(item, Mapping)]
        return [response]
    logger.debug(f"Ignoring {type(response).__name__} response, expected an object")
    return []


class MetricsScraper:
    """
    Produces metric samples from a query response.

    Labels accumulate down the tree. When a nested level's key would reuse a
    label name already set by an outer level, the inner label is qualified
    with the selector name (``componentRuntimes_name``) so neither is lost.
    """

    def scrape(self, query: MBeanSelector, response: Mapping[str, Any]) -> Dict[str, Number]:
        """Scrape a response into a mapping of qualified metric name to value."""
        return {sample.qualified_name: sample.value for sample in self.collect(query, response)}

    def collect(self, query: MBeanSelector, response: Mapping[str, Any]) -> List[MetricSample]:
        """Scrape a response into a list of samples, in tree order."""
        return list(self._walk_children(query, response, {}))

    def _walk_children(
        self, selector: MBeanSelector, item: Mapping[str, Any], labels: Dict[str, str]
    ) -> Iterator[MetricSample]:
        for name, nested in selector.nested_selectors.items():
            child_response = item.get(name)
            if child_response is None:
                logger.debug(f"No '{name}' in response, skipping")
                continue
            for child in _items(child_response):
                yield from self._walk_item(nested, child, labels)

    def _walk_item(
        self, selector: MBeanSelector, item: Mapping[str, Any], labels: Dict[str, str]
    ) -> Iterator[MetricSample]:
        if selector.type and item.get(TYPE_FIELD) != selector.type:
            return

        item_labels = dict(labels)
        if selector.key:
            key_value = item.get(selector.key)
            if key_value is not None:
                label = selector.key
                if label in item_labels:
                    label = f"{selector.name}_{selector.key}"
                item_labels[label] = str(key_value)

        for attribute in self._exported_attributes(selector, item):
            value = item.get(attribute)
            if _is_number(value):
                yield MetricSample(f"{selector.prefix or ''}{attribute}", value, item_labels)

        yield from self._walk_children(selector, item, item_labels)

    @staticmethod
    def _exported_attributes(selector: MBeanSelector, item: Mapping[str, Any]) -> List[str]:
        if selector.values:
            return list(selector.values)
        if reads_all_attributes(selector):
            return [name for name in item if name != selector.key]
        return []
