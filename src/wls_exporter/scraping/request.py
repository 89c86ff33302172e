"""
Query bodies for the WebLogic RESTful management search endpoint.

A selector tree maps directly onto the search syntax: each level lists the
fields to return and the child collections to descend into, e.g.::

    {"links": [], "fields": [],
     "children": {"applicationRuntimes": {"links": [], "fields": ["name"], "children": {...}}}}
"""

from typing import Any, Dict, List

from ..configuration.selector import MBeanSelector

TYPE_FIELD = "type"


def request_fields(selector: MBeanSelector) -> List[str]:
    """Attributes to request at this level: the key and type filter first, then the values."""
    fields: List[str] = []
    if selector.key:
        fields.append(selector.key)
    if selector.type and TYPE_FIELD not in fields:
        fields.append(TYPE_FIELD)
    for value in selector.values:
        if value not in fields:
            fields.append(value)
    return fields


def reads_all_attributes(selector: MBeanSelector) -> bool:
    """A named leaf without values exports every numeric attribute it finds."""
    return selector.name is not None and not selector.values and not selector.nested_selectors


def build_query_request(selector: MBeanSelector) -> Dict[str, Any]:
    """
    Build the search request body for a selector tree.

    ``fields`` is left out for leaves that read all attributes, which makes
    the server return every field of those objects.
    """
    request: Dict[str, Any] = {"links": []}
    if not reads_all_attributes(selector):
        request["fields"] = request_fields(selector)
    request["children"] = {
        name: build_query_request(nested)
        for name, nested in selector.nested_selectors.items()
    }
    return request
