"""
Coercion of loosely typed document values into configuration field types.
"""

import re
from typing import Any, List

from ..infrastructure.exceptions import InvalidConfigurationValue

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def coerce_int(raw_value: Any, field_name: str) -> int:
    """
    Convert a document value to an integer.

    Accepts native integers and strings made of an optional sign and digits,
    e.g. ``7001`` or ``"7001"``. Booleans are rejected even though ``bool``
    is an ``int`` subclass, since ``port: yes`` is almost certainly a typo.

    Raises:
        InvalidConfigurationValue: If the value is not an integer or a
            parseable integer string.
    """
    if isinstance(raw_value, int) and not isinstance(raw_value, bool):
        return raw_value

    if isinstance(raw_value, str):
        text = raw_value.strip()
        if _INTEGER_PATTERN.match(text):
            return int(text)

    raise InvalidConfigurationValue(
        f"Value for '{field_name}' must be an integer, got {raw_value!r}",
        field_name=field_name,
        value=raw_value,
    )


def coerce_string(raw_value: Any, field_name: str) -> str:
    """Convert a scalar document value to text."""
    if isinstance(raw_value, str):
        return raw_value
    if _is_scalar(raw_value):
        return str(raw_value)

    raise InvalidConfigurationValue(
        f"Value for '{field_name}' must be a scalar, got {type(raw_value).__name__}",
        field_name=field_name,
        value=raw_value,
    )


def coerce_string_list(raw_value: Any, field_name: str) -> List[str]:
    """
    Convert a document sequence to a list of unique strings.

    Duplicates are dropped, keeping the first occurrence.
    """
    if raw_value is None:
        return []
    if not isinstance(raw_value, (list, tuple)):
        raise InvalidConfigurationValue(
            f"Value for '{field_name}' must be a list, got {type(raw_value).__name__}",
            field_name=field_name,
            value=raw_value,
        )

    result: List[str] = []
    for item in raw_value:
        text = coerce_string(item, field_name)
        if text not in result:
            result.append(text)
    return result
