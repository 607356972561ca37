from __future__ import annotations

import math
from enum import Enum
from typing import Any, Mapping

# Marks a key that is absent, as opposed to present with a None value.
MISSING = object()


class FieldKind(Enum):
    PROPERTY = "property"
    COMPONENT = "component"
    NULL_RELATION = "null_relation"
    RELATION = "relation"


def _is_truthy(value: Any) -> bool:
    """Truthiness as the content API's clients see it.

    Empty lists and dicts count as truthy; None, False, 0, NaN and "" do not.
    """
    if value is MISSING or value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ''
    return True


def _field(container: Mapping[str, Any], key: str) -> Any:
    return container.get(key, MISSING)


def _data_of(value: Any) -> Any:
    if isinstance(value, dict):
        return value.get('data', MISSING)
    return MISSING


def is_property(container: Mapping[str, Any], key: str) -> bool:
    """True if the field is a plain value such as a number, string or null."""
    value = _field(container, key)
    return not isinstance(value, (dict, list))


def is_component(container: Mapping[str, Any], key: str) -> bool:
    """True if the field is a component.

    Components are embedded values that, unlike relations, carry no `data`
    wrapper. Lists are always treated as components.
    """
    value = _field(container, key)
    if isinstance(value, list):
        return True
    if isinstance(value, dict):
        data = _data_of(value)
        return not _is_truthy(data) and data is not None
    return False


def is_null(container: Mapping[str, Any], key: str) -> bool:
    """True if the field is a relation whose `data` is explicitly null."""
    value = _field(container, key)
    return isinstance(value, dict) and 'data' in value and value['data'] is None


def classify_field(container: Mapping[str, Any], key: str) -> FieldKind:
    # Order matters: an empty component must not be read as a null relation.
    if is_property(container, key):
        return FieldKind.PROPERTY
    if is_component(container, key):
        return FieldKind.COMPONENT
    if is_null(container, key):
        return FieldKind.NULL_RELATION
    return FieldKind.RELATION
