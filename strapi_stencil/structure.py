from __future__ import annotations

from typing import Any


def structure(obj: Any, is_component: bool = False) -> Any:
    """Strip the `{id, attributes}` wrapper of an entity.

    Components have no wrapper, so they are only shallow-copied. Non-container
    component values (e.g. items of a JSON list field) are returned as-is.
    """
    if is_component:
        if isinstance(obj, dict):
            return dict(obj)
        if isinstance(obj, list):
            return list(obj)
        return obj

    if not isinstance(obj, dict):
        return {'id': None}

    record = {'id': obj.get('id')}
    attributes = obj.get('attributes')
    if isinstance(attributes, dict):
        record.update(attributes)
    return record
