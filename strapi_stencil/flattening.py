from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

from .classify import FieldKind, classify_field
from .errors import MissingEnvelopeError
from .structure import structure

logger = logging.getLogger(__name__)


def flatten(envelope: Any, is_component: bool = False) -> Any:
    """Flatten a `{data: ...}` envelope into plain records.

    Returns a list when `data` is a list, None when `data` is null and a single
    record otherwise. Nested relations and components are flattened
    recursively; the input is never modified.
    """
    if not isinstance(envelope, dict) or 'data' not in envelope:
        raise MissingEnvelopeError("Expected an object with a 'data' key.")

    data = envelope['data']
    if isinstance(data, list):
        return [reformat_entity(item, is_component) for item in data]
    return reformat_entity(data, is_component)


def reformat_entity(entity: Any, is_component: bool = False) -> Any:
    """Structure one entity (or component) and flatten each of its fields.

    Usually called through `flatten`, which passes `is_component=True` when
    the value came from a component field rather than a relation.
    """
    if entity is None:
        return None

    record = structure(entity, is_component)
    if isinstance(record, list):
        # Nested list inside a component list, e.g. a repeatable JSON field.
        return [reformat_entity(item, True) for item in record]
    if not isinstance(record, dict):
        return record

    for key in list(record.keys()):
        kind = classify_field(record, key)
        if kind is FieldKind.PROPERTY:
            continue
        if kind is FieldKind.NULL_RELATION:
            record[key] = None
            continue
        try:
            if kind is FieldKind.COMPONENT:
                record[key] = flatten({'data': record[key]}, True)
            else:
                record[key] = flatten(record[key])
        except MissingEnvelopeError as exc:
            raise MissingEnvelopeError(f"{key}: {exc}") from exc
    return record


def flatten_many(envelopes: Iterable[Any]) -> List[Any]:
    """Flatten several envelopes, e.g. the pages of a paginated collection."""
    results: List[Any] = []
    for index, envelope in enumerate(envelopes):
        try:
            results.append(flatten(envelope))
        except MissingEnvelopeError as exc:
            raise MissingEnvelopeError(f"[{index}] {exc}") from exc
    logger.debug("Flattened %d envelopes", len(results))
    return results


def flatten_pages(envelopes: Iterable[Any]) -> List[Dict[str, Any]]:
    """Flatten paginated collection envelopes into one list of records."""
    records: List[Dict[str, Any]] = []
    for result in flatten_many(envelopes):
        if isinstance(result, list):
            records.extend(result)
        elif result is not None:
            records.append(result)
    return records
