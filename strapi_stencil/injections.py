from __future__ import annotations

from typing import Any, Callable, Dict, Optional

# (current, main, locale) -> entity
Injection = Callable[[Any, Dict[str, Any], str], Any]

_NOT_INHERITED = ('id', 'locale', 'localizations')


def identity_injector(current: Any, main: Dict[str, Any], locale: str) -> Any:
    return current


def injector_factory(inject: Optional[Injection] = None) -> Injection:
    """Return `inject` unchanged, or the identity injector if none is given."""
    if inject is None:
        return identity_injector
    return inject


def fill_from_main(current: Any, main: Dict[str, Any], locale: str) -> Any:
    """Copy fields a locale entry lacks (or holds as None) from the primary.

    Sibling localizations only carry their own shallow fields, so this lets
    them fall back to the primary locale's relations and components.
    """
    if not isinstance(current, dict) or not isinstance(main, dict):
        return current

    filled = dict(current)
    for key, value in main.items():
        if key in _NOT_INHERITED:
            continue
        if filled.get(key) is None:
            filled[key] = value
    return filled
