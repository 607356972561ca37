from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .errors import MissingLocaleError, MissingLocalizationsError
from .flattening import flatten
from .injections import Injection, injector_factory

logger = logging.getLogger(__name__)


def localize(entity: Dict[str, Any], inject: Optional[Injection] = None) -> Dict[str, Any]:
    """Build a locale -> entity map from a flattened, localized entity.

    The entity's own locale maps to the entity itself (minus its
    `localizations` field); every entry of `localizations` maps to a shallow
    copy of that sibling. `inject(current, main, locale)` runs once per
    locale, always receiving the untouched primary entity as `main`.
    """
    localizations = entity.get('localizations') if isinstance(entity, dict) else None
    if not isinstance(localizations, list) or not localizations:
        raise MissingLocalizationsError("Entity has no 'localizations' to consolidate.")

    primary_locale = entity.get('locale')
    if not primary_locale:
        raise MissingLocaleError("Entity has no 'locale' field.")

    locales: Dict[str, Any] = {primary_locale: entity}
    for sibling in localizations:
        sibling_locale = sibling.get('locale') if isinstance(sibling, dict) else None
        if not sibling_locale:
            raise MissingLocaleError(
                f"Localization of '{primary_locale}' entity {entity.get('id')!r} has no 'locale' field."
            )
        locales[sibling_locale] = dict(sibling)

    injector = injector_factory(inject)
    for locale in list(locales.keys()):
        locales[locale] = injector(locales[locale], entity, locale)

    primary = locales[primary_locale]
    if isinstance(primary, dict):
        locales[primary_locale] = {k: v for k, v in primary.items() if k != 'localizations'}

    logger.debug("Localized entity %r into locales %s", entity.get('id'), sorted(locales))
    return locales


def localize_single(response: Dict[str, Any], inject: Optional[Injection] = None) -> Dict[str, Any]:
    """Flatten a single-entity response, then localize it."""
    return localize(flatten(response), inject)


def localize_array(response: Dict[str, Any], inject: Optional[Injection] = None) -> List[Dict[str, Any]]:
    """Flatten a collection response and localize every entity separately.

    Siblings are never merged across entities; a single-entity response is
    treated as a collection of one.
    """
    entities = flatten(response)
    if not isinstance(entities, list):
        entities = [entities]
    return [localize(entity, inject) for entity in entities]
