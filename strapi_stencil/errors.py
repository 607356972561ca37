from __future__ import annotations


class StencilError(ValueError):
    """Base class for malformed response data."""


class MissingEnvelopeError(StencilError):
    """An object expected to carry a `data` key does not have one."""


class MissingLocalizationsError(StencilError):
    """Localization requested on an entity without `localizations`."""


class MissingLocaleError(StencilError):
    """Localization requested on an entity without a `locale`."""
