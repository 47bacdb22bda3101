"""Exception hierarchy of the icon search engine."""

from __future__ import annotations


class IconSearchError(Exception):
    """Base class for all errors raised by :mod:`icon_search`."""


class InputError(IconSearchError, ValueError):
    """Rejected search parameters (query, threshold or result limit)."""


class CatalogError(IconSearchError):
    """The icon catalog could not be loaded at startup."""


class SynonymLookupError(IconSearchError):
    """A synonym source failed for a single word."""

    def __init__(self, word: str, message: str = "") -> None:
        self.word = word
        super().__init__(message or f"synonym lookup failed for {word!r}")
