"""Indexed, read-only metadata store."""

from .holder import StoreHolder
from .selection import exemplar, score_font, select_font
from .store import DEFAULT_LANGUAGE, FamilyView, MetadataStore, load

__all__ = [
    "DEFAULT_LANGUAGE",
    "FamilyView",
    "MetadataStore",
    "StoreHolder",
    "exemplar",
    "load",
    "score_font",
    "select_font",
]
