"""Google Fonts Metadata
=====================

Typed, indexed access to Google Fonts family metadata.

Records decoded from the ``fonts_public``, ``languages_public``,
``designers`` and ``axes`` protobuf schemas are loaded once into a
read-only :class:`MetadataStore` that answers lookups by name and filters by
category, tag, script and designer.
"""

__version__ = "0.1.0"

from .core.config import MetadataConfig
from .core.exceptions import (
    DuplicateKeyError,
    GFMetadataError,
    NotFoundError,
    ValidationError,
)
from .core.models import (
    AxisRecord,
    AxisSegment,
    DesignerRecord,
    FamilyCategory,
    FamilyRecord,
    FontRecord,
    FontStyle,
    LanguageRecord,
    MetadataRecords,
    TagMetadata,
    Tagging,
)
from .io import GoogleFontsRepository
from .store import FamilyView, MetadataStore, StoreHolder, exemplar, load, select_font

__all__ = [
    "AxisRecord",
    "AxisSegment",
    "DesignerRecord",
    "DuplicateKeyError",
    "FamilyCategory",
    "FamilyRecord",
    "FamilyView",
    "FontRecord",
    "FontStyle",
    "GFMetadataError",
    "GoogleFontsRepository",
    "LanguageRecord",
    "MetadataConfig",
    "MetadataRecords",
    "MetadataStore",
    "NotFoundError",
    "StoreHolder",
    "TagMetadata",
    "Tagging",
    "ValidationError",
    "exemplar",
    "load",
    "select_font",
]
