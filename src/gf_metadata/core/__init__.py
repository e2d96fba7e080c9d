"""Core records, configuration and errors."""

from .config import MetadataConfig, load_config_from_yaml
from .exceptions import (
    ConfigurationError,
    DanglingReferenceError,
    DuplicateKeyError,
    GFMetadataError,
    InvalidCategoryError,
    NotFoundError,
    ParseError,
    RecordSchemaError,
    ValidationError,
)
from .models import (
    AxisFallback,
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

__all__ = [
    "AxisFallback",
    "AxisRecord",
    "AxisSegment",
    "ConfigurationError",
    "DanglingReferenceError",
    "DesignerRecord",
    "DuplicateKeyError",
    "FamilyCategory",
    "FamilyRecord",
    "FontRecord",
    "FontStyle",
    "GFMetadataError",
    "InvalidCategoryError",
    "LanguageRecord",
    "MetadataConfig",
    "MetadataRecords",
    "NotFoundError",
    "ParseError",
    "RecordSchemaError",
    "TagMetadata",
    "Tagging",
    "ValidationError",
    "load_config_from_yaml",
]
