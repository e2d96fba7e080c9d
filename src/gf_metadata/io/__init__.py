"""Readers that turn on-disk and protobuf metadata into records."""

from .decoders import (
    axis_from_proto,
    designer_from_proto,
    family_from_proto,
    language_from_proto,
    read_designer,
    read_family,
    strip_undocumented_fields,
)
from .repository import FamilyScan, GoogleFontsRepository
from .tags import csv_values, parse_tag_metadata, parse_tagging, read_tag_metadata, read_tags

__all__ = [
    "FamilyScan",
    "GoogleFontsRepository",
    "axis_from_proto",
    "csv_values",
    "designer_from_proto",
    "family_from_proto",
    "language_from_proto",
    "parse_tag_metadata",
    "parse_tagging",
    "read_designer",
    "read_family",
    "read_tag_metadata",
    "read_tags",
    "strip_undocumented_fields",
]
