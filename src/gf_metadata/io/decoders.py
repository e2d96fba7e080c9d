"""
Protobuf Decoders
=================

Adapters from protobuf-generated messages to metadata records.

The ``*_from_proto`` functions read fields by name only, so they accept the
generated classes shipped by ``gftools``, ``gflanguages`` and
``axisregistry`` as well as any object with the same attributes. Unset
proto2 string fields read as empty strings and are mapped to ``None``.
"""

import logging
import re
from pathlib import Path
from typing import Any

from ..core.exceptions import DecoderNotAvailableError, ProtoParseError
from ..core.models import (
    AxisFallback,
    AxisRecord,
    AxisSegment,
    DesignerRecord,
    FamilyRecord,
    FontRecord,
    LanguageRecord,
)

logger = logging.getLogger(__name__)

# METADATA.pb files may carry a `position { ... }` block the public schema lacks
_UNDOCUMENTED_FIELD = re.compile(r"position\s+\{[^}]*\}", re.MULTILINE)

# Fields tried, in order, for a language's sample text
_SAMPLE_TEXT_FIELDS = ("tester", "styles", "masthead_full", "specimen_48")


def _text(msg: Any, field: str) -> str | None:
    value = getattr(msg, field, None)
    return value or None


def _repeated(msg: Any, field: str) -> tuple:
    return tuple(getattr(msg, field, None) or ())


def split_designers(designer: str | None) -> tuple[str, ...]:
    """Split a ``designer`` field such as ``"A, B"`` into names."""
    if not designer:
        return ()
    return tuple(name.strip() for name in designer.split(",") if name.strip())


def _first_category(msg: Any) -> str | None:
    category = getattr(msg, "category", None)
    if isinstance(category, str):
        return category or None
    for value in category or ():
        if value:
            return value
    return None


def font_from_proto(msg: Any) -> FontRecord:
    """Convert a ``FontProto``."""
    return FontRecord(
        name=msg.name,
        style=_text(msg, "style") or "normal",
        weight=getattr(msg, "weight", 0) or 400,
        filename=msg.filename,
        post_script_name=_text(msg, "post_script_name"),
        full_name=_text(msg, "full_name"),
    )


def axis_segment_from_proto(msg: Any) -> AxisSegment:
    """Convert an ``AxisSegmentProto``."""
    return AxisSegment(tag=msg.tag, min_value=msg.min_value, max_value=msg.max_value)


def family_from_proto(msg: Any, source_path: Path | None = None) -> FamilyRecord:
    """
    Convert a ``FamilyProto``.

    Args:
        msg: Decoded family message
        source_path: Path of the METADATA.pb it was read from

    Returns:
        Family record
    """
    primary_script = _text(msg, "primary_script")
    return FamilyRecord(
        name=msg.name,
        display_name=_text(msg, "display_name"),
        category=_first_category(msg),
        designers=split_designers(_text(msg, "designer")),
        license=_text(msg, "license"),
        date_added=_text(msg, "date_added"),
        subsets=_repeated(msg, "subsets"),
        scripts=frozenset({primary_script}) if primary_script else frozenset(),
        primary_script=primary_script,
        primary_language=_text(msg, "primary_language"),
        languages=_repeated(msg, "languages"),
        axes=tuple(axis_segment_from_proto(a) for a in _repeated(msg, "axes")),
        fonts=tuple(font_from_proto(f) for f in _repeated(msg, "fonts")),
        source_path=source_path,
    )


def _sample_text(msg: Any) -> str | None:
    sample = getattr(msg, "sample_text", None)
    if sample is None:
        return None
    for field in _SAMPLE_TEXT_FIELDS:
        value = _text(sample, field)
        if value:
            return value
    return None


def language_from_proto(msg: Any) -> LanguageRecord:
    """Convert a ``LanguageProto``."""
    return LanguageRecord(
        id=msg.id,
        language=_text(msg, "language"),
        script=_text(msg, "script"),
        name=_text(msg, "name"),
        population=getattr(msg, "population", 0) or 0,
        sample_text=_sample_text(msg),
        regions=_repeated(msg, "region"),
    )


def designer_from_proto(msg: Any) -> DesignerRecord:
    """Convert a ``DesignerInfoProto``."""
    avatar = getattr(msg, "avatar", None)
    return DesignerRecord(
        name=msg.designer,
        bio=_text(msg, "bio"),
        link=_text(msg, "link"),
        avatar_file=_text(avatar, "file_name") if avatar is not None else None,
    )


def axis_from_proto(msg: Any) -> AxisRecord:
    """Convert an axis registry ``AxisProto``."""
    return AxisRecord(
        tag=msg.tag,
        display_name=_text(msg, "display_name"),
        min_value=msg.min_value,
        default_value=msg.default_value,
        max_value=msg.max_value,
        precision=getattr(msg, "precision", 0) or 0,
        fallbacks=tuple(
            AxisFallback(name=f.name, value=f.value) for f in _repeated(msg, "fallback")
        ),
        description=_text(msg, "description"),
    )


def strip_undocumented_fields(text: str) -> str:
    """Remove fields the published schema does not define."""
    if "position" not in text:
        return text
    return _UNDOCUMENTED_FIELD.sub("", text)


def _parse_text(text: str, message: Any, source: str) -> Any:
    from google.protobuf import text_format

    try:
        text_format.Parse(text, message)
    except text_format.ParseError as e:
        raise ProtoParseError(source, str(e)) from e
    return message


def read_family_proto(text: str, source: str = "<string>") -> Any:
    """Parse METADATA.pb text into a ``gftools`` ``FamilyProto``."""
    try:
        from gftools.fonts_public_pb2 import FamilyProto
    except ImportError as e:
        raise DecoderNotAvailableError("gftools.fonts_public_pb2", "gftools") from e

    return _parse_text(strip_undocumented_fields(text), FamilyProto(), source)


def read_family(text: str, source_path: Path | None = None) -> FamilyRecord:
    """Parse METADATA.pb text into a family record."""
    source = str(source_path) if source_path else "<string>"
    return family_from_proto(read_family_proto(text, source), source_path=source_path)


def read_designer(text: str, source: str = "<string>") -> DesignerRecord:
    """Parse a designer ``info.pb`` into a designer record."""
    try:
        from gftools.designers_pb2 import DesignerInfoProto
    except ImportError as e:
        raise DecoderNotAvailableError("gftools.designers_pb2", "gftools") from e

    return designer_from_proto(_parse_text(text, DesignerInfoProto(), source))
