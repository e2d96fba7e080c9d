"""
Tag CSV Parsing
===============

Reads family taggings from ``tags/all/*.csv`` and tag bounds from
``tags/tags_metadata.csv`` in a google/fonts checkout.

Lines are loosely formatted CSV: values are separated by commas with
optional surrounding whitespace, and a value starting with a double quote
runs to the closing quote so it may contain commas, e.g.::

    Georama, "ital,wght@1,100", /quant/stroke_width_min, 16.97
"""

import logging
from pathlib import Path

from ..core.exceptions import TagParseError
from ..core.models import TagMetadata, Tagging

logger = logging.getLogger(__name__)

TAGS_DIR = Path("tags") / "all"
TAG_METADATA_FILE = Path("tags") / "tags_metadata.csv"


def csv_values(line: str) -> list[str]:
    """Split a tag CSV line into its values."""
    values = []
    rest = line.strip()
    while rest:
        if rest.startswith('"'):
            close = rest.find('"', 1)
            if close == -1:
                raise TagParseError(f"Unterminated quote in: {line!r}")
            values.append(rest[1:close])
            rest = rest[close + 1 :].lstrip()
            if rest.startswith(","):
                rest = rest[1:].lstrip()
            elif rest:
                raise TagParseError(f"Expected ',' after quoted value in: {line!r}")
            continue

        comma = rest.find(",")
        if comma == -1:
            values.append(rest.strip())
            break
        values.append(rest[:comma].strip())
        rest = rest[comma + 1 :].lstrip()
    return values


def _float(value: str, field: str, line: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise TagParseError(f"Invalid {field} {value!r} in: {line!r}") from None


def parse_tagging(line: str) -> Tagging:
    """Parse ``family, tag, value`` or ``family, loc, tag, value``."""
    values = csv_values(line)
    if len(values) == 3:
        family, tag, value = values
        loc = ""
    elif len(values) == 4:
        family, loc, tag, value = values
    else:
        raise TagParseError(f"Unparseable tag, expected 3 or 4 values: {line!r}")
    return Tagging(family=family, loc=loc, tag=tag, value=_float(value, "tag value", line))


def parse_tag_metadata(line: str) -> TagMetadata:
    """Parse ``tag, min, max, prompt_name``."""
    values = csv_values(line)
    if len(values) != 4:
        raise TagParseError(f"Unparseable tag metadata, wrong number of values: {line!r}")
    tag, low, high, prompt_name = values
    return TagMetadata(
        tag=tag,
        min_value=_float(low, "min value", line),
        max_value=_float(high, "max value", line),
        prompt_name=prompt_name,
    )


def _parse_file(path: Path, parse) -> list:
    results = []
    with open(path, encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                results.append(parse(line))
            except TagParseError as e:
                raise TagParseError(str(e), details={"file": str(path), "line": lineno}) from e
    return results


def read_tags(repo_dir: Path) -> list[Tagging]:
    """Read every tagging under ``tags/all``."""
    tag_dir = Path(repo_dir) / TAGS_DIR
    taggings: list[Tagging] = []
    for path in sorted(tag_dir.iterdir()):
        if path.suffix != ".csv":
            continue
        file_taggings = _parse_file(path, parse_tagging)
        logger.debug(f"Read {len(file_taggings)} taggings from {path.name}")
        taggings.extend(file_taggings)
    logger.info(f"Read {len(taggings)} taggings from {tag_dir}")
    return taggings


def read_tag_metadata(repo_dir: Path) -> list[TagMetadata]:
    """Read tag bounds and prompt names."""
    return _parse_file(Path(repo_dir) / TAG_METADATA_FILE, parse_tag_metadata)
