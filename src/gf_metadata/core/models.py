"""Pydantic models for decoded font metadata records."""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .exceptions import (
    AxisDefaultOutOfRangeError,
    InvalidAxisRangeError,
    UnknownCategoryValueError,
)


def normalize_category(value: str) -> str:
    """Normalize a category spelling such as ``"Sans Serif"`` to ``"SANS_SERIF"``."""
    return value.strip().upper().replace("-", "_").replace(" ", "_")


class FamilyCategory(str, Enum):
    """Google Fonts family classification."""

    SANS_SERIF = "SANS_SERIF"
    SERIF = "SERIF"
    DISPLAY = "DISPLAY"
    HANDWRITING = "HANDWRITING"
    MONOSPACE = "MONOSPACE"

    @classmethod
    def parse(cls, value: "str | FamilyCategory") -> "FamilyCategory":
        """Parse a category name, accepting loose spellings."""
        if isinstance(value, cls):
            return value
        try:
            return cls(normalize_category(value))
        except ValueError:
            raise UnknownCategoryValueError(value) from None


class FontStyle(str, Enum):
    """Font style preference for font selection."""

    NORMAL = "normal"
    ITALIC = "italic"


class AxisSegment(BaseModel):
    """A variable font axis range as declared by a family."""

    model_config = ConfigDict(frozen=True)

    tag: str = Field(..., min_length=4, max_length=4, description="Axis tag, e.g. wght")
    min_value: float
    max_value: float

    @field_validator("max_value")
    @classmethod
    def max_not_below_min(cls, v: float, info: ValidationInfo) -> float:
        if info.data and "min_value" in info.data and v < info.data["min_value"]:
            raise InvalidAxisRangeError(info.data["min_value"], v)
        return v


class FontRecord(BaseModel):
    """A single font file belonging to a family."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    style: str = "normal"
    weight: int = Field(400, ge=1, le=1000)
    filename: str = Field(..., min_length=1)
    post_script_name: str | None = None
    full_name: str | None = None

    @property
    def is_variable(self) -> bool:
        """Whether the file is a variable font, e.g. ``Roboto[wdth,wght].ttf``."""
        return "]." in self.filename


class FamilyRecord(BaseModel):
    """Decoded metadata for a font family."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Family name, the unique key")
    display_name: str | None = None
    category: FamilyCategory
    designers: tuple[str, ...] = Field(default_factory=tuple)
    license: str | None = None
    date_added: str | None = None
    subsets: tuple[str, ...] = Field(default_factory=tuple)
    scripts: frozenset[str] = Field(default_factory=frozenset)
    primary_script: str | None = None
    primary_language: str | None = None
    languages: tuple[str, ...] = Field(default_factory=tuple)
    tags: frozenset[str] = Field(default_factory=frozenset)
    axes: tuple[AxisSegment, ...] = Field(default_factory=tuple)
    fonts: tuple[FontRecord, ...] = Field(default_factory=tuple)
    source_path: Path | None = Field(None, description="Path of the METADATA.pb file")

    @field_validator("category", mode="before")
    @classmethod
    def parse_category(cls, v: Any) -> Any:
        if isinstance(v, str):
            return normalize_category(v)
        return v

    @property
    def script_set(self) -> frozenset[str]:
        """Scripts declared by the family, including the primary script."""
        if self.primary_script:
            return self.scripts | {self.primary_script}
        return self.scripts

    def __str__(self) -> str:
        return f"{self.name} ({self.category.value})"


class LanguageRecord(BaseModel):
    """A supported language in a given script."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Language tag, e.g. en_Latn")
    language: str | None = None
    script: str | None = None
    name: str | None = None
    population: int = Field(0, ge=0)
    sample_text: str | None = None
    regions: tuple[str, ...] = Field(default_factory=tuple)


class DesignerRecord(BaseModel):
    """A person or foundry credited with designing families."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    bio: str | None = None
    link: str | None = None
    avatar_file: str | None = None
    families: tuple[str, ...] = Field(
        default_factory=tuple, description="Family names, filled in by the store"
    )


class AxisFallback(BaseModel):
    """A named position on a registered axis."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: float


class AxisRecord(BaseModel):
    """An axis from the Google Fonts axis registry."""

    model_config = ConfigDict(frozen=True)

    tag: str = Field(..., min_length=4, max_length=4)
    display_name: str | None = None
    min_value: float
    default_value: float
    max_value: float
    precision: int = 0
    fallbacks: tuple[AxisFallback, ...] = Field(default_factory=tuple)
    description: str | None = None

    @field_validator("max_value")
    @classmethod
    def bounds_contain_default(cls, v: float, info: ValidationInfo) -> float:
        data = info.data or {}
        low = data.get("min_value")
        default = data.get("default_value")
        if low is not None and v < low:
            raise InvalidAxisRangeError(low, v)
        if low is not None and default is not None and not low <= default <= v:
            raise AxisDefaultOutOfRangeError(default, low, v)
        return v

    def contains(self, segment: AxisSegment) -> bool:
        """Whether a family axis segment lies within this axis."""
        return self.min_value <= segment.min_value and segment.max_value <= self.max_value


class Tagging(BaseModel):
    """A numeric tag value for a family, optionally at a designspace location.

    ``loc`` uses the fonts web API form, e.g. ``ital,wght@1,700`` is the
    italic style at weight 700.
    """

    model_config = ConfigDict(frozen=True)

    family: str
    loc: str = ""
    tag: str
    value: float


class TagMetadata(BaseModel):
    """Value bounds and a friendly name for a tag."""

    model_config = ConfigDict(frozen=True)

    tag: str
    min_value: float
    max_value: float
    prompt_name: str


class MetadataRecords(BaseModel):
    """Decoded records handed to the store in a single bundle."""

    model_config = ConfigDict(frozen=True)

    families: tuple[FamilyRecord, ...] = Field(default_factory=tuple)
    languages: tuple[LanguageRecord, ...] = Field(default_factory=tuple)
    designers: tuple[DesignerRecord, ...] = Field(default_factory=tuple)
    axes: tuple[AxisRecord, ...] = Field(default_factory=tuple)
    taggings: tuple[Tagging, ...] = Field(default_factory=tuple)
    tag_metadata: tuple[TagMetadata, ...] = Field(default_factory=tuple)
