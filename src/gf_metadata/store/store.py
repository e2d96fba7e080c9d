"""
Metadata Store
==============

Read-only, indexed access to decoded Google Fonts metadata. A store is built
once from a :class:`MetadataRecords` bundle; every index is computed at load
time so queries are dictionary lookups against the static corpus.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, overload

from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import (
    AxisRangeError,
    DanglingReferenceError,
    DuplicateKeyError,
    InvalidCategoryError,
    NotFoundError,
    RecordSchemaError,
)
from ..core.models import (
    AxisRecord,
    DesignerRecord,
    FamilyCategory,
    FamilyRecord,
    LanguageRecord,
    MetadataRecords,
    TagMetadata,
    Tagging,
)

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en_Latn"


class FamilyView(Sequence):
    """
    Lazy, restartable sequence of families in insertion order.

    Holds only family keys; records are looked up as the view is iterated.
    Every call to ``iter()`` starts from the beginning.
    """

    __slots__ = ("_keys", "_families")

    def __init__(self, keys: tuple[str, ...], families: Mapping[str, FamilyRecord]):
        self._keys = keys
        self._families = families

    @property
    def names(self) -> tuple[str, ...]:
        """Family names in the view."""
        return self._keys

    def __len__(self) -> int:
        return len(self._keys)

    @overload
    def __getitem__(self, index: int) -> FamilyRecord: ...

    @overload
    def __getitem__(self, index: slice) -> "FamilyView": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return FamilyView(self._keys[index], self._families)
        return self._families[self._keys[index]]

    def __iter__(self) -> Iterator[FamilyRecord]:
        for key in self._keys:
            yield self._families[key]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, FamilyRecord):
            return item.name in self._keys and self._families[item.name] == item
        return item in self._keys

    def __repr__(self) -> str:
        return f"FamilyView({list(self._keys)!r})"


def _index_unique(kind: str, records: Iterable[Any], key: str) -> dict[str, Any]:
    indexed: dict[str, Any] = {}
    for record in records:
        value = getattr(record, key)
        if value in indexed:
            raise DuplicateKeyError(kind, value)
        indexed[value] = record
    return indexed


def _freeze(index: Mapping[str, list[str]]) -> dict[str, tuple[str, ...]]:
    return {key: tuple(names) for key, names in index.items()}


class MetadataStore:
    """
    Typed, indexed lookup over family, language, designer and axis records.

    Use :meth:`load` to construct a store. The store never changes after
    construction, so one instance can be shared freely between readers.
    """

    def __init__(self, records: MetadataRecords, default_language: str = DEFAULT_LANGUAGE):
        self.default_language = default_language

        self._families: dict[str, FamilyRecord] = _index_unique("family", records.families, "name")
        self._languages: dict[str, LanguageRecord] = _index_unique(
            "language", records.languages, "id"
        )
        designers = _index_unique("designer", records.designers, "name")
        self._axes: dict[str, AxisRecord] = _index_unique("axis", records.axes, "tag")
        self._tag_metadata: dict[str, TagMetadata] = _index_unique(
            "tag metadata", records.tag_metadata, "tag"
        )

        self._validate_references(designers, records.taggings)

        self._by_category: dict[FamilyCategory, tuple[str, ...]] = {}
        self._by_tag: dict[str, tuple[str, ...]] = {}
        self._by_script: dict[str, tuple[str, ...]] = {}
        self._by_designer: dict[str, tuple[str, ...]] = {}
        self._by_font_file: dict[str, str] = {}
        self._taggings: dict[str, tuple[Tagging, ...]] = {}
        self._tag_values: dict[tuple[str, str, str], float] = {}

        self._build_indexes(records.taggings)

        self._designers: dict[str, DesignerRecord] = {
            name: designer.model_copy(update={"families": self._by_designer.get(name, ())})
            for name, designer in designers.items()
        }

        logger.info(
            f"MetadataStore loaded {len(self._families)} families, "
            f"{len(self._languages)} languages, {len(self._designers)} designers, "
            f"{len(self._axes)} axes"
        )

    @classmethod
    def load(
        cls,
        records: MetadataRecords | Mapping[str, Any],
        default_language: str = DEFAULT_LANGUAGE,
    ) -> "MetadataStore":
        """
        Build a store from decoded records.

        Args:
            records: A record bundle, or a mapping with the same keys
            default_language: Language returned when no better primary language is known

        Returns:
            A fully indexed store

        Raises:
            RecordSchemaError: If a mapping does not match the record schema
            DuplicateKeyError: If two records share a unique key
            ValidationError: If a cross-reference target was not loaded
        """
        if not isinstance(records, MetadataRecords):
            try:
                records = MetadataRecords.model_validate(records)
            except PydanticValidationError as e:
                raise RecordSchemaError(str(e)) from e
        return cls(records, default_language=default_language)

    def _validate_references(
        self, designers: Mapping[str, DesignerRecord], taggings: Iterable[Tagging]
    ) -> None:
        for family in self._families.values():
            for designer in family.designers:
                if designer not in designers:
                    raise DanglingReferenceError("family", family.name, "designer", designer)
            for language in family.languages:
                if language not in self._languages:
                    raise DanglingReferenceError("family", family.name, "language", language)
            if self._axes:
                for segment in family.axes:
                    axis = self._axes.get(segment.tag)
                    if axis is None:
                        raise DanglingReferenceError("family", family.name, "axis", segment.tag)
                    if not axis.contains(segment):
                        raise AxisRangeError(
                            family.name, segment.tag, segment.min_value, segment.max_value
                        )

        for tagging in taggings:
            if tagging.family not in self._families:
                raise DanglingReferenceError("tagging", tagging.tag, "family", tagging.family)

    def _build_indexes(self, taggings: Iterable[Tagging]) -> None:
        by_category: dict[FamilyCategory, list[str]] = defaultdict(list)
        tag_sets: dict[str, set[str]] = defaultdict(set)
        by_designer: dict[str, list[str]] = defaultdict(list)
        family_taggings: dict[str, list[Tagging]] = defaultdict(list)

        for tagging in taggings:
            tag_sets[tagging.family].add(tagging.tag)
            family_taggings[tagging.family].append(tagging)
            self._tag_values[(tagging.family, tagging.tag, tagging.loc)] = tagging.value

        by_tag: dict[str, list[str]] = defaultdict(list)
        by_script: dict[str, list[str]] = defaultdict(list)

        for name, family in self._families.items():
            by_category[family.category].append(name)

            for designer in dict.fromkeys(family.designers):
                by_designer[designer].append(name)

            for tag in sorted(family.tags | tag_sets.get(name, set())):
                by_tag[tag].append(name)

            scripts = set(family.script_set)
            for language_id in family.languages:
                script = self._languages[language_id].script
                if script:
                    scripts.add(script)
            for script in sorted(scripts):
                by_script[script].append(name)

            for font in family.fonts:
                owner = self._by_font_file.setdefault(font.filename, name)
                if owner != name:
                    logger.warning(
                        f"Font file {font.filename} is listed by both {owner} and {name}; "
                        f"keeping {owner}"
                    )

        self._by_category = _freeze(by_category)
        self._by_tag = _freeze(by_tag)
        self._by_script = _freeze(by_script)
        self._by_designer = _freeze(by_designer)
        self._taggings = {name: tuple(items) for name, items in family_taggings.items()}

        logger.debug(
            f"Indexed {len(self._by_category)} categories, {len(self._by_tag)} tags, "
            f"{len(self._by_script)} scripts, {len(self._by_font_file)} font files"
        )

    def _view(self, keys: tuple[str, ...]) -> FamilyView:
        return FamilyView(keys, self._families)

    # Lookups

    def get_family(self, name: str) -> FamilyRecord:
        """Get a family by name."""
        try:
            return self._families[name]
        except KeyError:
            raise NotFoundError("family", name) from None

    def get_language(self, tag: str) -> LanguageRecord:
        """Get a language by its tag, e.g. ``en_Latn``."""
        try:
            return self._languages[tag]
        except KeyError:
            raise NotFoundError("language", tag) from None

    def get_designer(self, name: str) -> DesignerRecord:
        """Get a designer by name, with its family back-references filled in."""
        try:
            return self._designers[name]
        except KeyError:
            raise NotFoundError("designer", name) from None

    def get_axis(self, tag: str) -> AxisRecord:
        """Get a registered axis by tag."""
        try:
            return self._axes[tag]
        except KeyError:
            raise NotFoundError("axis", tag) from None

    def get_tag_metadata(self, tag: str) -> TagMetadata:
        """Get value bounds and the friendly name for a tag."""
        try:
            return self._tag_metadata[tag]
        except KeyError:
            raise NotFoundError("tag metadata", tag) from None

    def family_for_font(self, filename: str) -> FamilyRecord:
        """Get the family that lists a font file."""
        try:
            return self._families[self._by_font_file[filename]]
        except KeyError:
            raise NotFoundError("font file", filename) from None

    # Filters

    def families_by_category(self, category: FamilyCategory | str) -> FamilyView:
        """Families in a category, in insertion order."""
        try:
            category = FamilyCategory.parse(category)
        except ValueError as e:
            raise InvalidCategoryError(str(category)) from e
        return self._view(self._by_category.get(category, ()))

    def families_by_tag(self, tag: str) -> FamilyView:
        """Families carrying a tag, either declared or from taggings."""
        return self._view(self._by_tag.get(tag, ()))

    def families_by_script(self, script: str) -> FamilyView:
        """Families supporting a script, e.g. ``Latn``."""
        return self._view(self._by_script.get(script, ()))

    def families_by_designer(self, name: str) -> FamilyView:
        """Families credited to a designer."""
        return self._view(self._by_designer.get(name, ()))

    # Collections

    def families(self) -> FamilyView:
        return self._view(tuple(self._families))

    def languages(self) -> tuple[LanguageRecord, ...]:
        return tuple(self._languages.values())

    def designers(self) -> tuple[DesignerRecord, ...]:
        return tuple(self._designers.values())

    def axes(self) -> tuple[AxisRecord, ...]:
        return tuple(self._axes.values())

    def categories(self) -> tuple[FamilyCategory, ...]:
        return tuple(self._by_category)

    def tags(self) -> tuple[str, ...]:
        return tuple(sorted(self._by_tag))

    def scripts(self) -> tuple[str, ...]:
        return tuple(sorted(self._by_script))

    # Tags

    def taggings_for(self, family_name: str) -> tuple[Tagging, ...]:
        """Taggings recorded for a family."""
        if family_name not in self._families:
            raise NotFoundError("family", family_name)
        return self._taggings.get(family_name, ())

    def tag_value(self, family_name: str, tag: str, loc: str = "") -> float:
        """Value of a tag for a family at a designspace location."""
        try:
            return self._tag_values[(family_name, tag, loc)]
        except KeyError:
            location = f"@{loc}" if loc else ""
            raise NotFoundError("tagging", f"{family_name}{location} {tag}") from None

    # Languages

    def primary_language(self, family: FamilyRecord | str) -> LanguageRecord:
        """
        Best guess at the primary language of a family.

        Meant as a reasonable choice for rendering sample text, not an
        authoritative mapping. Tries the declared primary language, then the
        most populous language written in the primary script, then the
        default language.
        """
        if isinstance(family, str):
            family = self.get_family(family)

        if family.primary_language:
            language = self._languages.get(family.primary_language)
            if language is not None:
                return language
            logger.warning(
                f"{family.name} specifies invalid primary_language {family.primary_language}"
            )

        if family.primary_script:
            best = None
            for language in self._languages.values():
                if language.script != family.primary_script:
                    continue
                # Ties go to the language loaded last
                if best is None or language.population >= best.population:
                    best = language
            if best is not None:
                return best
            logger.warning(
                f"{family.name} specifies a primary_script that matches no languages "
                f"{family.primary_script}"
            )

        return self.get_language(self.default_language)

    # Introspection

    def __len__(self) -> int:
        return len(self._families)

    def __contains__(self, name: object) -> bool:
        return name in self._families

    def stats(self) -> dict[str, int]:
        """Get record counts."""
        return {
            "families": len(self._families),
            "languages": len(self._languages),
            "designers": len(self._designers),
            "axes": len(self._axes),
            "taggings": sum(len(items) for items in self._taggings.values()),
            "tags": len(self._by_tag),
            "scripts": len(self._by_script),
            "font_files": len(self._by_font_file),
        }


def load(
    records: MetadataRecords | Mapping[str, Any], default_language: str = DEFAULT_LANGUAGE
) -> MetadataStore:
    """Build a :class:`MetadataStore` from decoded records."""
    return MetadataStore.load(records, default_language=default_language)
