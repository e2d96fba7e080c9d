"""
Google Fonts Repository Loader
==============================

Collects decoded records from a local checkout of the google/fonts
repository (the directory holding ``ofl/``, ``apache/``, ``ufl/``,
``catalog/`` and ``tags/``) and assembles the bundle a
:class:`~gf_metadata.store.MetadataStore` is built from.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from ..core.config import MetadataConfig
from ..core.exceptions import DecoderNotAvailableError, ParseError
from ..core.models import (
    AxisRecord,
    DesignerRecord,
    FamilyRecord,
    FontRecord,
    LanguageRecord,
    MetadataRecords,
    TagMetadata,
    Tagging,
)
from ..store.store import MetadataStore
from .decoders import axis_from_proto, language_from_proto, read_designer, read_family
from .tags import TAG_METADATA_FILE, TAGS_DIR, read_tag_metadata, read_tags

logger = logging.getLogger(__name__)

METADATA_FILENAME = "METADATA.pb"
DESIGNERS_DIR = Path("catalog") / "designers"


@dataclass
class FamilyScan:
    """Outcome of reading every METADATA.pb in a checkout."""

    families: list[FamilyRecord] = field(default_factory=list)
    failures: list[tuple[Path, Exception]] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.families)

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    @property
    def total(self) -> int:
        return self.success_count + self.failure_count


class GoogleFontsRepository:
    """
    A view of a google/fonts checkout.

    Construction does no I/O; files are read when the corresponding
    ``read_*`` method is called.
    """

    def __init__(
        self,
        repo_dir: Path,
        family_filter: str | re.Pattern | None = None,
        config: MetadataConfig | None = None,
    ):
        """
        Initialize repository view.

        Args:
            repo_dir: Root of the checkout
            family_filter: Regular expression searched for in METADATA.pb paths
            config: Loader settings; defaults are used if omitted
        """
        self.repo_dir = Path(repo_dir).expanduser()
        self.config = config or MetadataConfig(_env_file=None)
        if family_filter is None:
            family_filter = self.config.family_pattern
        if isinstance(family_filter, str):
            family_filter = re.compile(family_filter)
        self.family_filter: re.Pattern | None = family_filter

    @classmethod
    def from_config(cls, config: MetadataConfig) -> "GoogleFontsRepository":
        """Create a repository view from settings that name ``repo_dir``."""
        if config.repo_dir is None:
            raise ValueError("MetadataConfig.repo_dir is not set")
        return cls(config.repo_dir, config=config)

    def iter_family_files(self) -> list[Path]:
        """List METADATA.pb files, sorted, after applying the family filter."""
        paths = sorted(self.repo_dir.rglob(METADATA_FILENAME))
        if self.family_filter is not None:
            paths = [p for p in paths if self.family_filter.search(str(p))]
        return paths

    def read_families(self) -> FamilyScan:
        """Read every family, collecting per-file failures instead of stopping."""
        scan = FamilyScan()
        for path in self.iter_family_files():
            try:
                family = read_family(path.read_text(encoding="utf-8"), source_path=path)
            except DecoderNotAvailableError:
                raise
            except (ParseError, PydanticValidationError, OSError, UnicodeDecodeError) as e:
                logger.warning(f"Unable to read {path}: {e}")
                scan.failures.append((path, e))
                continue
            scan.families.append(family)

        logger.info(f"Read {scan.success_count}/{scan.total} families successfully")
        return scan

    def read_designers(self) -> list[DesignerRecord]:
        """Read designer profiles from ``catalog/designers/*/info.pb``."""
        designers_dir = self.repo_dir / DESIGNERS_DIR
        if not designers_dir.is_dir():
            logger.debug(f"No designer catalog at {designers_dir}")
            return []

        designers = []
        for info_path in sorted(designers_dir.glob("*/info.pb")):
            try:
                designer = read_designer(info_path.read_text(encoding="utf-8"), str(info_path))
                bio_path = info_path.with_name("bio.html")
                if designer.bio is None and bio_path.exists():
                    designer = designer.model_copy(
                        update={"bio": bio_path.read_text(encoding="utf-8").strip()}
                    )
            except DecoderNotAvailableError:
                raise
            except (ParseError, PydanticValidationError, OSError, UnicodeDecodeError) as e:
                logger.warning(f"Skipping designer {info_path}: {e}")
                continue
            designers.append(designer)
        logger.info(f"Read {len(designers)} designers")
        return designers

    def read_languages(self) -> list[LanguageRecord]:
        """Read the language data bundled with ``gflanguages``."""
        try:
            from gflanguages import LoadLanguages
        except ImportError as e:
            raise DecoderNotAvailableError("gflanguages", "gflanguages") from e

        return [language_from_proto(lang) for lang in LoadLanguages().values()]

    def read_axes(self) -> list[AxisRecord]:
        """Read the axis registry bundled with ``axisregistry``."""
        try:
            from axisregistry import AxisRegistry
        except ImportError as e:
            raise DecoderNotAvailableError("axisregistry", "axisregistry") from e

        return [axis_from_proto(axis) for _, axis in AxisRegistry().items()]

    def read_tags(self) -> list[Tagging]:
        """Read taggings if the checkout has a tags directory."""
        if not (self.repo_dir / TAGS_DIR).is_dir():
            return []
        return read_tags(self.repo_dir)

    def read_tag_metadata(self) -> list[TagMetadata]:
        """Read tag metadata if the checkout has it."""
        if not (self.repo_dir / TAG_METADATA_FILE).exists():
            return []
        return read_tag_metadata(self.repo_dir)

    def records(self) -> MetadataRecords:
        """
        Assemble the record bundle for the store.

        References that the checkout itself cannot satisfy are reconciled
        here so the store can stay strict: designers missing from the
        catalog are synthesized (when configured), language references
        unknown to the loaded language set are dropped, and taggings for
        families outside the scan are skipped.
        """
        families = self.read_families().families
        languages = self.read_languages() if self.config.load_languages else []
        axes = self.read_axes() if self.config.load_axes else []
        designers = self.read_designers()

        families = self._reconcile_languages(
            families,
            {lang.id for lang in languages},
            level=logging.WARNING if self.config.load_languages else logging.DEBUG,
        )
        if self.config.synthesize_designers:
            designers = self._synthesize_designers(families, designers)

        family_names = {family.name for family in families}
        taggings = self.read_tags()
        kept = [t for t in taggings if t.family in family_names]
        if len(kept) != len(taggings):
            logger.debug(f"Skipped {len(taggings) - len(kept)} taggings for unloaded families")

        return MetadataRecords(
            families=families,
            languages=languages,
            designers=designers,
            axes=axes,
            taggings=kept,
            tag_metadata=self.read_tag_metadata(),
        )

    def load_store(self) -> MetadataStore:
        """Build a store from this checkout."""
        return MetadataStore.load(self.records(), default_language=self.config.default_language)

    @staticmethod
    def _reconcile_languages(
        families: list[FamilyRecord], known: set[str], level: int = logging.WARNING
    ) -> list[FamilyRecord]:
        # Store language references must resolve, whether or not languages were loaded
        reconciled = []
        for family in families:
            missing = [lang for lang in family.languages if lang not in known]
            if missing:
                logger.log(level, f"{family.name} references unknown languages {missing}")
                family = family.model_copy(
                    update={"languages": tuple(x for x in family.languages if x in known)}
                )
            reconciled.append(family)
        return reconciled

    @staticmethod
    def _synthesize_designers(
        families: list[FamilyRecord], designers: list[DesignerRecord]
    ) -> list[DesignerRecord]:
        known = {designer.name for designer in designers}
        synthesized = list(designers)
        for family in families:
            for name in family.designers:
                if name not in known:
                    logger.debug(f"Synthesizing designer record for {name}")
                    synthesized.append(DesignerRecord(name=name))
                    known.add(name)
        return synthesized

    def find_font_binary(self, family: FamilyRecord, font: FontRecord) -> Path | None:
        """
        Find the font file for a font of a family.

        Font binaries sit next to the family's METADATA.pb.

        Returns:
            Path to the font file, or None if it does not exist
        """
        if family.source_path is None:
            logger.warning(f"{family.name} has no known METADATA.pb location")
            return None
        font_file = Path(family.source_path).parent / font.filename
        if not font_file.exists():
            logger.warning(f"No such file as {font_file}")
            return None
        return font_file
