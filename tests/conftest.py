"""
Pytest configuration and fixtures for metadata store tests.
"""

import tempfile
from pathlib import Path

import pytest

from gf_metadata.core.models import (
    AxisFallback,
    AxisRecord,
    AxisSegment,
    DesignerRecord,
    FamilyRecord,
    FontRecord,
    LanguageRecord,
    MetadataRecords,
    TagMetadata,
    Tagging,
)
from gf_metadata.store import MetadataStore

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def testdata_dir():
    """Directory holding sample METADATA.pb files."""
    return DATA_DIR


@pytest.fixture
def temp_dir():
    """Create temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def roboto():
    """Roboto, a variable sans serif with a normal and an italic file."""
    return FamilyRecord(
        name="Roboto",
        category="SANS_SERIF",
        designers=["Christian Robertson"],
        license="APACHE2",
        subsets=["latin", "cyrillic", "greek"],
        scripts=["Latn", "Cyrl", "Grek"],
        primary_script="Latn",
        languages=["en_Latn", "ru_Cyrl"],
        tags=["/Sans/Neo Grotesque"],
        axes=[
            AxisSegment(tag="wdth", min_value=75.0, max_value=100.0),
            AxisSegment(tag="wght", min_value=100.0, max_value=900.0),
        ],
        fonts=[
            FontRecord(
                name="Roboto",
                style="normal",
                weight=400,
                filename="Roboto[wdth,wght].ttf",
                post_script_name="Roboto-Regular",
                full_name="Roboto Regular",
            ),
            FontRecord(
                name="Roboto",
                style="italic",
                weight=400,
                filename="Roboto-Italic[wdth,wght].ttf",
                post_script_name="Roboto-Italic",
                full_name="Roboto Italic",
            ),
        ],
    )


@pytest.fixture
def lora():
    """Lora, a serif by Cyreal."""
    return FamilyRecord(
        name="Lora",
        category="SERIF",
        designers=["Cyreal"],
        scripts=["Latn", "Cyrl"],
        languages=["en_Latn"],
        tags=["/Serif/Transitional"],
        fonts=[
            FontRecord(name="Lora", style="normal", weight=400, filename="Lora[wght].ttf"),
        ],
    )


@pytest.fixture
def kosugi_maru():
    """Kosugi Maru declares a primary language that does not exist."""
    return FamilyRecord(
        name="Kosugi Maru",
        category="SANS_SERIF",
        designers=["MOTOYA"],
        primary_script="Jpan",
        primary_language="Invalid",
        fonts=[
            FontRecord(
                name="Kosugi Maru", style="normal", weight=400, filename="KosugiMaru-Regular.ttf"
            ),
        ],
    )


@pytest.fixture
def roboto_mono():
    """Roboto Mono shares a designer with Roboto."""
    return FamilyRecord(
        name="Roboto Mono",
        category="MONOSPACE",
        designers=["Christian Robertson"],
        scripts=["Latn"],
        fonts=[
            FontRecord(
                name="Roboto Mono", style="normal", weight=400, filename="RobotoMono[wght].ttf"
            ),
        ],
    )


@pytest.fixture
def languages():
    """A handful of languages."""
    return [
        LanguageRecord(
            id="en_Latn",
            language="en",
            script="Latn",
            name="English",
            population=1_636_485_517,
            sample_text="All human beings are born free and equal in dignity and rights.",
        ),
        LanguageRecord(id="ru_Cyrl", language="ru", script="Cyrl", name="Russian", population=258_000_000),
        LanguageRecord(id="ja_Jpan", language="ja", script="Jpan", name="Japanese", population=128_000_000),
        LanguageRecord(id="ryu_Jpan", language="ryu", script="Jpan", name="Okinawan", population=1_000_000),
    ]


@pytest.fixture
def designers():
    """Designers referenced by the sample families."""
    return [
        DesignerRecord(name="Christian Robertson", link="https://christianrobertson.com"),
        DesignerRecord(name="Cyreal"),
        DesignerRecord(name="MOTOYA"),
    ]


@pytest.fixture
def axes():
    """Registry entries for the axes the sample families use."""
    return [
        AxisRecord(
            tag="wght",
            display_name="Weight",
            min_value=1,
            default_value=400,
            max_value=1000,
            fallbacks=[AxisFallback(name="Regular", value=400)],
        ),
        AxisRecord(tag="wdth", display_name="Width", min_value=25, default_value=100, max_value=200),
    ]


@pytest.fixture
def taggings():
    """Numeric tag values."""
    return [
        Tagging(family="Roboto", tag="/quant/stroke_width_min", value=26.31),
        Tagging(family="Roboto", loc="wght@100", tag="/quant/stroke_width_min", value=9.5),
        Tagging(family="Lora", tag="/Expressive/Calm", value=68.0),
    ]


@pytest.fixture
def tag_metadata():
    """Bounds for the sample tags."""
    return [
        TagMetadata(
            tag="/quant/stroke_width_min", min_value=0, max_value=100, prompt_name="stroke width"
        ),
        TagMetadata(tag="/Expressive/Calm", min_value=0, max_value=100, prompt_name="calm"),
    ]


@pytest.fixture
def sample_records(
    roboto, lora, kosugi_maru, roboto_mono, languages, designers, axes, taggings, tag_metadata
):
    """A consistent record bundle."""
    return MetadataRecords(
        families=[roboto, lora, kosugi_maru, roboto_mono],
        languages=languages,
        designers=designers,
        axes=axes,
        taggings=taggings,
        tag_metadata=tag_metadata,
    )


@pytest.fixture
def sample_store(sample_records):
    """A store built from the sample bundle."""
    return MetadataStore.load(sample_records)
