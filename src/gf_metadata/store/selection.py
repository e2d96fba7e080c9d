"""Font selection within a family."""

from ..core.models import FamilyRecord, FontRecord, FontStyle


def score_font(font: FontRecord, preferred_style: FontStyle, preferred_weight: int) -> int:
    """Score how well a font matches a style and weight preference."""
    score = 0
    if font.style == FontStyle(preferred_style).value:
        score += 16

    # Closer to the preferred weight is better, heavier beats lighter
    score -= abs(font.weight - preferred_weight) // 100
    if font.weight > preferred_weight:
        score += 1

    if font.is_variable:
        score += 2

    return score


def select_font(
    family: FamilyRecord,
    preferred_style: FontStyle = FontStyle.NORMAL,
    preferred_weight: int = 400,
) -> FontRecord | None:
    """
    Select the best matching font from a family.

    Args:
        family: Family to choose from
        preferred_style: Preferred style
        preferred_weight: Preferred weight

    Returns:
        Highest scoring font (earliest on ties), or None for a family without fonts
    """
    best: FontRecord | None = None
    best_score = 0
    for font in family.fonts:
        score = score_font(font, preferred_style, preferred_weight)
        if best is None or score > best_score:
            best, best_score = font, score
    return best


def exemplar(family: FamilyRecord) -> FontRecord | None:
    """
    Pick the font most representative of a family.

    Prefers normal style, weight close to 400 and a variable font if present.
    """
    return select_font(family, FontStyle.NORMAL, 400)
