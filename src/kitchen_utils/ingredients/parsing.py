"""Ingredient line parsing utilities."""

import dataclasses
import re
from fractions import Fraction
from typing import List, Optional, Tuple

from kitchen_utils.ingredients.normalization import UNICODE_FRAC, UNIT_LOOKUP, normalize_unit


@dataclasses.dataclass(frozen=True)
class ParsedIngredient:
    """An ingredient line split into its display parts."""

    amount: Optional[float]
    unit: Optional[str]
    name: str
    preparation: Optional[str] = None


# --- Number helpers ---


def _is_integer(text: str) -> bool:
    try:
        int(text)
        return True
    except ValueError:
        return False


def _is_number(text: str) -> bool:
    try:
        float(text)
        return True
    except ValueError:
        return False


def _is_fraction(text: str) -> bool:
    parts = text.split("/")
    return len(parts) == 2 and all(_is_integer(part) for part in parts)


def _parse_fraction(text: str) -> Fraction:
    """Parse a fraction string (e.g., '1/2'); raises ZeroDivisionError on '1/0'."""
    numerator, denominator = text.split("/")
    return Fraction(int(numerator), int(denominator))


# --- Parsing ---


def parse_ingredient_line(text: str) -> ParsedIngredient:
    """Split a recipe ingredient line into amount, unit, name and preparation.

    Handles mixed numbers, fractions, ranges and unicode fraction characters.
    The preparation note is everything after the first comma. Parsing never
    fails: unparseable text ends up in the name.

    Args:
        text: Raw ingredient line (e.g., "1 1/2 cups onions, diced").

    Returns:
        A ParsedIngredient. The name keeps the original casing.

    Examples:
        >>> parse_ingredient_line("2 cups diced onions, chopped")
        ParsedIngredient(amount=2.0, unit='cup', name='diced onions', preparation='chopped')
    """
    original_text = (text or "").strip()
    t = re.sub(r"\([^)]*\)", " ", original_text)

    head, _, tail = t.partition(",")
    preparation = " ".join(tail.split()) or None

    amount, rest = _parse_amount(head)
    unit, rest = _parse_unit(rest)
    name = clean_ingredient_name(rest)

    # If nothing is left for the name, fall back to the original text
    if not name:
        name = original_text
    return ParsedIngredient(amount, unit, name, preparation)


def _parse_amount(text: str) -> Tuple[Optional[float], str]:
    """Parse an amount from the start of an ingredient string.

    Returns:
        A tuple of the amount (or None) and the remaining text.
    """
    # "1½" -> "1 .5" so the mixed-number parser sees two words
    text = "".join(f" {UNICODE_FRAC[c]}" if c in UNICODE_FRAC else c for c in text)

    words = text.split()
    if not words:
        return None, ""

    try:
        for parser in [_parse_number_range, _parse_mixed_number, _parse_simple_number]:
            amount, consumed_words = parser(words)
            if amount is not None:
                return amount, " ".join(words[consumed_words:])
    except (ValueError, ZeroDivisionError):
        pass

    return None, " ".join(words)


def _parse_number_range(words: List[str]) -> Tuple[Optional[float], int]:
    """Parse number ranges like '2 to 3' or '2-3' as their midpoint."""
    if (
        len(words) >= 3
        and _is_number(words[0])
        and words[1].lower() in ("to", "or")
        and _is_number(words[2])
    ):
        return (float(words[0]) + float(words[2])) / 2, 3

    parts = words[0].split("-")
    if len(parts) == 2 and _is_number(parts[0]) and _is_number(parts[1]):
        return (float(parts[0]) + float(parts[1])) / 2, 1

    return None, 0


def _parse_mixed_number(words: List[str]) -> Tuple[Optional[float], int]:
    """Parse mixed numbers like '1 1/2' or '1 .5'."""
    if len(words) < 2 or not _is_integer(words[0]):
        return None, 0

    whole_part = int(words[0])

    if _is_fraction(words[1]):
        return float(whole_part + _parse_fraction(words[1])), 2

    if _is_number(words[1]):
        decimal_part = float(words[1])
        if 0 < decimal_part < 1:
            return whole_part + decimal_part, 2

    return None, 0


def _parse_simple_number(words: List[str]) -> Tuple[Optional[float], int]:
    """Parse simple numbers like '1/2', '2.5', or '3'."""
    if _is_fraction(words[0]):
        return float(_parse_fraction(words[0])), 1

    if _is_number(words[0]):
        return float(words[0]), 1

    return None, 0


def _parse_unit(text: str) -> Tuple[Optional[str], str]:
    """Parse a unit (and a trailing 'of') from the start of a string."""
    words = text.split()
    if not words:
        return None, text

    potential_unit = words[0].lower().strip(".")
    if potential_unit in UNIT_LOOKUP:
        rest = words[1:]
        if rest and rest[0].lower() == "of":
            rest = rest[1:]
        # A lone unit word is more likely the ingredient itself ("2 cloves")
        if rest:
            return normalize_unit(potential_unit), " ".join(rest)

    return None, text


def clean_ingredient_name(name: str) -> str:
    """Clean up an ingredient name by removing notes and extra whitespace.

    Examples:
        >>> clean_ingredient_name("fresh basil (about 1 bunch)")
        'fresh basil'
        >>> clean_ingredient_name("  olive   oil ,")
        'olive oil'
    """
    name = re.sub(r"\s*\([^)]*\)", "", name)
    name = re.sub(r"\s+", " ", name)
    return name.strip().strip(",").strip()
