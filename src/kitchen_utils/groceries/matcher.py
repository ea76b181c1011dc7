"""Match free-text recipe ingredient lines against a Grocery Index."""

import logging
import math
from typing import List, Optional, Tuple

from kitchen_utils.groceries.index import GroceryIndex, IndexEntry
from kitchen_utils.ingredients.models import IngredientMatch, MatchType
from kitchen_utils.ingredients.normalization import (
    WORD_SYNONYMS,
    normalize_ingredient_name,
    words_for_matching,
)
from kitchen_utils.settings import DEFAULT_SETTINGS, MatchSettings

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (12.5 -> 13)."""
    return int(math.floor(value + 0.5))


def _scale(ratio: float, low: int, high: int) -> int:
    """Map a ratio in [0, 1] onto the integer band [low, high]."""
    ratio = min(max(ratio, 0.0), 1.0)
    return round_half_up(low + (high - low) * ratio)


class IngredientMatcher:
    """Classifies recipe ingredient lines against a user's inventory.

    Strategies are tried in order and the first hit wins:

    1. exact: the normalized line is an indexed name (confidence 100).
    2. partial: the normalized line and an indexed name contain one
       another. Confidence grows with how much of the longer string the
       shorter one covers.
    3. fuzzy: at least one word overlaps with an indexed name's words
       (equal, containing or contained, synonyms counted as equal). The
       best-scoring entry across the whole index wins.
    4. none: confidence 0.

    This is a heuristic. "onion powder" will happily match "onion".

    Attributes:
        index: The GroceryIndex built from the current inventory snapshot.
        settings: Confidence bands and thresholds.
    """

    def __init__(self, index: GroceryIndex, settings: Optional[MatchSettings] = None):
        self.index = index
        self.settings = settings or DEFAULT_SETTINGS

    def match_ingredient(self, recipe_ingredient: str) -> IngredientMatch:
        """Match one recipe ingredient line against the inventory.

        Args:
            recipe_ingredient: The free-text line, e.g. "2 cups diced onions".

        Returns:
            A fresh IngredientMatch. Empty input and an empty inventory both
            yield a `none` match.
        """
        if not len(self.index):
            return IngredientMatch.no_match(recipe_ingredient)

        normalized = normalize_ingredient_name(recipe_ingredient)
        if not normalized:
            return IngredientMatch.no_match(recipe_ingredient)

        entry = self.index.find_exact(normalized)
        if entry is not None:
            return self._build(recipe_ingredient, entry, MatchType.EXACT, 100)

        entry = self.index.find_substring(normalized)
        if entry is not None:
            confidence = self._partial_confidence(normalized, entry.normalized)
            return self._build(recipe_ingredient, entry, MatchType.PARTIAL, confidence)

        best = self._find_fuzzy_match(normalized)
        if best is not None:
            entry, confidence = best
            return self._build(recipe_ingredient, entry, MatchType.FUZZY, confidence)

        logger.debug(f"No inventory match for '{recipe_ingredient}'")
        return IngredientMatch.no_match(recipe_ingredient)

    def has_ingredient(self, ingredient: str, threshold: Optional[int] = None) -> bool:
        """Check whether the inventory effectively contains an ingredient.

        Args:
            ingredient: Ingredient name or line.
            threshold: Minimum confidence; defaults to the settings'
                availability threshold.
        """
        if threshold is None:
            threshold = self.settings.availability_threshold
        return self.match_ingredient(ingredient).meets_threshold(threshold)

    def _build(
        self, recipe_ingredient: str, entry: IndexEntry, match_type: MatchType, confidence: int
    ) -> IngredientMatch:
        return IngredientMatch(
            recipe_ingredient=recipe_ingredient,
            match_type=match_type,
            confidence=confidence,
            matched_category=entry.category,
            matched_ingredient=entry.ingredient_name,
        )

    def _partial_confidence(self, query: str, key: str) -> int:
        shorter, longer = sorted((query, key), key=len)
        return _scale(
            len(shorter) / len(longer),
            self.settings.partial_min_confidence,
            self.settings.partial_max_confidence,
        )

    def _words_overlap(self, query_word: str, entry_word: str) -> bool:
        candidates = WORD_SYNONYMS.get(query_word, {query_word})
        min_length = self.settings.min_fuzzy_word_length
        for word in candidates:
            if word == entry_word:
                return True
            if len(word) >= min_length and len(entry_word) >= min_length:
                if word in entry_word or entry_word in word:
                    return True
        return False

    def _find_fuzzy_match(self, normalized: str) -> Optional[Tuple[IndexEntry, int]]:
        query_words = words_for_matching(normalized)
        if not query_words:
            return None

        best: Optional[Tuple[IndexEntry, int]] = None
        for entry in self.index:
            entry_words = words_for_matching(entry.normalized)
            if not entry_words:
                continue

            overlapping: List[str] = [
                word
                for word in query_words
                if any(self._words_overlap(word, other) for other in entry_words)
            ]
            if not overlapping:
                continue

            fraction = len(overlapping) / max(len(query_words), len(entry_words))
            confidence = _scale(
                fraction,
                self.settings.fuzzy_min_confidence,
                self.settings.fuzzy_max_confidence,
            )
            # Strict comparison keeps the first entry on ties
            if best is None or confidence > best[1]:
                best = (entry, confidence)

        return best


def match_ingredient(
    index: GroceryIndex, recipe_ingredient: str, settings: Optional[MatchSettings] = None
) -> IngredientMatch:
    """Match a single ingredient line; see IngredientMatcher.match_ingredient."""
    return IngredientMatcher(index, settings).match_ingredient(recipe_ingredient)
