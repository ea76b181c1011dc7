import dataclasses
import enum
from typing import Optional


class MatchType(str, enum.Enum):
    """How a recipe ingredient line was resolved against the inventory."""

    EXACT = "exact"
    PARTIAL = "partial"
    FUZZY = "fuzzy"
    NONE = "none"


@dataclasses.dataclass(frozen=True)
class IngredientMatch:
    recipe_ingredient: str  # original line, shown to the user unmodified
    match_type: MatchType
    confidence: int  # 0-100
    matched_category: Optional[str] = None
    matched_ingredient: Optional[str] = None

    @classmethod
    def no_match(cls, recipe_ingredient: str) -> "IngredientMatch":
        return cls(recipe_ingredient, MatchType.NONE, 0)

    @property
    def is_available(self) -> bool:
        return self.match_type is not MatchType.NONE

    def meets_threshold(self, threshold: int) -> bool:
        """Check availability under a caller-chosen confidence threshold."""
        return self.is_available and self.confidence >= threshold
