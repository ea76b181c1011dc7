import dataclasses
from typing import List, Optional, Tuple

from kitchen_utils.ingredients.models import IngredientMatch


@dataclasses.dataclass
class Recipe:
    """Dataclass for holding recipe data as loaded from the record store."""

    id: str
    name: str
    ingredients: List[str]
    categories: List[str] = dataclasses.field(default_factory=list)
    owner_id: Optional[str] = None
    description: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class RecipeCompatibility:
    """How well a recipe can be made from the current inventory.

    `available_ingredients` holds every match whose type is not `none`,
    regardless of confidence; use `strict_available` for a stricter view.
    """

    recipe_id: str
    total_ingredients: int
    available_ingredients: Tuple[IngredientMatch, ...]
    missing_ingredients: Tuple[IngredientMatch, ...]
    compatibility_score: int  # percentage of ingredients available, 0-100
    confidence_score: int  # mean confidence of available matches, 0-100

    @property
    def available_count(self) -> int:
        return len(self.available_ingredients)

    @property
    def missing_count(self) -> int:
        return len(self.missing_ingredients)

    @property
    def missing_ingredient_names(self) -> List[str]:
        return [match.recipe_ingredient for match in self.missing_ingredients]

    def strict_available(
        self, threshold: int
    ) -> Tuple[List[IngredientMatch], List[IngredientMatch]]:
        """Re-partition the available matches by a confidence threshold.

        Returns:
            A tuple of (matches at or above the threshold, matches below it).
        """
        confident = [m for m in self.available_ingredients if m.confidence >= threshold]
        doubtful = [m for m in self.available_ingredients if m.confidence < threshold]
        return confident, doubtful


@dataclasses.dataclass
class ShoppingListItem:
    name: str
    category: str
    recipe_ids: List[str] = dataclasses.field(default_factory=list)
    lines: List[str] = dataclasses.field(default_factory=list)
