"""Recipe compatibility scoring and batch analysis."""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from tqdm.auto import tqdm

from kitchen_utils.groceries.categories import CATEGORY_KEYS, suggest_category
from kitchen_utils.groceries.index import GroceryIndex
from kitchen_utils.groceries.matcher import IngredientMatcher, round_half_up
from kitchen_utils.ingredients.normalization import normalize_ingredient_name
from kitchen_utils.ingredients.parsing import parse_ingredient_line
from kitchen_utils.recipes.models import Recipe, RecipeCompatibility, ShoppingListItem
from kitchen_utils.settings import MatchSettings

logger = logging.getLogger(__name__)


def _score_recipe(matcher: IngredientMatcher, recipe: Recipe) -> RecipeCompatibility:
    matches = [matcher.match_ingredient(line) for line in recipe.ingredients]
    available = tuple(match for match in matches if match.is_available)
    missing = tuple(match for match in matches if not match.is_available)

    total = len(matches)
    compatibility_score = round_half_up(100 * len(available) / total) if total else 0
    confidence_score = (
        round_half_up(sum(match.confidence for match in available) / len(available))
        if available
        else 0
    )

    return RecipeCompatibility(
        recipe_id=recipe.id,
        total_ingredients=total,
        available_ingredients=available,
        missing_ingredients=missing,
        compatibility_score=compatibility_score,
        confidence_score=confidence_score,
    )


def calculate_recipe_compatibility(
    recipe: Recipe, index: GroceryIndex, settings: Optional[MatchSettings] = None
) -> RecipeCompatibility:
    """Score how much of a recipe can be made from the indexed inventory.

    Every ingredient line is matched; lines with any match other than `none`
    count as available, whatever their confidence. Callers wanting a stricter
    notion of availability filter on the returned confidences.

    Args:
        recipe: Recipe with an identifier and ordered ingredient lines.
        index: GroceryIndex built from the current inventory snapshot.
        settings: Optional matcher settings.

    Returns:
        A RecipeCompatibility. A recipe without ingredients scores 0.
    """
    return _score_recipe(IngredientMatcher(index, settings), recipe)


def analyze_recipes(
    recipes: Iterable[Recipe],
    index: GroceryIndex,
    settings: Optional[MatchSettings] = None,
    show_progress: bool = False,
) -> List[RecipeCompatibility]:
    """Score a collection of recipes and rank them by compatibility.

    The sort is stable, so recipes with equal scores keep their input order.

    Args:
        recipes: Recipes to analyze. Not deduplicated or filtered.
        index: GroceryIndex built from the current inventory snapshot.
        settings: Optional matcher settings.
        show_progress: Display a tqdm progress bar while scoring.

    Returns:
        RecipeCompatibility results, highest compatibility score first.
    """
    matcher = IngredientMatcher(index, settings)
    recipes = list(recipes)

    results = [
        _score_recipe(matcher, recipe)
        for recipe in tqdm(recipes, desc="Scoring recipes", disable=not show_progress)
    ]
    results.sort(key=lambda result: result.compatibility_score, reverse=True)

    logger.info(f"Analyzed {len(results)} recipes against {len(index)} grocery names")
    return results


def get_missing_ingredients(
    recipe: Recipe, index: GroceryIndex, settings: Optional[MatchSettings] = None
) -> List[str]:
    """Return the ingredient lines of a recipe that are not in the inventory."""
    return calculate_recipe_compatibility(recipe, index, settings).missing_ingredient_names


def get_availability_percentage(
    recipe: Recipe, index: GroceryIndex, settings: Optional[MatchSettings] = None
) -> int:
    return calculate_recipe_compatibility(recipe, index, settings).compatibility_score


def filter_makeable(
    results: Iterable[RecipeCompatibility], min_score: int = 100
) -> List[RecipeCompatibility]:
    """Keep results whose compatibility score is at least `min_score`."""
    return [result for result in results if result.compatibility_score >= min_score]


def build_shopping_list(
    results: Iterable[RecipeCompatibility], recipes: Sequence[Recipe]
) -> List[ShoppingListItem]:
    """Collect missing ingredients across recipes into a shopping list.

    Lines naming the same ingredient (same normalized name) are merged into a
    single item. Each item gets a suggested grocery category, using the
    owning recipe's categories as context.

    Args:
        results: Compatibility results, e.g. from analyze_recipes.
        recipes: The recipes the results were computed from.

    Returns:
        Shopping list items ordered by category, then name.
    """
    recipes_by_id = {recipe.id: recipe for recipe in recipes}
    items: Dict[str, ShoppingListItem] = {}

    for result in results:
        recipe = recipes_by_id.get(result.recipe_id)
        recipe_categories = recipe.categories if recipe else []

        for match in result.missing_ingredients:
            line = match.recipe_ingredient
            key = normalize_ingredient_name(line)
            if not key:
                continue

            item = items.get(key)
            if item is None:
                name = parse_ingredient_line(line).name
                item = ShoppingListItem(
                    name=name, category=suggest_category(name, recipe_categories)
                )
                items[key] = item

            if result.recipe_id not in item.recipe_ids:
                item.recipe_ids.append(result.recipe_id)
            item.lines.append(line)

    def sort_key(item: ShoppingListItem):
        rank = CATEGORY_KEYS.index(item.category) if item.category in CATEGORY_KEYS else len(CATEGORY_KEYS)
        return rank, item.name.lower()

    return sorted(items.values(), key=sort_key)
