"""Recipe models, compatibility scoring and reports."""

from .compatibility import (
    analyze_recipes,
    build_shopping_list,
    calculate_recipe_compatibility,
    filter_makeable,
    get_availability_percentage,
    get_missing_ingredients,
)
from .models import Recipe, RecipeCompatibility, ShoppingListItem
from .reporting import compatibility_dataframe, match_dataframe, write_compatibility_csv

__all__ = [
    "Recipe",
    "RecipeCompatibility",
    "ShoppingListItem",
    "analyze_recipes",
    "build_shopping_list",
    "calculate_recipe_compatibility",
    "filter_makeable",
    "get_availability_percentage",
    "get_missing_ingredients",
    "compatibility_dataframe",
    "match_dataframe",
    "write_compatibility_csv",
]
