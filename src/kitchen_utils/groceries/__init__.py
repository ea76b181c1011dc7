"""Grocery inventory indexing and ingredient matching."""

from .categories import (
    CATEGORY_KEYS,
    GROCERY_CATEGORIES,
    category_display_name,
    normalize_category,
    starter_inventory,
    suggest_category,
    validate_inventory_categories,
)
from .index import GroceryIndex, GroceryInventory, IndexEntry
from .matcher import IngredientMatcher, match_ingredient

__all__ = [
    "CATEGORY_KEYS",
    "GROCERY_CATEGORIES",
    "category_display_name",
    "normalize_category",
    "starter_inventory",
    "suggest_category",
    "validate_inventory_categories",
    "GroceryIndex",
    "GroceryInventory",
    "IndexEntry",
    "IngredientMatcher",
    "match_ingredient",
]
