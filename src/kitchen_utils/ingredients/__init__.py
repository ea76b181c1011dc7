"""Ingredient parsing and normalization utilities."""

from .models import IngredientMatch, MatchType
from .normalization import (
    normalize_ingredient_name,
    normalize_unit,
    singularize,
    tokenize,
)
from .parsing import ParsedIngredient, clean_ingredient_name, parse_ingredient_line

__all__ = [
    "IngredientMatch",
    "MatchType",
    "normalize_ingredient_name",
    "normalize_unit",
    "singularize",
    "tokenize",
    "ParsedIngredient",
    "clean_ingredient_name",
    "parse_ingredient_line",
]
