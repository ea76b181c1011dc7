"""Kitchen Utils - Ingredient matching and recipe compatibility against a kitchen inventory."""

__version__ = "0.1.0"

from . import database, groceries, ingredients, recipes
from .settings import DEFAULT_SETTINGS, MatchSettings, load_settings

__all__ = [
    "database",
    "groceries",
    "ingredients",
    "recipes",
    "MatchSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
]
