"""Database utilities for kitchen inventory and recipe databases."""

from .schema import DDL, create_schema
from .utils import (
    add_grocery_item,
    get_connection,
    get_recipe,
    load_inventory,
    load_recipes,
    remove_grocery_item,
    transaction,
    upsert_recipe,
)

__all__ = [
    "DDL",
    "create_schema",
    "get_connection",
    "transaction",
    "add_grocery_item",
    "remove_grocery_item",
    "load_inventory",
    "upsert_recipe",
    "get_recipe",
    "load_recipes",
]
