#!/usr/bin/env python3
"""
Loads a user's grocery inventory and recipes from JSON files into a SQLite database.

Groceries JSON: {"category": ["ingredient", ...], ...}
Recipes JSON:   [{"id": ..., "name": ..., "ingredients": [...], "categories": [...]}, ...]
"""

import argparse
import json
import logging
import pathlib

from tqdm.auto import tqdm

from kitchen_utils.database import (
    add_grocery_item,
    create_schema,
    get_connection,
    transaction,
    upsert_recipe,
)
from kitchen_utils.groceries import normalize_category, starter_inventory
from kitchen_utils.recipes import Recipe

# Config
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def import_groceries(conn, owner_id: str, inventory: dict) -> int:
    """Add every inventory item for `owner_id`, mapping legacy category names."""
    count = 0
    with transaction(conn) as cur:
        for category, names in inventory.items():
            canonical = normalize_category(category)
            for name in names:
                if name and name.strip():
                    add_grocery_item(cur, owner_id, canonical, name.strip())
                    count += 1
    return count


def import_recipes(conn, owner_id: str, records: list) -> int:
    count = 0
    with transaction(conn) as cur:
        for record in tqdm(records, desc="Importing recipes"):
            recipe = Recipe(
                id=str(record["id"]),
                name=record.get("name") or "Unnamed Recipe",
                ingredients=list(record.get("ingredients", [])),
                categories=list(record.get("categories", [])),
                owner_id=record.get("owner_id", owner_id),
                description=record.get("description"),
            )
            upsert_recipe(cur, recipe)
            count += 1
    return count


def main():
    parser = argparse.ArgumentParser(
        description="Import grocery inventory and recipes into a kitchen database"
    )
    parser.add_argument("--db-path", type=str, default="data/kitchen.db")
    parser.add_argument("--owner-id", type=str, required=True, help="Owner of the data")
    parser.add_argument("--groceries", type=str, help="Path to a grocery inventory JSON file")
    parser.add_argument("--recipes", type=str, help="Path to a recipes JSON file")
    parser.add_argument(
        "--starter",
        action="store_true",
        help="Seed the inventory with the starter items of every category",
    )
    args = parser.parse_args()

    if not (args.groceries or args.recipes or args.starter):
        parser.error("Nothing to import: pass --groceries, --recipes or --starter")

    pathlib.Path(args.db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = get_connection(args.db_path)
    create_schema(conn)

    try:
        if args.starter:
            count = import_groceries(conn, args.owner_id, starter_inventory())
            print(f"Seeded {count} starter grocery items")

        if args.groceries:
            with open(args.groceries, "r", encoding="utf-8") as f:
                count = import_groceries(conn, args.owner_id, json.load(f))
            print(f"Imported {count} grocery items for {args.owner_id}")

        if args.recipes:
            with open(args.recipes, "r", encoding="utf-8") as f:
                count = import_recipes(conn, args.owner_id, json.load(f))
            print(f"Imported {count} recipes for {args.owner_id}")

    except KeyboardInterrupt:
        print("\nImport interrupted by user")
    except Exception as e:
        print(f"\nError during import: {e}")
        raise
    finally:
        conn.close()


if __name__ == "__main__":
    main()
