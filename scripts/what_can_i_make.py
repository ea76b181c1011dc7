#!/usr/bin/env python3
"""
Ranks a user's recipes by how much of each can be made from their kitchen inventory.
"""

import argparse
import dataclasses
import datetime
import logging

from kitchen_utils.database import get_connection, load_inventory, load_recipes
from kitchen_utils.groceries import GroceryIndex, category_display_name
from kitchen_utils.recipes import (
    analyze_recipes,
    build_shopping_list,
    filter_makeable,
    match_dataframe,
    write_compatibility_csv,
)
from kitchen_utils.settings import DEFAULT_SETTINGS, load_settings

# Config
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def print_ranking(results, recipes_by_id, threshold: int, top: int):
    print(f"\nTop {min(top, len(results))} recipes:")
    for result in results[:top]:
        confident, doubtful = result.strict_available(threshold)
        name = recipes_by_id[result.recipe_id].name
        print(
            f"  {result.compatibility_score:3d}%  {name} "
            f"({len(confident)} confident, {len(doubtful)} doubtful, "
            f"{result.missing_count} missing; confidence {result.confidence_score})"
        )


def print_shopping_list(items):
    print("\nShopping list:")
    current_category = None
    for item in items:
        if item.category != current_category:
            current_category = item.category
            print(f"  {category_display_name(current_category)}")
        print(f"    - {item.name} (for {len(item.recipe_ids)} recipe(s))")


def main():
    parser = argparse.ArgumentParser(
        description="Rank recipes by compatibility with a kitchen inventory"
    )
    parser.add_argument("--db-path", type=str, default="data/kitchen.db")
    parser.add_argument("--owner-id", type=str, required=True, help="Inventory owner")
    parser.add_argument(
        "--all-recipes",
        action="store_true",
        help="Analyze every recipe in the database, not only the owner's",
    )
    parser.add_argument("--settings", type=str, help="JSON file of matcher settings")
    parser.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Confidence needed to count a match as confident (default: 50)",
    )
    parser.add_argument(
        "--min-score",
        type=int,
        default=0,
        help="Only report recipes at or above this compatibility score (default: 0)",
    )
    parser.add_argument("--top", type=int, default=10, help="Recipes to print (default: 10)")
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory to write CSV reports to (default: no CSV output)",
    )
    args = parser.parse_args()

    settings = load_settings(args.settings) if args.settings else DEFAULT_SETTINGS
    if args.threshold is not None:
        settings = dataclasses.replace(settings, availability_threshold=args.threshold)

    conn = get_connection(args.db_path)
    try:
        inventory = load_inventory(conn, args.owner_id)
        recipes = load_recipes(conn, None if args.all_recipes else args.owner_id)
    finally:
        conn.close()

    if not recipes:
        print("No recipes found. Import some with scripts/import_kitchen_data.py first.")
        exit(1)
    if not inventory:
        print(f"Inventory for {args.owner_id} is empty; every ingredient will be missing.")

    try:
        index = GroceryIndex(inventory)
        results = analyze_recipes(recipes, index, settings, show_progress=True)
        results = filter_makeable(results, args.min_score)
        recipes_by_id = {recipe.id: recipe for recipe in recipes}

        print_ranking(results, recipes_by_id, settings.availability_threshold, args.top)
        print_shopping_list(build_shopping_list(results[: args.top], recipes))

        if args.output_dir:
            timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            summary_file = f"{args.output_dir}/compatibility_{timestamp}.csv"
            matches_file = f"{args.output_dir}/ingredient_matches_{timestamp}.csv"
            write_compatibility_csv(results, summary_file)
            match_dataframe(results).to_csv(matches_file, index=False)
            print(f"\nWrote reports to {summary_file} and {matches_file}")

        fully_makeable = len(filter_makeable(results, 100))
        print("\nSummary:")
        print(f"  Recipes analyzed: {len(recipes)}")
        print(f"  Grocery names indexed: {len(index)}")
        print(f"  Fully makeable recipes: {fully_makeable}")

    except KeyboardInterrupt:
        print("\nAnalysis interrupted by user")
    except Exception as e:
        print(f"\nError during analysis: {e}")
        raise


if __name__ == "__main__":
    main()
