"""Database utility functions for kitchen inventory and recipe databases."""

import contextlib
import logging
import pathlib
import sqlite3
from typing import Dict, Generator, List, Optional, Union

from kitchen_utils.recipes.models import Recipe

logger = logging.getLogger(__name__)


def get_connection(db_path: Union[str, pathlib.Path]) -> sqlite3.Connection:
    """Get a SQLite database connection with foreign keys enabled.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        SQLite connection with foreign keys enabled
    """
    conn = sqlite3.connect(db_path)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextlib.contextmanager
def transaction(conn: sqlite3.Connection) -> Generator[sqlite3.Cursor, None, None]:
    """Context manager for database transactions.

    Commits when the block finishes, rolls back and re-raises on any error.

    Example:
        with transaction(conn) as cur:
            add_grocery_item(cur, "user-1", "fresh_produce", "onions")
    """
    cur = conn.cursor()
    try:
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise


def add_grocery_item(cur: sqlite3.Cursor, owner_id: str, category: str, name: str) -> int:
    """Add an ingredient to a user's inventory if it is not there yet.

    Args:
        cur: Database cursor
        owner_id: Owner of the inventory
        category: Grocery category key
        name: Ingredient name as the user wrote it

    Returns:
        Integer ID of the grocery item
    """
    cur.execute(
        "SELECT COALESCE(MAX(position), -1) + 1 FROM grocery_item WHERE owner_id = ?",
        (owner_id,),
    )
    position = cur.fetchone()[0]
    cur.execute(
        "INSERT INTO grocery_item(owner_id, category, name, position) VALUES (?, ?, ?, ?) "
        "ON CONFLICT(owner_id, category, name) DO NOTHING",
        (owner_id, category, name, position),
    )
    cur.execute(
        "SELECT id FROM grocery_item WHERE owner_id = ? AND category = ? AND name = ?",
        (owner_id, category, name),
    )
    return cur.fetchone()[0]


def remove_grocery_item(cur: sqlite3.Cursor, owner_id: str, category: str, name: str) -> bool:
    """Remove an ingredient from a user's inventory.

    Returns:
        True if a row was removed, False if the item was not present
    """
    cur.execute(
        "DELETE FROM grocery_item WHERE owner_id = ? AND category = ? AND name = ?",
        (owner_id, category, name),
    )
    return cur.rowcount > 0


def load_inventory(conn: sqlite3.Connection, owner_id: str) -> Dict[str, List[str]]:
    """Load a snapshot of a user's inventory.

    Categories appear in the order their first item was added, and items in
    the order they were added.

    Returns:
        Mapping of category -> ingredient names; empty for unknown owners
    """
    cursor = conn.execute(
        "SELECT category, name FROM grocery_item WHERE owner_id = ? ORDER BY position, id",
        (owner_id,),
    )
    inventory: Dict[str, List[str]] = {}
    for category, name in cursor.fetchall():
        inventory.setdefault(category, []).append(name)

    logger.debug(
        f"Loaded {sum(len(v) for v in inventory.values())} grocery items "
        f"in {len(inventory)} categories for {owner_id}"
    )
    return inventory


def upsert_recipe(cur: sqlite3.Cursor, recipe: Recipe) -> None:
    """Insert or replace a recipe together with its ingredient lines and categories."""
    cur.execute(
        "INSERT INTO recipe(id, owner_id, name, description) VALUES (?, ?, ?, ?) "
        "ON CONFLICT(id) DO UPDATE SET owner_id = excluded.owner_id, "
        "name = excluded.name, description = excluded.description",
        (recipe.id, recipe.owner_id, recipe.name, recipe.description),
    )
    cur.execute("DELETE FROM recipe_ingredient WHERE recipe_id = ?", (recipe.id,))
    cur.executemany(
        "INSERT INTO recipe_ingredient(recipe_id, position, text) VALUES (?, ?, ?)",
        [(recipe.id, position, text) for position, text in enumerate(recipe.ingredients)],
    )
    cur.execute("DELETE FROM recipe_category WHERE recipe_id = ?", (recipe.id,))
    cur.executemany(
        "INSERT OR IGNORE INTO recipe_category(recipe_id, category) VALUES (?, ?)",
        [(recipe.id, category) for category in recipe.categories],
    )


def _fetch_recipe_rows(conn: sqlite3.Connection, rows) -> List[Recipe]:
    recipes = []
    for recipe_id, owner_id, name, description in rows:
        ingredients = [
            text
            for (text,) in conn.execute(
                "SELECT text FROM recipe_ingredient WHERE recipe_id = ? ORDER BY position",
                (recipe_id,),
            )
        ]
        categories = [
            category
            for (category,) in conn.execute(
                "SELECT category FROM recipe_category WHERE recipe_id = ? ORDER BY rowid",
                (recipe_id,),
            )
        ]
        recipes.append(
            Recipe(
                id=recipe_id,
                name=name,
                ingredients=ingredients,
                categories=categories,
                owner_id=owner_id,
                description=description,
            )
        )
    return recipes


def get_recipe(conn: sqlite3.Connection, recipe_id: str) -> Optional[Recipe]:
    """Fetch one recipe by primary key, or None if it does not exist."""
    rows = conn.execute(
        "SELECT id, owner_id, name, description FROM recipe WHERE id = ?", (recipe_id,)
    ).fetchall()
    recipes = _fetch_recipe_rows(conn, rows)
    return recipes[0] if recipes else None


def load_recipes(conn: sqlite3.Connection, owner_id: Optional[str] = None) -> List[Recipe]:
    """Load all recipes, or only those belonging to `owner_id`, ordered by name."""
    if owner_id is None:
        rows = conn.execute(
            "SELECT id, owner_id, name, description FROM recipe ORDER BY name, id"
        ).fetchall()
    else:
        rows = conn.execute(
            "SELECT id, owner_id, name, description FROM recipe "
            "WHERE owner_id = ? ORDER BY name, id",
            (owner_id,),
        ).fetchall()
    return _fetch_recipe_rows(conn, rows)
