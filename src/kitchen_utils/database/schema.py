"""Database schema definitions for kitchen inventory and recipe databases."""

import sqlite3

DDL = """
CREATE TABLE IF NOT EXISTS grocery_item(
    id       INTEGER PRIMARY KEY,
    owner_id TEXT NOT NULL,
    category TEXT NOT NULL,
    name     TEXT NOT NULL,
    position INTEGER NOT NULL,
    UNIQUE(owner_id, category, name)
);

CREATE TABLE IF NOT EXISTS recipe(
    id          TEXT PRIMARY KEY,
    owner_id    TEXT,
    name        TEXT NOT NULL,
    description TEXT
);

CREATE TABLE IF NOT EXISTS recipe_ingredient(
    recipe_id TEXT,
    position  INTEGER,
    text      TEXT NOT NULL,
    PRIMARY KEY(recipe_id, position),
    FOREIGN KEY(recipe_id) REFERENCES recipe(id) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS recipe_category(
    recipe_id TEXT,
    category  TEXT,
    PRIMARY KEY(recipe_id, category),
    FOREIGN KEY(recipe_id) REFERENCES recipe(id) ON DELETE CASCADE
);

CREATE INDEX IF NOT EXISTS idx_grocery_item_owner ON grocery_item(owner_id, position);
"""


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the database schema for groceries and recipes.

    Args:
        conn: SQLite database connection
    """
    conn.executescript(DDL)
    conn.execute("PRAGMA foreign_keys = ON")
