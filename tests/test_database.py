import sqlite3

import pytest

from kitchen_utils.database import (
    add_grocery_item,
    create_schema,
    get_connection,
    get_recipe,
    load_inventory,
    load_recipes,
    remove_grocery_item,
    transaction,
    upsert_recipe,
)
from kitchen_utils.recipes.models import Recipe


@pytest.fixture
def conn(tmp_path):
    conn = get_connection(tmp_path / "kitchen.db")
    create_schema(conn)
    yield conn
    conn.close()


def test_inventory_keeps_insertion_order(conn):
    with transaction(conn) as cur:
        add_grocery_item(cur, "u1", "fresh_produce", "onions")
        add_grocery_item(cur, "u1", "dairy_cold", "milk")
        add_grocery_item(cur, "u1", "fresh_produce", "garlic")
        add_grocery_item(cur, "u2", "frozen", "peas")

    assert load_inventory(conn, "u1") == {
        "fresh_produce": ["onions", "garlic"],
        "dairy_cold": ["milk"],
    }
    assert list(load_inventory(conn, "u1")) == ["fresh_produce", "dairy_cold"]
    assert load_inventory(conn, "u2") == {"frozen": ["peas"]}
    assert load_inventory(conn, "nobody") == {}


def test_add_grocery_item_is_idempotent(conn):
    with transaction(conn) as cur:
        first = add_grocery_item(cur, "u1", "fresh_produce", "onions")
        second = add_grocery_item(cur, "u1", "fresh_produce", "onions")

    assert first == second
    assert load_inventory(conn, "u1") == {"fresh_produce": ["onions"]}


def test_same_name_in_two_categories(conn):
    with transaction(conn) as cur:
        add_grocery_item(cur, "u1", "cooking_essentials", "butter")
        add_grocery_item(cur, "u1", "dairy_cold", "butter")

    assert load_inventory(conn, "u1") == {
        "cooking_essentials": ["butter"],
        "dairy_cold": ["butter"],
    }


def test_remove_grocery_item(conn):
    with transaction(conn) as cur:
        add_grocery_item(cur, "u1", "fresh_produce", "onions")
        add_grocery_item(cur, "u1", "fresh_produce", "garlic")

    with transaction(conn) as cur:
        assert remove_grocery_item(cur, "u1", "fresh_produce", "onions") is True
        assert remove_grocery_item(cur, "u1", "fresh_produce", "onions") is False

    assert load_inventory(conn, "u1") == {"fresh_produce": ["garlic"]}


def test_transaction_rolls_back_on_error(conn):
    with pytest.raises(RuntimeError):
        with transaction(conn) as cur:
            add_grocery_item(cur, "u1", "fresh_produce", "onions")
            raise RuntimeError("boom")

    assert load_inventory(conn, "u1") == {}


def test_recipe_round_trip(conn):
    recipe = Recipe(
        id="soffritto",
        name="Soffritto",
        ingredients=["2 cups diced onions", "1 clove garlic, minced", "3 tbsp olive oil"],
        categories=["Cuisine: Italian", "Course: Base"],
        owner_id="u1",
        description="Slowly cooked aromatics",
    )
    with transaction(conn) as cur:
        upsert_recipe(cur, recipe)

    assert get_recipe(conn, "soffritto") == recipe
    assert get_recipe(conn, "missing") is None


def test_upsert_replaces_ingredients(conn):
    with transaction(conn) as cur:
        upsert_recipe(cur, Recipe("r1", "Toast", ["bread", "butter", "jam"]))
        upsert_recipe(cur, Recipe("r1", "Buttered Toast", ["bread", "butter"]))

    recipe = get_recipe(conn, "r1")
    assert recipe.name == "Buttered Toast"
    assert recipe.ingredients == ["bread", "butter"]
    assert recipe.categories == []


def test_load_recipes_filters_by_owner(conn):
    with transaction(conn) as cur:
        upsert_recipe(cur, Recipe("b", "Pancakes", ["flour"], owner_id="u1"))
        upsert_recipe(cur, Recipe("a", "Omelette", ["eggs"], owner_id="u2"))
        upsert_recipe(cur, Recipe("c", "Crepes", ["flour", "milk"], owner_id="u1"))

    assert [r.id for r in load_recipes(conn)] == ["c", "a", "b"]
    assert [r.id for r in load_recipes(conn, "u1")] == ["c", "b"]
    assert load_recipes(conn, "nobody") == []


def test_deleting_recipe_cascades(conn):
    with transaction(conn) as cur:
        upsert_recipe(cur, Recipe("r1", "Toast", ["bread"], categories=["Course: Breakfast"]))
    with transaction(conn) as cur:
        cur.execute("DELETE FROM recipe WHERE id = ?", ("r1",))

    assert conn.execute("SELECT COUNT(*) FROM recipe_ingredient").fetchone()[0] == 0
    assert conn.execute("SELECT COUNT(*) FROM recipe_category").fetchone()[0] == 0


def test_schema_is_reentrant(conn):
    create_schema(conn)
    tables = {
        row[0]
        for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
    }
    assert {"grocery_item", "recipe", "recipe_ingredient", "recipe_category"} <= tables


def test_ingredient_text_is_required(conn):
    with pytest.raises(sqlite3.IntegrityError):
        with transaction(conn) as cur:
            upsert_recipe(cur, Recipe("r1", "Broken", [None]))
