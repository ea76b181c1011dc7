import dataclasses

import pytest

from kitchen_utils.groceries.index import GroceryIndex
from kitchen_utils.groceries.matcher import match_ingredient


@pytest.fixture
def inventory():
    return {
        "fresh_produce": ["Onions", "garlic", "cherry tomatoes"],
        "cooking_essentials": ["olive oil", "butter"],
        "dairy_cold": ["milk", "butter"],
    }


@pytest.fixture
def index(inventory):
    return GroceryIndex(inventory)


def test_exact_lookup_uses_normalized_names(index):
    entry = index.find_exact("onion")
    assert entry is not None
    assert entry.ingredient_name == "Onions"
    assert entry.category == "fresh_produce"


def test_duplicate_names_are_indexed_once_with_all_categories(index):
    entry = index.find_exact("butter")
    assert entry.categories == ("cooking_essentials", "dairy_cold")
    assert entry.category == "cooking_essentials"
    assert len(index) == 6


@pytest.mark.parametrize(
    "query, expected_name",
    [
        ("diced onion", "Onions"),  # query contains entry
        ("tomato", "cherry tomatoes"),  # entry contains query
        ("garlic butter", "garlic"),  # first in iteration order wins
        ("oil", "olive oil"),
    ],
)
def test_substring_lookup(index, query, expected_name):
    assert index.find_substring(query).ingredient_name == expected_name


def test_substring_lookup_misses(index):
    assert index.find_substring("maple syrup") is None
    assert index.find_substring("") is None


def test_lookup_prefers_exact_over_substring(index):
    assert index.lookup("garlic").ingredient_name == "garlic"
    assert index.lookup("garlic clove").ingredient_name == "garlic"
    assert index.lookup("saffron") is None


def test_iteration_follows_category_then_insertion_order(index):
    assert [entry.normalized for entry in index] == [
        "onion",
        "garlic",
        "cherry tomato",
        "olive oil",
        "butter",
        "milk",
    ]


def test_index_is_a_snapshot(inventory):
    index = GroceryIndex(inventory)
    inventory["fresh_produce"].append("shallots")
    inventory["frozen"] = ["peas"]

    assert "shallot" not in index
    assert "pea" not in index
    assert "shallot" in GroceryIndex(inventory)


def test_blank_names_are_skipped():
    index = GroceryIndex({"pantry_staples": ["", "   ", "honey"]})
    assert len(index) == 1
    assert "honey" in index


@pytest.mark.parametrize("inventory", [None, {}, {"fresh_produce": []}])
def test_empty_inventory(inventory):
    index = GroceryIndex(inventory)
    assert len(index) == 0
    assert index.lookup("onion") is None


def test_categories_for(index):
    assert index.categories_for("2 sticks butter") == ["cooking_essentials", "dairy_cold"]
    assert index.categories_for("saffron") == []


def test_entries_cannot_be_modified(index):
    entry = next(iter(index))

    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.categories = ("tampered",)
    with pytest.raises(AttributeError):
        entry.categories.insert(0, "tampered")

    result = match_ingredient(index, "2 cups diced onions")
    assert result.matched_category == "fresh_produce"


def test_categories_for_returns_a_copy(index):
    categories = index.categories_for("butter")
    categories.append("tampered")
    assert index.categories_for("butter") == ["cooking_essentials", "dairy_cold"]
