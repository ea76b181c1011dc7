import pytest

from kitchen_utils.ingredients.normalization import (
    normalize_ingredient_name,
    normalize_unit,
    singularize,
    tokenize,
)


@pytest.mark.parametrize(
    "input_text, expected_text",
    [
        ("2 cups diced yellow onions, chopped", "diced yellow onion"),
        ("1 clove garlic, minced", "garlic"),
        ("3 tbsp olive oil", "olive oil"),
        ("1 (14 oz) can crushed tomatoes", "crushed tomato"),
        ("½ cup sugar", "sugar"),
        ("1½ cups all-purpose flour", "all purpose flour"),
        ("a pinch of salt", "salt"),
        ("2 to 3 large eggs", "large egg"),
        ("2 Tbsp. soy sauce", "soy sauce"),
        ("Baker's chocolate", "baker chocolate"),
        ("Cherry Tomatoes", "cherry tomato"),
        ("Fresh basil leaves", "fresh basil leaf"),
        ("  lots   of   whitespace  ", "lot of whitespace"),
        ("salt to taste", "salt to taste"),
        ("two dozen eggs", "egg"),
    ],
)
def test_normalize_ingredient_name(input_text, expected_text):
    """Test that quantities, units, notes and plurals are stripped."""
    assert normalize_ingredient_name(input_text) == expected_text


@pytest.mark.parametrize(
    "input_text, expected_text",
    [
        ("2 cups", "cup"),
        ("garlic", "garlic"),
        (", diced", ", diced"),
        ("()", "()"),
        ("  !!  ", "!!"),
    ],
)
def test_normalize_ingredient_name_always_returns_something(input_text, expected_text):
    """A lone unit is kept, and text with no words falls back to the collapsed input."""
    assert normalize_ingredient_name(input_text) == expected_text


@pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
def test_normalize_ingredient_name_blank(blank):
    assert normalize_ingredient_name(blank) == ""


@pytest.mark.parametrize(
    "input_text",
    [
        "2 cups diced yellow onions, chopped",
        "1 (14 oz) can crushed tomatoes",
        "twos eggs",
        "leaveses",
        "2 cups",
        ", diced",
        "()",
        "Crème fraîche",
        "1/2 lb. ground beef (80% lean)",
        "3 Dashes Angostura Bitters",
        "molasses",
        "  ",
    ],
)
def test_normalize_ingredient_name_is_idempotent(input_text):
    once = normalize_ingredient_name(input_text)
    assert normalize_ingredient_name(once) == once


@pytest.mark.parametrize(
    "word, expected",
    [
        ("onions", "onion"),
        ("tomatoes", "tomato"),
        ("berries", "berry"),
        ("peaches", "peach"),
        ("radishes", "radish"),
        ("glasses", "glass"),
        ("leaves", "leaf"),
        ("cookies", "cookie"),
        ("pies", "pie"),
        ("molasses", "molasses"),
        ("hummus", "hummus"),
        ("oats", "oat"),
        ("egg", "egg"),
        ("peas", "pea"),
    ],
)
def test_singularize(word, expected):
    assert singularize(word) == expected
    assert singularize(expected) == expected


@pytest.mark.parametrize(
    "input_unit, expected_unit",
    [
        ("cups", "cup"),
        ("Tbsp.", "tablespoon"),
        ("lbs", "pound"),
        ("cloves", "clove"),
        ("handful", "handful"),
        ("smidgen", "smidgen"),
    ],
)
def test_normalize_unit(input_unit, expected_unit):
    assert normalize_unit(input_unit) == expected_unit


def test_tokenize_strips_punctuation_and_possessives():
    assert tokenize("Baker's all-purpose (unbleached) flour!") == [
        "baker",
        "all",
        "purpose",
        "unbleached",
        "flour",
    ]
