"""Canonical grocery categories and category suggestion heuristics."""

import logging
from typing import Dict, Iterable, List, Mapping, Sequence

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "pantry_staples"

# Grouped by how food is stored and used in a kitchen, not by food science.
# Each category carries a display name and a small starter set for new users.
GROCERY_CATEGORIES: Dict[str, Dict] = {
    "proteins": {
        "name": "Proteins",
        "items": [
            "chicken breast",
            "chicken thighs",
            "ground beef",
            "salmon",
            "eggs",
            "tofu",
            "greek yogurt",
            "beans",
            "lentils",
            "nuts",
        ],
    },
    "fresh_produce": {
        "name": "Fresh Produce",
        "items": [
            "onions",
            "garlic",
            "carrots",
            "spinach",
            "tomatoes",
            "bell peppers",
            "avocados",
            "lemons",
            "basil",
            "cilantro",
        ],
    },
    "flavor_builders": {
        "name": "Flavor Builders",
        "items": [
            "salt",
            "black pepper",
            "garlic powder",
            "cumin",
            "paprika",
            "oregano",
            "thyme",
            "bay leaves",
            "ginger",
            "chili powder",
        ],
    },
    "cooking_essentials": {
        "name": "Cooking Essentials",
        "items": [
            "olive oil",
            "vegetable oil",
            "butter",
            "chicken stock",
            "vegetable stock",
            "balsamic vinegar",
            "soy sauce",
            "vanilla extract",
        ],
    },
    "bakery_grains": {
        "name": "Bakery & Grains",
        "items": ["bread", "pasta", "rice", "flour", "bagels", "tortillas", "quinoa", "oats"],
    },
    "dairy_cold": {
        "name": "Dairy & Cold",
        "items": [
            "milk",
            "cheese",
            "yogurt",
            "butter",
            "eggs",
            "cream cheese",
            "heavy cream",
            "sour cream",
        ],
    },
    "pantry_staples": {
        "name": "Pantry Staples",
        "items": [
            "canned tomatoes",
            "canned beans",
            "pasta sauce",
            "honey",
            "peanut butter",
            "crackers",
            "soup",
            "olives",
        ],
    },
    "frozen": {
        "name": "Frozen",
        "items": [
            "frozen vegetables",
            "frozen berries",
            "ice cream",
            "frozen pizza",
            "frozen shrimp",
            "popsicles",
        ],
    },
}

CATEGORY_KEYS = list(GROCERY_CATEGORIES)

LEGACY_CATEGORY_MAP = {
    "vegetables": "fresh_produce",
    "fruits": "fresh_produce",
    "spices": "flavor_builders",
    "dairy": "dairy_cold",
    "pantry": "pantry_staples",
    "other": "pantry_staples",
    "meat": "proteins",
    "seafood": "proteins",
    "grains": "bakery_grains",
    "bread": "bakery_grains",
}

# Checked in order; the first category with a keyword found in the ingredient wins
KEYWORD_CATEGORIES = [
    ("proteins", ["meat", "chicken", "beef", "fish", "pork", "lamb", "turkey", "shrimp", "tofu"]),
    ("fresh_produce", ["vegetable", "onion", "carrot", "tomato", "bell pepper", "lettuce", "spinach"]),
    ("flavor_builders", ["spice", "herb", "salt", "pepper", "cumin", "paprika", "oregano"]),
    ("dairy_cold", ["milk", "cheese", "yogurt", "butter", "cream"]),
    ("fresh_produce", ["fruit", "apple", "banana", "berry", "orange", "lemon", "lime"]),
    ("cooking_essentials", ["oil", "vinegar", "stock", "broth", "sauce"]),
    ("bakery_grains", ["flour", "rice", "pasta", "bread", "oat", "noodle"]),
]

# (recipe category fragment, keywords, suggested category)
CONTEXT_RULES = [
    ("breakfast", ["egg", "bacon"], "proteins"),
    ("breakfast", ["milk", "cheese"], "dairy_cold"),
    ("breakfast", ["bread", "toast"], "bakery_grains"),
    ("dessert", ["sugar", "chocolate", "vanilla"], "pantry_staples"),
    ("dessert", ["flour"], "bakery_grains"),
    ("middle eastern", ["tahini", "hummus"], "pantry_staples"),
    ("middle eastern", ["sumac", "zaatar", "za'atar"], "flavor_builders"),
    ("asian", ["soy", "miso"], "cooking_essentials"),
    ("asian", ["ginger", "sesame"], "flavor_builders"),
]


def is_valid_category(category: str) -> bool:
    return category in GROCERY_CATEGORIES


def category_display_name(category: str) -> str:
    """Return the display name for a category, deriving one for unknown keys."""
    if category in GROCERY_CATEGORIES:
        return GROCERY_CATEGORIES[category]["name"]
    return category.replace("_", " ").strip().capitalize()


def normalize_category(category: str) -> str:
    """Map a category name, including legacy names, to a canonical key.

    Unknown categories are logged and mapped to the pantry staples bucket.
    """
    normalized = category.lower().strip().replace(" ", "_")

    if normalized in LEGACY_CATEGORY_MAP:
        return LEGACY_CATEGORY_MAP[normalized]
    if is_valid_category(normalized):
        return normalized

    logger.warning(f"Unknown category '{category}', defaulting to {DEFAULT_CATEGORY}")
    return DEFAULT_CATEGORY


def suggest_category(ingredient: str, recipe_categories: Sequence[str] = ()) -> str:
    """Guess which grocery category an ingredient belongs in.

    Recipe context (e.g. "Course: Breakfast") is consulted first, then plain
    keyword matching on the ingredient text.

    Args:
        ingredient: Ingredient name or full ingredient line.
        recipe_categories: Category labels attached to the recipe the
            ingredient came from.

    Returns:
        A canonical category key; pantry staples when nothing fits.
    """
    ingredient_lower = ingredient.lower()
    context = " ".join(recipe_categories).lower()

    for fragment, keywords, category in CONTEXT_RULES:
        if fragment in context and any(k in ingredient_lower for k in keywords):
            return category

    for category, keywords in KEYWORD_CATEGORIES:
        if any(keyword in ingredient_lower for keyword in keywords):
            return category

    return DEFAULT_CATEGORY


def validate_inventory_categories(inventory: Mapping[str, Iterable[str]]) -> List[str]:
    """Return the inventory categories that are not canonical keys."""
    return [category for category in inventory if not is_valid_category(category)]


def starter_inventory() -> Dict[str, List[str]]:
    """Return a fresh copy of the starter items for every category."""
    return {key: list(meta["items"]) for key, meta in GROCERY_CATEGORIES.items()}
