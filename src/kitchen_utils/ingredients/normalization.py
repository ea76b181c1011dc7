"""Ingredient name normalization utilities."""

import re
from typing import Dict, FrozenSet, List

# Unit normalization mapping
UNIT_MAP = {
    # Volume
    "cup": ["cup", "cups", "c"],
    "tablespoon": [
        "tablespoon",
        "tablespoons",
        "tbsp",
        "tbsps",
        "tbs",
        "tbl",
        "tablespoonful",
        "tablespoonfuls",
    ],
    "teaspoon": ["teaspoon", "teaspoons", "tsp", "tsps", "teaspoonful", "teaspoonfuls"],
    "fluid ounce": ["floz"],
    "pint": ["pint", "pints", "pt"],
    "quart": ["quart", "quarts", "qt"],
    "gallon": ["gallon", "gallons", "gal"],
    "ml": ["milliliter", "milliliters", "millilitre", "millilitres", "ml", "mls"],
    "l": ["liter", "liters", "litre", "litres", "l"],
    # Weight
    "ounce": ["ounce", "ounces", "oz", "ozs"],
    "pound": ["pound", "pounds", "lb", "lbs"],
    "gram": ["gram", "grams", "g", "gs", "gr"],
    "kilogram": ["kilogram", "kilograms", "kg", "kgs"],
    # Count/measure
    "clove": ["clove", "cloves"],
    "slice": ["slice", "slices"],
    "pinch": ["pinch", "pinches"],
    "dash": ["dash", "dashes"],
    "piece": ["piece", "pieces"],
    "can": ["can", "cans", "tin", "tins"],
    "jar": ["jar", "jars"],
    "package": ["package", "packages", "pkg", "packet", "packets"],
    "bunch": ["bunch", "bunches"],
    "handful": ["handful", "handfuls"],
    "sprig": ["sprig", "sprigs"],
    "stick": ["stick", "sticks"],
    "head": ["head", "heads"],
    "stalk": ["stalk", "stalks"],
}

# Create reverse mapping for lookup
UNIT_LOOKUP = {v: k for k, vs in UNIT_MAP.items() for v in vs}

# Leading words that express an amount rather than an ingredient
QUANTITY_WORDS = {
    "a",
    "an",
    "of",
    "to",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "dozen",
}

STOP_WORDS = {"and", "or", "of", "with", "the", "a", "an", "for", "to", "in"}

UNICODE_FRAC = {
    "¼": ".25",
    "½": ".5",
    "¾": ".75",
    "⅓": ".333",
    "⅔": ".667",
    "⅛": ".125",
}

# Plurals the suffix rules get wrong
IRREGULAR_SINGULARS = {
    "leaves": "leaf",
    "loaves": "loaf",
    "halves": "half",
    "knives": "knife",
    "cookies": "cookie",
    "brownies": "brownie",
    "veggies": "veggie",
    "smoothies": "smoothie",
    "calves": "calf",
    "geese": "goose",
}

# Words that look plural but are not
INVARIANT_WORDS = {"molasses", "hummus", "couscous", "asparagus", "swiss", "citrus"}

# Groups of words that name the same ingredient in different regions
SYNONYM_GROUPS = [
    {"cilantro", "coriander"},
    {"aubergine", "eggplant"},
    {"courgette", "zucchini"},
    {"garbanzo", "chickpea"},
    {"prawn", "shrimp"},
    {"rocket", "arugula"},
    {"yoghurt", "yogurt"},
    {"capsicum", "pepper"},
]

WORD_SYNONYMS: Dict[str, FrozenSet[str]] = {
    word: frozenset(group) for group in SYNONYM_GROUPS for word in group
}

_PARENTHETICAL = re.compile(r"\([^)]*\)")
_POSSESSIVE = re.compile(r"'s\b")
_PUNCTUATION = re.compile(r"[^\w\s]|_")


def normalize_unit(unit: str) -> str:
    """Normalize unit names to their standard form.

    Examples:
        >>> normalize_unit("Tbsp.")
        'tablespoon'
        >>> normalize_unit("handful")
        'handful'
    """
    unit = unit.lower().strip(".")
    return UNIT_LOOKUP.get(unit, unit)  # Return original if not found


def singularize(word: str) -> str:
    """Reduce a single lowercase word to its singular form.

    Suffix rules only; applying it twice gives the same result as once.
    """
    if word in IRREGULAR_SINGULARS:
        return IRREGULAR_SINGULARS[word]
    if len(word) <= 3 or word in INVARIANT_WORDS or not word.isalpha():
        return word
    if word.endswith("ies") and len(word) > 4:
        word = word[:-3] + "y"
    elif word.endswith(("ches", "shes", "sses", "xes", "zzes", "oes")):
        word = word[:-2]
    elif word.endswith("s") and not word.endswith(("ss", "us", "is")):
        word = word[:-1]
    return IRREGULAR_SINGULARS.get(word, word)


def _is_quantity_token(token: str) -> bool:
    if token.isdigit():
        return True
    # The singular is checked too so a second pass strips the same words
    return any(
        word in QUANTITY_WORDS or word in UNIT_LOOKUP
        for word in (token, singularize(token))
    )


def tokenize(text: str) -> List[str]:
    """Split text into lowercase words with punctuation removed."""
    text = _POSSESSIVE.sub("", text.lower())
    return _PUNCTUATION.sub(" ", text).split()


def normalize_ingredient_name(raw: str) -> str:
    """Canonicalize an ingredient string into a comparison key.

    Lowercases the text, removes parenthetical notes, drops everything after
    the first comma (preparation notes), strips leading quantities and units,
    removes punctuation and singularizes each word. The operation is
    deterministic, idempotent and never raises.

    Args:
        raw: Ingredient name or full recipe ingredient line.

    Returns:
        The normalized name. If nothing survives the pipeline, the lowercased,
        whitespace-collapsed input is returned instead.

    Examples:
        >>> normalize_ingredient_name("2 cups diced yellow onions, chopped")
        'diced yellow onion'
        >>> normalize_ingredient_name("1 (14 oz) can crushed tomatoes")
        'crushed tomato'
        >>> normalize_ingredient_name("  Garlic  ")
        'garlic'
    """
    if not raw:
        return ""

    text = (
        raw.replace("’", "'")
        .replace("‘", "'")
        .replace("“", '"')
        .replace("”", '"')
    )
    text = "".join(UNICODE_FRAC.get(c, c) for c in text).lower()
    text = _PARENTHETICAL.sub(" ", text)
    head = text.split(",", 1)[0]

    tokens = tokenize(head)
    # Keep at least one word so "2 cups" still normalizes to something
    while len(tokens) > 1 and _is_quantity_token(tokens[0]):
        tokens.pop(0)

    normalized = " ".join(singularize(token) for token in tokens)
    if not normalized:
        return " ".join(raw.lower().split())
    return normalized


def words_for_matching(normalized: str) -> List[str]:
    """Return the words of a normalized name with stop words removed."""
    return [word for word in normalized.split() if word not in STOP_WORDS]
