"""Tabular reports of recipe compatibility results."""

import logging
import pathlib
from typing import Iterable, Union

import pandas as pd

from kitchen_utils.ingredients.parsing import parse_ingredient_line
from kitchen_utils.recipes.models import RecipeCompatibility

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    "recipe_id",
    "total_ingredients",
    "available_count",
    "missing_count",
    "compatibility_score",
    "confidence_score",
    "missing_ingredients",
]

MATCH_COLUMNS = [
    "recipe_id",
    "recipe_ingredient",
    "amount",
    "unit",
    "match_type",
    "confidence",
    "matched_category",
    "matched_ingredient",
]


def compatibility_dataframe(results: Iterable[RecipeCompatibility]) -> pd.DataFrame:
    """Build a one-row-per-recipe summary, keeping the input order."""
    data = [
        {
            "recipe_id": result.recipe_id,
            "total_ingredients": result.total_ingredients,
            "available_count": result.available_count,
            "missing_count": result.missing_count,
            "compatibility_score": result.compatibility_score,
            "confidence_score": result.confidence_score,
            "missing_ingredients": "; ".join(result.missing_ingredient_names),
        }
        for result in results
    ]
    return pd.DataFrame(data, columns=SUMMARY_COLUMNS)


def match_dataframe(results: Iterable[RecipeCompatibility]) -> pd.DataFrame:
    """Build a one-row-per-ingredient-line table of match details."""
    data = []
    for result in results:
        for match in result.available_ingredients + result.missing_ingredients:
            parsed = parse_ingredient_line(match.recipe_ingredient)
            data.append(
                {
                    "recipe_id": result.recipe_id,
                    "recipe_ingredient": match.recipe_ingredient,
                    "amount": parsed.amount,
                    "unit": parsed.unit,
                    "match_type": match.match_type.value,
                    "confidence": match.confidence,
                    "matched_category": match.matched_category,
                    "matched_ingredient": match.matched_ingredient,
                }
            )
    return pd.DataFrame(data, columns=MATCH_COLUMNS)


def write_compatibility_csv(
    results: Iterable[RecipeCompatibility], output_file: Union[str, pathlib.Path]
) -> int:
    """Write the recipe summary to a CSV file.

    Returns:
        The number of rows written.
    """
    df = compatibility_dataframe(results)
    df.to_csv(output_file, index=False)
    logger.info(f"Wrote {len(df)} recipe compatibility rows to {output_file}")
    return len(df)
