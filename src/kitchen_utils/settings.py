"""Tunable constants for ingredient matching."""

import dataclasses
import json
import pathlib
from typing import Union


@dataclasses.dataclass(frozen=True)
class MatchSettings:
    """Confidence bands and thresholds used by the ingredient matcher.

    The band limits are heuristics. What matters is that they keep the
    ordering exact (100) > partial > fuzzy > none (0).

    Attributes:
        partial_min_confidence: Confidence for a very short substring overlap.
        partial_max_confidence: Confidence for a substring covering nearly the
            whole string.
        fuzzy_min_confidence: Confidence for a weak word-level overlap.
        fuzzy_max_confidence: Confidence when every word overlaps.
        min_fuzzy_word_length: Words shorter than this only match by equality,
            never by containment.
        availability_threshold: Default confidence callers require before
            treating a match as "really" available.
    """

    partial_min_confidence: int = 60
    partial_max_confidence: int = 90
    fuzzy_min_confidence: int = 40
    fuzzy_max_confidence: int = 60
    min_fuzzy_word_length: int = 3
    availability_threshold: int = 50

    def __post_init__(self):
        bands = (
            self.fuzzy_min_confidence,
            self.fuzzy_max_confidence,
            self.partial_min_confidence,
            self.partial_max_confidence,
        )
        if bands[0] < 0 or bands[-1] >= 100 or list(bands) != sorted(bands):
            raise ValueError(
                "Confidence bands must satisfy 0 <= fuzzy_min <= fuzzy_max "
                f"<= partial_min <= partial_max < 100, got {bands}"
            )
        if not 0 <= self.availability_threshold <= 100:
            raise ValueError(
                f"availability_threshold must be in [0, 100], "
                f"got {self.availability_threshold}"
            )
        if self.min_fuzzy_word_length < 1:
            raise ValueError("min_fuzzy_word_length must be at least 1")


DEFAULT_SETTINGS = MatchSettings()


def load_settings(path: Union[str, pathlib.Path]) -> MatchSettings:
    """Load settings overrides from a JSON file.

    Args:
        path: JSON file holding an object whose keys are MatchSettings fields.

    Returns:
        MatchSettings with the overrides applied on top of the defaults.

    Raises:
        ValueError: If the file holds unknown keys or invalid values.
    """
    with open(path, "r", encoding="utf-8") as f:
        overrides = json.load(f)

    if not isinstance(overrides, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object")

    known = {field.name for field in dataclasses.fields(MatchSettings)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown settings in {path}: {', '.join(sorted(unknown))}")

    return dataclasses.replace(DEFAULT_SETTINGS, **overrides)
