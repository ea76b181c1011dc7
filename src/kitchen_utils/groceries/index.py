"""In-memory lookup structure over a user's kitchen inventory."""

import dataclasses
import logging
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from kitchen_utils.ingredients.normalization import normalize_ingredient_name

logger = logging.getLogger(__name__)

# category -> ingredient names, in the order the user added them
GroceryInventory = Mapping[str, Sequence[str]]


@dataclasses.dataclass(frozen=True)
class IndexEntry:
    """One normalized ingredient name in the index.

    Attributes:
        normalized: The comparison key.
        ingredient_name: The inventory name as the user wrote it (first seen).
        categories: Every category the name appears in, in iteration order.
    """

    normalized: str
    ingredient_name: str
    categories: Tuple[str, ...]

    @property
    def category(self) -> str:
        return self.categories[0]


class GroceryIndex:
    """Lookup structure built once from an inventory snapshot.

    The index copies what it needs out of the inventory, so later changes to
    the inventory are not seen. Build a new index whenever the inventory
    changes.
    """

    def __init__(self, inventory: Optional[GroceryInventory] = None):
        names: Dict[str, str] = {}
        categories: Dict[str, List[str]] = {}

        for category, ingredients in (inventory or {}).items():
            for ingredient in ingredients:
                normalized = normalize_ingredient_name(ingredient)
                if not normalized:
                    continue

                names.setdefault(normalized, ingredient)
                seen = categories.setdefault(normalized, [])
                if category not in seen:
                    seen.append(category)

        self._entries: Dict[str, IndexEntry] = {
            normalized: IndexEntry(normalized, name, tuple(categories[normalized]))
            for normalized, name in names.items()
        }
        logger.debug(f"Indexed {len(self._entries)} grocery names")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, normalized: str) -> bool:
        return normalized in self._entries

    def __iter__(self) -> Iterator[IndexEntry]:
        return iter(self._entries.values())

    def find_exact(self, normalized: str) -> Optional[IndexEntry]:
        return self._entries.get(normalized)

    def find_substring(self, normalized: str) -> Optional[IndexEntry]:
        """Return the first entry that contains, or is contained in, the query.

        Entries are scanned in category order, then in the order ingredients
        were listed within each category.
        """
        if not normalized:
            return None

        for key, entry in self._entries.items():
            if normalized in key or key in normalized:
                return entry
        return None

    def lookup(self, normalized: str) -> Optional[IndexEntry]:
        """Exact lookup, falling back to a substring scan."""
        return self.find_exact(normalized) or self.find_substring(normalized)

    def categories_for(self, ingredient: str) -> List[str]:
        """Return every category holding an ingredient, matched by normalized name."""
        entry = self.find_exact(normalize_ingredient_name(ingredient))
        return list(entry.categories) if entry else []
