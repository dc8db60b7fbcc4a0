"""Product category enums and the category-set selector.

Two closed category sets exist in the sales data. A store works with exactly
one of them; the literal values are kept verbatim (including ``fungicidee``
in the legacy set) because downstream consumers key on them.
"""

from enum import Enum
from typing import Union


class Category(str, Enum):
    """Current six-value category set.

    Uses (str, Enum) for Python 3.10 compatibility (StrEnum is 3.11+).
    Declaration order is the canonical order of the category universe.
    """

    BIOLOGICALS = "biologicals"
    MICRONUTRIENTS = "micronutrients"
    ADJUVANTS = "adjuvants"
    HERBICIDE = "herbicide"
    FUNGICIDE = "fungicide"
    INSECTICIDE = "insecticide"


class LegacyCategory(str, Enum):
    """Earlier nine-value category set."""

    BIOLOGICALS = "biologicals"
    MICRONUTRIENTS = "micronutrients"
    ADJUVANTS = "adjuvants"
    SEED_TREATMENT = "seed-treatment"
    HERBICIDE = "herbicide"
    FUNGICIDEE = "fungicidee"
    INSECTICIDE = "insecticide"
    FERTILIZER = "fertilizer"
    SEED = "seed"


SalesCategory = Union[Category, LegacyCategory]


class CategorySet(str, Enum):
    """Selects which category enum is active for a dataset."""

    CURRENT = "current"
    LEGACY = "legacy"

    @property
    def enum(self) -> type[Category] | type[LegacyCategory]:
        if self is CategorySet.LEGACY:
            return LegacyCategory
        return Category

    def members(self) -> list[SalesCategory]:
        """All categories of this set, in declaration order."""
        return list(self.enum)

    def contains(self, value: str | Enum) -> bool:
        raw = value.value if isinstance(value, Enum) else value
        return raw in {member.value for member in self.enum}

    def coerce(self, value: str | Enum) -> SalesCategory:
        """Bind a category literal (or a member of either enum) to this set.

        Raises
        ------
        ValueError
            If the literal is not part of this set.
        """
        raw = value.value if isinstance(value, Enum) else str(value)
        try:
            return self.enum(raw)
        except ValueError:
            valid = [member.value for member in self.enum]
            msg = f"Category '{raw}' is not part of the {self.value} set. Valid: {valid}"
            raise ValueError(msg) from None

    @classmethod
    def from_string(cls, value: str) -> "CategorySet":
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = [s.value for s in cls]
            msg = f"Unknown category set: {value}. Valid: {valid}"
            raise ValueError(msg) from None
