"""Ordering, truncation and percentage shaping of grouped sums."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Optional, TypeVar

from agrisales.domain.sales.exceptions import InvalidTopNError

K = TypeVar("K")

ONE_DECIMAL = Decimal("0.1")
HUNDRED = Decimal("100")
ZERO = Decimal("0")


class RankingService:
    """Static helpers that turn keyed sums into display-ready sequences."""

    @staticmethod
    def rank_descending(
        pairs: Iterable[tuple[K, Decimal]],
        top_n: Optional[int] = None,
    ) -> list[tuple[K, Decimal]]:
        """Sort by value descending, keeping input order among equal values.

        Raises
        ------
        InvalidTopNError
            If ``top_n`` is given and is not a positive integer.
        """
        if top_n is not None:
            RankingService.validate_top_n(top_n)
        # sorted() is stable, so ties keep their first-occurrence order
        ranked = sorted(pairs, key=lambda x: x[1], reverse=True)
        if top_n is not None:
            return ranked[:top_n]
        return ranked

    @staticmethod
    def validate_top_n(top_n: object) -> int:
        if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n <= 0:
            raise InvalidTopNError(top_n)
        return top_n

    @staticmethod
    def sort_alphabetically(
        pairs: Iterable[tuple[K, Decimal]],
        name_func: Callable[[K], str],
    ) -> list[tuple[K, Decimal]]:
        return sorted(pairs, key=lambda x: name_func(x[0]))

    @staticmethod
    def percentage(part: Decimal, total: Decimal) -> Decimal:
        """``part / total * 100`` to one decimal place, 0 for an empty total."""
        if total == 0:
            return ZERO.quantize(ONE_DECIMAL)
        return (part / total * HUNDRED).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)

    @staticmethod
    def with_percentages(
        pairs: Sequence[tuple[K, Decimal]],
    ) -> tuple[Decimal, list[tuple[K, Decimal, Decimal]]]:
        """Attach the share of the total to every pair.

        Returns the total together with ``(key, amount, percentage)`` triples
        in input order.
        """
        total = sum((amount for _, amount in pairs), ZERO)
        shaped = [
            (key, amount, RankingService.percentage(amount, total))
            for key, amount in pairs
        ]
        return total, shaped

    @staticmethod
    def display_name(category: Enum | str) -> str:
        """Human-readable category name, e.g. ``seed-treatment`` -> ``Seed treatment``."""
        raw = category.value if isinstance(category, Enum) else str(category)
        if not raw:
            return raw
        return (raw[0].upper() + raw[1:]).replace("-", " ")
