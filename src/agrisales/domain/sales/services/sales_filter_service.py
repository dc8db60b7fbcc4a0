"""Dealer and date filtering over a transaction store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from agrisales.domain.sales.exceptions import InconsistentReferenceError

if TYPE_CHECKING:
    from agrisales.domain.sales.aggregates import TransactionStore
    from agrisales.domain.sales.entities import Transaction
    from agrisales.domain.sales.value_objects import ReportingPeriod

logger = logging.getLogger(__name__)


def normalize_dealer_id(dealer_id: Optional[str | int]) -> Optional[str]:
    """Map the dealer filter to ``None`` (all dealers) or a stripped string id."""
    if dealer_id is None:
        return None
    normalized = str(dealer_id).strip()
    return normalized or None


class SalesFilterService:
    """Select the transactions a report aggregates over."""

    @staticmethod
    def apply(
        store: TransactionStore,
        dealer_id: Optional[str] = None,
        period: Optional[ReportingPeriod] = None,
    ) -> list[Transaction]:
        """Return matching transactions in store order.

        A transaction is kept when no dealer filter is given or its dealer id
        equals ``dealer_id``, and when no period is given or its date lies in
        ``[period.start, period.end]``. Records that disagree with the
        reference tables are logged and skipped.
        """
        dealer_filter = normalize_dealer_id(dealer_id)
        matched: list[Transaction] = []
        skipped = 0

        for transaction in store:
            if dealer_filter is not None and not transaction.dealer.matches(
                dealer_filter,
            ):
                continue
            if period is not None and not period.contains(transaction.date):
                continue

            try:
                store.check_references(transaction)
            except InconsistentReferenceError as exc:
                skipped += 1
                logger.warning(
                    "Skipping transaction on %s (%s): %s",
                    transaction.date.isoformat(),
                    exc.details,
                    exc.message,
                )
                continue

            matched.append(transaction)

        if skipped:
            logger.warning(
                "Skipped %d inconsistent transaction(s) while filtering",
                skipped,
            )
        return matched

    @staticmethod
    def for_customer(
        transactions: list[Transaction],
        customer_id: int,
    ) -> list[Transaction]:
        return [t for t in transactions if t.customer.id == customer_id]
