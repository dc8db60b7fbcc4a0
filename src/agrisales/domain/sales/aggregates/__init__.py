"""Aggregates of the sales domain."""

from agrisales.domain.sales.aggregates.transaction_store import (
    ALL_DEALERS_LABEL,
    UNKNOWN_DEALER_LABEL,
    TransactionStore,
)

__all__ = [
    "ALL_DEALERS_LABEL",
    "UNKNOWN_DEALER_LABEL",
    "TransactionStore",
]
