"""Sales domain exceptions."""

from typing import Any

from agrisales.domain.shared.exceptions import (
    BusinessRuleViolation,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidPeriodError(ValidationError):
    """Raised when a period token is neither a rolling window nor a quarter."""

    def __init__(self, token: Any, reason: str | None = None) -> None:
        message = f"Invalid period '{token}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_PERIOD,
            details={"token": token, "reason": reason},
        )


class InvalidTopNError(ValidationError):
    """Raised when a leaderboard size is not a positive integer."""

    def __init__(self, top_n: Any) -> None:
        super().__init__(
            message=f"top_n must be a positive integer, got {top_n!r}",
            code=ErrorCode.INVALID_TOP_N,
            details={"top_n": top_n},
        )


class MixedCategorySetError(ValidationError):
    """Raised when a dataset uses categories outside its active set."""

    def __init__(self, category: str, category_set: str) -> None:
        super().__init__(
            message=(
                f"Category '{category}' does not belong to the "
                f"'{category_set}' category set"
            ),
            code=ErrorCode.MIXED_CATEGORY_SET,
            details={"category": category, "category_set": category_set},
        )


class DuplicateReferenceError(ValidationError):
    """Raised when a reference table contains the same id twice."""

    def __init__(self, table: str, record_id: int) -> None:
        super().__init__(
            message=f"Duplicate {table} id {record_id}",
            code=ErrorCode.DUPLICATE_REFERENCE,
            details={"table": table, "id": record_id},
        )


class CustomerNotFoundError(EntityNotFoundError):
    """Raised when a customer id is not in the reference table."""

    def __init__(self, customer_id: int) -> None:
        super().__init__(
            message=f"Customer '{customer_id}' not found",
            code=ErrorCode.CUSTOMER_NOT_FOUND,
            details={"customer_id": customer_id},
        )


class InconsistentReferenceError(BusinessRuleViolation):
    """Raised when a transaction disagrees with the reference tables.

    Reports skip such records instead of failing, see SalesFilterService.
    """

    def __init__(self, reason: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=f"Inconsistent transaction reference: {reason}",
            code=ErrorCode.INCONSISTENT_REFERENCE,
            details=details,
        )
