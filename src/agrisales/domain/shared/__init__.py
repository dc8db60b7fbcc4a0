"""Shared domain building blocks."""

from agrisales.domain.shared.exceptions import (
    BusinessRuleViolation,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

__all__ = [
    "BusinessRuleViolation",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ValidationError",
]
