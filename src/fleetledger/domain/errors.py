"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


def duplicate_transaction_id(transaction_id: str) -> str:
    """Return message for duplicate transaction ID."""
    return f"Transaction with id '{transaction_id}' already exists"


def duplicate_account_code(code: str) -> str:
    """Return message for a chart of accounts listing the same code twice."""
    return f"Account code '{code}' appears more than once in the chart of accounts"


def invalid_choice(field: str, value: str, choices: list[str]) -> str:
    """Return message for a value outside its allowed set."""
    return f"Invalid {field} '{value}'. Must be one of: {', '.join(choices)}"
