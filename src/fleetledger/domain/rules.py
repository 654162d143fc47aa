"""Ordered keyword rules for description-based classification.

Each table is evaluated top to bottom and the first matching rule wins, so
priority is the order of the tuple. Matching is a case-insensitive substring
test against the transaction or line description.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from fleetledger.domain.chart import (
    BANK,
    CASH_ON_HAND,
    MAINTENANCE_EXPENSE,
    RENT_EXPENSE,
    RENTAL_REVENUE,
)
from fleetledger.domain.entities import TransactionCategory


@dataclass(frozen=True)
class KeywordRule:
    """Map descriptions containing any (or all) keywords to a target."""

    keywords: tuple[str, ...]
    target: str
    require_all: bool = False

    def matches(self, text: str) -> bool:
        """Return True when text satisfies this rule."""
        lowered = text.lower()
        if self.require_all:
            return all(keyword in lowered for keyword in self.keywords)
        return any(keyword in lowered for keyword in self.keywords)


def first_match(
    rules: Sequence[KeywordRule], text: str, default: Optional[str] = None
) -> Optional[str]:
    """Return the target of the first rule matching text, else default."""
    for rule in rules:
        if rule.matches(text):
            return rule.target
    return default


# Expense account debited by a derived Expense entry
EXPENSE_ACCOUNT_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(("maintenance", "parts"), MAINTENANCE_EXPENSE),
)
DEFAULT_EXPENSE_ACCOUNT = RENT_EXPENSE

# Category of an imported outflow without debit/credit columns
OUTFLOW_CATEGORY_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(("asset", "aset", "motor", "unit"), TransactionCategory.ASSET.value),
)
DEFAULT_OUTFLOW_CATEGORY = TransactionCategory.EXPENSE.value

# Account of a raw journal line imported from a CSV
IMPORTED_LINE_ACCOUNT_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(("revenue", "sales"), RENTAL_REVENUE),
    KeywordRule(("bank", "bca"), BANK),
    KeywordRule(("cash",), CASH_ON_HAND),
    KeywordRule(("maintenance", "service"), MAINTENANCE_EXPENSE),
    KeywordRule(("rent", "expense"), RENT_EXPENSE, require_all=True),
)
