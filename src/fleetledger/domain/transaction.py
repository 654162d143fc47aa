"""Transaction domain service."""

import random
import uuid
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

import structlog

from fleetledger.domain.chart import ACCOUNTS_PAYABLE, BANK
from fleetledger.domain.entities import Transaction, TransactionCategory
from fleetledger.domain.errors import ValidationError, invalid_choice

if TYPE_CHECKING:
    from fleetledger.database.base import TransactionStore

logger = structlog.get_logger(__name__)

# Accounts a form submission may name as the paying side
CONTRA_ACCOUNTS = (BANK, ACCOUNTS_PAYABLE)

# Categories recorded as outflows regardless of the sign typed in
OUTFLOW_CATEGORIES = (TransactionCategory.EXPENSE, TransactionCategory.ASSET)


def new_transaction_id(prefix: str = "TX") -> str:
    """Generate a fresh transaction id."""
    return f"{prefix}-{uuid.uuid4().hex[:12].upper()}"


def coerce_category(category: str | TransactionCategory) -> TransactionCategory:
    """Convert a category name (any case) to TransactionCategory.

    Raises:
        ValidationError: If category is not a known transaction category
    """
    if isinstance(category, TransactionCategory):
        return category
    for member in TransactionCategory:
        if member.value.lower() == str(category).strip().lower():
            return member
    raise ValidationError(
        invalid_choice("category", str(category), [c.value for c in TransactionCategory])
    )


def signed_amount(category: TransactionCategory, amount: Decimal) -> Decimal:
    """Apply the sign convention of a category to an amount typed by a user."""
    if category in OUTFLOW_CATEGORIES:
        return -abs(amount)
    return abs(amount)


class TransactionService:
    """Service for recording transactions in the caller's store."""

    def __init__(self, store: "TransactionStore"):
        """Initialize transaction service.

        Args:
            store: Transaction store instance
        """
        self.store = store

    def build_transaction(
        self,
        date: date,
        category: str | TransactionCategory,
        amount: Decimal,
        description: str = "",
        reference: Optional[str] = None,
        contra_account: Optional[str] = BANK,
    ) -> Transaction:
        """Build a transaction from a single form submission without storing it.

        Args:
            date: Transaction date
            category: Transaction category name or enum
            amount: Amount; the sign is forced by category (Expense and Asset
                are outflows, everything else is an inflow)
            description: Free-text description
            reference: External document id; generated when omitted
            contra_account: Paying account, Bank (1002) or Accounts Payable (2000)

        Returns:
            Transaction entity

        Raises:
            ValidationError: If category or contra account is invalid
        """
        txn_category = coerce_category(category)
        if contra_account is not None and contra_account not in CONTRA_ACCOUNTS:
            raise ValidationError(
                invalid_choice("contra account", contra_account, list(CONTRA_ACCOUNTS))
            )

        if not reference:
            reference = f"REF-{random.randint(0, 999)}"

        return Transaction(
            id=new_transaction_id(),
            date=date,
            description=description or "",
            category=txn_category,
            amount=signed_amount(txn_category, amount),
            reference=reference,
            contra_account=contra_account,
        )

    def create_transaction(
        self,
        date: date,
        category: str | TransactionCategory,
        amount: Decimal,
        description: str = "",
        reference: Optional[str] = None,
        contra_account: Optional[str] = BANK,
    ) -> Transaction:
        """Build a transaction from a form submission and append it to the store.

        Returns:
            The stored Transaction entity

        Raises:
            ValidationError: If category or contra account is invalid
        """
        transaction = self.build_transaction(
            date=date,
            category=category,
            amount=amount,
            description=description,
            reference=reference,
            contra_account=contra_account,
        )
        self.store.append_transaction(transaction)
        logger.info(
            "transaction_recorded",
            transaction_id=transaction.id,
            category=transaction.category.value,
            amount=str(transaction.amount),
        )
        return transaction

    def add_transactions(self, transactions: list[Transaction]) -> int:
        """Append already-built transactions as one batch."""
        return self.store.append_transactions(transactions)

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by id."""
        return self.store.get_transaction(transaction_id)

    def list_transactions(self, newest_first: bool = True) -> list[Transaction]:
        """List transactions, most recently added first by default."""
        return self.store.list_transactions(newest_first=newest_first)

    def search_transactions(self, term: Optional[str] = None) -> list[Transaction]:
        """Filter transactions by description or reference.

        An empty term returns every transaction, newest date first.
        """
        if not term:
            return sorted(
                self.store.list_transactions(newest_first=True),
                key=lambda txn: txn.date,
                reverse=True,
            )
        return self.store.search_transactions(term)
