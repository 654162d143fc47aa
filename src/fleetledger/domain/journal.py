"""Double-entry journal derivation."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Iterable, Mapping, Optional, Sequence

import structlog

from fleetledger.domain.chart import (
    ACCOUNTS_PAYABLE,
    BANK,
    FLEET_INVENTORY,
    RENTAL_REVENUE,
    ChartOfAccounts,
)
from fleetledger.domain.entities import (
    EntryOrigin,
    JournalEntry,
    JournalLine,
    Transaction,
    TransactionCategory,
)
from fleetledger.domain.rules import (
    DEFAULT_EXPENSE_ACCOUNT,
    EXPENSE_ACCOUNT_RULES,
    first_match,
)

logger = structlog.get_logger(__name__)

AccountSelector = Callable[[Transaction], str]


def fixed(code: str) -> AccountSelector:
    """Selector that always posts to one account."""
    return lambda txn: code


def expense_account(txn: Transaction) -> str:
    """Expense account picked from the transaction description."""
    return first_match(EXPENSE_ACCOUNT_RULES, txn.description, DEFAULT_EXPENSE_ACCOUNT)


def payable_or_bank(txn: Transaction) -> str:
    """Accounts Payable when the transaction names it as contra, else Bank."""
    if txn.contra_account == ACCOUNTS_PAYABLE:
        return ACCOUNTS_PAYABLE
    return BANK


@dataclass(frozen=True)
class PostingRule:
    """Which account is debited and which is credited for a category."""

    debit: AccountSelector
    credit: AccountSelector


POSTING_RULES: dict[TransactionCategory, PostingRule] = {
    TransactionCategory.REVENUE: PostingRule(debit=fixed(BANK), credit=fixed(RENTAL_REVENUE)),
    TransactionCategory.EXPENSE: PostingRule(debit=expense_account, credit=payable_or_bank),
    TransactionCategory.ASSET: PostingRule(debit=fixed(FLEET_INVENTORY), credit=fixed(BANK)),
}


class JournalService:
    """Service deriving journal entries from transactions.

    Derivation is a pure function of the transaction, the chart and the
    rule table; running it twice yields equal entries.
    """

    def __init__(
        self,
        chart: ChartOfAccounts,
        rules: Optional[Mapping[TransactionCategory, PostingRule]] = None,
    ):
        """Initialize journal service.

        Args:
            chart: Chart of accounts used for line display names
            rules: Posting rules by category; defaults to POSTING_RULES
        """
        self.chart = chart
        self.rules = dict(POSTING_RULES if rules is None else rules)

    def _line(self, code: str, debit: Decimal = Decimal("0"), credit: Decimal = Decimal("0")) -> JournalLine:
        return JournalLine(
            account_id=code,
            account_name=self.chart.name_for(code),
            debit=debit,
            credit=credit,
        )

    def derive(self, transaction: Transaction) -> JournalEntry:
        """Derive the journal entry for one transaction.

        Categories without a posting rule (Liability and Equity by default)
        and zero amounts produce an entry with no lines.
        """
        lines: tuple[JournalLine, ...] = ()
        rule = self.rules.get(transaction.category)
        amount = abs(transaction.amount)

        if rule is None:
            logger.warning(
                "no_posting_rule",
                transaction_id=transaction.id,
                category=transaction.category.value,
            )
        elif amount != 0:
            lines = (
                self._line(rule.debit(transaction), debit=amount),
                self._line(rule.credit(transaction), credit=amount),
            )

        return JournalEntry(
            id=transaction.id,
            date=transaction.date,
            reference=transaction.reference,
            description=transaction.description,
            lines=lines,
            origin=EntryOrigin.DERIVED,
        )

    def derive_all(self, transactions: Iterable[Transaction]) -> list[JournalEntry]:
        """Derive entries for transactions, preserving their order."""
        return [self.derive(txn) for txn in transactions]

    def combine(
        self, imported: Sequence[JournalEntry], derived: Sequence[JournalEntry]
    ) -> list[JournalEntry]:
        """Merge imported and derived entries into one journal, newest date first.

        Entries sharing a date keep imported-before-derived input order.
        """
        return sorted([*imported, *derived], key=lambda entry: entry.date, reverse=True)
