"""Domain model entities for fleetledger.

These are pure data classes representing bookkeeping concepts, independent of
how transactions are stored. Journal entries and reports are derived values:
they are recomputed from transactions on demand and never stored.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class AccountType(str, Enum):
    """Top-level classification of a chart-of-accounts entry."""

    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    REVENUE = "Revenue"
    EXPENSE = "Expense"


class TransactionCategory(str, Enum):
    """Economic category of a transaction, which selects its posting rule."""

    REVENUE = "Revenue"
    EXPENSE = "Expense"
    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"


class EntryOrigin(str, Enum):
    """Where a journal entry came from.

    DERIVED entries are produced by the posting rules and always balance.
    IMPORTED entries are raw CSV lines grouped by reference; they are shown
    as-is and may not balance.
    """

    DERIVED = "Derived"
    IMPORTED = "Imported"


@dataclass(frozen=True)
class Account:
    """Chart-of-accounts entry."""

    code: str
    name: str
    type: AccountType
    category: str


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    The amount is signed: positive for inflows, negative for outflows.
    """

    id: str
    date: date
    description: str
    category: TransactionCategory
    amount: Decimal
    reference: str
    contra_account: Optional[str] = None


@dataclass(frozen=True)
class JournalLine:
    """A single posting against one account."""

    account_id: str
    account_name: str
    debit: Decimal = Decimal("0")
    credit: Decimal = Decimal("0")


@dataclass(frozen=True)
class JournalEntry:
    """A dated group of postings derived from one transaction or CSV group."""

    id: str
    date: date
    reference: str
    description: str
    lines: tuple[JournalLine, ...] = ()
    origin: EntryOrigin = EntryOrigin.DERIVED

    @property
    def total_debit(self) -> Decimal:
        return sum((line.debit for line in self.lines), Decimal("0"))

    @property
    def total_credit(self) -> Decimal:
        return sum((line.credit for line in self.lines), Decimal("0"))

    @property
    def is_balanced(self) -> bool:
        return self.total_debit == self.total_credit

    @property
    def is_imported(self) -> bool:
        return self.origin == EntryOrigin.IMPORTED


@dataclass(frozen=True)
class IncomeStatement:
    """Income statement totals."""

    revenue: Decimal = Decimal("0")
    cost_of_goods_sold: Decimal = Decimal("0")
    operating_expense: Decimal = Decimal("0")
    net_income: Decimal = Decimal("0")

    @property
    def gross_profit(self) -> Decimal:
        return self.revenue - self.cost_of_goods_sold


@dataclass(frozen=True)
class MonthlyStat:
    """Revenue and expense totals for one calendar month."""

    name: str
    revenue: Decimal
    expenses: Decimal
    profit: Decimal


@dataclass(frozen=True)
class AccountBalance:
    """Debit and credit totals posted to one account."""

    account_id: str
    account_name: str
    debit: Decimal = Decimal("0")
    credit: Decimal = Decimal("0")

    @property
    def balance(self) -> Decimal:
        """Net debit balance (negative when credits dominate)."""
        return self.debit - self.credit


@dataclass(frozen=True)
class ColumnRoles:
    """Column index per semantic role, None when the header has no match."""

    date: Optional[int] = None
    reference: Optional[int] = None
    description: Optional[int] = None
    debit: Optional[int] = None
    credit: Optional[int] = None
    amount: Optional[int] = None

    @property
    def has_debit_credit(self) -> bool:
        return self.debit is not None and self.credit is not None


@dataclass(frozen=True)
class Table:
    """Delimited text split into a header and numbered data rows."""

    delimiter: str
    header: tuple[str, ...]
    rows: tuple[tuple[int, tuple[str, ...]], ...] = field(default=())
