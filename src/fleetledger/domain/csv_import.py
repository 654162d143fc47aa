"""CSV import domain service."""

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional, Sequence

import structlog

from fleetledger.domain.chart import BANK
from fleetledger.domain.csv_dialect import DELIMITER_NAMES, infer_columns, read_table
from fleetledger.domain.entities import ColumnRoles, Transaction, TransactionCategory
from fleetledger.domain.rules import (
    DEFAULT_OUTFLOW_CATEGORY,
    OUTFLOW_CATEGORY_RULES,
    first_match,
)
from fleetledger.domain.transaction import new_transaction_id
from fleetledger.utils.amount_parser import normalize_amount
from fleetledger.utils.date_parser import parse_date_or_none

if TYPE_CHECKING:
    from fleetledger.database.base import TransactionStore

logger = structlog.get_logger(__name__)

# Positional layout used when the header names no amount columns
FALLBACK_DATE, FALLBACK_REFERENCE, FALLBACK_DESCRIPTION = 0, 1, 2
FALLBACK_AMOUNT = 3
FALLBACK_DEBIT, FALLBACK_CREDIT = 3, 4
FALLBACK_MIN_COLUMNS = 4

DEFAULT_DESCRIPTION = "Imported Transaction"


def _field(cols: Sequence[str], index: Optional[int]) -> str:
    if index is None or index >= len(cols):
        return ""
    return cols[index]


def _field_or_position(cols: Sequence[str], index: Optional[int], position: int) -> str:
    value = _field(cols, index)
    if not value and len(cols) > position:
        value = cols[position]
    return value


def minimum_columns(roles: ColumnRoles) -> int:
    """Smallest row width that can carry an amount for the inferred layout."""
    if roles.has_debit_credit:
        return max(roles.debit, roles.credit) + 1
    if roles.amount is not None:
        return roles.amount + 1
    return FALLBACK_MIN_COLUMNS


def _from_debit_credit(debit: Decimal, credit: Decimal) -> tuple[Decimal, TransactionCategory]:
    if credit > 0:
        return credit, TransactionCategory.REVENUE
    if debit > 0:
        return -debit, TransactionCategory.EXPENSE
    return Decimal("0"), TransactionCategory.REVENUE


def classify_signed_amount(amount: Decimal, description: str) -> TransactionCategory:
    """Category for an amount that carries no debit/credit semantics.

    Outflows are Expense unless the description names an asset purchase;
    everything else is Revenue.
    """
    if amount < 0:
        return TransactionCategory(
            first_match(OUTFLOW_CATEGORY_RULES, description, DEFAULT_OUTFLOW_CATEGORY)
        )
    return TransactionCategory.REVENUE


def resolve_amount(cols: Sequence[str], roles: ColumnRoles, description: str) -> tuple[Decimal, TransactionCategory]:
    """Resolve the signed amount and category of one data row."""
    if roles.has_debit_credit:
        return _from_debit_credit(
            normalize_amount(_field(cols, roles.debit)),
            normalize_amount(_field(cols, roles.credit)),
        )

    if roles.amount is not None:
        amount = normalize_amount(_field(cols, roles.amount))
    elif len(cols) > FALLBACK_CREDIT:
        # Date, Ref, Desc, Debit, Credit
        return _from_debit_credit(
            normalize_amount(cols[FALLBACK_DEBIT]),
            normalize_amount(cols[FALLBACK_CREDIT]),
        )
    else:
        # Date, Ref, Desc, Amount
        amount = normalize_amount(_field(cols, FALLBACK_AMOUNT))

    return amount, classify_signed_amount(amount, description)


def materialize_row(
    cols: Sequence[str],
    roles: ColumnRoles,
    row_index: int,
    dayfirst: bool = True,
    today: Optional[date] = None,
) -> Optional[Transaction]:
    """Build a transaction from one data row.

    Args:
        cols: Row fields
        roles: Inferred column roles of the header
        row_index: 1-based data row index, used for the fallback reference
        dayfirst: Read ambiguous numeric dates as day/month/year
        today: Date used when the row has no usable date

    Returns:
        Transaction, or None when the row is too short for its layout or
        carries neither an amount nor a description
    """
    if len(cols) < minimum_columns(roles):
        return None

    date_str = _field_or_position(cols, roles.date, FALLBACK_DATE)
    reference = _field_or_position(cols, roles.reference, FALLBACK_REFERENCE)
    description = _field_or_position(cols, roles.description, FALLBACK_DESCRIPTION)

    amount, category = resolve_amount(cols, roles, description)
    if amount == 0 and not description:
        return None

    txn_date = parse_date_or_none(date_str, dayfirst=dayfirst)
    if txn_date is None:
        txn_date = today or date.today()
        logger.warning("row_date_defaulted", row=row_index, raw_date=date_str, date=txn_date.isoformat())

    return Transaction(
        id=new_transaction_id("TX-CSV"),
        date=txn_date,
        description=description or DEFAULT_DESCRIPTION,
        category=category,
        amount=amount,
        reference=reference or f"CSV-{row_index}",
        contra_account=BANK,
    )


class CSVImportService:
    """Service for importing transactions from CSV/TSV text."""

    def __init__(self, store: "TransactionStore"):
        """Initialize CSV import service.

        Args:
            store: Transaction store the imported batch is appended to
        """
        self.store = store

    def parse_text(self, text: str, dayfirst: bool = True) -> dict[str, Any]:
        """Materialize transactions from delimited text without storing them.

        Args:
            text: Complete file contents, header row first
            dayfirst: Read ambiguous numeric dates as day/month/year

        Returns:
            Dict with import statistics:
            - transactions: materialized transactions in row order
            - imported: number of transactions produced
            - skipped: number of rows dropped (too short, or no amount and
              no description)
            - delimiter: detected delimiter character
            - delimiter_name: COMMA, SEMICOLON or TAB
            - revenue_count: transactions with a positive amount
            - expense_count: the remaining transactions
        """
        table = read_table(text)
        roles = infer_columns(table.header)
        today = date.today()

        transactions: list[Transaction] = []
        skipped = 0
        for row_index, cols in table.rows:
            transaction = materialize_row(cols, roles, row_index, dayfirst=dayfirst, today=today)
            if transaction is None:
                skipped += 1
                logger.debug("row_skipped", row=row_index, columns=len(cols))
                continue
            transactions.append(transaction)

        revenue_count = sum(1 for txn in transactions if txn.amount > 0)
        return {
            "transactions": transactions,
            "imported": len(transactions),
            "skipped": skipped,
            "delimiter": table.delimiter,
            "delimiter_name": DELIMITER_NAMES[table.delimiter],
            "revenue_count": revenue_count,
            "expense_count": len(transactions) - revenue_count,
        }

    def import_text(self, text: str, dayfirst: bool = True) -> dict[str, Any]:
        """Import transactions from delimited text.

        Every row is parsed before anything is stored, and the batch is then
        appended in one step, so a partially parsed file is never visible.

        Returns:
            The statistics dict of parse_text
        """
        result = self.parse_text(text, dayfirst=dayfirst)
        if result["transactions"]:
            self.store.append_transactions(result["transactions"])

        logger.info(
            "csv_imported",
            imported=result["imported"],
            skipped=result["skipped"],
            delimiter=result["delimiter_name"],
        )
        return result
