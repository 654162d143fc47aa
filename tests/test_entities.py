"""Tests for domain entities."""

from dataclasses import FrozenInstanceError
from datetime import date
from decimal import Decimal

import pytest

from fleetledger.domain.entities import (
    AccountBalance,
    ColumnRoles,
    EntryOrigin,
    IncomeStatement,
    JournalEntry,
    JournalLine,
    Transaction,
    TransactionCategory,
)


def test_transaction_is_frozen():
    txn = Transaction(
        id="TX1",
        date=date(2024, 6, 1),
        description="Rental Income",
        category=TransactionCategory.REVENUE,
        amount=Decimal("1"),
        reference="INV-1",
    )

    with pytest.raises(FrozenInstanceError):
        txn.amount = Decimal("2")


def test_category_values():
    assert [c.value for c in TransactionCategory] == [
        "Revenue",
        "Expense",
        "Asset",
        "Liability",
        "Equity",
    ]
    assert TransactionCategory("Asset") is TransactionCategory.ASSET


def test_journal_entry_totals():
    entry = JournalEntry(
        id="E1",
        date=date(2024, 6, 1),
        reference="JV-1",
        description="",
        lines=(
            JournalLine("5001", "Maintenance Expense", debit=Decimal("125000")),
            JournalLine("1001", "Cash on Hand", credit=Decimal("100000")),
        ),
        origin=EntryOrigin.IMPORTED,
    )

    assert entry.total_debit == Decimal("125000")
    assert entry.total_credit == Decimal("100000")
    assert not entry.is_balanced
    assert entry.is_imported


def test_empty_entry_is_balanced_and_derived():
    entry = JournalEntry(id="E1", date=date(2024, 6, 1), reference="R", description="")

    assert entry.is_balanced
    assert entry.origin == EntryOrigin.DERIVED
    assert not entry.is_imported


def test_income_statement_gross_profit():
    statement = IncomeStatement(
        revenue=Decimal("100"),
        cost_of_goods_sold=Decimal("30"),
        operating_expense=Decimal("20"),
        net_income=Decimal("50"),
    )

    assert statement.gross_profit == Decimal("70")


def test_account_balance():
    assert AccountBalance("1002", "Bank BCA", Decimal("10"), Decimal("25")).balance == Decimal("-15")


def test_column_roles_debit_credit_requires_both():
    assert ColumnRoles(debit=3, credit=4).has_debit_credit
    assert not ColumnRoles(debit=3).has_debit_credit
    assert not ColumnRoles(amount=3).has_debit_credit
