"""Domain tests for CSV import service."""

from datetime import date
from decimal import Decimal

import pytest

from fleetledger.domain.chart import BANK
from fleetledger.domain.csv_dialect import infer_columns
from fleetledger.domain.csv_import import materialize_row, minimum_columns
from fleetledger.domain.entities import ColumnRoles, TransactionCategory
from fleetledger.domain.errors import ConflictError


def test_import_result_contract(import_service, fixtures_dir):
    """Import returns a structured result contract."""
    text = (fixtures_dir / "bank_debit_credit.csv").read_text(encoding="utf-8")

    result = import_service.import_text(text)

    assert result["imported"] == 3
    assert result["skipped"] == 2
    assert result["delimiter"] == ","
    assert result["delimiter_name"] == "COMMA"
    assert result["revenue_count"] == 1
    assert result["expense_count"] == 2
    assert len(result["transactions"]) == 3


def test_import_debit_credit_rows(import_service, fixtures_dir):
    """Credit rows become revenue inflows, debit rows expense outflows."""
    text = (fixtures_dir / "bank_debit_credit.csv").read_text(encoding="utf-8")

    transactions = import_service.import_text(text)["transactions"]

    revenue, parts, rent = transactions
    assert revenue.category == TransactionCategory.REVENUE
    assert revenue.amount == Decimal("450000")
    assert revenue.reference == "INV-1001"
    assert revenue.date == date(2024, 6, 1)
    assert revenue.contra_account == BANK

    assert parts.category == TransactionCategory.EXPENSE
    assert parts.amount == Decimal("-2500000")
    assert parts.description == "Purchase Parts (Tires), Mitra Motor"

    # Debit/credit rows are never reclassified by keyword
    assert rent.category == TransactionCategory.EXPENSE
    assert rent.amount == Decimal("-5000000")


def test_import_appends_batch_to_store(import_service, store, fixtures_dir):
    """Imported transactions land in the store in row order."""
    text = (fixtures_dir / "bank_debit_credit.csv").read_text(encoding="utf-8")

    result = import_service.import_text(text)

    stored = store.list_transactions()
    assert [txn.id for txn in stored] == [txn.id for txn in result["transactions"]]


def test_import_semicolon_indonesian(import_service, fixtures_dir):
    """Semicolon file with Indonesian headers and number formats."""
    text = (fixtures_dir / "bank_semicolon_id.csv").read_text(encoding="utf-8")

    result = import_service.import_text(text)

    assert result["delimiter_name"] == "SEMICOLON"
    rental, unit, service = result["transactions"]
    assert rental.date == date(2024, 6, 1)
    assert rental.reference == "INV-2001"
    assert rental.amount == Decimal("1500000")
    assert rental.category == TransactionCategory.REVENUE

    assert unit.amount == Decimal("-7000000")
    assert unit.category == TransactionCategory.ASSET

    assert service.amount == Decimal("-350000")
    assert service.category == TransactionCategory.EXPENSE


def test_import_monthfirst(import_service, fixtures_dir):
    text = (fixtures_dir / "bank_semicolon_id.csv").read_text(encoding="utf-8")

    result = import_service.parse_text(text, dayfirst=False)

    assert result["transactions"][0].date == date(2024, 1, 6)


def test_import_tab_delimited(import_service, fixtures_dir):
    text = (fixtures_dir / "bank_export.tsv").read_text(encoding="utf-8")

    result = import_service.import_text(text)

    assert result["delimiter_name"] == "TAB"
    income, rent = result["transactions"]
    assert income.reference == "KW-01"
    assert income.amount == Decimal("2000000")
    assert rent.amount == Decimal("-1000000.00")
    assert rent.category == TransactionCategory.EXPENSE


def test_empty_text_yields_nothing(import_service, store):
    """No data is an outcome, not an error."""
    result = import_service.import_text("")

    assert result["imported"] == 0
    assert result["skipped"] == 0
    assert store.count_transactions() == 0


def test_headers_only(import_service, store):
    result = import_service.import_text("Date,Ref,Description,Amount\n")

    assert result["imported"] == 0
    assert store.count_transactions() == 0


def test_parse_text_does_not_store(import_service, store, fixtures_dir):
    text = (fixtures_dir / "bank_debit_credit.csv").read_text(encoding="utf-8")

    import_service.parse_text(text)

    assert store.count_transactions() == 0


def test_failed_batch_is_not_partially_visible(import_service, store, fixtures_dir, monkeypatch):
    """A batch that cannot be stored leaves the store untouched."""
    text = (fixtures_dir / "bank_debit_credit.csv").read_text(encoding="utf-8")
    monkeypatch.setattr(
        "fleetledger.domain.csv_import.new_transaction_id", lambda prefix="TX": "TX-SAME"
    )

    with pytest.raises(ConflictError):
        import_service.import_text(text)

    assert store.count_transactions() == 0


class TestMaterializeRow:
    """Tests for single-row materialization."""

    def test_end_to_end_credit_row(self):
        roles = infer_columns(["date", "ref", "description", "debit", "credit"])
        txn = materialize_row(
            ["2024-06-01", "INV-1001", "Rental Income", "", "450000"], roles, row_index=1
        )

        assert txn.category == TransactionCategory.REVENUE
        assert txn.amount == Decimal("450000")

    def test_row_too_short_is_skipped(self):
        roles = infer_columns(["date", "ref", "description", "debit", "credit"])

        assert materialize_row(["2024-06-01", "INV-1"], roles, row_index=1) is None

    def test_zero_amount_without_description_is_skipped(self):
        roles = infer_columns(["date", "ref", "description", "amount"])

        assert materialize_row(["2024-06-01", "X", "", "0"], roles, row_index=1) is None

    def test_zero_amount_with_description_is_kept(self):
        roles = infer_columns(["date", "ref", "description", "amount"])

        txn = materialize_row(["2024-06-01", "X", "Note only", ""], roles, row_index=1)

        assert txn is not None
        assert txn.amount == Decimal("0")
        assert txn.category == TransactionCategory.REVENUE

    def test_negative_amount_with_asset_keyword(self):
        roles = infer_columns(["date", "ref", "description", "amount"])

        txn = materialize_row(["2024-06-05", "CAPEX", "Beli Motor Baru", "-7.000.000"], roles, 1)

        assert txn.category == TransactionCategory.ASSET
        assert txn.amount == Decimal("-7000000")

    def test_positive_amount_is_revenue_even_with_asset_keyword(self):
        roles = infer_columns(["date", "ref", "description", "amount"])

        txn = materialize_row(["2024-06-05", "S-1", "Sale of old unit", "3.000.000"], roles, 1)

        assert txn.category == TransactionCategory.REVENUE

    def test_fallback_four_column_layout(self):
        roles = infer_columns(["a", "b", "c", "d"])
        assert roles == ColumnRoles()

        txn = materialize_row(["2024-06-04", "AP-1", "Garage rent", "(5.000.000)"], roles, 1)

        assert txn.reference == "AP-1"
        assert txn.description == "Garage rent"
        assert txn.amount == Decimal("-5000000")
        assert txn.category == TransactionCategory.EXPENSE

    def test_fallback_five_column_layout(self):
        roles = ColumnRoles()

        txn = materialize_row(["2024-06-04", "AP-1", "Unit purchase", "5.000.000", ""], roles, 1)

        # Debit column semantics: no asset reclassification
        assert txn.amount == Decimal("-5000000")
        assert txn.category == TransactionCategory.EXPENSE

    def test_fallback_layout_needs_four_columns(self):
        assert minimum_columns(ColumnRoles()) == 4
        assert materialize_row(["2024-06-04", "AP-1", "Rent"], ColumnRoles(), 1) is None

    def test_missing_reference_gets_synthetic_reference(self):
        roles = infer_columns(["date", "ref", "description", "amount"])

        txn = materialize_row(["2024-06-01", "", "", "100"], roles, row_index=7)

        # Reference falls back to column 1, which is empty too
        assert txn.reference == "CSV-7"
        assert txn.description == "Imported Transaction"

    def test_missing_date_uses_today(self):
        roles = infer_columns(["date", "ref", "description", "amount"])

        txn = materialize_row(["", "R-1", "Cash sale", "100"], roles, 1, today=date(2024, 1, 2))

        assert txn.date == date(2024, 1, 2)

    def test_fresh_ids(self):
        roles = infer_columns(["date", "ref", "description", "amount"])
        row = ["2024-06-01", "R-1", "Cash sale", "100"]

        assert materialize_row(row, roles, 1).id != materialize_row(row, roles, 1).id
