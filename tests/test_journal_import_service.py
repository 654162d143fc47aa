"""Tests for importing raw journal lines."""

from datetime import date
from decimal import Decimal

import pytest

from fleetledger.domain.entities import EntryOrigin
from fleetledger.domain.journal_import import account_for_line


def test_import_groups_lines_by_reference(journal_import_service, fixtures_dir):
    text = (fixtures_dir / "journal_lines.csv").read_text(encoding="utf-8")

    result = journal_import_service.import_text(text)

    assert result["lines"] == 4
    assert result["skipped"] == 1
    assert [entry.reference for entry in result["entries"]] == ["JV-01", "JV-02"]


def test_imported_entries_are_tagged(journal_import_service, fixtures_dir):
    text = (fixtures_dir / "journal_lines.csv").read_text(encoding="utf-8")

    entries = journal_import_service.import_text(text)["entries"]

    for entry in entries:
        assert entry.origin == EntryOrigin.IMPORTED
        assert entry.is_imported
        assert entry.description == "Imported Transaction"
        assert entry.id.startswith(f"CSV-{entry.reference}-")


def test_imported_lines_keep_raw_values(journal_import_service, fixtures_dir):
    text = (fixtures_dir / "journal_lines.csv").read_text(encoding="utf-8")

    jv01, jv02 = journal_import_service.import_text(text)["entries"]

    assert jv01.date == date(2024, 5, 30)
    assert [(line.account_id, line.account_name) for line in jv01.lines] == [
        ("1002", "Bank BCA"),
        ("4000", "Rental Revenue"),
    ]
    assert jv01.is_balanced

    # Unbalanced groups are passed through untouched
    assert jv02.total_debit == Decimal("125000")
    assert jv02.total_credit == Decimal("100000")
    assert not jv02.is_balanced


def test_unbalanced_count(journal_import_service, fixtures_dir):
    text = (fixtures_dir / "journal_lines.csv").read_text(encoding="utf-8")

    assert journal_import_service.import_text(text)["unbalanced"] == 1


def test_semicolon_and_indonesian_amounts(journal_import_service):
    text = (
        "Tanggal;Ref;Akun;Debit;Kredit\n"
        "05/06/2024;JV-9;Kas (Cash);Rp 1.250.000,50;\n"
    )

    entry = journal_import_service.import_text(text)["entries"][0]

    assert entry.date == date(2024, 6, 5)
    assert entry.lines[0].account_id == "1001"
    assert entry.lines[0].debit == Decimal("1250000.50")


def test_quotes_removed_from_account_name(journal_import_service):
    text = 'Date,Ref,Account,Debit,Credit\n2024-06-01,JV-1,"Sales ""Promo""",,10\n'

    entry = journal_import_service.import_text(text)["entries"][0]

    assert entry.lines[0].account_name == "Sales Promo"
    assert entry.lines[0].account_id == "4000"


def test_empty_text(journal_import_service):
    result = journal_import_service.import_text("")

    assert result["entries"] == []
    assert result["lines"] == 0


@pytest.mark.parametrize(
    "description, code",
    [
        ("Rental Revenue", "4000"),
        ("Sales counter", "4000"),
        ("Bank BCA", "1002"),
        ("Petty cash", "1001"),
        ("Maintenance Service", "5001"),
        ("Oil service", "5001"),
        ("Rent Expense", "5002"),
        ("Rent deposit", "9999"),
        ("Something else", "9999"),
    ],
)
def test_account_for_line(description, code):
    assert account_for_line(description) == code
