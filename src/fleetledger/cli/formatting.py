"""Display helpers for amounts and journal tables."""

from decimal import Decimal

import click

from fleetledger.domain.entities import JournalEntry
from fleetledger.domain.chart import MISC


def format_rupiah(amount: Decimal) -> str:
    """Format an amount with Indonesian separators ("1.500.000" or "50,50")."""
    text = f"{abs(amount):,.2f}".translate(str.maketrans(",.", ".,"))
    if text.endswith(",00"):
        text = text[:-3]
    return f"-{text}" if amount < 0 else text


def format_cell(amount: Decimal) -> str:
    """Journal cell: blank dash for zero postings."""
    return format_rupiah(amount) if amount > 0 else "-"


def echo_journal(entries: list[JournalEntry]) -> None:
    """Print journal entries as a table, one row per line."""
    click.echo(f"{'Date':<12} {'Ref':<14} {'Account':<40} {'Debit':>15} {'Credit':>15}")
    click.echo("-" * 100)
    for entry in entries:
        if not entry.lines:
            click.echo(f"{entry.date.isoformat():<12} {entry.reference:<14} {'(no postings) ' + entry.description:<40}")
            continue
        for idx, line in enumerate(entry.lines):
            date_cell = entry.date.isoformat() if idx == 0 else ""
            ref_cell = entry.reference if idx == 0 else ""
            account = line.account_name
            if line.account_id != MISC:
                account = f"{line.account_id} - {line.account_name}" if line.account_name else line.account_id
            # Indent credit lines, as in a handwritten journal
            if line.credit > 0 and line.debit == 0:
                account = "    " + account
            click.echo(
                f"{date_cell:<12} {ref_cell:<14} {account[:40]:<40} "
                f"{format_cell(line.debit):>15} {format_cell(line.credit):>15}"
            )
        if entry.is_imported and not entry.is_balanced:
            click.echo(f"{'':<12} {'':<14} {'(imported, unbalanced)':<40}")
