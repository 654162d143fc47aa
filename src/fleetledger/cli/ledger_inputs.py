"""CLI helpers for loading transactions and imported entries into a session."""

from pathlib import Path

import click

from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.domain.csv_import import CSVImportService
from fleetledger.domain.entities import JournalEntry
from fleetledger.domain.journal import JournalService
from fleetledger.domain.journal_import import JournalImportService
from fleetledger.domain.sample_data import SAMPLE_TRANSACTIONS
from fleetledger.domain.transaction import TransactionService


def read_text_file(path: str) -> str:
    """Read a whole text file, dropping a UTF-8 byte order mark."""
    return Path(path).read_text(encoding="utf-8-sig")


def ledger_input_options(func):
    """Add the options shared by commands that build a journal."""
    func = click.option(
        "--dayfirst/--monthfirst",
        default=True,
        help="Read ambiguous numeric dates as DD/MM/YYYY (default) or MM/DD/YYYY",
    )(func)
    func = click.option(
        "--sample", is_flag=True, help="Include the sample fleet transactions"
    )(func)
    func = click.option(
        "--entries",
        "-e",
        "entry_files",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False),
        help="CSV of journal lines (Date, Ref, Account, Debit, Credit) to show as imported entries",
    )(func)
    func = click.option(
        "--transactions",
        "-t",
        "transaction_files",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False),
        help="CSV/TSV transaction export to import",
    )(func)
    return func


def load_journal(
    ctx: click.Context,
    *,
    transaction_files: tuple[str, ...],
    entry_files: tuple[str, ...],
    sample: bool,
    dayfirst: bool,
) -> tuple[list[JournalEntry], list[JournalEntry]]:
    """Fill the session store and derive the journal.

    Returns:
        Tuple of (derived entries in transaction order, imported entries)
    """
    store = ctx.obj["store"]
    chart = ctx.obj["chart"]

    if sample:
        TransactionService(store).add_transactions(SAMPLE_TRANSACTIONS)

    import_service = CSVImportService(store)
    journal_import = JournalImportService()
    imported: list[JournalEntry] = []
    try:
        for path in transaction_files:
            import_service.import_text(read_text_file(path), dayfirst=dayfirst)
        for path in entry_files:
            result = journal_import.import_text(read_text_file(path), dayfirst=dayfirst)
            imported.extend(result["entries"])
    except (ValueError, UnicodeDecodeError) as e:
        handle_domain_error(ctx, e)

    derived = JournalService(chart).derive_all(store.list_transactions())
    return derived, imported
