"""CSV import command."""

import click

from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.cli.formatting import format_rupiah
from fleetledger.cli.ledger_inputs import read_text_file
from fleetledger.domain.csv_import import CSVImportService
from fleetledger.domain.transaction import TransactionService


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--search", help="Only list transactions whose description or reference contains this text")
@click.option(
    "--dayfirst/--monthfirst",
    default=True,
    help="Read ambiguous numeric dates as DD/MM/YYYY (default) or MM/DD/YYYY",
)
@click.pass_context
def import_csv(ctx, csv_file: str, search: str | None, dayfirst: bool):
    """Import transactions from a CSV/TSV export.

    The delimiter (comma, semicolon or tab) and the column layout are
    detected from the header row. Headers may be English or Indonesian
    (Date/Tanggal, Ref/Nomor, Description/Keterangan, Debit/Masuk,
    Credit/Kredit/Keluar, Amount/Jumlah/Nilai).
    """
    store = ctx.obj["store"]
    service = CSVImportService(store)

    try:
        result = service.import_text(read_text_file(csv_file), dayfirst=dayfirst)
    except (ValueError, UnicodeDecodeError) as e:
        handle_domain_error(ctx, e)

    if result["imported"] == 0:
        click.echo("No valid data found.")
        click.echo("Please ensure your CSV has headers like 'Debit', 'Credit', or 'Amount'.")
        if result["skipped"]:
            click.echo(f"  Skipped: {result['skipped']} rows")
        return

    click.echo("\nImport complete:")
    click.echo(f"  Detected delimiter: {result['delimiter_name']}")
    click.echo(f"  Imported: {result['imported']} transactions")
    click.echo(f"  Revenue items: {result['revenue_count']}")
    click.echo(f"  Expense items: {result['expense_count']}")
    click.echo(f"  Skipped: {result['skipped']} rows")

    transactions = TransactionService(store).search_transactions(search)
    if not transactions:
        click.echo(f"\nNo transactions match '{search}'.")
        return

    click.echo()
    click.echo(f"{'Date':<12} {'Ref':<14} {'Category':<10} {'Description':<40} {'Amount':>15}")
    click.echo("-" * 95)
    for txn in transactions:
        click.echo(
            f"{txn.date.isoformat():<12} {txn.reference[:14]:<14} {txn.category.value:<10} "
            f"{txn.description[:40]:<40} {format_rupiah(txn.amount):>15}"
        )


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_csv)
