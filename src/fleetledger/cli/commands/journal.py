"""General journal command."""

import click

from fleetledger.cli.formatting import echo_journal
from fleetledger.cli.ledger_inputs import ledger_input_options, load_journal
from fleetledger.domain.journal import JournalService


@click.command("journal")
@ledger_input_options
@click.pass_context
def show_journal(
    ctx,
    transaction_files: tuple[str, ...],
    entry_files: tuple[str, ...],
    sample: bool,
    dayfirst: bool,
):
    """Show the general journal (Jurnal Umum), newest entries first.

    Entries derived from transactions are always balanced. Entries loaded
    with --entries are shown as imported and may not balance.
    """
    derived, imported = load_journal(
        ctx,
        transaction_files=transaction_files,
        entry_files=entry_files,
        sample=sample,
        dayfirst=dayfirst,
    )
    entries = JournalService(ctx.obj["chart"]).combine(imported, derived)

    if not entries:
        click.echo("No journal entries found.")
        return

    click.echo(f"General Journal ({len(entries)} entries)\n")
    echo_journal(entries)

    if imported:
        click.echo(
            f"\nViewing combined data: {len(derived)} system entries + "
            f"{len(imported)} imported entries."
        )


def register_commands(cli):
    """Register journal command with main CLI."""
    cli.add_command(show_journal)
