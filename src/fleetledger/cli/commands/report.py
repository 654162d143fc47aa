"""Financial report commands."""

import click

from fleetledger.cli.formatting import format_rupiah
from fleetledger.cli.ledger_inputs import ledger_input_options, load_journal
from fleetledger.domain.summary import ReportService


def _row(label: str, amount, indent: int = 0) -> None:
    click.echo(f"{' ' * indent}{label:<{40 - indent}} {'Rp ' + format_rupiah(amount):>20}")


@click.command("report")
@ledger_input_options
@click.option("--monthly", is_flag=True, help="Also show revenue, expenses and profit per month")
@click.option("--by-account", is_flag=True, help="Also show debit and credit totals per account")
@click.option(
    "--system-only",
    is_flag=True,
    help="Leave imported journal entries out of the figures",
)
@click.pass_context
def show_report(
    ctx,
    transaction_files: tuple[str, ...],
    entry_files: tuple[str, ...],
    sample: bool,
    dayfirst: bool,
    monthly: bool,
    by_account: bool,
    system_only: bool,
):
    """Show the income statement (Laba Rugi)."""
    derived, imported = load_journal(
        ctx,
        transaction_files=transaction_files,
        entry_files=entry_files,
        sample=sample,
        dayfirst=dayfirst,
    )
    entries = [*imported, *derived]

    if not entries:
        click.echo("No journal entries found.")
        return

    service = ReportService(ctx.obj["chart"])
    include_imported = not system_only
    statement = service.aggregate(entries, include_imported=include_imported)

    click.echo("Income Statement (Laba Rugi)")
    click.echo("=" * 61)
    _row("Revenue (Rental Income)", statement.revenue)
    _row("Maintenance & Parts", statement.cost_of_goods_sold, indent=2)
    _row("Gross Profit", statement.gross_profit)
    _row("Garage Rent & Utilities", statement.operating_expense, indent=2)
    click.echo("-" * 61)
    _row("Net Income (Laba Bersih)", statement.net_income)

    if monthly:
        click.echo("\nMonthly Performance")
        click.echo("=" * 61)
        click.echo(f"{'Month':<10} {'Revenue':>16} {'Expenses':>16} {'Profit':>16}")
        for stat in service.monthly_stats(entries, include_imported=include_imported):
            click.echo(
                f"{stat.name:<10} {format_rupiah(stat.revenue):>16} "
                f"{format_rupiah(stat.expenses):>16} {format_rupiah(stat.profit):>16}"
            )

    if by_account:
        click.echo("\nAccount Totals")
        click.echo("=" * 61)
        click.echo(f"{'Account':<30} {'Debit':>15} {'Credit':>15}")
        for balance in service.account_balances(entries, include_imported=include_imported):
            label = f"{balance.account_id} {balance.account_name}"
            click.echo(
                f"{label[:30]:<30} {format_rupiah(balance.debit):>15} {format_rupiah(balance.credit):>15}"
            )


def register_commands(cli):
    """Register report command with main CLI."""
    cli.add_command(show_report)
