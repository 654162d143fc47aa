"""Derive the journal entry of a single transaction."""

import click

from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.cli.formatting import echo_journal, format_rupiah
from fleetledger.domain.chart import ACCOUNTS_PAYABLE, BANK
from fleetledger.domain.entities import TransactionCategory
from fleetledger.domain.errors import DomainError
from fleetledger.domain.journal import JournalService
from fleetledger.domain.transaction import TransactionService
from fleetledger.utils.amount_parser import parse_amount
from fleetledger.utils.date_parser import parse_date


@click.command("derive")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option(
    "--category",
    required=True,
    type=click.Choice([c.value for c in TransactionCategory], case_sensitive=False),
    help="Transaction category",
)
@click.option(
    "--amount",
    required=True,
    help="Amount (e.g., 450000, 'Rp 2.500.000', '1,250.50'); the sign follows the category",
)
@click.option("--description", default="", help="Transaction description")
@click.option("--reference", help="Reference number (generated if not provided)")
@click.option(
    "--contra",
    type=click.Choice([BANK, ACCOUNTS_PAYABLE]),
    default=BANK,
    show_default=True,
    help="Paying account: 1002 Bank or 2000 Accounts Payable",
)
@click.pass_context
def derive_entry(
    ctx,
    date: str,
    category: str,
    amount: str,
    description: str,
    reference: str | None,
    contra: str,
):
    """Record one transaction and show its journal entry.

    Examples:
        fleetledger derive --category Revenue --amount 450000 --description "Rental Income"
        fleetledger derive --category Expense --amount "Rp 2.500.000" --description "Purchase Parts" --contra 2000
    """
    store = ctx.obj["store"]
    chart = ctx.obj["chart"]

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        transaction = TransactionService(store).create_transaction(
            date=txn_date,
            category=category,
            amount=txn_amount,
            description=description,
            reference=reference,
            contra_account=contra,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    entry = JournalService(chart).derive(transaction)

    click.echo(f"Created transaction {transaction.id}")
    click.echo(f"  Date: {transaction.date.isoformat()}")
    click.echo(f"  Category: {transaction.category.value}")
    click.echo(f"  Amount: Rp {format_rupiah(transaction.amount)}")
    click.echo(f"  Reference: {transaction.reference}")
    if transaction.description:
        click.echo(f"  Description: {transaction.description}")
    click.echo()
    echo_journal([entry])


def register_commands(cli):
    """Register derive command with main CLI."""
    cli.add_command(derive_entry)
