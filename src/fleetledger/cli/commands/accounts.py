"""Chart of accounts command."""

import click


@click.command("accounts")
@click.pass_context
def list_accounts(ctx):
    """Show the chart of accounts used for journal mapping and reports."""
    chart = ctx.obj["chart"]

    if len(chart) == 0:
        click.echo("No accounts found.")
        return

    click.echo(f"{'Code':<8} {'Name':<32} {'Type':<10} {'Category':<20}")
    click.echo("-" * 72)
    for account in chart:
        click.echo(
            f"{account.code:<8} {account.name:<32} {account.type.value:<10} {account.category:<20}"
        )


def register_commands(cli):
    """Register accounts command with main CLI."""
    cli.add_command(list_accounts)
