"""Main CLI entry point."""

import click

from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.cli.ledger_inputs import read_text_file
from fleetledger.database.factories import create_memory_store
from fleetledger.domain.chart import ChartOfAccounts
from fleetledger.domain.errors import DomainError
from fleetledger.utils.logging_config import configure_logging

# Import and register all commands at module level
from fleetledger.cli.commands import (
    accounts,
    import_cmd,
    derive,
    journal,
    report,
)


@click.group()
@click.option(
    "--chart-file",
    type=click.Path(exists=True, dir_okay=False),
    help="CSV chart of accounts (code, name, type, category) replacing the built-in chart "
    "(overrides FLEETLEDGER_CHART_FILE environment variable)",
    envvar="FLEETLEDGER_CHART_FILE",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Log level for diagnostics on stderr (overrides FLEETLEDGER_LOG_LEVEL)",
    envvar="FLEETLEDGER_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, chart_file: str | None, log_level: str):
    """Fleetledger - double-entry bookkeeping for a motorcycle rental fleet.

    Import transaction exports from banks and spreadsheets (comma, semicolon
    or tab separated, Indonesian or Western number formats), derive the
    general journal and print the income statement.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Build the session store only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            if chart_file:
                chart = ChartOfAccounts.from_csv_text(read_text_file(chart_file))
            else:
                chart = ChartOfAccounts.default()
        except (DomainError, UnicodeDecodeError) as e:
            handle_domain_error(ctx, e)

        store = create_memory_store()
        store.connect()
        store.initialize_schema()
        ctx.call_on_close(store.disconnect)
        ctx.obj["store"] = store
        ctx.obj["chart"] = chart


# Register all commands
accounts.register_commands(cli)
import_cmd.register_commands(cli)
derive.register_commands(cli)
journal.register_commands(cli)
report.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
