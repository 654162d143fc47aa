"""CLI error handling helpers."""

import click
import structlog

logger = structlog.get_logger(__name__)


def handle_domain_error(ctx: click.Context, error: ValueError) -> None:
    """Report a domain error or unreadable input on stderr and exit with status 1.

    Domain errors and decoding failures are both ValueError subclasses.
    """
    logger.debug("command_failed", command=ctx.info_name, error_type=type(error).__name__)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
