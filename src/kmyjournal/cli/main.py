"""Main CLI entry point."""

import click

from kmyjournal.cli.commands import accounts, convert
from kmyjournal.cli.error_handling import handle_domain_error
from kmyjournal.config import (
    AMOUNT_SCALE_ENVVAR,
    JOURNAL_EXTENSION_ENVVAR,
    NEWLINE_SEPARATOR_ENVVAR,
    load_settings,
)
from kmyjournal.domain.errors import ConfigurationError
from kmyjournal.logging_setup import LOG_LEVEL_ENVVAR, configure_logging


@click.group()
@click.option(
    "--log-level",
    help="Logging level (overrides KMYJOURNAL_LOG_LEVEL environment variable)",
    envvar=LOG_LEVEL_ENVVAR,
)
@click.option(
    "--separator",
    help="Text replacing newlines inside comments (default ' => ')",
    envvar=NEWLINE_SEPARATOR_ENVVAR,
)
@click.option(
    "--extension",
    help="Suffix appended to each input path for the journal (default .journal)",
    envvar=JOURNAL_EXTENSION_ENVVAR,
)
@click.option(
    "--amount-scale",
    help="Minimum number of decimal places for amounts (default 2)",
    envvar=AMOUNT_SCALE_ENVVAR,
)
@click.option(
    "--include-payees",
    is_flag=True,
    default=False,
    help="Also write a comment block for every payee",
)
@click.pass_context
def cli(
    ctx,
    log_level: str | None,
    separator: str | None,
    extension: str | None,
    amount_scale: str | None,
    include_payees: bool,
):
    """kmyjournal - Convert KMyMoney files to hledger journals.

    Accounts become account directives and transactions become hledger
    transactions with one posting per split.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    if ctx.invoked_subcommand is not None:
        try:
            ctx.obj["settings"] = load_settings(
                newline_separator=separator,
                journal_extension=extension,
                min_amount_scale=amount_scale,
                include_payees=include_payees or None,
            )
        except ConfigurationError as e:
            handle_domain_error(ctx, e)


convert.register_commands(cli)
accounts.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
