"""Convert command."""

import click

from kmyjournal.cli.error_handling import report_document_error
from kmyjournal.domain.converter import ConversionService
from kmyjournal.domain.errors import DomainError
from kmyjournal.logging_setup import get_logger

logger = get_logger(__name__)


def usage(extension: str) -> str:
    return (
        "Usage: kmyjournal convert pathname [pathname ...]\n\n"
        "Converts KMyMoney file format to HLedger. Output files are postfixed "
        f"with a {extension} file extension."
    )


@click.command("convert")
@click.argument("paths", nargs=-1, type=click.Path(dir_okay=False))
@click.pass_context
def convert_files(ctx, paths: tuple[str, ...]):
    """Convert KMyMoney files to hledger journals.

    Each PATH is converted to PATH.journal. A failing file is reported and
    the remaining files are still converted; the exit status is 1 if any
    file failed.

    Examples:
        kmyjournal convert finances.kmy
        kmyjournal convert 2023.kmy 2024.kmy
    """
    settings = ctx.obj["settings"]
    if not paths:
        click.echo(usage(settings.journal_extension))
        return

    service = ConversionService(settings)

    failed = 0
    for path in paths:
        click.echo(f"{path} ...", nl=False)
        try:
            service.convert_file(path)
        except (DomainError, OSError) as e:
            click.echo(" failed.")
            logger.error("Conversion of %s failed: %s", path, e)
            report_document_error(path, e)
            failed += 1
            continue
        click.echo(" done.")

    if failed:
        ctx.exit(1)


def register_commands(cli):
    """Register convert command with main CLI."""
    cli.add_command(convert_files)
