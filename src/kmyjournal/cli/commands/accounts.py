"""Account inspection command."""

import click

from kmyjournal.cli.error_handling import handle_domain_error
from kmyjournal.domain.account_path import AccountPathResolver
from kmyjournal.domain.errors import DomainError
from kmyjournal.domain.indexer import DocumentIndex
from kmyjournal.source.factories import open_document


@click.command("accounts")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--comment",
    is_flag=True,
    default=False,
    help="Show paths with their original case instead of journal account names",
)
@click.pass_context
def list_accounts(ctx, path: str, comment: bool):
    """List the resolved path of every account in PATH."""
    settings = ctx.obj["settings"]
    try:
        document = open_document(path)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    index = DocumentIndex(document)
    if not index.accounts.handles:
        click.echo("No accounts found.")
        return

    resolver = AccountPathResolver(document, index.accounts, settings.newline_separator)
    for account in index.accounts.handles:
        account_id = document.attribute(account, "id") or ""
        click.echo(f"{account_id:10s} {resolver.resolve(account, as_comment=comment)}")


def register_commands(cli):
    """Register accounts command with main CLI."""
    cli.add_command(list_accounts)
