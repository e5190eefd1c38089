"""CLI error handling helpers."""

import click

from kmyjournal.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def report_document_error(path: str, error: Exception) -> None:
    """Render a per-document failure without exiting."""
    click.echo(f"Error: {path}: {error}", err=True)
