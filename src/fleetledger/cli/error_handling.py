"""CLI error handling helpers."""

import click

from fleetledger.domain.errors import DomainError, StorageError

# Exit codes: 1 for rejected input or missing records, 2 for storage failures.
EXIT_DOMAIN_ERROR = 1
EXIT_STORAGE_ERROR = 2


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError | StorageError) -> None:
    """Render a domain or storage error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, StorageError):
        ctx.exit(EXIT_STORAGE_ERROR)
    ctx.exit(EXIT_DOMAIN_ERROR)
