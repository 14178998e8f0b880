"""Main CLI entry point."""

import click
from fleetledger.database.factories import create_sqlite_database
from fleetledger.logging_setup import configure_logging

# Import and register all commands at module level
from fleetledger.cli.commands import (
    vehicle,
    employee,
    document,
    transaction,
    profitability,
    dashboard,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FLEETLEDGER_DB_PATH environment variable)",
    envvar="FLEETLEDGER_DB_PATH",
)
@click.option(
    "--log-level",
    help="Log level such as INFO or DEBUG (overrides FLEETLEDGER_LOG_LEVEL environment variable)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Fleetledger - Vehicle financial ledger.

    Record revenue and expenses per vehicle, and report monthly
    profitability for single vehicles or the whole fleet.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
vehicle.register_commands(cli)
employee.register_commands(cli)
document.register_commands(cli)
transaction.register_commands(cli)
profitability.register_commands(cli)
dashboard.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
