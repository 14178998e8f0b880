"""Per-vehicle profitability command."""

import json

import click
from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.cli.vehicle_resolution import resolve_vehicle_or_exit
from fleetledger.domain.entities import MonthlySummary, YearToDate
from fleetledger.domain.errors import DomainError, StorageError
from fleetledger.domain.profitability import ProfitabilityService
from fleetledger.domain.serialization import to_jsonable
from fleetledger.domain.vehicle import VehicleService
from fleetledger.utils.date_parser import parse_date


def format_month_row(label: str, summary: MonthlySummary | YearToDate | None) -> str:
    """Format one month of revenue, expenses and profit as a table row."""
    if summary is None:
        return f"{label:<12} {'no activity':>15}"
    return (
        f"{label:<12} {summary.revenue:>15,.2f} {summary.expenses:>15,.2f} "
        f"{summary.profit:>15,.2f} {summary.transaction_count:>6d}"
    )


def month_table_header() -> str:
    return f"{'Month':<12} {'Revenue':>15} {'Expenses':>15} {'Profit':>15} {'Txns':>6}"


@click.command("profitability")
@click.argument("vehicle", metavar="VEHICLE")
@click.option("--as-of", help="Reference date (default today); its month is the current month")
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.pass_context
def profitability(ctx, vehicle: str, as_of: str | None, as_json: bool):
    """Show a vehicle's current-month, all-time and 12-month profitability.

    VEHICLE can be a vehicle ID or vehicle number.

    Examples:
        fleetledger profitability DXB-1042
        fleetledger profitability DXB-1042 --as-of 2025-06-30 --json
    """
    db = ctx.obj["db"]
    vehicle_service = VehicleService(db)
    service = ProfitabilityService(db)

    vehicle_id = resolve_vehicle_or_exit(ctx, vehicle_service, vehicle)

    as_of_date = None
    if as_of:
        try:
            as_of_date = parse_date(as_of)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        summary = service.get_profitability(vehicle_id, as_of=as_of_date)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    if as_json:
        click.echo(json.dumps(to_jsonable(summary), indent=2))
        return

    vehicle_obj = vehicle_service.get_vehicle(vehicle_id)
    window = summary.months
    click.echo(f"\nProfitability for vehicle {vehicle_obj.vehicle_number}")
    click.echo("=" * 70)
    click.echo(month_table_header())
    click.echo(format_month_row("This month", summary.current_month))
    click.echo(format_month_row("Last month", summary.last_month))
    click.echo()
    click.echo(f"All-time revenue:  {summary.all_time_revenue:>15,.2f}")
    click.echo(f"All-time expenses: {summary.all_time_expenses:>15,.2f}")
    click.echo(f"All-time profit:   {summary.all_time_profit:>15,.2f}")
    click.echo(f"Transactions:      {summary.transaction_count:>15d}")
    click.echo(f"\nLast {len(window)} months ({window[0].month} to {window[-1].month}):")
    click.echo(month_table_header())
    click.echo("-" * 70)
    for month in window:
        click.echo(format_month_row(month.month, month))


def register_commands(cli):
    """Register profitability command with main CLI."""
    cli.add_command(profitability)
