"""Fleet dashboard command."""

import json

import click
from fleetledger.cli.commands.profitability import format_month_row, month_table_header
from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.cli.vehicle_resolution import resolve_vehicle_or_exit
from fleetledger.domain.dashboard import DashboardService
from fleetledger.domain.entities import (
    DASHBOARD_SECTIONS,
    DashboardDisplaySettings,
    DashboardSnapshot,
)
from fleetledger.domain.errors import DomainError, StorageError
from fleetledger.domain.serialization import to_jsonable
from fleetledger.domain.vehicle import VehicleService
from fleetledger.utils.date_parser import parse_date


def _show_overall(snapshot: DashboardSnapshot) -> None:
    o = snapshot.overall
    click.echo("\nOverall")
    click.echo("-" * 50)
    click.echo(f"Revenue:                   {o.revenue:>15,.2f}")
    click.echo(f"Expenses:                  {o.expenses:>15,.2f}")
    click.echo(f"Profit:                    {o.profit:>15,.2f}")
    click.echo(f"Profit margin:             {o.profit_margin:>14,.2f}%")
    click.echo(f"Avg revenue per vehicle:   {o.avg_revenue_per_vehicle:>15,.2f}")
    click.echo(f"Avg profit per vehicle:    {o.avg_profit_per_vehicle:>15,.2f}")
    click.echo(f"Transactions:              {o.transaction_count:>15d}")
    click.echo(f"Avg transaction value:     {o.avg_transaction_value:>15,.2f}")


def _show_time_based(snapshot: DashboardSnapshot) -> None:
    t = snapshot.time_based
    click.echo("\nTime based")
    click.echo("-" * 70)
    click.echo(month_table_header())
    click.echo(format_month_row("This month", t.current_month))
    click.echo(format_month_row("Last month", t.last_month))
    click.echo(format_month_row(f"YTD {t.ytd.year}", t.ytd))
    g = t.mom_growth
    click.echo(
        f"Month-over-month: revenue {g.revenue:+.2f}%, expenses {g.expenses:+.2f}%, profit {g.profit:+.2f}%"
    )
    click.echo("\nTrend:")
    for month in t.monthly_trend:
        click.echo(format_month_row(month.month, month))


def _show_rankings(title: str, rankings) -> None:
    click.echo(f"  {title}:")
    if not rankings:
        click.echo("    (none)")
    for i, r in enumerate(rankings, start=1):
        click.echo(f"    {i}. {r.vehicle_number:<12} {r.value:>15,.2f}")


def _show_vehicle_based(snapshot: DashboardSnapshot) -> None:
    v = snapshot.vehicle_based
    click.echo("\nVehicles")
    click.echo("-" * 50)
    click.echo(
        f"{v.vehicle_count} vehicles: {v.active} active, {v.no_data} without transactions, "
        f"{v.profitable} profitable, {v.loss_making} loss-making"
    )
    _show_rankings("Top by revenue", v.top_by_revenue)
    _show_rankings("Top by profit", v.top_by_profit)
    _show_rankings("Bottom by profit", v.bottom_by_profit)


def _show_customer_based(snapshot: DashboardSnapshot) -> None:
    c = snapshot.customer_based
    click.echo("\nCustomers")
    click.echo("-" * 50)
    click.echo(f"Unique customers:          {c.unique_customers:>15d}")
    click.echo(f"Avg revenue per customer:  {c.avg_revenue_per_customer:>15,.2f}")
    for i, r in enumerate(c.top_by_revenue, start=1):
        click.echo(f"    {i}. {r.customer_name:<25} {r.revenue:>15,.2f}")


def _show_category_based(snapshot: DashboardSnapshot) -> None:
    c = snapshot.category_based
    click.echo("\nCategories")
    click.echo("-" * 50)
    click.echo("  Revenue:")
    for name, total in c.revenue_by_category.items():
        click.echo(f"    {name:<30} {total:>15,.2f}")
    click.echo("  Expenses:")
    for name, total in c.expenses_by_category.items():
        click.echo(f"    {name:<30} {total:>15,.2f}")
    click.echo(f"  Top expense category: {c.top_expense_category}")


def _show_operational(snapshot: DashboardSnapshot) -> None:
    o = snapshot.operational
    click.echo("\nOperational")
    click.echo("-" * 50)
    click.echo(f"Revenue per vehicle-month: {o.revenue_per_vehicle_per_month:>15,.2f}")
    click.echo(f"Expense ratio:             {o.expense_ratio:>14,.2f}%")
    click.echo(f"Avg txns per vehicle:      {o.avg_transactions_per_vehicle:>15,.2f}")
    if o.most_active_vehicle is not None:
        click.echo(
            f"Most active vehicle:       {o.most_active_vehicle.vehicle_number} "
            f"({int(o.most_active_vehicle.value)} transactions)"
        )
    else:
        click.echo("Most active vehicle:       N/A")


_SECTION_RENDERERS = {
    "overall": _show_overall,
    "time_based": _show_time_based,
    "vehicle_based": _show_vehicle_based,
    "customer_based": _show_customer_based,
    "category_based": _show_category_based,
    "operational": _show_operational,
}


@click.command("dashboard")
@click.option("--vehicle", "vehicles", multiple=True, help="Vehicle ID or number (repeatable; default all)")
@click.option("--as-of", help="Reference date (default today)")
@click.option(
    "--hide",
    multiple=True,
    type=click.Choice(DASHBOARD_SECTIONS),
    help="Section to leave out (repeatable)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the dashboard as JSON")
@click.pass_context
def dashboard(ctx, vehicles: tuple[str, ...], as_of: str | None, hide: tuple[str, ...], as_json: bool):
    """Show fleet-wide profitability.

    Examples:
        fleetledger dashboard
        fleetledger dashboard --vehicle DXB-1042 --vehicle DXB-2001 --hide customer_based
        fleetledger dashboard --as-of 2025-06-30 --json
    """
    db = ctx.obj["db"]
    vehicle_service = VehicleService(db)
    service = DashboardService(db)

    vehicle_ids = None
    if vehicles:
        vehicle_ids = [resolve_vehicle_or_exit(ctx, vehicle_service, v) for v in vehicles]

    as_of_date = None
    if as_of:
        try:
            as_of_date = parse_date(as_of)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    settings = DashboardDisplaySettings.from_mapping({f"show_{section}": False for section in hide})

    try:
        snapshot = service.get_dashboard(vehicle_ids=vehicle_ids, as_of=as_of_date)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    if as_json:
        data = to_jsonable(snapshot)
        for section in DASHBOARD_SECTIONS:
            if not settings.is_shown(section):
                data.pop(section)
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(f"\nFleet dashboard as of {snapshot.as_of}")
    click.echo("=" * 70)
    for section in DASHBOARD_SECTIONS:
        if settings.is_shown(section):
            _SECTION_RENDERERS[section](snapshot)


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
