"""Transaction management commands."""

import click
from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.cli.vehicle_resolution import resolve_vehicle_or_exit
from fleetledger.domain.entities import VehicleTransaction
from fleetledger.domain.errors import DomainError, NotFoundError, StorageError
from fleetledger.domain.transaction import TransactionService
from fleetledger.domain.vehicle import VehicleService
from fleetledger.utils.amount_parser import parse_amount
from fleetledger.utils.date_parser import parse_date, parse_month
from fleetledger.utils.vehicle_resolver import resolve_vehicle

TRANSACTION_TYPE_HELP = "Transaction type: 'revenue' or 'expense'"
DATE_HELP = "Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday', '3 days ago')"


def _parse_date_or_exit(ctx, value: str):
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)


def _parse_amount_or_exit(ctx, value: str):
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)


def _vehicle_id_for_write(vehicle_service: VehicleService, vehicle: str) -> str:
    """Resolve a vehicle number to its ID, leaving unknown input for the validator to reject."""
    try:
        return resolve_vehicle(vehicle_service, vehicle)
    except NotFoundError:
        return vehicle


def _display_transaction(txn: VehicleTransaction) -> None:
    click.echo(f"Transaction {txn.id}")
    click.echo(f"  Vehicle:         {txn.vehicle_id}")
    click.echo(f"  Type:            {txn.transaction_type.value}")
    click.echo(f"  Amount:          {txn.amount:,.2f}")
    click.echo(f"  Date:            {txn.date}")
    click.echo(f"  Month:           {txn.month}")
    # Optional fields only when set
    for label, value in (
        ("Category", txn.category),
        ("Description", txn.description),
        ("Employee", txn.employee_id),
        ("Invoice", txn.invoice_id),
        ("Purchase order", txn.purchase_order_id),
        ("Quote", txn.quote_id),
    ):
        if value:
            click.echo(f"  {label + ':':<17}{value}")
    click.echo(f"  Created:         {txn.created_at:%Y-%m-%d %H:%M:%S}")
    click.echo(f"  Updated:         {txn.updated_at:%Y-%m-%d %H:%M:%S}")


@click.group()
def transaction_group():
    """Manage vehicle transactions."""
    pass


@transaction_group.command("add")
@click.option("--vehicle", required=True, help="Vehicle ID or vehicle number")
@click.option("--type", "transaction_type", required=True, help=TRANSACTION_TYPE_HELP)
@click.option("--amount", required=True, help="Positive amount (e.g., 1250.00 or 'AED 300')")
@click.option("--date", "date_str", required=True, help=DATE_HELP)
@click.option("--category", help="Category label (e.g., 'Fuel', 'Rental Income')")
@click.option("--description", help="Transaction description")
@click.option("--employee", help="Employee ID")
@click.option("--invoice", help="Invoice ID")
@click.option("--purchase-order", help="Purchase order ID")
@click.option("--quote", help="Quote ID")
@click.pass_context
def add_transaction(
    ctx,
    vehicle: str,
    transaction_type: str,
    amount: str,
    date_str: str,
    category: str | None,
    description: str | None,
    employee: str | None,
    invoice: str | None,
    purchase_order: str | None,
    quote: str | None,
):
    """Record a revenue or expense event for a vehicle.

    Examples:
        fleetledger transaction add --vehicle DXB-1042 --type revenue --amount 1500 --date today --category "Rental Income"
        fleetledger transaction add --vehicle DXB-1042 --type expense --amount "AED 300" --date yesterday --category Fuel
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)
    vehicle_service = VehicleService(db)

    vehicle_id = _vehicle_id_for_write(vehicle_service, vehicle)
    txn_date = _parse_date_or_exit(ctx, date_str)
    txn_amount = _parse_amount_or_exit(ctx, amount)

    try:
        txn = transaction_service.create_transaction(
            vehicle_id=vehicle_id,
            transaction_type=transaction_type.strip().lower(),
            amount=txn_amount,
            date=txn_date,
            category=category,
            description=description,
            employee_id=employee,
            invoice_id=invoice,
            purchase_order_id=purchase_order,
            quote_id=quote,
        )
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(
        f"Recorded {txn.transaction_type.value} of {txn.amount:,.2f} for {txn.month} (ID: {txn.id})"
    )


@transaction_group.command("list")
@click.option("--vehicle", help="Vehicle ID or vehicle number")
@click.option("--month", help="Month (YYYY-MM, 'this month' or 'last month')")
@click.pass_context
def list_transactions(ctx, vehicle: str | None, month: str | None):
    """List transactions, newest first.

    Filter by vehicle, by month, or both to see one vehicle's month.
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)
    vehicle_service = VehicleService(db)

    vehicle_id = None
    if vehicle is not None:
        vehicle_id = resolve_vehicle_or_exit(ctx, vehicle_service, vehicle)

    month_key = None
    if month is not None:
        try:
            month_key = parse_month(month)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)

    try:
        transactions = transaction_service.list_transactions(vehicle_id=vehicle_id, month=month_key)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    if not transactions:
        click.echo("No transactions found.")
        return

    numbers = {v.id: v.vehicle_number for v in vehicle_service.list_vehicles()}
    click.echo(f"{'ID':32s} | {'Date':10s} | {'Vehicle':12s} | {'Type':7s} | {'Amount':>12s} | Category")
    click.echo("-" * 100)
    for txn in transactions:
        click.echo(
            f"{txn.id:32s} | {txn.date.isoformat():10s} | {numbers.get(txn.vehicle_id, txn.vehicle_id):12s} | "
            f"{txn.transaction_type.value:7s} | {txn.amount:>12,.2f} | {txn.category or ''}"
        )
    click.echo(f"\n{len(transactions)} transaction{'s' if len(transactions) != 1 else ''}")


@transaction_group.command("show")
@click.argument("transaction_id")
@click.pass_context
def show_transaction(ctx, transaction_id: str):
    """Show a single transaction."""
    service = TransactionService(ctx.obj["db"])
    try:
        txn = service.require_transaction(transaction_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    _display_transaction(txn)


@transaction_group.command("update")
@click.argument("transaction_id")
@click.option("--vehicle", help="Vehicle ID or vehicle number")
@click.option("--type", "transaction_type", help=TRANSACTION_TYPE_HELP)
@click.option("--amount", help="Positive amount")
@click.option("--date", "date_str", help=DATE_HELP)
@click.option("--category", help="Category label, or empty string to clear")
@click.option("--description", help="Description, or empty string to clear")
@click.option("--employee", help="Employee ID, or empty string to clear")
@click.option("--invoice", help="Invoice ID, or empty string to clear")
@click.option("--purchase-order", help="Purchase order ID, or empty string to clear")
@click.option("--quote", help="Quote ID, or empty string to clear")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: str,
    vehicle: str | None,
    transaction_type: str | None,
    amount: str | None,
    date_str: str | None,
    category: str | None,
    description: str | None,
    employee: str | None,
    invoice: str | None,
    purchase_order: str | None,
    quote: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided. The same checks as for new
    transactions apply, including the 12-month limit on dates.

    Examples:
        fleetledger transaction update 3f2a... --amount 320.50
        fleetledger transaction update 3f2a... --date yesterday --category ""
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)

    changes = {}
    if vehicle is not None:
        changes["vehicle_id"] = _vehicle_id_for_write(VehicleService(db), vehicle)
    if transaction_type is not None:
        changes["transaction_type"] = transaction_type.strip().lower()
    if amount is not None:
        changes["amount"] = _parse_amount_or_exit(ctx, amount)
    if date_str is not None:
        changes["date"] = _parse_date_or_exit(ctx, date_str)
    for field_name, value in (
        ("category", category),
        ("description", description),
        ("employee_id", employee),
        ("invoice_id", invoice),
        ("purchase_order_id", purchase_order),
        ("quote_id", quote),
    ):
        if value is not None:
            changes[field_name] = value

    if not changes:
        click.echo("Error: Nothing to update; pass at least one field option", err=True)
        ctx.exit(1)

    try:
        txn = transaction_service.update_transaction(transaction_id, **changes)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated transaction {txn.id}")


@transaction_group.command("delete")
@click.argument("transaction_id")
@click.option("--yes", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: str, yes: bool) -> None:
    """Delete a transaction. Deleting an unknown ID is not an error."""
    service = TransactionService(ctx.obj["db"])

    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Transaction '{transaction_id}' not found; nothing to delete.")
        return

    if not yes and not click.confirm(
        f"Delete {txn.transaction_type.value} of {txn.amount:,.2f} on {txn.date}?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
    except StorageError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
