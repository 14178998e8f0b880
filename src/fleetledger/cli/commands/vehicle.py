"""Vehicle management commands."""

import click
from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.cli.vehicle_resolution import resolve_vehicle_or_exit
from fleetledger.domain.errors import DomainError, StorageError
from fleetledger.domain.vehicle import VehicleService


@click.group()
def vehicle_group():
    """Manage vehicles."""
    pass


@vehicle_group.command("add")
@click.argument("vehicle_number", metavar="VEHICLE_NUMBER")
@click.option("--id", "vehicle_id", help="Vehicle ID (auto-generated if not provided)")
@click.option("--make", help="Manufacturer, e.g. Toyota")
@click.option("--model", help="Model, e.g. Hiace")
@click.pass_context
def add_vehicle(ctx, vehicle_number: str, vehicle_id: str | None, make: str | None, model: str | None):
    """Register a vehicle.

    Examples:
        fleetledger vehicle add "DXB-1042" --make Toyota --model Hiace
        fleetledger vehicle add "DXB-2001" --id van-2001
    """
    db = ctx.obj["db"]
    service = VehicleService(db)

    try:
        new_id = service.create_vehicle(
            vehicle_number=vehicle_number, make=make, model=model, vehicle_id=vehicle_id
        )
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created vehicle '{vehicle_number}' (ID: {new_id})")


@vehicle_group.command("list")
@click.pass_context
def list_vehicles(ctx):
    """List all vehicles."""
    db = ctx.obj["db"]
    service = VehicleService(db)

    vehicles = service.list_vehicles()
    if not vehicles:
        click.echo("No vehicles found.")
        return

    click.echo("\nVehicles:")
    click.echo("-" * 80)
    for v in vehicles:
        make_model = " ".join(part for part in (v.make, v.model) if part) or "-"
        click.echo(f"ID: {v.id:32s} | {v.vehicle_number:12s} | {make_model:20s} | {v.status}")


@vehicle_group.command("delete")
@click.argument("vehicle", metavar="VEHICLE")
@click.option("--yes", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_vehicle(ctx, vehicle: str, yes: bool) -> None:
    """Delete a vehicle and all of its transactions.

    VEHICLE can be a vehicle ID or vehicle number.

    Examples:
        fleetledger vehicle delete "DXB-1042"
        fleetledger vehicle delete van-2001 --yes
    """
    db = ctx.obj["db"]
    service = VehicleService(db)

    vehicle_id = resolve_vehicle_or_exit(ctx, service, vehicle)
    vehicle_obj = service.get_vehicle(vehicle_id)
    transaction_count = len(db.list_transactions(vehicle_id=vehicle_id))

    if not yes:
        prompt = f"Delete vehicle '{vehicle_obj.vehicle_number}'"
        if transaction_count:
            prompt += f" and its {transaction_count} transaction{'s' if transaction_count != 1 else ''}"
        if not click.confirm(prompt + "?"):
            click.echo("Deletion cancelled.")
            return

    try:
        removed = service.delete_vehicle(vehicle_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(
        f"Deleted vehicle '{vehicle_obj.vehicle_number}' and {removed} "
        f"transaction{'s' if removed != 1 else ''}"
    )


def register_commands(cli):
    """Register vehicle commands with main CLI."""
    cli.add_command(vehicle_group, name="vehicle")
