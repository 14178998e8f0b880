"""Employee management commands."""

import click
from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.domain.employee import EmployeeService
from fleetledger.domain.errors import DomainError, StorageError


@click.group()
def employee_group():
    """Manage employees."""
    pass


@employee_group.command("add")
@click.argument("name", metavar="NAME")
@click.option("--id", "employee_id", help="Employee ID (auto-generated if not provided)")
@click.pass_context
def add_employee(ctx, name: str, employee_id: str | None):
    """Register an employee transactions can be attributed to."""
    db = ctx.obj["db"]
    service = EmployeeService(db)

    try:
        new_id = service.create_employee(name=name, employee_id=employee_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created employee '{name}' (ID: {new_id})")


@employee_group.command("list")
@click.pass_context
def list_employees(ctx):
    """List all employees."""
    db = ctx.obj["db"]
    service = EmployeeService(db)

    employees = service.list_employees()
    if not employees:
        click.echo("No employees found.")
        return

    click.echo("\nEmployees:")
    click.echo("-" * 60)
    for emp in employees:
        click.echo(f"ID: {emp.id:32s} | {emp.name}")


def register_commands(cli):
    """Register employee commands with main CLI."""
    cli.add_command(employee_group, name="employee")
