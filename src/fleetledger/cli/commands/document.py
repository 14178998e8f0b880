"""Reference document commands (invoices, purchase orders, quotes)."""

import click
from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.domain.document import DocumentService
from fleetledger.domain.errors import DomainError, StorageError


@click.group()
def document_group():
    """Register documents that transactions can reference."""
    pass


@document_group.command("invoice")
@click.argument("number", metavar="NUMBER")
@click.option("--customer", help="Customer the invoice was issued to")
@click.option("--id", "invoice_id", help="Invoice ID (auto-generated if not provided)")
@click.pass_context
def add_invoice(ctx, number: str, customer: str | None, invoice_id: str | None):
    """Register an invoice.

    Examples:
        fleetledger document invoice INV-2025-001 --customer "Acme Logistics"
    """
    service = DocumentService(ctx.obj["db"])
    try:
        new_id = service.create_invoice(number=number, customer_name=customer, invoice_id=invoice_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created invoice '{number}' (ID: {new_id})")


@document_group.command("purchase-order")
@click.argument("number", metavar="NUMBER")
@click.option("--id", "purchase_order_id", help="Purchase order ID (auto-generated if not provided)")
@click.pass_context
def add_purchase_order(ctx, number: str, purchase_order_id: str | None):
    """Register a purchase order."""
    service = DocumentService(ctx.obj["db"])
    try:
        new_id = service.create_purchase_order(number=number, purchase_order_id=purchase_order_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created purchase order '{number}' (ID: {new_id})")


@document_group.command("quote")
@click.argument("number", metavar="NUMBER")
@click.option("--id", "quote_id", help="Quote ID (auto-generated if not provided)")
@click.pass_context
def add_quote(ctx, number: str, quote_id: str | None):
    """Register a quote."""
    service = DocumentService(ctx.obj["db"])
    try:
        new_id = service.create_quote(number=number, quote_id=quote_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created quote '{number}' (ID: {new_id})")


def register_commands(cli):
    """Register document commands with main CLI."""
    cli.add_command(document_group, name="document")
