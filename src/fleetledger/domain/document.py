"""Invoices, purchase orders and quotes that transactions may reference."""

from typing import Optional

from fleetledger.database.base import Database
from fleetledger.domain.entities import Invoice, PurchaseOrder, Quote
from fleetledger.domain.errors import ValidationError


def _require_number(number: str, label: str) -> str:
    number = (number or "").strip()
    if not number:
        raise ValidationError(f"{label} number cannot be empty")
    return number


class DocumentService:
    """Service for the reference documents a transaction can point to.

    The ledger only checks that these exist; their own lifecycle belongs to
    other systems, so only creation and lookup are offered here.
    """

    def __init__(self, db: Database):
        """Initialize document service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_invoice(
        self,
        number: str,
        customer_name: Optional[str] = None,
        invoice_id: Optional[str] = None,
    ) -> str:
        """Create an invoice reference.

        Args:
            number: Invoice number
            customer_name: Customer billed; used for per-customer revenue
            invoice_id: Optional explicit ID

        Returns:
            Invoice ID
        """
        number = _require_number(number, "Invoice")
        if invoice_id and self.db.invoice_exists(invoice_id):
            raise ValidationError(f"Invoice with ID '{invoice_id}' already exists")
        return self.db.create_invoice(
            number=number,
            customer_name=(customer_name or "").strip() or None,
            invoice_id=invoice_id or None,
        )

    def create_purchase_order(self, number: str, purchase_order_id: Optional[str] = None) -> str:
        number = _require_number(number, "Purchase order")
        if purchase_order_id and self.db.purchase_order_exists(purchase_order_id):
            raise ValidationError(f"Purchase order with ID '{purchase_order_id}' already exists")
        return self.db.create_purchase_order(number=number, purchase_order_id=purchase_order_id or None)

    def create_quote(self, number: str, quote_id: Optional[str] = None) -> str:
        number = _require_number(number, "Quote")
        if quote_id and self.db.quote_exists(quote_id):
            raise ValidationError(f"Quote with ID '{quote_id}' already exists")
        return self.db.create_quote(number=number, quote_id=quote_id or None)

    def get_invoice(self, invoice_id: str) -> Optional[Invoice]:
        return self.db.get_invoice(invoice_id)

    def get_purchase_order(self, purchase_order_id: str) -> Optional[PurchaseOrder]:
        return self.db.get_purchase_order(purchase_order_id)

    def get_quote(self, quote_id: str) -> Optional[Quote]:
        return self.db.get_quote(quote_id)
