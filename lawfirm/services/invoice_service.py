import logging
import uuid
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, List, Mapping, Union

from lawfirm.integrity import check_not_before, check_references, check_unique, ensure_exists
from lawfirm.invoices.schemas import InvoiceCreate, InvoiceUpdate
from lawfirm.lifecycle import INVOICE_TRANSITIONS, check_transition, resolve_status_date
from lawfirm.models import Invoice, InvoiceStatus, utcnow
from lawfirm.services.base import EntityService
from lawfirm.validation import changes, require_not_null, shape

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def generate_invoice_number() -> str:
    """Generate a unique invoice number."""
    timestamp = utcnow().strftime("%Y%m%d")
    unique_id = str(uuid.uuid4())[:8].upper()
    return f"INV-{timestamp}-{unique_id}"


def compute_amount(hours_billed: Decimal, hourly_rate: Decimal) -> Decimal:
    return (Decimal(hours_billed) * Decimal(hourly_rate)).quantize(CENTS, rounding=ROUND_HALF_UP)


class InvoiceService(EntityService):
    model = Invoice

    def create(self, payload: Union[InvoiceCreate, Mapping[str, Any]]) -> Invoice:
        """Create an invoice. The amount is always hours_billed x hourly_rate."""
        data = shape(InvoiceCreate, payload)
        values = data.model_dump()
        values["invoice_number"] = data.invoice_number or generate_invoice_number()
        values["issued_date"] = data.issued_date or utcnow()
        values["amount"] = compute_amount(data.hours_billed, data.hourly_rate)
        values["paid_date"] = resolve_status_date("paid_date", data.status, InvoiceStatus.PAID, None)
        check_not_before("issued_date", values["issued_date"], "due_date", values["due_date"])

        with self.storage.transaction(self.entity):
            check_references(self.storage, Invoice, values)
            check_unique(self.storage, Invoice, values)
            invoice = self.storage.insert(Invoice, values)

        logger.info("Created invoice %s (%s) for %s", invoice.id, invoice.invoice_number, invoice.amount)
        return invoice

    def update(self, payload: Union[InvoiceUpdate, Mapping[str, Any]]) -> Invoice:
        """Move an invoice through its status lifecycle."""
        data = shape(InvoiceUpdate, payload)
        values = changes(data, "id")
        require_not_null(values, "status")

        with self.storage.transaction(self.entity):
            invoice = ensure_exists(self.storage, Invoice, data.id)
            target = values.get("status", invoice.status)
            check_transition(self.entity, INVOICE_TRANSITIONS, invoice.status, target)
            values["paid_date"] = resolve_status_date(
                "paid_date",
                target,
                InvoiceStatus.PAID,
                values.get("paid_date"),
                current=invoice.paid_date,
                supplied_set="paid_date" in values,
            )
            check_not_before("issued_date", invoice.issued_date, "paid_date", values["paid_date"])
            invoice = self.storage.update(Invoice, data.id, values)

        logger.info("Updated invoice %s: %s", data.id, sorted(values))
        return invoice

    def get_by_client(self, client_id: int) -> List[Invoice]:
        return self.find_by(client_id=client_id)

    def get_by_case(self, case_id: int) -> List[Invoice]:
        return self.find_by(case_id=case_id)
