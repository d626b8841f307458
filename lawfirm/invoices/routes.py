from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from lawfirm.database import get_db
from lawfirm.invoices.schemas import InvoiceCreate, InvoiceUpdate, InvoiceUpdateFields, InvoiceResponse
from lawfirm.services.invoice_service import InvoiceService

router = APIRouter(prefix="/invoices", tags=["Invoices"])

@router.post("/", response_model=InvoiceResponse)
def create_invoice(invoice_data: InvoiceCreate, db: Session = Depends(get_db)):
    """Issue an invoice. The amount is computed, never accepted from the caller."""
    return InvoiceService(db).create(invoice_data)

@router.get("/", response_model=List[InvoiceResponse])
def list_invoices(db: Session = Depends(get_db)):
    return InvoiceService(db).get_all()

@router.get("/{invoice_id}", response_model=InvoiceResponse)
def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    return InvoiceService(db).get_by_id(invoice_id)

@router.put("/{invoice_id}", response_model=InvoiceResponse)
def update_invoice(invoice_id: int, invoice_update: InvoiceUpdateFields, db: Session = Depends(get_db)):
    payload = InvoiceUpdate(id=invoice_id, **invoice_update.model_dump(exclude_unset=True))
    return InvoiceService(db).update(payload)
