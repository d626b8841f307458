from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal

from lawfirm.models import InvoiceStatus
from lawfirm.validation import Instant, OptionalText, RecordId, RequiredText

class InvoiceBase(BaseModel):
    client_id: RecordId
    case_id: RecordId
    hours_billed: Decimal = Field(..., gt=0, max_digits=8, decimal_places=2)
    hourly_rate: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    description: OptionalText = None
    status: InvoiceStatus = InvoiceStatus.DRAFT

class InvoiceCreate(InvoiceBase):
    # Generated when omitted
    invoice_number: Optional[RequiredText] = Field(None, max_length=50)
    issued_date: Optional[Instant] = None
    due_date: Instant

class InvoiceUpdateFields(BaseModel):
    status: Optional[InvoiceStatus] = None
    paid_date: Optional[Instant] = None

class InvoiceUpdate(InvoiceUpdateFields):
    id: RecordId

class InvoiceResponse(InvoiceBase):
    id: int
    invoice_number: str
    amount: Decimal
    issued_date: datetime
    due_date: datetime
    paid_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
