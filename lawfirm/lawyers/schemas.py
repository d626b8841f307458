from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal

from lawfirm.validation import Email, OptionalText, RequiredText

class LawyerBase(BaseModel):
    first_name: RequiredText = Field(..., max_length=100)
    last_name: RequiredText = Field(..., max_length=100)
    email: Email
    phone: OptionalText = Field(None, max_length=20)
    specialization: OptionalText = None
    bar_number: RequiredText = Field(..., max_length=50)
    hourly_rate: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)

class LawyerCreate(LawyerBase):
    pass

# Lawyers are create/read only

class LawyerResponse(LawyerBase):
    id: int
    email: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
