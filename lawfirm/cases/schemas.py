from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from lawfirm.models import CaseStatus
from lawfirm.validation import Instant, OptionalText, RecordId, RequiredText

class CaseBase(BaseModel):
    title: RequiredText = Field(..., max_length=255)
    description: OptionalText = None
    status: CaseStatus = CaseStatus.PENDING
    client_id: RecordId
    primary_lawyer_id: RecordId

class CaseCreate(CaseBase):
    # Generated when omitted
    case_number: Optional[RequiredText] = Field(None, max_length=50)
    opened_date: Optional[Instant] = None

class CaseUpdateFields(BaseModel):
    title: Optional[RequiredText] = Field(None, max_length=255)
    description: OptionalText = None
    status: Optional[CaseStatus] = None
    primary_lawyer_id: Optional[RecordId] = None
    closed_date: Optional[Instant] = None

class CaseUpdate(CaseUpdateFields):
    id: RecordId

class CaseResponse(CaseBase):
    id: int
    case_number: str
    opened_date: datetime
    closed_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
