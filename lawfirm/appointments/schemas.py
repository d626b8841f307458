from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from lawfirm.models import AppointmentStatus
from lawfirm.validation import Instant, OptionalText, RecordId, RequiredText

class AppointmentBase(BaseModel):
    title: RequiredText = Field(..., max_length=255)
    description: OptionalText = None
    client_id: RecordId
    lawyer_id: RecordId
    case_id: Optional[RecordId] = None
    scheduled_date: Instant
    duration_minutes: int = Field(60, gt=0)
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    location: OptionalText = Field(None, max_length=255)
    notes: OptionalText = None

class AppointmentCreate(AppointmentBase):
    pass

class AppointmentUpdateFields(BaseModel):
    title: Optional[RequiredText] = Field(None, max_length=255)
    description: OptionalText = None
    scheduled_date: Optional[Instant] = None
    duration_minutes: Optional[int] = Field(None, gt=0)
    status: Optional[AppointmentStatus] = None
    location: OptionalText = Field(None, max_length=255)
    notes: OptionalText = None

class AppointmentUpdate(AppointmentUpdateFields):
    id: RecordId

class AppointmentResponse(AppointmentBase):
    id: int
    scheduled_date: datetime
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
