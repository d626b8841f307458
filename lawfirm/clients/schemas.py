from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from lawfirm.validation import Email, OptionalText, RecordId, RequiredText

class ClientBase(BaseModel):
    first_name: RequiredText = Field(..., max_length=100)
    last_name: RequiredText = Field(..., max_length=100)
    email: Email
    phone: OptionalText = Field(None, max_length=20)
    address: OptionalText = None
    company: OptionalText = Field(None, max_length=255)

class ClientCreate(ClientBase):
    pass

class ClientUpdateFields(BaseModel):
    first_name: Optional[RequiredText] = Field(None, max_length=100)
    last_name: Optional[RequiredText] = Field(None, max_length=100)
    email: Optional[Email] = None
    phone: OptionalText = Field(None, max_length=20)
    address: OptionalText = None
    company: OptionalText = Field(None, max_length=255)

class ClientUpdate(ClientUpdateFields):
    id: RecordId

class ClientResponse(ClientBase):
    id: int
    email: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
