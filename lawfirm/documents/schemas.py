from pydantic import BaseModel, Field
from datetime import datetime

from lawfirm.models import DocumentType
from lawfirm.validation import OptionalText, RecordId, RequiredText

class DocumentBase(BaseModel):
    name: RequiredText = Field(..., max_length=255)
    description: OptionalText = None
    file_path: RequiredText = Field(..., max_length=500)
    file_size: int = Field(..., gt=0)
    mime_type: RequiredText = Field(..., max_length=100)
    document_type: DocumentType
    case_id: RecordId
    uploaded_by_lawyer_id: RecordId

class DocumentCreate(DocumentBase):
    pass

# Documents are create/read only

class DocumentResponse(DocumentBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
