from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from lawfirm.models import TaskPriority, TaskStatus
from lawfirm.validation import Instant, OptionalText, RecordId, RequiredText

class TaskBase(BaseModel):
    title: RequiredText = Field(..., max_length=255)
    description: OptionalText = None
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    case_id: RecordId
    assigned_lawyer_id: RecordId
    due_date: Optional[Instant] = None

class TaskCreate(TaskBase):
    pass

class TaskUpdateFields(BaseModel):
    title: Optional[RequiredText] = Field(None, max_length=255)
    description: OptionalText = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    assigned_lawyer_id: Optional[RecordId] = None
    due_date: Optional[Instant] = None
    completed_date: Optional[Instant] = None

class TaskUpdate(TaskUpdateFields):
    id: RecordId

class TaskResponse(TaskBase):
    id: int
    completed_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
