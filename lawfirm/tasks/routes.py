from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from lawfirm.database import get_db
from lawfirm.tasks.schemas import TaskCreate, TaskUpdate, TaskUpdateFields, TaskResponse
from lawfirm.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["Tasks"])

@router.post("/", response_model=TaskResponse)
def create_task(task_data: TaskCreate, db: Session = Depends(get_db)):
    return TaskService(db).create(task_data)

@router.get("/", response_model=List[TaskResponse])
def list_tasks(db: Session = Depends(get_db)):
    return TaskService(db).get_all()

@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: int, db: Session = Depends(get_db)):
    return TaskService(db).get_by_id(task_id)

@router.put("/{task_id}", response_model=TaskResponse)
def update_task(task_id: int, task_update: TaskUpdateFields, db: Session = Depends(get_db)):
    """Update a task. Completing it stamps completed_date."""
    payload = TaskUpdate(id=task_id, **task_update.model_dump(exclude_unset=True))
    return TaskService(db).update(payload)
