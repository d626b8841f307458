from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from lawfirm.database import get_db
from lawfirm.lawyers.schemas import LawyerCreate, LawyerResponse
from lawfirm.cases.schemas import CaseResponse
from lawfirm.tasks.schemas import TaskResponse
from lawfirm.appointments.schemas import AppointmentResponse
from lawfirm.services.lawyer_service import LawyerService
from lawfirm.services.case_service import CaseService
from lawfirm.services.task_service import TaskService
from lawfirm.services.appointment_service import AppointmentService

router = APIRouter(prefix="/lawyers", tags=["Lawyers"])

@router.post("/", response_model=LawyerResponse)
def create_lawyer(lawyer_data: LawyerCreate, db: Session = Depends(get_db)):
    """Register a lawyer."""
    return LawyerService(db).create(lawyer_data)

@router.get("/", response_model=List[LawyerResponse])
def list_lawyers(db: Session = Depends(get_db)):
    return LawyerService(db).get_all()

@router.get("/{lawyer_id}", response_model=LawyerResponse)
def get_lawyer(lawyer_id: int, db: Session = Depends(get_db)):
    return LawyerService(db).get_by_id(lawyer_id)

# =====================================================
# RELATIONSHIP LOOKUPS
# =====================================================

@router.get("/{lawyer_id}/cases", response_model=List[CaseResponse])
def get_lawyer_cases(lawyer_id: int, db: Session = Depends(get_db)):
    """Cases where the lawyer is primary."""
    return CaseService(db).get_by_lawyer(lawyer_id)

@router.get("/{lawyer_id}/tasks", response_model=List[TaskResponse])
def get_lawyer_tasks(lawyer_id: int, db: Session = Depends(get_db)):
    return TaskService(db).get_by_lawyer(lawyer_id)

@router.get("/{lawyer_id}/appointments", response_model=List[AppointmentResponse])
def get_lawyer_appointments(lawyer_id: int, db: Session = Depends(get_db)):
    return AppointmentService(db).get_by_lawyer(lawyer_id)
