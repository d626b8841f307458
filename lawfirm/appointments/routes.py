from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from lawfirm.database import get_db
from lawfirm.appointments.schemas import (
    AppointmentCreate, AppointmentUpdate, AppointmentUpdateFields, AppointmentResponse
)
from lawfirm.services.appointment_service import AppointmentService

router = APIRouter(prefix="/appointments", tags=["Appointments"])

@router.post("/", response_model=AppointmentResponse)
def create_appointment(appointment_data: AppointmentCreate, db: Session = Depends(get_db)):
    return AppointmentService(db).create(appointment_data)

@router.get("/", response_model=List[AppointmentResponse])
def list_appointments(db: Session = Depends(get_db)):
    return AppointmentService(db).get_all()

@router.get("/{appointment_id}", response_model=AppointmentResponse)
def get_appointment(appointment_id: int, db: Session = Depends(get_db)):
    return AppointmentService(db).get_by_id(appointment_id)

@router.put("/{appointment_id}", response_model=AppointmentResponse)
def update_appointment(
    appointment_id: int,
    appointment_update: AppointmentUpdateFields,
    db: Session = Depends(get_db)
):
    payload = AppointmentUpdate(id=appointment_id, **appointment_update.model_dump(exclude_unset=True))
    return AppointmentService(db).update(payload)
