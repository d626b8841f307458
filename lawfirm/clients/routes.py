from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from lawfirm.database import get_db
from lawfirm.clients.schemas import ClientCreate, ClientUpdate, ClientUpdateFields, ClientResponse
from lawfirm.cases.schemas import CaseResponse
from lawfirm.appointments.schemas import AppointmentResponse
from lawfirm.invoices.schemas import InvoiceResponse
from lawfirm.services.client_service import ClientService
from lawfirm.services.case_service import CaseService
from lawfirm.services.appointment_service import AppointmentService
from lawfirm.services.invoice_service import InvoiceService

router = APIRouter(prefix="/clients", tags=["Clients"])

@router.post("/", response_model=ClientResponse)
def create_client(client_data: ClientCreate, db: Session = Depends(get_db)):
    """Create a new client."""
    return ClientService(db).create(client_data)

@router.get("/", response_model=List[ClientResponse])
def list_clients(db: Session = Depends(get_db)):
    return ClientService(db).get_all()

@router.get("/{client_id}", response_model=ClientResponse)
def get_client(client_id: int, db: Session = Depends(get_db)):
    return ClientService(db).get_by_id(client_id)

@router.put("/{client_id}", response_model=ClientResponse)
def update_client(client_id: int, client_update: ClientUpdateFields, db: Session = Depends(get_db)):
    """Update a client. Omitted fields are left unchanged."""
    payload = ClientUpdate(id=client_id, **client_update.model_dump(exclude_unset=True))
    return ClientService(db).update(payload)

# =====================================================
# RELATIONSHIP LOOKUPS
# =====================================================

@router.get("/{client_id}/cases", response_model=List[CaseResponse])
def get_client_cases(client_id: int, db: Session = Depends(get_db)):
    return CaseService(db).get_by_client(client_id)

@router.get("/{client_id}/appointments", response_model=List[AppointmentResponse])
def get_client_appointments(client_id: int, db: Session = Depends(get_db)):
    return AppointmentService(db).get_by_client(client_id)

@router.get("/{client_id}/invoices", response_model=List[InvoiceResponse])
def get_client_invoices(client_id: int, db: Session = Depends(get_db)):
    return InvoiceService(db).get_by_client(client_id)
