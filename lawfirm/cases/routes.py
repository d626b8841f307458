from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from lawfirm.database import get_db
from lawfirm.cases.schemas import CaseCreate, CaseUpdate, CaseUpdateFields, CaseResponse
from lawfirm.tasks.schemas import TaskResponse
from lawfirm.documents.schemas import DocumentResponse
from lawfirm.invoices.schemas import InvoiceResponse
from lawfirm.services.case_service import CaseService
from lawfirm.services.task_service import TaskService
from lawfirm.services.document_service import DocumentService
from lawfirm.services.invoice_service import InvoiceService

router = APIRouter(prefix="/cases", tags=["Cases"])

# =====================================================
# CASE CRUD OPERATIONS
# =====================================================

@router.post("/", response_model=CaseResponse)
def create_case(case_data: CaseCreate, db: Session = Depends(get_db)):
    """Open a new case. A case number is generated when none is given."""
    return CaseService(db).create(case_data)

@router.get("/", response_model=List[CaseResponse])
def list_cases(db: Session = Depends(get_db)):
    return CaseService(db).get_all()

@router.get("/{case_id}", response_model=CaseResponse)
def get_case(case_id: int, db: Session = Depends(get_db)):
    """Get a specific case by ID."""
    return CaseService(db).get_by_id(case_id)

@router.put("/{case_id}", response_model=CaseResponse)
def update_case(case_id: int, case_update: CaseUpdateFields, db: Session = Depends(get_db)):
    """Update a case."""
    payload = CaseUpdate(id=case_id, **case_update.model_dump(exclude_unset=True))
    return CaseService(db).update(payload)

# =====================================================
# RELATIONSHIP LOOKUPS
# =====================================================

@router.get("/{case_id}/tasks", response_model=List[TaskResponse])
def get_case_tasks(case_id: int, db: Session = Depends(get_db)):
    return TaskService(db).get_by_case(case_id)

@router.get("/{case_id}/documents", response_model=List[DocumentResponse])
def get_case_documents(case_id: int, db: Session = Depends(get_db)):
    return DocumentService(db).get_by_case(case_id)

@router.get("/{case_id}/invoices", response_model=List[InvoiceResponse])
def get_case_invoices(case_id: int, db: Session = Depends(get_db)):
    return InvoiceService(db).get_by_case(case_id)
