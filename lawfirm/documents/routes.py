from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from lawfirm.database import get_db
from lawfirm.documents.schemas import DocumentCreate, DocumentResponse
from lawfirm.services.document_service import DocumentService

router = APIRouter(prefix="/documents", tags=["Documents"])

@router.post("/", response_model=DocumentResponse)
def create_document(document_data: DocumentCreate, db: Session = Depends(get_db)):
    """Register a document already stored at file_path."""
    return DocumentService(db).create(document_data)

@router.get("/", response_model=List[DocumentResponse])
def list_documents(db: Session = Depends(get_db)):
    return DocumentService(db).get_all()

@router.get("/{document_id}", response_model=DocumentResponse)
def get_document(document_id: int, db: Session = Depends(get_db)):
    return DocumentService(db).get_by_id(document_id)
