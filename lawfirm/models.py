from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum, Numeric
from sqlalchemy.orm import relationship
from lawfirm.database import Base
import enum


def utcnow() -> datetime:
    """Current instant as naive UTC, the canonical form stored in every date column."""
    return datetime.now(timezone.utc).replace(tzinfo=None)

# =====================================================
# ENUMS
# =====================================================

class CaseStatus(str, enum.Enum):
    PENDING = "pending"
    ACTIVE = "active"
    ON_HOLD = "on_hold"
    CLOSED = "closed"

class TaskPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

class TaskStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class AppointmentStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"

class DocumentType(str, enum.Enum):
    CONTRACT = "contract"
    BRIEF = "brief"
    EVIDENCE = "evidence"
    CORRESPONDENCE = "correspondence"
    COURT_FILING = "court_filing"
    OTHER = "other"

class InvoiceStatus(str, enum.Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"

# =====================================================
# PEOPLE
# =====================================================

class Client(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(20))
    address = Column(Text)
    company = Column(String(255))
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    cases = relationship("Case", back_populates="client", order_by="Case.id")
    appointments = relationship("Appointment", back_populates="client", order_by="Appointment.id")
    invoices = relationship("Invoice", back_populates="client", order_by="Invoice.id")

class Lawyer(Base):
    __tablename__ = "lawyers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(20))
    specialization = Column(Text)
    bar_number = Column(String(50), unique=True, nullable=False, index=True)
    hourly_rate = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    primary_cases = relationship("Case", back_populates="primary_lawyer", order_by="Case.id")
    tasks = relationship("Task", back_populates="assigned_lawyer", order_by="Task.id")
    appointments = relationship("Appointment", back_populates="lawyer", order_by="Appointment.id")
    uploaded_documents = relationship("Document", back_populates="uploaded_by_lawyer", order_by="Document.id")

# =====================================================
# CASE MANAGEMENT
# =====================================================

class Case(Base):
    __tablename__ = "cases"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    status = Column(Enum(CaseStatus), default=CaseStatus.PENDING, nullable=False, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    primary_lawyer_id = Column(Integer, ForeignKey("lawyers.id"), nullable=False, index=True)
    case_number = Column(String(50), unique=True, nullable=False, index=True)
    opened_date = Column(DateTime, default=utcnow, nullable=False)
    closed_date = Column(DateTime)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    client = relationship("Client", back_populates="cases")
    primary_lawyer = relationship("Lawyer", back_populates="primary_cases")
    tasks = relationship("Task", back_populates="case", order_by="Task.id")
    appointments = relationship("Appointment", back_populates="case", order_by="Appointment.id")
    documents = relationship("Document", back_populates="case", order_by="Document.id")
    invoices = relationship("Invoice", back_populates="case", order_by="Invoice.id")

class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    priority = Column(Enum(TaskPriority), default=TaskPriority.MEDIUM, nullable=False)
    status = Column(Enum(TaskStatus), default=TaskStatus.PENDING, nullable=False, index=True)
    case_id = Column(Integer, ForeignKey("cases.id"), nullable=False, index=True)
    assigned_lawyer_id = Column(Integer, ForeignKey("lawyers.id"), nullable=False, index=True)
    due_date = Column(DateTime, index=True)
    completed_date = Column(DateTime)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    case = relationship("Case", back_populates="tasks")
    assigned_lawyer = relationship("Lawyer", back_populates="tasks")

# =====================================================
# SCHEDULING
# =====================================================

class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    lawyer_id = Column(Integer, ForeignKey("lawyers.id"), nullable=False, index=True)
    case_id = Column(Integer, ForeignKey("cases.id"), index=True)
    scheduled_date = Column(DateTime, nullable=False, index=True)
    duration_minutes = Column(Integer, default=60, nullable=False)
    status = Column(Enum(AppointmentStatus), default=AppointmentStatus.SCHEDULED, nullable=False, index=True)
    location = Column(String(255))
    notes = Column(Text)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    client = relationship("Client", back_populates="appointments")
    lawyer = relationship("Lawyer", back_populates="appointments")
    case = relationship("Case", back_populates="appointments")

# =====================================================
# DOCUMENTS
# =====================================================

class Document(Base):
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    file_path = Column(String(500), nullable=False)
    file_size = Column(Integer, nullable=False)
    mime_type = Column(String(100), nullable=False)
    document_type = Column(Enum(DocumentType), nullable=False, index=True)
    case_id = Column(Integer, ForeignKey("cases.id"), nullable=False, index=True)
    uploaded_by_lawyer_id = Column(Integer, ForeignKey("lawyers.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    case = relationship("Case", back_populates="documents")
    uploaded_by_lawyer = relationship("Lawyer", back_populates="uploaded_documents")

# =====================================================
# BILLING
# =====================================================

class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    invoice_number = Column(String(50), unique=True, nullable=False, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    case_id = Column(Integer, ForeignKey("cases.id"), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    hours_billed = Column(Numeric(8, 2), nullable=False)
    hourly_rate = Column(Numeric(10, 2), nullable=False)
    description = Column(Text)
    status = Column(Enum(InvoiceStatus), default=InvoiceStatus.DRAFT, nullable=False, index=True)
    issued_date = Column(DateTime, default=utcnow, nullable=False)
    due_date = Column(DateTime, nullable=False, index=True)
    paid_date = Column(DateTime)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    client = relationship("Client", back_populates="invoices")
    case = relationship("Case", back_populates="invoices")
