"""Shared fixtures: an isolated in-memory database per test plus record factories."""

import os
from datetime import datetime, timedelta
from decimal import Decimal
from itertools import count

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment variables before any imports
os.environ.update({
    "DATABASE_URL": "sqlite:///:memory:",
    "LOG_LEVEL": "WARNING",
})

from lawfirm.database import Base
from lawfirm.services.appointment_service import AppointmentService
from lawfirm.services.case_service import CaseService
from lawfirm.services.client_service import ClientService
from lawfirm.services.document_service import DocumentService
from lawfirm.services.invoice_service import InvoiceService
from lawfirm.services.lawyer_service import LawyerService
from lawfirm.services.task_service import TaskService


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()


# ================================
# RECORD FACTORIES
# ================================

@pytest.fixture()
def make_client(db):
    seq = count(1)

    def _make(**overrides):
        n = next(seq)
        payload = {
            "first_name": "Amina",
            "last_name": f"Otieno{n}",
            "email": f"client{n}@example.com",
        }
        payload.update(overrides)
        return ClientService(db).create(payload)

    return _make


@pytest.fixture()
def make_lawyer(db):
    seq = count(1)

    def _make(**overrides):
        n = next(seq)
        payload = {
            "first_name": "Brian",
            "last_name": f"Kamau{n}",
            "email": f"lawyer{n}@example.com",
            "bar_number": f"BAR-{n:04d}",
            "specialization": "Commercial litigation",
            "hourly_rate": Decimal("250.00"),
        }
        payload.update(overrides)
        return LawyerService(db).create(payload)

    return _make


@pytest.fixture()
def client(make_client):
    return make_client()


@pytest.fixture()
def lawyer(make_lawyer):
    return make_lawyer()


@pytest.fixture()
def make_case(db, client, lawyer):
    seq = count(1)

    def _make(**overrides):
        n = next(seq)
        payload = {
            "title": f"Estate of Wanjiru {n}",
            "client_id": client.id,
            "primary_lawyer_id": lawyer.id,
            "case_number": f"CASE-{n:04d}",
        }
        payload.update(overrides)
        return CaseService(db).create(payload)

    return _make


@pytest.fixture()
def case(make_case):
    return make_case()


@pytest.fixture()
def make_task(db, case, lawyer):
    def _make(**overrides):
        payload = {
            "title": "Draft pleadings",
            "case_id": case.id,
            "assigned_lawyer_id": lawyer.id,
        }
        payload.update(overrides)
        return TaskService(db).create(payload)

    return _make


@pytest.fixture()
def make_appointment(db, client, lawyer):
    def _make(**overrides):
        payload = {
            "title": "Initial consultation",
            "client_id": client.id,
            "lawyer_id": lawyer.id,
            "scheduled_date": datetime(2026, 11, 2, 9, 30),
        }
        payload.update(overrides)
        return AppointmentService(db).create(payload)

    return _make


@pytest.fixture()
def make_document(db, case, lawyer):
    def _make(**overrides):
        payload = {
            "name": "Engagement letter",
            "file_path": "s3://firm-docs/engagement.pdf",
            "file_size": 48213,
            "mime_type": "application/pdf",
            "document_type": "correspondence",
            "case_id": case.id,
            "uploaded_by_lawyer_id": lawyer.id,
        }
        payload.update(overrides)
        return DocumentService(db).create(payload)

    return _make


@pytest.fixture()
def make_invoice(db, client, case):
    seq = count(1)

    def _make(**overrides):
        n = next(seq)
        issued = datetime(2026, 10, 1, 12, 0)
        payload = {
            "invoice_number": f"INV-{n:04d}",
            "client_id": client.id,
            "case_id": case.id,
            "hours_billed": Decimal("3.50"),
            "hourly_rate": Decimal("200.00"),
            "issued_date": issued,
            "due_date": issued + timedelta(days=30),
        }
        payload.update(overrides)
        return InvoiceService(db).create(payload)

    return _make
