"""Tests for document records."""

import pytest

from lawfirm.documents.schemas import DocumentResponse
from lawfirm.errors import InvalidValueError, NotFoundError, ValidationError
from lawfirm.models import DocumentType
from lawfirm.services.document_service import DocumentService


class TestCreateDocument:
    def test_round_trip(self, db, make_document):
        document = make_document(description="Signed copy")
        fetched = DocumentService(db).get_by_id(document.id)
        response = DocumentResponse.model_validate(fetched)
        assert response.document_type == DocumentType.CORRESPONDENCE
        assert response.file_size == 48213
        assert response.description == "Signed copy"

    def test_zero_size_is_invalid_value(self, make_document):
        with pytest.raises(InvalidValueError):
            make_document(file_size=0)

    def test_empty_location_rejected(self, make_document):
        with pytest.raises(ValidationError) as exc:
            make_document(file_path="")
        assert exc.value.errors[0]["field"] == "file_path"

    def test_unknown_uploader(self, make_document):
        with pytest.raises(NotFoundError) as exc:
            make_document(uploaded_by_lawyer_id=99)
        assert exc.value.entity == "Lawyer"

    def test_unknown_case(self, db, make_document):
        with pytest.raises(NotFoundError):
            make_document(case_id=99)
        assert DocumentService(db).get_all() == []


class TestDocumentLookups:
    def test_by_case(self, db, make_document, make_case, case):
        elsewhere = make_document(case_id=make_case().id)
        first = make_document(name="Plaint")
        second = make_document(name="Defence", document_type="court_filing")
        documents = DocumentService(db).get_by_case(case.id)
        assert [d.id for d in documents] == [first.id, second.id]
        assert elsewhere.id not in [d.id for d in documents]
