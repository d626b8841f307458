import logging
from typing import Any, List, Mapping, Union

from lawfirm.documents.schemas import DocumentCreate
from lawfirm.integrity import check_references
from lawfirm.models import Document
from lawfirm.services.base import EntityService
from lawfirm.validation import shape

logger = logging.getLogger(__name__)


class DocumentService(EntityService):
    model = Document

    def create(self, payload: Union[DocumentCreate, Mapping[str, Any]]) -> Document:
        """Record a document stored at ``file_path``. The file itself is not touched."""
        data = shape(DocumentCreate, payload)
        values = data.model_dump()

        with self.storage.transaction(self.entity):
            check_references(self.storage, Document, values)
            document = self.storage.insert(Document, values)

        logger.info("Created document %s on case %s", document.id, document.case_id)
        return document

    def get_by_case(self, case_id: int) -> List[Document]:
        return self.find_by(case_id=case_id)
