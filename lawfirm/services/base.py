from sqlalchemy.orm import Session
from typing import Any, List

from lawfirm.integrity import ensure_exists
from lawfirm.storage import Storage


class EntityService:
    """Reads shared by every entity service; subclasses set ``model``."""

    model = None

    def __init__(self, db: Session):
        self.db = db
        self.storage = Storage(db)

    @property
    def entity(self) -> str:
        return self.model.__name__

    def get_by_id(self, record_id: Any):
        """Get a single record, or raise NotFoundError."""
        return ensure_exists(self.storage, self.model, record_id)

    def get_all(self) -> List:
        """All records in creation order."""
        return self.storage.find_by(self.model)

    def find_by(self, **filters) -> List:
        criteria = [getattr(self.model, field) == value for field, value in filters.items()]
        return self.storage.find_by(self.model, *criteria)
