import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Type

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from lawfirm.database import Base
from lawfirm.errors import ConflictError, StorageError
from lawfirm.models import utcnow

logger = logging.getLogger(__name__)


class Storage:
    """Row-level persistence over a SQLAlchemy session.

    Writes are only flushed here; the surrounding ``transaction()`` block owns
    the commit so the checks a service runs and the write it makes land
    together or not at all.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def transaction(self, entity: str = "Record"):
        try:
            yield
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # A concurrent writer got the unique key between our check and our write
            logger.warning("Integrity error on commit: %s", e.orig)
            raise ConflictError(entity, "unique key") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Storage failure")
            raise StorageError(f"Storage failure: {e}") from e
        except Exception:
            self.db.rollback()
            raise

    def insert(self, model: Type[Base], values: Dict[str, Any]) -> Base:
        now = utcnow()
        record = model(**values)
        record.created_at = now
        record.updated_at = now
        self.db.add(record)
        self._flush()
        return record

    def find_by_id(self, model: Type[Base], record_id: Any) -> Optional[Base]:
        try:
            return self.db.get(model, record_id)
        except SQLAlchemyError as e:
            logger.exception("Lookup of %s %s failed", model.__name__, record_id)
            raise StorageError(f"Storage failure: {e}") from e

    def find_by(self, model: Type[Base], *criteria) -> List[Base]:
        """Rows matching all criteria, oldest first."""
        try:
            return self.db.query(model).filter(*criteria).order_by(model.id).all()
        except SQLAlchemyError as e:
            logger.exception("Query on %s failed", model.__tablename__)
            raise StorageError(f"Storage failure: {e}") from e

    def exists(self, model: Type[Base], *criteria) -> bool:
        try:
            return self.db.query(model.id).filter(*criteria).first() is not None
        except SQLAlchemyError as e:
            logger.exception("Query on %s failed", model.__tablename__)
            raise StorageError(f"Storage failure: {e}") from e

    def update(self, model: Type[Base], record_id: Any, values: Dict[str, Any]) -> Base:
        record = self.find_by_id(model, record_id)
        for field, value in values.items():
            setattr(record, field, value)
        now = utcnow()
        # Never move updated_at backwards, even if the clock does
        record.updated_at = max(now, record.updated_at) if record.updated_at else now
        self._flush()
        return record

    def _flush(self):
        try:
            self.db.flush()
        except IntegrityError:
            raise
        except SQLAlchemyError as e:
            raise StorageError(f"Storage failure: {e}") from e
