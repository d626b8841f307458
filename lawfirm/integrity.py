"""Referential and uniqueness rules checked before every write.

The database carries the same constraints, but a write must never depend on
them: the checks here run first and raise domain errors naming the offending
reference or key.
"""
import logging
from typing import Any, Dict, Mapping, Optional, Tuple, Type

from lawfirm.database import Base
from lawfirm.errors import ConflictError, NotFoundError, ValidationError
from lawfirm.models import Appointment, Case, Client, Document, Invoice, Lawyer, Task
from lawfirm.storage import Storage

logger = logging.getLogger(__name__)

# field -> referenced model, per referencing model
REFERENCES: Dict[Type[Base], Dict[str, Type[Base]]] = {
    Case: {"client_id": Client, "primary_lawyer_id": Lawyer},
    Task: {"case_id": Case, "assigned_lawyer_id": Lawyer},
    Appointment: {"client_id": Client, "lawyer_id": Lawyer, "case_id": Case},
    Document: {"case_id": Case, "uploaded_by_lawyer_id": Lawyer},
    Invoice: {"client_id": Client, "case_id": Case},
}

UNIQUE_FIELDS: Dict[Type[Base], Tuple[str, ...]] = {
    Client: ("email",),
    Lawyer: ("email", "bar_number"),
    Case: ("case_number",),
    Invoice: ("invoice_number",),
}


def ensure_exists(storage: Storage, model: Type[Base], record_id: Any) -> Base:
    record = storage.find_by_id(model, record_id)
    if record is None:
        raise NotFoundError(model.__name__, record_id)
    return record


def check_references(storage: Storage, model: Type[Base], values: Mapping[str, Any]) -> None:
    """Every reference present in ``values`` must point at an existing row.

    Absent or null references are skipped; nullability is the schema's job.
    """
    for field, target in REFERENCES.get(model, {}).items():
        target_id = values.get(field)
        if target_id is None:
            continue
        if storage.find_by_id(target, target_id) is None:
            logger.info("%s.%s references missing %s %s", model.__name__, field, target.__name__, target_id)
            raise NotFoundError(target.__name__, target_id)


def check_unique(
    storage: Storage,
    model: Type[Base],
    values: Mapping[str, Any],
    exclude_id: Optional[Any] = None,
) -> None:
    for field in UNIQUE_FIELDS.get(model, ()):
        value = values.get(field)
        if value is None:
            continue
        criteria = [getattr(model, field) == value]
        if exclude_id is not None:
            criteria.append(model.id != exclude_id)
        if storage.exists(model, *criteria):
            logger.warning("Duplicate %s.%s: %s", model.__name__, field, value)
            raise ConflictError(model.__name__, field, value)


def check_not_before(earlier_field: str, earlier, later_field: str, later) -> None:
    if earlier is not None and later is not None and later < earlier:
        raise ValidationError(
            f"{later_field} may not be before {earlier_field}",
            [{"field": later_field, "message": f"must be on or after {earlier_field}"}],
        )
