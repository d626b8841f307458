"""Domain error taxonomy.

Every error carries the HTTP status the transport should answer with, so the
routers never need to know which operation raised it.
"""
from typing import Any, Dict, List, Optional


class LawFirmError(Exception):
    """Base class for all domain errors."""
    status_code = 500
    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.kind, "detail": self.message}


class ValidationError(LawFirmError):
    """Malformed or out-of-range input."""
    status_code = 400
    kind = "validation_error"

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["errors"] = self.errors
        return data


class InvalidValueError(ValidationError):
    """A numeric field that must be positive was zero or negative."""
    kind = "invalid_value"


class ConflictError(LawFirmError):
    """Unique constraint violation (email, bar number, case or invoice number)."""
    status_code = 409
    kind = "conflict"

    def __init__(self, entity: str, field: str, value: Any = None):
        if value is None:
            message = f"{entity} with this {field} already exists"
        else:
            message = f"{entity} with {field} '{value}' already exists"
        super().__init__(message)
        self.entity = entity
        self.field = field
        self.value = value

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["field"] = self.field
        return data


class NotFoundError(LawFirmError):
    """Targeted or referenced entity does not exist."""
    status_code = 404
    kind = "not_found"

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class InvalidTransitionError(LawFirmError):
    """Requested status change is not allowed from the current status."""
    status_code = 409
    kind = "invalid_transition"

    def __init__(self, entity: str, current: str, requested: str, terminal: bool = False):
        if terminal:
            message = f"{entity} is '{current}', a terminal status, and cannot move to '{requested}'"
        else:
            message = f"{entity} cannot move from '{current}' to '{requested}'"
        super().__init__(message)
        self.entity = entity
        self.current = current
        self.requested = requested
        self.terminal = terminal

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["terminal"] = self.terminal
        return data


class StorageError(LawFirmError):
    """Underlying persistence failure."""
    status_code = 500
    kind = "storage_error"
