"""Status state machines for cases, tasks, appointments and invoices.

Each table maps a status to the statuses reachable from it in one update.
A status with no outgoing edges is terminal. Re-stating the current status is
always accepted and changes nothing.
"""
import logging
from datetime import datetime
from typing import Dict, Optional, Set

from lawfirm.errors import InvalidTransitionError, ValidationError
from lawfirm.models import (
    AppointmentStatus, CaseStatus, InvoiceStatus, TaskStatus, utcnow,
)

logger = logging.getLogger(__name__)

CASE_TRANSITIONS: Dict[CaseStatus, Set[CaseStatus]] = {
    CaseStatus.PENDING: {CaseStatus.ACTIVE, CaseStatus.ON_HOLD, CaseStatus.CLOSED},
    CaseStatus.ACTIVE: {CaseStatus.ON_HOLD, CaseStatus.CLOSED},
    CaseStatus.ON_HOLD: {CaseStatus.ACTIVE, CaseStatus.CLOSED},
    CaseStatus.CLOSED: set(),
}

TASK_TRANSITIONS: Dict[TaskStatus, Set[TaskStatus]] = {
    TaskStatus.PENDING: {TaskStatus.IN_PROGRESS, TaskStatus.CANCELLED},
    TaskStatus.IN_PROGRESS: {TaskStatus.COMPLETED, TaskStatus.CANCELLED},
    TaskStatus.COMPLETED: set(),
    TaskStatus.CANCELLED: set(),
}

APPOINTMENT_TRANSITIONS: Dict[AppointmentStatus, Set[AppointmentStatus]] = {
    AppointmentStatus.SCHEDULED: {
        AppointmentStatus.COMPLETED,
        AppointmentStatus.CANCELLED,
        AppointmentStatus.NO_SHOW,
    },
    AppointmentStatus.COMPLETED: set(),
    AppointmentStatus.CANCELLED: set(),
    AppointmentStatus.NO_SHOW: set(),
}

INVOICE_TRANSITIONS: Dict[InvoiceStatus, Set[InvoiceStatus]] = {
    InvoiceStatus.DRAFT: {InvoiceStatus.SENT, InvoiceStatus.CANCELLED},
    InvoiceStatus.SENT: {InvoiceStatus.PAID, InvoiceStatus.OVERDUE, InvoiceStatus.CANCELLED},
    InvoiceStatus.OVERDUE: {InvoiceStatus.PAID, InvoiceStatus.CANCELLED},
    InvoiceStatus.PAID: set(),
    InvoiceStatus.CANCELLED: set(),
}


def can_transition(table: Dict, current, target) -> bool:
    return current == target or target in table.get(current, set())


def is_terminal(table: Dict, status) -> bool:
    return not table.get(status)


def check_transition(entity: str, table: Dict, current, target) -> None:
    """Raise InvalidTransitionError unless ``current -> target`` is an edge of ``table``."""
    if not can_transition(table, current, target):
        terminal = is_terminal(table, current)
        logger.warning(
            "Rejected %s transition %s -> %s%s",
            entity, current.value, target.value, " (terminal)" if terminal else "",
        )
        raise InvalidTransitionError(entity, current.value, target.value, terminal=terminal)


def resolve_status_date(
    field: str,
    status,
    marker_status,
    supplied: Optional[datetime],
    current: Optional[datetime] = None,
    supplied_set: bool = False,
) -> Optional[datetime]:
    """Work out the date that is set iff ``status == marker_status``.

    ``supplied`` is the value from the payload (``supplied_set`` tells whether
    the payload carried the field at all), ``current`` the stored one. Under
    the marker status the date is the supplied one, else the stored one, else
    now. Under any other status the date is cleared, and a non-null supplied
    value is rejected.
    """
    if status == marker_status:
        if supplied_set:
            if supplied is None:
                raise ValidationError(
                    f"{field} is required while status is '{marker_status.value}'",
                    [{"field": field, "message": "may not be cleared"}],
                )
            return supplied
        return current or utcnow()
    if supplied_set and supplied is not None:
        raise ValidationError(
            f"{field} may only be set when status is '{marker_status.value}'",
            [{"field": field, "message": f"requires status '{marker_status.value}'"}],
        )
    return None
