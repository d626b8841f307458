import logging
from typing import Any, List, Mapping, Union

from lawfirm.appointments.schemas import AppointmentCreate, AppointmentUpdate
from lawfirm.integrity import check_references, ensure_exists
from lawfirm.lifecycle import APPOINTMENT_TRANSITIONS, check_transition
from lawfirm.models import Appointment
from lawfirm.services.base import EntityService
from lawfirm.validation import changes, require_not_null, shape

logger = logging.getLogger(__name__)


class AppointmentService(EntityService):
    model = Appointment

    def create(self, payload: Union[AppointmentCreate, Mapping[str, Any]]) -> Appointment:
        """Schedule an appointment between a client and a lawyer, optionally for a case."""
        data = shape(AppointmentCreate, payload)
        values = data.model_dump()

        with self.storage.transaction(self.entity):
            check_references(self.storage, Appointment, values)
            appointment = self.storage.insert(Appointment, values)

        logger.info("Created appointment %s for client %s", appointment.id, appointment.client_id)
        return appointment

    def update(self, payload: Union[AppointmentUpdate, Mapping[str, Any]]) -> Appointment:
        data = shape(AppointmentUpdate, payload)
        values = changes(data, "id")
        require_not_null(values, "title", "scheduled_date", "duration_minutes", "status")

        with self.storage.transaction(self.entity):
            appointment = ensure_exists(self.storage, Appointment, data.id)
            if "status" in values:
                check_transition(self.entity, APPOINTMENT_TRANSITIONS, appointment.status, values["status"])
            appointment = self.storage.update(Appointment, data.id, values)

        logger.info("Updated appointment %s: %s", data.id, sorted(values))
        return appointment

    def get_by_lawyer(self, lawyer_id: int) -> List[Appointment]:
        return self.find_by(lawyer_id=lawyer_id)

    def get_by_client(self, client_id: int) -> List[Appointment]:
        return self.find_by(client_id=client_id)
