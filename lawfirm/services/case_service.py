import logging
import uuid
from typing import Any, List, Mapping, Union

from lawfirm.cases.schemas import CaseCreate, CaseUpdate
from lawfirm.integrity import check_not_before, check_references, check_unique, ensure_exists
from lawfirm.lifecycle import CASE_TRANSITIONS, check_transition, resolve_status_date
from lawfirm.models import Case, CaseStatus, utcnow
from lawfirm.services.base import EntityService
from lawfirm.validation import changes, require_not_null, shape

logger = logging.getLogger(__name__)


def generate_case_number() -> str:
    """Generate a unique case number."""
    timestamp = utcnow().strftime("%Y%m%d")
    unique_id = str(uuid.uuid4())[:8].upper()
    return f"CASE-{timestamp}-{unique_id}"


class CaseService(EntityService):
    model = Case

    def create(self, payload: Union[CaseCreate, Mapping[str, Any]]) -> Case:
        """Create a new case for an existing client and lawyer."""
        data = shape(CaseCreate, payload)
        values = data.model_dump()
        values["case_number"] = data.case_number or generate_case_number()
        values["opened_date"] = data.opened_date or utcnow()
        values["closed_date"] = resolve_status_date("closed_date", data.status, CaseStatus.CLOSED, None)
        check_not_before("opened_date", values["opened_date"], "closed_date", values["closed_date"])

        with self.storage.transaction(self.entity):
            check_references(self.storage, Case, values)
            check_unique(self.storage, Case, values)
            case = self.storage.insert(Case, values)

        logger.info("Created case %s (%s)", case.id, case.case_number)
        return case

    def update(self, payload: Union[CaseUpdate, Mapping[str, Any]]) -> Case:
        """Update a case, enforcing the status lifecycle and the closed_date rule."""
        data = shape(CaseUpdate, payload)
        values = changes(data, "id")
        require_not_null(values, "title", "status", "primary_lawyer_id")

        with self.storage.transaction(self.entity):
            case = ensure_exists(self.storage, Case, data.id)
            check_references(self.storage, Case, values)

            target = values.get("status", case.status)
            check_transition(self.entity, CASE_TRANSITIONS, case.status, target)
            values["closed_date"] = resolve_status_date(
                "closed_date",
                target,
                CaseStatus.CLOSED,
                values.get("closed_date"),
                current=case.closed_date,
                supplied_set="closed_date" in values,
            )
            check_not_before("opened_date", case.opened_date, "closed_date", values["closed_date"])
            case = self.storage.update(Case, data.id, values)

        logger.info("Updated case %s: %s", data.id, sorted(values))
        return case

    def get_by_client(self, client_id: int) -> List[Case]:
        """Cases owned by a client."""
        return self.find_by(client_id=client_id)

    def get_by_lawyer(self, lawyer_id: int) -> List[Case]:
        """Cases where the lawyer is the primary lawyer."""
        return self.find_by(primary_lawyer_id=lawyer_id)
