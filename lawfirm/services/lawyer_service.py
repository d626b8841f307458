import logging
from typing import Any, Mapping, Union

from lawfirm.integrity import check_unique
from lawfirm.lawyers.schemas import LawyerCreate
from lawfirm.models import Lawyer
from lawfirm.services.base import EntityService
from lawfirm.validation import shape

logger = logging.getLogger(__name__)


class LawyerService(EntityService):
    model = Lawyer

    def create(self, payload: Union[LawyerCreate, Mapping[str, Any]]) -> Lawyer:
        """Create a new lawyer. Email and bar number must both be unused."""
        data = shape(LawyerCreate, payload)
        values = data.model_dump()

        with self.storage.transaction(self.entity):
            check_unique(self.storage, Lawyer, values)
            lawyer = self.storage.insert(Lawyer, values)

        logger.info("Created lawyer %s (bar %s)", lawyer.id, lawyer.bar_number)
        return lawyer
