import logging
from typing import Any, Mapping, Union

from lawfirm.clients.schemas import ClientCreate, ClientUpdate
from lawfirm.integrity import check_unique, ensure_exists
from lawfirm.models import Client
from lawfirm.services.base import EntityService
from lawfirm.validation import changes, require_not_null, shape

logger = logging.getLogger(__name__)


class ClientService(EntityService):
    model = Client

    def create(self, payload: Union[ClientCreate, Mapping[str, Any]]) -> Client:
        """Create a new client."""
        data = shape(ClientCreate, payload)
        values = data.model_dump()

        with self.storage.transaction(self.entity):
            check_unique(self.storage, Client, values)
            client = self.storage.insert(Client, values)

        logger.info("Created client %s", client.id)
        return client

    def update(self, payload: Union[ClientUpdate, Mapping[str, Any]]) -> Client:
        """Update a client; the email may change but must stay unique."""
        data = shape(ClientUpdate, payload)
        values = changes(data, "id")
        require_not_null(values, "first_name", "last_name", "email")

        with self.storage.transaction(self.entity):
            ensure_exists(self.storage, Client, data.id)
            check_unique(self.storage, Client, values, exclude_id=data.id)
            client = self.storage.update(Client, data.id, values)

        logger.info("Updated client %s: %s", data.id, sorted(values))
        return client
