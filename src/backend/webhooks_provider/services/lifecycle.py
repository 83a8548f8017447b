"""Lifecycle controller for the webhooks integration resource.

The remote integration is an account-wide singleton with no caller-chosen
key. Create therefore re-reads the object and adopts the name the service
reports as the local identifier, rather than trusting the request echo.
Create, update and delete run under the process-wide MutationSerializer;
read, exists and import do not.
"""

import logging
from collections.abc import Mapping
from typing import Any

from webhooks_provider.errors import (
    CreateError,
    DeleteError,
    NotFoundError,
    ReadError,
    RemoteAPIError,
    ResourceImportError,
    UpdateError,
)
from webhooks_provider.models import (
    IntegrationConfig,
    ResourceData,
    TrackingState,
    WebhooksRecord,
)
from webhooks_provider.services.client import IntegrationClient
from webhooks_provider.services.serializer import MutationSerializer
from webhooks_provider.services.translator import from_remote, load_record, to_remote

logger = logging.getLogger(__name__)


class WebhooksIntegrationResource:
    """Reconciles desired webhooks integration state with the remote service."""

    def __init__(self, client: IntegrationClient, serializer: MutationSerializer):
        self.client = client
        self.serializer = serializer

    def _fetch(self) -> IntegrationConfig | None:
        """Get the remote integration, or None if it does not exist.

        Shared by read, exists and import so they never disagree on absence.
        """
        try:
            return self.client.get()
        except NotFoundError:
            return None

    def state(self, data: ResourceData) -> TrackingState:
        return data.state

    def create(self, data: ResourceData) -> str:
        """Create the remote integration from data's attributes.

        Returns:
            The canonical identifier adopted from the remote object

        Raises:
            TranslationError: If the attributes are not a valid record
            CreateError: If the remote service fails or reports no name
        """
        with self.serializer.hold("create"):
            config = to_remote(data.attributes)

            try:
                self.client.create(config)
            except RemoteAPIError as e:
                raise CreateError(e) from e

            try:
                current = self.client.get()
            except RemoteAPIError as e:
                raise CreateError(f"could not retrieve created integration: {e}") from e

            identifier = current.get_name()
            if not identifier:
                raise CreateError("remote integration reported no name")

            data.set_id(identifier)

        logger.info(f"Created webhooks integration {identifier} with {len(config.webhooks)} hooks")
        return identifier

    def read(self, data: ResourceData) -> WebhooksRecord | None:
        """Refresh data from the remote integration.

        Returns None and marks data orphaned when the integration is gone,
        so the engine plans a re-create.
        """
        try:
            config = self._fetch()
        except RemoteAPIError as e:
            raise ReadError(e) from e

        if config is None:
            logger.warning(f"Webhooks integration {data.id or '(untracked)'} no longer exists")
            data.mark_orphaned()
            return None

        record = from_remote(config)
        data.replace_attributes(record.model_dump())
        data.orphaned = False
        return record

    def exists(self, data: ResourceData) -> bool:
        """Probe for the remote integration without touching data."""
        try:
            return self._fetch() is not None
        except RemoteAPIError as e:
            raise ReadError(e, "exists") from e

    def update(self, data: ResourceData, desired: Mapping[str, Any] | WebhooksRecord) -> None:
        """Replace the whole remote configuration with desired.

        data keeps its previous attributes if anything fails.
        """
        with self.serializer.hold("update"):
            record = load_record(desired)
            config = to_remote(record)

            try:
                self.client.update(config)
            except RemoteAPIError as e:
                raise UpdateError(e) from e

            data.replace_attributes(record.model_dump())

        logger.info(f"Updated webhooks integration {data.id}")

    def delete(self, data: ResourceData) -> None:
        """Delete the remote integration. Already-absent counts as success."""
        with self.serializer.hold("delete"):
            try:
                self.client.delete()
            except NotFoundError:
                logger.info(f"Webhooks integration {data.id} already absent")
            except RemoteAPIError as e:
                raise DeleteError(e) from e

            data.set_id("")

        logger.info("Deleted webhooks integration")

    def import_state(self, raw_id: str) -> ResourceData:
        """Adopt an existing remote integration into local tracking."""
        raw_id = (raw_id or "").strip()
        if not raw_id:
            raise ResourceImportError("an identifier is required")

        try:
            config = self._fetch()
        except RemoteAPIError as e:
            raise ResourceImportError(e) from e

        if config is None:
            raise ResourceImportError(f"webhooks integration {raw_id} not found")

        identifier = config.get_name() or raw_id
        if identifier != raw_id:
            logger.warning(f"Imported {raw_id} under its canonical name {identifier}")

        record = from_remote(config)
        data = ResourceData(id=identifier, attributes=record.model_dump())

        logger.info(f"Imported webhooks integration {identifier}")
        return data
