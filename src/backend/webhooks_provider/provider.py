"""Provider runtime context.

Owns the objects shared by every resource operation in this process: the
settings, the remote client and the single MutationSerializer.
"""

import logging
import threading
from dataclasses import dataclass, field

from webhooks_provider.config import Settings, settings
from webhooks_provider.schema import RESOURCE_TYPE
from webhooks_provider.services.client import DatadogWebhooksClient, IntegrationClient
from webhooks_provider.services.lifecycle import WebhooksIntegrationResource
from webhooks_provider.services.serializer import MutationSerializer

logger = logging.getLogger(__name__)

_context: "ProviderContext | None" = None
_context_lock = threading.Lock()


def configure_logging(config: Settings = settings) -> None:
    """Configure root logging for the provider process."""
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@dataclass
class ProviderContext:
    """Runtime context passed to every resource of the provider."""

    settings: Settings
    client: IntegrationClient
    serializer: MutationSerializer = field(default_factory=MutationSerializer)

    def resources(self) -> dict[str, WebhooksIntegrationResource]:
        """Resource controllers keyed by resource type name."""
        return {
            RESOURCE_TYPE: WebhooksIntegrationResource(self.client, self.serializer),
        }

    def resource(self, resource_type: str = RESOURCE_TYPE) -> WebhooksIntegrationResource:
        resources = self.resources()
        if resource_type not in resources:
            raise ValueError(
                f"Unknown resource type '{resource_type}'. Must be one of: {', '.join(resources)}"
            )
        return resources[resource_type]


def create_provider_context(
    config: Settings = settings,
    client: IntegrationClient | None = None,
) -> ProviderContext:
    """Build a new context, defaulting to the Datadog HTTP client."""
    if client is None:
        client = DatadogWebhooksClient.from_settings(config)
    return ProviderContext(settings=config, client=client)


def get_provider_context() -> ProviderContext:
    """Get the process-wide provider context, creating it on first use."""
    global _context
    with _context_lock:
        if _context is None:
            configure_logging(settings)
            _context = create_provider_context(settings)
            logger.info(f"Started {settings.app_name} {settings.app_version}")
        return _context


def reset_provider_context(context: ProviderContext | None = None) -> None:
    """Replace (or clear) the process-wide context."""
    global _context
    with _context_lock:
        _context = context
