"""Datadog webhooks integration resource for a declarative provider plugin."""

from webhooks_provider.errors import (
    CreateError,
    DeleteError,
    IntegrationError,
    NotFoundError,
    ReadError,
    RemoteAPIError,
    ResourceImportError,
    TranslationError,
    UpdateError,
)
from webhooks_provider.models import ResourceData, TrackingState, WebhooksRecord
from webhooks_provider.provider import (
    ProviderContext,
    create_provider_context,
    get_provider_context,
)
from webhooks_provider.schema import RESOURCE_TYPE, WEBHOOKS_INTEGRATION_SCHEMA
from webhooks_provider.services import WebhooksIntegrationResource

__all__ = [
    "RESOURCE_TYPE",
    "WEBHOOKS_INTEGRATION_SCHEMA",
    "ProviderContext",
    "create_provider_context",
    "get_provider_context",
    "ResourceData",
    "TrackingState",
    "WebhooksRecord",
    "WebhooksIntegrationResource",
    # Errors
    "IntegrationError",
    "TranslationError",
    "RemoteAPIError",
    "NotFoundError",
    "CreateError",
    "ReadError",
    "UpdateError",
    "DeleteError",
    "ResourceImportError",
]
