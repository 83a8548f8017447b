"""Webhooks integration services."""

from webhooks_provider.services.client import DatadogWebhooksClient, IntegrationClient
from webhooks_provider.services.lifecycle import WebhooksIntegrationResource
from webhooks_provider.services.serializer import MutationSerializer
from webhooks_provider.services.translator import from_remote, load_record, to_remote

__all__ = [
    "DatadogWebhooksClient",
    "IntegrationClient",
    "MutationSerializer",
    "WebhooksIntegrationResource",
    "from_remote",
    "load_record",
    "to_remote",
]
