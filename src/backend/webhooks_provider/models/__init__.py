"""Webhooks integration models.

Two sides of the same object: the desired-state record the declarative
engine hands us, and the remote configuration owned by the monitoring service.
"""

from webhooks_provider.models.integration import IntegrationConfig, Webhook
from webhooks_provider.models.resource import (
    HookEntry,
    ResourceData,
    TrackingState,
    WebhooksRecord,
)

__all__ = [
    # Remote
    "IntegrationConfig",
    "Webhook",
    # Local
    "HookEntry",
    "ResourceData",
    "TrackingState",
    "WebhooksRecord",
]
