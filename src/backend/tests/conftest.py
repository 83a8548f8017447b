"""Test fixtures."""

import pytest

from webhooks_provider.config import Settings
from webhooks_provider.models import ResourceData
from webhooks_provider.services import MutationSerializer, WebhooksIntegrationResource
from webhooks_provider.testing import InMemoryIntegrationClient


@pytest.fixture
def test_settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        datadog_api_key="test-api-key",
        datadog_app_key="test-app-key",
        datadog_api_url="https://api.example.test/api/",
        http_timeout_seconds=5.0,
    )


@pytest.fixture
def memory_client():
    """Empty in-memory remote integration."""
    return InMemoryIntegrationClient()


@pytest.fixture
def serializer():
    return MutationSerializer()


@pytest.fixture
def resource(memory_client, serializer):
    """Lifecycle controller wired to the in-memory remote."""
    return WebhooksIntegrationResource(memory_client, serializer)


@pytest.fixture
def github_attributes():
    """Desired state for a single GitHub pull-request hook."""
    return {
        "name": "github",
        "url": "https://x/hook",
        "hooks": [{"name": "pr", "url": "https://x/pr"}],
    }


@pytest.fixture
def github_data(github_attributes):
    """Untracked resource data carrying the GitHub desired state."""
    return ResourceData(attributes=dict(github_attributes))
