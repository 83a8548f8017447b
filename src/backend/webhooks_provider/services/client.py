"""Remote integration client: the port and its Datadog HTTP adapter."""

import logging
from abc import abstractmethod
from typing import Protocol

import httpx
from pydantic import ValidationError

from webhooks_provider.config import Settings
from webhooks_provider.errors import NotFoundError, RemoteAPIError
from webhooks_provider.models import IntegrationConfig

logger = logging.getLogger(__name__)

WEBHOOKS_PATH = "v1/integration/webhooks"

# Characters of the response body kept on errors
MAX_ERROR_BODY = 500


class IntegrationClient(Protocol):
    """Access to the account-wide webhooks integration.

    Implementations raise NotFoundError when the integration does not exist
    and RemoteAPIError for any other failure.
    """

    @abstractmethod
    def get(self) -> IntegrationConfig: ...

    @abstractmethod
    def create(self, config: IntegrationConfig) -> None: ...

    @abstractmethod
    def update(self, config: IntegrationConfig) -> None: ...

    @abstractmethod
    def delete(self) -> None: ...


class DatadogWebhooksClient(IntegrationClient):
    """IntegrationClient backed by the Datadog REST API using httpx."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatadogWebhooksClient":
        """Build a client authenticated with the configured API keys."""
        headers = {"Content-Type": "application/json"}
        if settings.datadog_api_key:
            headers["DD-API-KEY"] = settings.datadog_api_key
        if settings.datadog_app_key:
            headers["DD-APPLICATION-KEY"] = settings.datadog_app_key

        base_url = settings.datadog_api_url
        if not base_url.endswith("/"):
            base_url += "/"

        return cls(
            httpx.Client(
                base_url=base_url,
                headers=headers,
                timeout=settings.http_timeout_seconds,
            )
        )

    def close(self) -> None:
        self._client.close()

    def _request(self, operation: str, method: str, json: dict | None = None) -> httpx.Response:
        try:
            response = self._client.request(method, WEBHOOKS_PATH, json=json)
        except httpx.HTTPError as e:
            raise RemoteAPIError(f"{method} {WEBHOOKS_PATH}: {e}", operation) from e

        logger.debug(f"{method} {WEBHOOKS_PATH} -> {response.status_code}")

        if response.status_code == 404:
            raise NotFoundError(
                "Webhooks integration not found",
                operation,
                status_code=404,
                body=response.text[:MAX_ERROR_BODY],
            )
        if response.is_error:
            body = response.text[:MAX_ERROR_BODY]
            raise RemoteAPIError(
                f"{method} {WEBHOOKS_PATH} returned {response.status_code}: {body}",
                operation,
                status_code=response.status_code,
                body=body,
            )
        return response

    def get(self) -> IntegrationConfig:
        response = self._request("get", "GET")
        try:
            return IntegrationConfig.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise RemoteAPIError(
                f"Unexpected webhooks integration payload: {e}",
                "get",
                status_code=response.status_code,
                body=response.text[:MAX_ERROR_BODY],
            ) from e

    def create(self, config: IntegrationConfig) -> None:
        self._request("create", "POST", json=config.to_payload())

    def update(self, config: IntegrationConfig) -> None:
        self._request("update", "PUT", json=config.to_payload())

    def delete(self) -> None:
        self._request("delete", "DELETE")
