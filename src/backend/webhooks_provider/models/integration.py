"""Remote webhooks integration configuration models.

Mirrors the payload of the Datadog ``/v1/integration/webhooks`` endpoint.
Every scalar is optional on the wire, so the accessors below follow the
remote SDK convention: ``get_*`` returns the value or its zero value, and
``has_*`` reports whether a boolean option is switched on.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Webhook(BaseModel):
    """A single named webhook endpoint."""

    name: str | None = None
    url: str | None = None

    def get_name(self) -> str:
        return self.name or ""

    def get_url(self) -> str:
        return self.url or ""


class IntegrationConfig(BaseModel):
    """The account-wide webhooks integration as stored by the remote service."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    url: str | None = None
    use_custom_payload: bool | None = None
    custom_payload: str | None = None
    encode_as_form: bool | None = None
    headers: str | None = None
    webhooks: list[Webhook] = Field(default_factory=list, alias="hooks")

    @field_validator("webhooks", mode="before")
    @classmethod
    def _null_hooks_as_empty(cls, value):
        # The API sends "hooks": null when no hook is configured
        return [] if value is None else value

    def get_name(self) -> str:
        return self.name or ""

    def get_url(self) -> str:
        return self.url or ""

    def get_custom_payload(self) -> str:
        return self.custom_payload or ""

    def get_headers(self) -> str:
        return self.headers or ""

    def has_use_custom_payload(self) -> bool:
        """Whether the custom payload override is switched on.

        Independent of ``get_custom_payload()``: a payload template can be
        stored while the override is off.
        """
        return bool(self.use_custom_payload)

    def has_encode_as_form(self) -> bool:
        return bool(self.encode_as_form)

    def to_payload(self) -> dict:
        """Serialize to the JSON body expected by the remote API."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
