"""Translation between the desired-state record and the remote configuration."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from webhooks_provider.errors import TranslationError
from webhooks_provider.models import (
    HookEntry,
    IntegrationConfig,
    Webhook,
    WebhooksRecord,
)
from webhooks_provider.schema import WEBHOOKS_INTEGRATION_SCHEMA, zero_value


def _normalize(record: Mapping[str, Any]) -> dict[str, Any]:
    """Fill unset optional attributes with their zero values."""
    values = {key: value for key, value in record.items() if value is not None}
    for name, spec in WEBHOOKS_INTEGRATION_SCHEMA.items():
        if not spec.required and name not in values:
            values[name] = zero_value(name)
    return values


def load_record(record: Mapping[str, Any] | WebhooksRecord) -> WebhooksRecord:
    """Validate raw engine attributes into a WebhooksRecord.

    Raises:
        TranslationError: If a required attribute is missing or malformed
    """
    if isinstance(record, WebhooksRecord):
        return record

    try:
        return WebhooksRecord.model_validate(_normalize(record))
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise TranslationError(f"Invalid webhooks integration configuration: {problems}") from exc


def to_remote(record: Mapping[str, Any] | WebhooksRecord) -> IntegrationConfig:
    """Build the remote configuration for a desired-state record."""
    desired = load_record(record)
    return IntegrationConfig(
        name=desired.name,
        url=desired.url,
        use_custom_payload=desired.use_custom_payload,
        custom_payload=desired.custom_payload,
        encode_as_form=desired.encode_as_form,
        headers=desired.headers,
        webhooks=[Webhook(name=hook.name, url=hook.url) for hook in desired.hooks],
    )


def from_remote(config: IntegrationConfig) -> WebhooksRecord:
    """Rebuild the full desired-state record from the remote configuration.

    Hooks keep the order the service returned them in. Flags come from the
    ``has_*`` accessors and values from the ``get_*`` accessors; the two are
    mapped independently even where they describe the same option.

    Uses ``model_construct`` because out-of-band edits on the remote side may
    not satisfy local validation, and Read must still surface them as drift.
    """
    hooks = [
        HookEntry.model_construct(name=webhook.get_name(), url=webhook.get_url())
        for webhook in config.webhooks
    ]
    return WebhooksRecord.model_construct(
        name=config.get_name(),
        url=config.get_url(),
        use_custom_payload=config.has_use_custom_payload(),
        custom_payload=config.get_custom_payload(),
        encode_as_form=config.has_encode_as_form(),
        headers=config.get_headers(),
        hooks=hooks,
    )
