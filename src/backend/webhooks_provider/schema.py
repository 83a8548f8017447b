"""Schema declaration for the webhooks integration resource.

This is the contract handed to the declarative engine: the engine validates
and diffs user configuration against it before calling any lifecycle
operation.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

RESOURCE_TYPE = "datadog_integration_webhooks"


class ValueType(StrEnum):
    """Attribute value types understood by the engine."""

    STRING = "string"
    BOOL = "bool"
    LIST = "list"


@dataclass(frozen=True)
class SchemaField:
    """Declaration of a single resource attribute."""

    type: ValueType
    required: bool = False
    description: str = ""
    elem: dict[str, "SchemaField"] = field(default_factory=dict)


HOOK_SCHEMA: dict[str, SchemaField] = {
    "name": SchemaField(ValueType.STRING, required=True, description="Hook name"),
    "url": SchemaField(ValueType.STRING, required=True, description="Hook endpoint URL"),
}

WEBHOOKS_INTEGRATION_SCHEMA: dict[str, SchemaField] = {
    "name": SchemaField(ValueType.STRING, required=True),
    "url": SchemaField(ValueType.STRING, required=True),
    "use_custom_payload": SchemaField(
        ValueType.BOOL, description="Send custom_payload instead of the default body"
    ),
    "custom_payload": SchemaField(ValueType.STRING),
    "encode_as_form": SchemaField(
        ValueType.BOOL, description="Form-encode request bodies instead of JSON"
    ),
    "headers": SchemaField(ValueType.STRING),
    "hooks": SchemaField(ValueType.LIST, elem=HOOK_SCHEMA),
}

_ZERO_VALUES: dict[ValueType, Any] = {
    ValueType.STRING: "",
    ValueType.BOOL: False,
}


def required_fields(schema: dict[str, SchemaField] = WEBHOOKS_INTEGRATION_SCHEMA) -> list[str]:
    """Names of the attributes the engine must always supply."""
    return [name for name, spec in schema.items() if spec.required]


def zero_value(name: str, schema: dict[str, SchemaField] = WEBHOOKS_INTEGRATION_SCHEMA) -> Any:
    """Value an unset optional attribute takes."""
    spec = schema[name]
    if spec.type == ValueType.LIST:
        return []
    return _ZERO_VALUES[spec.type]
