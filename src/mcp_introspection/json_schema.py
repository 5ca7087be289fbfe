"""JSON Schema (draft-07) generation for configuration types.

Schemas are derived from the pydantic field declarations, so defaults and
descriptions live in one place and the published schema never drifts from
what the config loader accepts.
"""

from typing import Any

from pydantic import (
    PydanticInvalidForJsonSchema,
    PydanticSchemaGenerationError,
    TypeAdapter,
)
from pydantic.json_schema import GenerateJsonSchema, JsonSchemaMode

from mcp_introspection.models.config import Config
from mcp_introspection.models.introspection_config import (
    ExecuteConfig,
    Introspection,
    IntrospectConfig,
    SearchConfig,
    ValidateConfig,
)

DRAFT_07 = "http://json-schema.org/draft-07/schema#"

CONFIG_SCHEMAS: dict[str, Any] = {
    "config": Config,
    "introspection": Introspection,
    "execute": ExecuteConfig,
    "introspect": IntrospectConfig,
    "search": SearchConfig,
    "validate": ValidateConfig,
}


class SchemaGenerationError(RuntimeError):
    """Raised when a type cannot be described as a JSON schema."""


def _wrap_refs(node: Any) -> Any:
    # Draft-07 ignores keywords that sit beside "$ref"
    if isinstance(node, list):
        return [_wrap_refs(item) for item in node]
    if not isinstance(node, dict):
        return node

    node = {key: _wrap_refs(value) for key, value in node.items()}
    if "$ref" in node and len(node) > 1:
        ref = node.pop("$ref")
        node["allOf"] = [{"$ref": ref}]
    return node


class Draft07JsonSchema(GenerateJsonSchema):
    """Schema generator emitting the draft-07 dialect."""

    schema_dialect = DRAFT_07

    def generate(self, schema, mode: JsonSchemaMode = "validation"):
        json_schema = super().generate(schema, mode=mode)
        definitions = json_schema.pop("$defs", None)
        json_schema = _wrap_refs(json_schema)
        if definitions:
            json_schema["definitions"] = _wrap_refs(definitions)
        return {"$schema": self.schema_dialect, **json_schema}


def schema_from_type(tp: Any) -> dict[str, Any]:
    """
    Generate a draft-07 JSON schema for a type.

    ``tp`` may be a pydantic model or anything ``TypeAdapter`` accepts.
    A type that cannot be described is a programming error, so this raises
    ``SchemaGenerationError`` instead of returning a partial schema.
    """
    name = getattr(tp, "__name__", repr(tp))
    try:
        return TypeAdapter(tp).json_schema(
            ref_template="#/definitions/{model}",
            schema_generator=Draft07JsonSchema,
        )
    except (PydanticSchemaGenerationError, PydanticInvalidForJsonSchema) as e:
        raise SchemaGenerationError(f"Failed to generate schema for {name}") from e


def schema_for(name: str) -> dict[str, Any]:
    """Generate the schema for a registered config type by name."""
    try:
        tp = CONFIG_SCHEMAS[name]
    except KeyError:
        raise KeyError(
            f"Unknown config type '{name}'. Available: {', '.join(sorted(CONFIG_SCHEMAS))}"
        ) from None
    return schema_from_type(tp)
