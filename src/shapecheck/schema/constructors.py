"""
Schema Constructors.

Functions that build schema nodes. Arguments are checked here so that a
malformed schema fails when it is defined, not when it first validates.

Usage:
    user = object_({
        "id": number(),
        "name": string(),
        "tags": array(string()).optional(),
    })
    user.parse(payload, mode="strict")
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from shapecheck.domain.kinds import SchemaKind, is_literal_value
from shapecheck.schema.node import Schema
from shapecheck.validation.errors import SchemaDefinitionError


def nothing() -> Schema:
    """Matches only an absent object key."""
    return Schema(SchemaKind.NOTHING)


def unknown() -> Schema:
    """Matches any value."""
    return Schema(SchemaKind.UNKNOWN)


def string() -> Schema:
    return Schema(SchemaKind.STRING)


def number() -> Schema:
    """Matches int and float values (not bool)."""
    return Schema(SchemaKind.NUMBER)


def bigint() -> Schema:
    """Matches integral values (int, not bool)."""
    return Schema(SchemaKind.BIGINT)


def boolean() -> Schema:
    return Schema(SchemaKind.BOOLEAN)


def undefined() -> Schema:
    """Matches the UNDEFINED sentinel."""
    return Schema(SchemaKind.UNDEFINED)


def null() -> Schema:
    """Matches None."""
    return Schema(SchemaKind.NULL)


def literal(value: Any) -> Schema:
    """
    Match exactly one str, int, float or bool value.

    Raises:
        SchemaDefinitionError: If value is not a supported literal type
    """
    if not is_literal_value(value):
        raise SchemaDefinitionError(
            f"literal() expects a str, int, float or bool, got {type(value).__name__}"
        )
    return Schema(SchemaKind.LITERAL, literal=value)


def object_(shape: Mapping[str, Schema]) -> Schema:
    """
    Match a dict with the given keys.

    Keys are validated in the order they appear in shape.

    Raises:
        SchemaDefinitionError: If a key is not a str or a value is not a Schema
    """
    for key, schema in shape.items():
        if not isinstance(key, str):
            raise SchemaDefinitionError(f"object_() keys must be str, got {key!r}")
        _require_schema(schema, f"object_() field {key!r}")
    return Schema(SchemaKind.OBJECT, shape=MappingProxyType(dict(shape)))


def array(item: Schema) -> Schema:
    """Match a list whose every element matches item."""
    _require_schema(item, "array() item")
    return Schema(SchemaKind.ARRAY, item=item)


def union(*options: Schema) -> Schema:
    """Match a value accepted by at least one option."""
    for index, option in enumerate(options):
        _require_schema(option, f"union() option {index}")
    return Schema(SchemaKind.UNION, options=tuple(options))


def _require_schema(value: Any, where: str) -> None:
    if not isinstance(value, Schema):
        raise SchemaDefinitionError(f"{where} must be a Schema, got {type(value).__name__}")
