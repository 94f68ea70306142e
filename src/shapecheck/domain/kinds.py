"""
Schema Kinds, Base Types and Sentinels.

This module defines the closed vocabularies the engine is built on:
    - SchemaKind: tag of every schema node variant
    - BaseType: runtime classification of an input value
    - ParseMode: policy for object keys outside a declared shape

It also defines the three sentinel values used during validation:
    - NOTHING: a key that is absent from an object
    - UNDEFINED: an explicitly undefined value
    - UNCHANGED: result marker for "valid, return the input as-is"
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class SchemaKind(str, Enum):
    """Tag of a schema node."""

    NOTHING = "nothing"
    UNKNOWN = "unknown"
    STRING = "string"
    NUMBER = "number"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    UNDEFINED = "undefined"
    NULL = "null"
    LITERAL = "literal"
    OBJECT = "object"
    ARRAY = "array"
    UNION = "union"
    OPTIONAL = "optional"
    TRANSFORM = "transform"


class BaseType(str, Enum):
    """Runtime type of an input value."""

    OBJECT = "object"
    ARRAY = "array"
    NULL = "null"
    UNDEFINED = "undefined"
    STRING = "string"
    NUMBER = "number"
    BIGINT = "bigint"
    BOOLEAN = "boolean"


class ParseMode(str, Enum):
    """How object keys outside the declared shape are handled."""

    PASSTHROUGH = "passthrough"
    STRICT = "strict"
    STRIP = "strip"


# Kinds that are their own terminal
TERMINAL_KINDS = frozenset(
    {
        SchemaKind.NOTHING,
        SchemaKind.UNKNOWN,
        SchemaKind.STRING,
        SchemaKind.NUMBER,
        SchemaKind.BIGINT,
        SchemaKind.BOOLEAN,
        SchemaKind.UNDEFINED,
        SchemaKind.NULL,
        SchemaKind.LITERAL,
        SchemaKind.OBJECT,
        SchemaKind.ARRAY,
    }
)

# Base type a terminal reports in invalid_type issues
EXPECTED_TYPES = {
    SchemaKind.STRING: BaseType.STRING,
    SchemaKind.NUMBER: BaseType.NUMBER,
    SchemaKind.BIGINT: BaseType.BIGINT,
    SchemaKind.BOOLEAN: BaseType.BOOLEAN,
    SchemaKind.UNDEFINED: BaseType.UNDEFINED,
    SchemaKind.NULL: BaseType.NULL,
    SchemaKind.OBJECT: BaseType.OBJECT,
    SchemaKind.ARRAY: BaseType.ARRAY,
}

# Bucket a terminal is dispatched under. Integers are numbers at runtime,
# so bigint shares the number bucket.
DISPATCH_TYPES = {
    **EXPECTED_TYPES,
    SchemaKind.BIGINT: BaseType.NUMBER,
}

LITERAL_TYPES = frozenset({BaseType.STRING, BaseType.NUMBER, BaseType.BOOLEAN})


class _Sentinel:
    """Named singleton marker."""

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


NOTHING = _Sentinel("NOTHING")
UNDEFINED = _Sentinel("UNDEFINED")
UNCHANGED = _Sentinel("UNCHANGED")


def base_type_of(value: object) -> Optional[BaseType]:
    """
    Classify a runtime value.

    Args:
        value: Any input value

    Returns:
        The value's BaseType, or None for values outside the data model
        (tuples, sets, bytes, arbitrary objects, the NOTHING sentinel).
    """
    if value is None:
        return BaseType.NULL
    if value is UNDEFINED:
        return BaseType.UNDEFINED
    # bool is a subclass of int and must be checked first
    if isinstance(value, bool):
        return BaseType.BOOLEAN
    if isinstance(value, (int, float)):
        return BaseType.NUMBER
    if isinstance(value, str):
        return BaseType.STRING
    if isinstance(value, list):
        return BaseType.ARRAY
    if isinstance(value, dict):
        return BaseType.OBJECT
    return None


def is_literal_value(value: object) -> bool:
    """Check whether a value can be used as a literal."""
    return base_type_of(value) in LITERAL_TYPES
