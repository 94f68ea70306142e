"""
Schema Package - Schema Nodes and Their Constructors.

This package provides:
    - Schema: the immutable, tagged schema node with its combinators
    - constructor functions for every node kind
"""

from shapecheck.schema.node import Schema
from shapecheck.schema.constructors import (
    array,
    bigint,
    boolean,
    literal,
    nothing,
    null,
    number,
    object_,
    string,
    undefined,
    union,
    unknown,
)

__all__ = [
    "Schema",
    "array",
    "bigint",
    "boolean",
    "literal",
    "nothing",
    "null",
    "number",
    "object_",
    "string",
    "undefined",
    "union",
    "unknown",
]
