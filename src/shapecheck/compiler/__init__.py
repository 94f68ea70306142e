"""
Compiler Package - Schema Nodes to Validation Functions.

compile_schema() turns a node into a pure function (value, mode) -> Result
that returns:
    - UNCHANGED: value is valid and returned as-is
    - Ok(new_value): value is valid and was transformed or cloned
    - an issue tree: value is invalid

Builders are looked up by SchemaKind. Every kind must have a builder; a
missing entry fails at import time.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict

from shapecheck.compiler.combinators import build_optional, build_transform
from shapecheck.compiler.containers import build_array, build_object
from shapecheck.compiler.primitives import PRIMITIVE_BUILDERS
from shapecheck.compiler.union import build_union
from shapecheck.domain.kinds import ParseMode, SchemaKind
from shapecheck.domain.results import Result

if TYPE_CHECKING:
    from shapecheck.schema.node import Schema

logger = logging.getLogger(__name__)

Func = Callable[[Any, ParseMode], Result]

_BUILDERS: Dict[SchemaKind, Callable[["Schema"], Func]] = {
    **PRIMITIVE_BUILDERS,
    SchemaKind.OBJECT: build_object,
    SchemaKind.ARRAY: build_array,
    SchemaKind.UNION: build_union,
    SchemaKind.OPTIONAL: build_optional,
    SchemaKind.TRANSFORM: build_transform,
}

_missing = set(SchemaKind) - set(_BUILDERS)
if _missing:
    raise RuntimeError(f"No validation builder for schema kinds: {sorted(k.value for k in _missing)}")


def compile_schema(schema: "Schema") -> Func:
    """
    Build the validation function of a schema node.

    Child nodes are compiled through their own cached func property, so
    each node of a tree is compiled once no matter how often it is shared.

    Args:
        schema: Node to compile

    Returns:
        Validation function for the node
    """
    func = _BUILDERS[schema.kind](schema)
    logger.debug(f"Compiled {schema.name} schema")
    return func


__all__ = ["compile_schema", "Func"]
