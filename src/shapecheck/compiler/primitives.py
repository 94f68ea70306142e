"""
Primitive Validators.

Each primitive check is O(1) and returns UNCHANGED or one issue that is
allocated at compile time and shared by every failing call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict

from shapecheck.domain.issues import InvalidLiteralIssue, InvalidTypeIssue
from shapecheck.domain.kinds import (
    NOTHING,
    UNCHANGED,
    UNDEFINED,
    BaseType,
    ParseMode,
    SchemaKind,
    base_type_of,
)
from shapecheck.domain.results import Result

if TYPE_CHECKING:
    from shapecheck.schema.node import Schema

Func = Callable[[Any, ParseMode], Result]


def _type_check(expected: BaseType, accepts: Callable[[Any], bool]) -> Callable[["Schema"], Func]:
    """Builder for a node that accepts values of one base type."""

    def build(schema: "Schema") -> Func:
        issue = InvalidTypeIssue(expected=(expected,))

        def validate(value: Any, mode: ParseMode) -> Result:
            return UNCHANGED if accepts(value) else issue

        return validate

    return build


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def build_nothing(schema: "Schema") -> Func:
    # No base type can satisfy nothing, only key absence
    issue = InvalidTypeIssue(expected=())

    def validate(value: Any, mode: ParseMode) -> Result:
        return UNCHANGED if value is NOTHING else issue

    return validate


def build_unknown(schema: "Schema") -> Func:
    def validate(value: Any, mode: ParseMode) -> Result:
        return UNCHANGED

    return validate


def build_literal(schema: "Schema") -> Func:
    expected = schema.literal
    expected_type = base_type_of(expected)
    issue = InvalidLiteralIssue(expected=(expected,))

    def validate(value: Any, mode: ParseMode) -> Result:
        # Compare base types first so that True never equals 1
        if base_type_of(value) is expected_type and value == expected:
            return UNCHANGED
        return issue

    return validate


PRIMITIVE_BUILDERS: Dict[SchemaKind, Callable[["Schema"], Func]] = {
    SchemaKind.NOTHING: build_nothing,
    SchemaKind.UNKNOWN: build_unknown,
    SchemaKind.STRING: _type_check(BaseType.STRING, lambda v: isinstance(v, str)),
    SchemaKind.NUMBER: _type_check(BaseType.NUMBER, _is_number),
    SchemaKind.BIGINT: _type_check(BaseType.BIGINT, _is_integer),
    SchemaKind.BOOLEAN: _type_check(BaseType.BOOLEAN, lambda v: isinstance(v, bool)),
    SchemaKind.UNDEFINED: _type_check(BaseType.UNDEFINED, lambda v: v is UNDEFINED),
    SchemaKind.NULL: _type_check(BaseType.NULL, lambda v: v is None),
    SchemaKind.LITERAL: build_literal,
}
