"""
Optional and Transform Validators.

Transform backs apply(), assert_() and chain(): the wrapped node validates
first, then the user function sees the validated (possibly already
transformed) value. User functions run inline; anything they raise
propagates to the caller of parse().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from shapecheck.domain.kinds import NOTHING, UNCHANGED, UNDEFINED, ParseMode
from shapecheck.domain.results import Ok, Result

if TYPE_CHECKING:
    from shapecheck.schema.node import Schema

Func = Callable[[Any, ParseMode], Result]


def build_optional(schema: "Schema") -> Func:
    func = schema.inner.func  # type: ignore[union-attr]

    def validate(value: Any, mode: ParseMode) -> Result:
        if value is NOTHING or value is UNDEFINED:
            return UNCHANGED
        return func(value, mode)

    return validate


def build_transform(schema: "Schema") -> Func:
    func = schema.inner.func  # type: ignore[union-attr]
    transform = schema.transform

    def validate(value: Any, mode: ParseMode) -> Result:
        r = func(value, mode)
        if r is UNCHANGED:
            return transform(value)
        if isinstance(r, Ok):
            t = transform(r.value)
            # A passing check must not discard what the inner node produced
            return r if t is UNCHANGED else t
        return r

    return validate
