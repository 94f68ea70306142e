"""
Schema Node - Immutable Validation Rule.

A Schema is a tagged variant: every node carries a SchemaKind tag and only
the payload fields that kind uses. All kinds share one capability contract:
    - func: compiled validation function (value, mode) -> Result
    - enumerate_terminals(into): leaf classifications reachable from the node
    - name / kind: classification tag

Payload by kind:
    - LITERAL: literal
    - OBJECT: shape (ordered, read-only), rest_schema
    - ARRAY: item
    - UNION: options
    - OPTIONAL: inner
    - TRANSFORM: inner, transform

Design Notes:
    - Frozen after construction; safe to share between threads
    - Compiled function and optionality are cached in owned fields that are
      written once; a concurrent recomputation produces an equal value
    - Identity equality, so nodes can key dicts during union analysis
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional, Tuple, TypeVar, Union

from shapecheck.compiler import compile_schema
from shapecheck.domain.issues import CustomError, CustomErrorIssue
from shapecheck.domain.kinds import TERMINAL_KINDS, UNCHANGED, ParseMode, SchemaKind
from shapecheck.domain.results import Err, Ok, Result
from shapecheck.validation.errors import SchemaDefinitionError, ValidationError
from shapecheck.validation.parser import parse

T = TypeVar("T")

Func = Callable[[Any, ParseMode], Result]


@dataclass(frozen=True, eq=False)
class Schema:
    """One node of a schema tree."""

    kind: SchemaKind
    literal: Any = None
    shape: Optional[Mapping[str, "Schema"]] = None
    rest_schema: Optional["Schema"] = None
    item: Optional["Schema"] = None
    options: Tuple["Schema", ...] = ()
    inner: Optional["Schema"] = None
    transform: Optional[Callable[[Any], Result]] = field(default=None, repr=False)

    _func: Optional[Func] = field(default=None, init=False, repr=False)
    _optional: Optional[bool] = field(default=None, init=False, repr=False)

    @property
    def name(self) -> str:
        """Classification tag as a string."""
        return self.kind.value

    @property
    def func(self) -> Func:
        """Compiled validation function, built on first use."""
        func = self._func
        if func is None:
            func = compile_schema(self)
            object.__setattr__(self, "_func", func)
        return func

    @property
    def is_optional(self) -> bool:
        """Whether the node accepts an absent object key."""
        optional = self._optional
        if optional is None:
            optional = any(t.kind is SchemaKind.NOTHING for t in self.terminals())
            object.__setattr__(self, "_optional", optional)
        return optional

    def enumerate_terminals(self, into: List["Schema"]) -> None:
        """
        Append every terminal reachable from this node.

        Optional contributes nothing and undefined besides its inner
        terminals; union contributes the terminals of all its options;
        transform contributes those of the node it wraps.
        """
        kind = self.kind
        if kind in TERMINAL_KINDS:
            into.append(self)
        elif kind is SchemaKind.OPTIONAL:
            into.append(_NOTHING_TERMINAL)
            into.append(_UNDEFINED_TERMINAL)
            self.inner.enumerate_terminals(into)  # type: ignore[union-attr]
        elif kind is SchemaKind.UNION:
            for option in self.options:
                option.enumerate_terminals(into)
        elif kind is SchemaKind.TRANSFORM:
            self.inner.enumerate_terminals(into)  # type: ignore[union-attr]
        else:
            raise AssertionError(f"Unhandled schema kind: {kind}")

    def terminals(self) -> List["Schema"]:
        """List the terminals reachable from this node."""
        result: List[Schema] = []
        self.enumerate_terminals(result)
        return result

    def parse(self, value: Any, mode: Union[ParseMode, str] = ParseMode.PASSTHROUGH) -> Any:
        """
        Validate value against this schema.

        Args:
            value: Untrusted input
            mode: Handling of object keys outside a declared shape

        Returns:
            The input itself when nothing was transformed, else the new value

        Raises:
            ValidationError: If the value does not conform
        """
        return parse(self, value, mode)

    def try_parse(
        self,
        value: Any,
        mode: Union[ParseMode, str] = ParseMode.PASSTHROUGH,
    ) -> Union[Ok[Any], Err[ValidationError]]:
        """Like parse(), but return Ok(value) or Err(ValidationError)."""
        try:
            return Ok(parse(self, value, mode))
        except ValidationError as e:
            return Err(e)

    def optional(self) -> "Schema":
        """Also accept an absent key or UNDEFINED."""
        return Schema(SchemaKind.OPTIONAL, inner=self)

    def assert_(
        self,
        predicate: Callable[[Any], bool],
        error: CustomError = None,
    ) -> "Schema":
        """
        Additionally require predicate(value) to be truthy.

        Args:
            predicate: Check run on the validated value
            error: Message or {"message", "path"} mapping reported on failure
        """
        issue = CustomErrorIssue(error)

        def check(value: Any) -> Result:
            return UNCHANGED if predicate(value) else issue

        return Schema(SchemaKind.TRANSFORM, inner=self, transform=check)

    def apply(self, func: Callable[[Any], T]) -> "Schema":
        """Replace the validated value with func(value)."""

        def convert(value: Any) -> Result:
            return Ok(func(value))

        return Schema(SchemaKind.TRANSFORM, inner=self, transform=convert)

    def chain(self, func: Callable[[Any], Union[Ok[Any], Err[CustomError]]]) -> "Schema":
        """
        Run a fallible conversion on the validated value.

        func returns ok(new_value) or err(error); an err becomes a
        custom_error issue at the current path.
        """

        def step(value: Any) -> Result:
            result = func(value)
            if isinstance(result, Ok):
                return result
            if isinstance(result, Err):
                return CustomErrorIssue(result.error)
            raise TypeError(
                f"chain callback must return ok() or err(), got {type(result).__name__}"
            )

        return Schema(SchemaKind.TRANSFORM, inner=self, transform=step)

    def rest(self, schema: "Schema") -> "Schema":
        """Object schema whose undeclared keys are validated against schema."""
        if self.kind is not SchemaKind.OBJECT:
            raise SchemaDefinitionError(f"rest() requires an object schema, not {self.name}")
        if not isinstance(schema, Schema):
            raise SchemaDefinitionError(f"rest() expects a Schema, got {type(schema).__name__}")
        return Schema(SchemaKind.OBJECT, shape=self.shape, rest_schema=schema)


_NOTHING_TERMINAL = Schema(SchemaKind.NOTHING)
_UNDEFINED_TERMINAL = Schema(SchemaKind.UNDEFINED)
