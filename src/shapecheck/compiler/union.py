"""
Union Dispatcher - Discriminated Matching of Union Alternatives.

Trying every alternative in turn is correct but costs O(N) per value and
produces noisy errors. Instead, the alternatives' terminals are analysed
once, at compile time, to pick a cheap dispatch key:

    1. Object discrimination: a key common to every object alternative whose
       type or literal value at that key identifies at most one alternative.
       The value found under that key selects the alternative.
    2. Base type discrimination: the value's own runtime base type, then its
       exact literal value within that type.

Dispatch rules:
    - unknown alternatives are catch-alls, tried after the specific bucket
    - nothing alternatives are tried only for an absent key (NOTHING)
    - a bucket holding several alternatives is tried in declaration order,
      first success wins; if all fail the failures are wrapped in
      invalid_union, a single failure is reported unwrapped
    - an unmatched base type fails with invalid_type, an unmatched literal
      with invalid_literal, without invoking any alternative

Nested unions, optionals and transforms contribute their terminals, so the
analysis composes through any depth of nesting.
"""

from __future__ import annotations

import logging
from itertools import chain
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Hashable,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from shapecheck.domain.issues import (
    InvalidLiteralIssue,
    InvalidTypeIssue,
    InvalidUnionIssue,
    IssueTree,
    Key,
    MissingKeyIssue,
    join_issues,
)
from shapecheck.domain.kinds import (
    DISPATCH_TYPES,
    EXPECTED_TYPES,
    LITERAL_TYPES,
    NOTHING,
    BaseType,
    ParseMode,
    SchemaKind,
    base_type_of,
)
from shapecheck.domain.results import Result, is_success

if TYPE_CHECKING:
    from shapecheck.schema.node import Schema

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

Func = Callable[[Any, ParseMode], Result]

# (root value, value to dispatch on, mode) -> Result
Matcher = Callable[[Any, Any, ParseMode], Result]

# Each terminal paired with the union alternative it was reached from
Flattened = List[Tuple["Schema", "Schema"]]

LiteralKey = Tuple[BaseType, Any]


def _flatten(pairs: Iterable[Tuple["Schema", "Schema"]]) -> Flattened:
    """Pair every terminal of each schema with its root alternative."""
    return [(root, terminal) for root, schema in pairs for terminal in schema.terminals()]


def _dedup(items: Iterable[T]) -> List[T]:
    output: List[T] = []
    seen = set()
    for item in items:
        if item not in seen:
            output.append(item)
            seen.add(item)
    return output


def _difference(items: Iterable[T], remove: Iterable[T]) -> List[T]:
    removed = set(remove)
    return [item for item in items if item not in removed]


def _literal_key(value: Any) -> LiteralKey:
    # Tag with the base type so that True and 1 land in different buckets
    return (base_type_of(value), value)  # type: ignore[return-value]


def _find_common_keys(shapes: Sequence[Mapping[str, "Schema"]]) -> List[str]:
    """Keys present in every shape, in first-seen order."""
    counts: Dict[str, int] = {}
    for shape in shapes:
        for key in shape:
            counts[key] = counts.get(key, 0) + 1
    return [key for key, count in counts.items() if count == len(shapes)]


def _is_discriminant(shapes: Sequence[Mapping[str, "Schema"]], key: str) -> bool:
    """
    Check whether the values under key tell the shapes apart.

    A key qualifies when no base type or literal is accepted by two shapes,
    at most one shape tolerates the key being absent, and at most one shape
    accepts anything there (in which case no other shape may be typed).
    """
    types: Dict[BaseType, List[int]] = {}
    literals: Dict[LiteralKey, List[int]] = {}
    nothings: List[int] = []
    unknowns: List[int] = []

    for index, shape in enumerate(shapes):
        for terminal in shape[key].terminals():
            kind = terminal.kind
            if kind is SchemaKind.UNKNOWN:
                unknowns.append(index)
            elif kind is SchemaKind.NOTHING:
                nothings.append(index)
            elif kind is SchemaKind.LITERAL:
                literals.setdefault(_literal_key(terminal.literal), []).append(index)
            else:
                types.setdefault(DISPATCH_TYPES[kind], []).append(index)

    unknowns = _dedup(unknowns)
    nothings = _dedup(nothings)
    for literal_key in list(literals):
        if literal_key[0] in types:
            types[literal_key[0]].extend(literals.pop(literal_key))

    if len(nothings) > 1 or len(unknowns) > 1:
        return False
    if unknowns:
        return not literals and not types
    return all(len(_dedup(found)) <= 1 for found in chain(types.values(), literals.values()))


def _first_success(
    options: Iterable["Schema"],
    root_value: Any,
    mode: ParseMode,
) -> Tuple[Optional[Result], Optional[IssueTree], int]:
    """Try options in order; return the first success or the joined failures."""
    issue_tree: Optional[IssueTree] = None
    count = 0
    for option in options:
        r = option.func(root_value, mode)
        if is_success(r):
            return r, None, count
        issue_tree = join_issues(issue_tree, r)
        count += 1
    return None, issue_tree, count


def create_union_matcher(flattened: Flattened, path: Optional[Sequence[Key]] = None) -> Matcher:
    """
    Build the base type / literal dispatch table for a set of terminals.

    Args:
        flattened: (root alternative, terminal) pairs
        path: Path suffix attached to invalid_type / invalid_literal issues,
              used when dispatching on an object key

    Returns:
        Matcher validating root_value with the alternatives selected by value
    """
    order: Dict["Schema", int] = {}
    for root, _ in flattened:
        order.setdefault(root, len(order))

    literals: Dict[LiteralKey, List["Schema"]] = {}
    types: Dict[BaseType, List["Schema"]] = {}
    all_types: Dict[BaseType, None] = {}
    expected_types: Dict[BaseType, None] = {}
    unknowns: List["Schema"] = []
    nothings: List["Schema"] = []

    for root, terminal in flattened:
        kind = terminal.kind
        if kind is SchemaKind.NOTHING:
            nothings.append(root)
        elif kind is SchemaKind.UNKNOWN:
            unknowns.append(root)
        elif kind is SchemaKind.LITERAL:
            literal_key = _literal_key(terminal.literal)
            literals.setdefault(literal_key, []).append(root)
            all_types[literal_key[0]] = None
            expected_types[literal_key[0]] = None
        else:
            types.setdefault(DISPATCH_TYPES[kind], []).append(root)
            all_types[DISPATCH_TYPES[kind]] = None
            expected_types[EXPECTED_TYPES[kind]] = None

    unknowns = _dedup(unknowns)
    nothings = _dedup(nothings)
    for literal_key in list(literals):
        if literal_key[0] in types:
            types[literal_key[0]].extend(literals.pop(literal_key))

    # Buckets hold specific alternatives only, in declaration order
    buckets_by_type = {
        t: sorted(_difference(_dedup(roots), unknowns), key=order.__getitem__)
        for t, roots in types.items()
    }
    buckets_by_literal = {
        k: sorted(_difference(_dedup(roots), unknowns), key=order.__getitem__)
        for k, roots in literals.items()
    }

    invalid_type = InvalidTypeIssue(expected=tuple(expected_types), path=path)
    invalid_literal = InvalidLiteralIssue(
        expected=tuple(value for _, value in buckets_by_literal),
        path=path,
    )
    catch_alls = tuple(unknowns)
    absent_options = tuple(nothings)

    def match(root_value: Any, value: Any, mode: ParseMode) -> Result:
        if value is NOTHING:
            result, issue_tree, count = _first_success(absent_options, root_value, mode)
        else:
            value_type = base_type_of(value)
            if not catch_alls and value_type not in all_types:
                return invalid_type

            options = None
            if value_type in LITERAL_TYPES:
                options = buckets_by_literal.get((value_type, value))
            if options is None:
                options = buckets_by_type.get(value_type, [])  # type: ignore[arg-type]
            result, issue_tree, count = _first_success(
                chain(options, catch_alls), root_value, mode
            )

        if result is not None:
            return result
        if issue_tree is not None:
            if count > 1:
                return InvalidUnionIssue(tree=issue_tree)
            return issue_tree
        return invalid_literal

    return match


def _create_object_dispatch(
    flattened: Flattened,
) -> Optional[Tuple[str, Optional["Schema"], Matcher]]:
    """
    Find a discriminant key across the object alternatives.

    Returns:
        (key, alternative tolerating the key's absence, matcher on the key's
        value), or None when no key discriminates
    """
    if any(terminal.kind is SchemaKind.UNKNOWN for _, terminal in flattened):
        # A root catch-all must stay reachable for object inputs
        return None

    objects = [(root, terminal) for root, terminal in flattened if terminal.kind is SchemaKind.OBJECT]
    if not objects:
        return None

    shapes = [terminal.shape for _, terminal in objects]
    for key in _find_common_keys(shapes):  # type: ignore[arg-type]
        if not _is_discriminant(shapes, key):  # type: ignore[arg-type]
            continue
        keyed = _flatten((root, terminal.shape[key]) for root, terminal in objects)
        absent = next((root for root, t in keyed if t.kind is SchemaKind.NOTHING), None)
        return key, absent, create_union_matcher(keyed, path=(key,))
    return None


def build_union(schema: "Schema") -> Func:
    options = schema.options
    flattened = _flatten((option, option) for option in options)
    base = create_union_matcher(flattened)
    object_dispatch = _create_object_dispatch(flattened)

    if object_dispatch is None:
        logger.debug(f"Union of {len(options)} options dispatches on base type")

        def validate(value: Any, mode: ParseMode) -> Result:
            return base(value, value, mode)

        return validate

    key, absent, matcher = object_dispatch
    missing = MissingKeyIssue(key=key)
    logger.debug(f"Union of {len(options)} options dispatches on key {key!r}")

    def validate_discriminated(value: Any, mode: ParseMode) -> Result:
        if isinstance(value, dict):
            discriminant = value.get(key, NOTHING)
            if discriminant is NOTHING:
                if absent is not None:
                    return absent.func(value, mode)
                return missing
            return matcher(value, discriminant, mode)
        return base(value, value, mode)

    return validate_discriminated
