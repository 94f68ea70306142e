"""
Object and Array Validators.

Both validators report every failing field or element in one issue tree
and build their output copy-on-write:
    - the input reference is returned (UNCHANGED) when no field changed
      and no key was stripped or injected
    - otherwise a shallow clone is created once, on the first change

Object key policy (no rest schema):
    - passthrough: extra keys are kept
    - strict: the first extra key fails with unrecognized_key
    - strip: extra keys are dropped from the output

With a rest schema every extra key is validated against it, in every mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from shapecheck.domain.issues import (
    InvalidTypeIssue,
    IssueTree,
    MissingKeyIssue,
    UnrecognizedKeyIssue,
    join_issues,
    prepend_path,
)
from shapecheck.domain.kinds import NOTHING, UNCHANGED, BaseType, ParseMode
from shapecheck.domain.results import Ok, Result

if TYPE_CHECKING:
    from shapecheck.schema.node import Schema

Func = Callable[[Any, ParseMode], Result]

_NOT_AN_OBJECT = InvalidTypeIssue(expected=(BaseType.OBJECT,))
_NOT_AN_ARRAY = InvalidTypeIssue(expected=(BaseType.ARRAY,))


def build_object(schema: "Schema") -> Func:
    shape = schema.shape or {}
    rest = schema.rest_schema.func if schema.rest_schema is not None else None

    keys = tuple(shape)
    funcs = tuple(shape[key].func for key in keys)
    required = tuple(not shape[key].is_optional for key in keys)
    missing = tuple(MissingKeyIssue(key=key) for key in keys)
    known = frozenset(keys)
    fields = tuple(zip(keys, funcs, required, missing))

    def declared_only(obj: Dict[Any, Any]) -> Dict[Any, Any]:
        return {key: value for key, value in obj.items() if key in known}

    def validate(obj: Any, mode: ParseMode) -> Result:
        if not isinstance(obj, dict):
            return _NOT_AN_OBJECT

        issue_tree: Optional[IssueTree] = None
        output = obj
        # Extra keys survive in clones unless they are being stripped
        clone = dict

        if rest is None and mode is not ParseMode.PASSTHROUGH:
            for key in obj:
                if key not in known:
                    if mode is ParseMode.STRICT:
                        return UnrecognizedKeyIssue(key=key)
                    output = declared_only(obj)
                    clone = declared_only
                    break

        for key, func, is_required, missing_issue in fields:
            # Absent optional keys are validated as NOTHING so that a
            # transform can inject a default
            value = obj.get(key, NOTHING)
            if value is NOTHING and is_required:
                issue_tree = join_issues(issue_tree, missing_issue)
                continue
            r = func(value, mode)
            if r is UNCHANGED:
                continue
            if isinstance(r, Ok):
                if r.value is NOTHING:
                    continue
                if output is obj:
                    output = clone(obj)
                output[key] = r.value
            else:
                issue_tree = join_issues(issue_tree, prepend_path(key, r))

        if rest is not None:
            for key, value in obj.items():
                if key in known:
                    continue
                r = rest(value, mode)
                if r is UNCHANGED:
                    continue
                if isinstance(r, Ok):
                    if output is obj:
                        output = clone(obj)
                    output[key] = r.value
                else:
                    issue_tree = join_issues(issue_tree, prepend_path(key, r))

        if issue_tree is not None:
            return issue_tree
        if output is obj:
            return UNCHANGED
        return Ok(output)

    return validate


def build_array(schema: "Schema") -> Func:
    func = schema.item.func  # type: ignore[union-attr]

    def validate(arr: Any, mode: ParseMode) -> Result:
        if not isinstance(arr, list):
            return _NOT_AN_ARRAY

        issue_tree: Optional[IssueTree] = None
        output = arr
        for index, item in enumerate(arr):
            r = func(item, mode)
            if r is UNCHANGED:
                continue
            if isinstance(r, Ok):
                if output is arr:
                    output = arr.copy()
                output[index] = r.value
            else:
                issue_tree = join_issues(issue_tree, prepend_path(index, r))

        if issue_tree is not None:
            return issue_tree
        if output is arr:
            return UNCHANGED
        return Ok(output)

    return validate
