"""
Issues and Issue Trees.

A failed validation produces an issue tree rather than a list:
    - Prepend(key, tree): every issue in tree sits below key
    - Join(left, right): issues of left, then issues of right
    - a leaf Issue record

Building a tree node is O(1). Paths are only materialized when the tree
is flattened with collect_issues(), which happens at most once per raised
ValidationError.

Design Notes:
    - Issue records are frozen and may be shared between validations
    - Flattening returns fresh copies carrying their absolute path
    - Flattened order is depth-first, left-to-right (validation order)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from shapecheck.domain.kinds import BaseType

Key = Union[str, int]

# None, a message, or a mapping with optional "message" and "path" entries
CustomError = Union[None, str, Mapping[str, Any]]


def or_list(items: Sequence[str]) -> str:
    """Render ["a", "b", "c"] as "a, b or c"."""
    if not items:
        return "nothing"
    if len(items) < 2:
        return items[-1]
    return f"{', '.join(items[:-1])} or {items[-1]}"


def format_literal(value: Any) -> str:
    """Render a literal or key the way it would appear in JSON."""
    if isinstance(value, (str, int, float, bool)):
        return json.dumps(value)
    return repr(value)


class Issue:
    """Behaviour shared by all issue records."""

    code: ClassVar[str] = "issue"

    path: Optional[Sequence[Key]]

    def describe(self) -> str:
        """Short human readable description used in error messages."""
        return "validation failed"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to {code, path, ...code-specific fields}."""
        result: Dict[str, Any] = {"code": self.code, "path": list(self.path or [])}
        for f in fields(self):  # type: ignore[arg-type]
            if f.name == "path":
                continue
            result[f.name] = _plain(getattr(self, f.name))
        return result

    def located(self, path: List[Key]) -> "Issue":
        """Copy of this issue with its absolute path."""
        return replace(self, path=path)  # type: ignore[type-var]


def _plain(value: Any) -> Any:
    if isinstance(value, BaseType):
        return value.value
    if isinstance(value, Issue):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass(frozen=True)
class InvalidTypeIssue(Issue):
    """The value's runtime type is not one of the expected base types."""

    expected: Sequence[BaseType]
    path: Optional[Sequence[Key]] = None

    code: ClassVar[str] = "invalid_type"

    def describe(self) -> str:
        return f"expected {or_list([t.value for t in self.expected])}"

    def located(self, path: List[Key]) -> Issue:
        return replace(self, path=path, expected=list(self.expected))


@dataclass(frozen=True)
class InvalidLiteralIssue(Issue):
    """The value is not one of the expected literal values."""

    expected: Sequence[Any]
    path: Optional[Sequence[Key]] = None

    code: ClassVar[str] = "invalid_literal"

    def describe(self) -> str:
        return f"expected {or_list([format_literal(v) for v in self.expected])}"

    def located(self, path: List[Key]) -> Issue:
        return replace(self, path=path, expected=list(self.expected))


@dataclass(frozen=True)
class MissingKeyIssue(Issue):
    """A required object key is absent."""

    key: Key
    path: Optional[Sequence[Key]] = None

    code: ClassVar[str] = "missing_key"

    def describe(self) -> str:
        return f"missing key {format_literal(self.key)}"


@dataclass(frozen=True)
class UnrecognizedKeyIssue(Issue):
    """An object key outside the declared shape (strict mode)."""

    key: Key
    path: Optional[Sequence[Key]] = None

    code: ClassVar[str] = "unrecognized_key"

    def describe(self) -> str:
        return f"unrecognized key {format_literal(self.key)}"


@dataclass(frozen=True)
class InvalidUnionIssue(Issue):
    """
    Several union alternatives were tried and all of them failed.

    The raw tree holds the failure of every tried alternative. Once the
    surrounding tree is flattened, issues holds the same failures with
    absolute paths.
    """

    tree: "IssueTree"
    path: Optional[Sequence[Key]] = None
    issues: Optional[Tuple[Issue, ...]] = None

    code: ClassVar[str] = "invalid_union"

    def to_dict(self) -> Dict[str, Any]:
        issues = self.issues if self.issues is not None else collect_issues(self.tree)
        return {
            "code": self.code,
            "path": list(self.path or []),
            "issues": [issue.to_dict() for issue in issues],
        }

    def located(self, path: List[Key]) -> Issue:
        return replace(self, path=path, issues=collect_issues(self.tree, path))


@dataclass(frozen=True)
class CustomErrorIssue(Issue):
    """Failure reported by a user predicate or chain function."""

    error: CustomError = None
    path: Optional[Sequence[Key]] = None

    code: ClassVar[str] = "custom_error"

    def describe(self) -> str:
        error = self.error
        if isinstance(error, str):
            return error
        if isinstance(error, Mapping) and isinstance(error.get("message"), str):
            return error["message"]
        return "validation failed"

    def located(self, path: List[Key]) -> Issue:
        error = self.error
        if isinstance(error, Mapping) and error.get("path"):
            path = path + list(error["path"])
        return replace(self, path=path)


@dataclass(frozen=True)
class Prepend:
    """Every issue of tree is located below key."""

    key: Key
    tree: "IssueTree"


@dataclass(frozen=True)
class Join:
    """Issues of left followed by issues of right."""

    left: "IssueTree"
    right: "IssueTree"


IssueTree = Union[Prepend, Join, Issue]


def join_issues(tree: Optional[IssueTree], issue: IssueTree) -> IssueTree:
    """Append issue after the issues already collected in tree."""
    if tree is None:
        return issue
    return Join(tree, issue)


def prepend_path(key: Key, tree: IssueTree) -> IssueTree:
    """Locate every issue of tree below key."""
    return Prepend(key, tree)


_POP = object()


def collect_issues(
    tree: IssueTree,
    prefix: Sequence[Key] = (),
) -> Tuple[Issue, ...]:
    """
    Flatten an issue tree into issues with absolute paths.

    The traversal uses an explicit stack so that very wide trees (thousands
    of joined failures) do not hit the recursion limit.

    Args:
        tree: Issue tree to flatten
        prefix: Path under which the whole tree is located

    Returns:
        Issues in depth-first, left-to-right order
    """
    issues: List[Issue] = []
    path: List[Key] = list(prefix)
    stack: List[Any] = [tree]

    while stack:
        node = stack.pop()
        if node is _POP:
            path.pop()
        elif isinstance(node, Join):
            stack.append(node.right)
            stack.append(node.left)
        elif isinstance(node, Prepend):
            path.append(node.key)
            stack.append(_POP)
            stack.append(node.tree)
        else:
            final_path = path.copy()
            if node.path:
                final_path.extend(node.path)
            issues.append(node.located(final_path))

    return tuple(issues)
