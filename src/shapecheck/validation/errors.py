"""
Validation Errors.

ValidationError is the single exception raised at the parse boundary. It
wraps the raw issue tree; the flat issue list is computed on first access
and cached.

SchemaDefinitionError is raised while building a schema, never while
validating a value.
"""

from __future__ import annotations

from typing import Optional, Tuple

from shapecheck.domain.issues import Issue, IssueTree, collect_issues


class SchemaDefinitionError(TypeError):
    """Raised when the construction API is used with invalid arguments."""


class ValidationError(Exception):
    """Raised when a value does not conform to a schema."""

    def __init__(self, issue_tree: IssueTree) -> None:
        super().__init__()
        self.issue_tree = issue_tree
        self._issues: Optional[Tuple[Issue, ...]] = None

    @property
    def issues(self) -> Tuple[Issue, ...]:
        """All issues with absolute paths, in validation order."""
        issues = self._issues
        if issues is None:
            # Concurrent first accesses compute equal tuples
            issues = collect_issues(self.issue_tree)
            self._issues = issues
        return issues

    @property
    def message(self) -> str:
        """One line summary of the first issue."""
        issue = self.issues[0]
        path = ".".join(str(key) for key in issue.path or [])
        return f"{issue.code} at .{path} ({issue.describe()})"

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"
