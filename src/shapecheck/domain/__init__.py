"""
Domain Package - Core Vocabulary of the Validation Engine.

This package defines:
    - kinds: SchemaKind, BaseType, ParseMode and the sentinels
    - issues: Issue records and the lazily flattened issue tree
    - results: Ok / Err result records

Design Principles:
    - Immutable records, safe to share between threads
    - No dependencies on the schema or compiler layers
"""

from shapecheck.domain.kinds import (
    NOTHING,
    UNCHANGED,
    UNDEFINED,
    BaseType,
    ParseMode,
    SchemaKind,
    base_type_of,
)
from shapecheck.domain.issues import (
    CustomErrorIssue,
    InvalidLiteralIssue,
    InvalidTypeIssue,
    InvalidUnionIssue,
    Issue,
    IssueTree,
    Join,
    MissingKeyIssue,
    Prepend,
    UnrecognizedKeyIssue,
    collect_issues,
)
from shapecheck.domain.results import Err, Ok, err, ok

__all__ = [
    "NOTHING",
    "UNCHANGED",
    "UNDEFINED",
    "BaseType",
    "ParseMode",
    "SchemaKind",
    "base_type_of",
    "Issue",
    "IssueTree",
    "Join",
    "Prepend",
    "InvalidTypeIssue",
    "InvalidLiteralIssue",
    "MissingKeyIssue",
    "UnrecognizedKeyIssue",
    "InvalidUnionIssue",
    "CustomErrorIssue",
    "collect_issues",
    "Ok",
    "Err",
    "ok",
    "err",
]
