"""
Shapecheck - Composable Runtime Validation for Untyped Data.

Validates untrusted input (API payloads, config files, messages) against a
schema built from small combinators, returning the validated value or
raising one error that describes every failure with its path.

Architecture:
    - domain: Kinds, sentinels, issue records and the issue tree
    - schema: Immutable schema nodes and their constructors
    - compiler: Schema nodes to memoized validation functions,
      including the discriminated union dispatcher
    - validation: Parse entry point and errors
    - config: Configuration models and YAML loader

Example:
    >>> import shapecheck as sc
    >>> event = sc.union(
    ...     sc.object_({"kind": sc.literal("click"), "x": sc.number()}),
    ...     sc.object_({"kind": sc.literal("key"), "code": sc.string()}),
    ... )
    >>> event.parse({"kind": "click", "x": 3})
    {'kind': 'click', 'x': 3}

"""

import logging
from typing import Union

from shapecheck.domain import (
    NOTHING,
    UNDEFINED,
    BaseType,
    CustomErrorIssue,
    Err,
    InvalidLiteralIssue,
    InvalidTypeIssue,
    InvalidUnionIssue,
    Issue,
    MissingKeyIssue,
    Ok,
    ParseMode,
    SchemaKind,
    UnrecognizedKeyIssue,
    err,
    ok,
)
from shapecheck.schema import (
    Schema,
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
from shapecheck.config import LoggingConfig, ParserConfig, ShapecheckConfig, load_config
from shapecheck.validation import (
    SchemaDefinitionError,
    SchemaParser,
    ValidationError,
    parse,
)

__version__ = "0.4.0"


def configure_logging(
    level: Union[int, str, LoggingConfig] = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Shapecheck.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO), or a LoggingConfig whose
            level and format replace both arguments
        format: Log message format

    Example:
        >>> import shapecheck
        >>> shapecheck.configure_logging(logging.DEBUG)
        >>> shapecheck.configure_logging(shapecheck.load_config("shapecheck.yaml").logging)
    """
    if isinstance(level, LoggingConfig):
        level, format = level.level_value, level.format
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("shapecheck").setLevel(level)


__all__ = [
    "NOTHING",
    "UNDEFINED",
    "BaseType",
    "ParseMode",
    "SchemaKind",
    "Issue",
    "InvalidTypeIssue",
    "InvalidLiteralIssue",
    "MissingKeyIssue",
    "UnrecognizedKeyIssue",
    "InvalidUnionIssue",
    "CustomErrorIssue",
    "Ok",
    "Err",
    "ok",
    "err",
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
    "parse",
    "SchemaParser",
    "ValidationError",
    "SchemaDefinitionError",
    "ParserConfig",
    "LoggingConfig",
    "ShapecheckConfig",
    "load_config",
    "configure_logging",
]
