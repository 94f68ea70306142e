"""
Result Records.

Ok wraps a successfully produced value; Err wraps a failure. Compiled
validation functions return UNCHANGED, an Ok, or an issue tree. Chain
callbacks return ok(value) or err(error).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from shapecheck.domain.issues import CustomError, IssueTree
from shapecheck.domain.kinds import UNCHANGED

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E = None  # type: ignore[assignment]

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


# Return type of a compiled validation function
Result = Union[Any, Ok[Any], IssueTree]


def ok(value: T) -> Ok[T]:
    """Successful chain step producing value."""
    return Ok(value)


def err(error: CustomError = None) -> Err[CustomError]:
    """
    Failed chain step.

    Args:
        error: None, a message, or a mapping with "message" and/or "path"
    """
    return Err(error)


def is_success(result: Result) -> bool:
    """Check whether a compiled function accepted its input."""
    return result is UNCHANGED or isinstance(result, Ok)
