"""
Validation Package - Parse Entry Point and Errors.

This package provides:
    - parse: Validate a value against a schema
    - SchemaParser: parse() with configured defaults
    - ValidationError: Raised when a value does not conform
    - SchemaDefinitionError: Raised when a schema is built incorrectly

Design Principles:
    - Failures are data until the parse boundary
    - Exactly one error per failed parse, carrying every issue
    - Issue paths are computed lazily, only when inspected
"""

from shapecheck.validation.errors import SchemaDefinitionError, ValidationError
from shapecheck.validation.parser import SchemaParser, parse

__all__ = [
    "parse",
    "SchemaParser",
    "ValidationError",
    "SchemaDefinitionError",
]
