"""
Parse Entry Point.

parse() runs a schema's compiled function and converts its raw result:
    - UNCHANGED -> the input value itself
    - Ok(value) -> value
    - issue tree -> ValidationError wrapping the tree (not flattened)

SchemaParser applies a ParserConfig on top of parse(): a default mode and
optional logging of failures.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Union

from shapecheck.config.loader import load_config
from shapecheck.config.models import ParserConfig
from shapecheck.domain.kinds import UNCHANGED, ParseMode
from shapecheck.domain.results import Err, Ok
from shapecheck.validation.errors import ValidationError

if TYPE_CHECKING:
    from shapecheck.schema.node import Schema

logger = logging.getLogger(__name__)


def parse(
    schema: "Schema",
    value: Any,
    mode: Union[ParseMode, str] = ParseMode.PASSTHROUGH,
) -> Any:
    """
    Validate value against schema.

    Args:
        schema: Schema to validate against
        value: Untrusted input
        mode: passthrough, strict or strip

    Returns:
        The validated value; the input reference itself when nothing changed

    Raises:
        ValidationError: If the value does not conform
        ValueError: If mode is not a known parse mode
    """
    result = schema.func(value, ParseMode(mode))
    if result is UNCHANGED:
        return value
    if isinstance(result, Ok):
        return result.value
    raise ValidationError(result)


class SchemaParser:
    """
    Parses values with configured defaults.

    Example:
        >>> parser = SchemaParser(ParserConfig(mode="strict", log_failures=True))
        >>> parser.parse(object_({"id": number()}), {"id": 1})
        {'id': 1}
    """

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        """
        Initialize schema parser.

        Args:
            config: Parser configuration (defaults to passthrough, no logging)
        """
        self.config = config or ParserConfig()

    @classmethod
    def from_file(
        cls,
        config_path: Union[str, Path],
        section: Optional[str] = None,
    ) -> "SchemaParser":
        """
        Build a parser from the parser settings of a YAML config file.

        Args:
            config_path: Path to the YAML file
            section: Top-level key holding the shapecheck settings, if any
        """
        config = load_config(config_path, section=section)
        logger.info(
            f"Schema parser configured from {config_path}: mode={config.parser.mode.value}"
        )
        return cls(config.parser)

    def parse(
        self,
        schema: "Schema",
        value: Any,
        mode: Optional[Union[ParseMode, str]] = None,
    ) -> Any:
        """
        Validate value, using the configured mode unless one is given.

        Raises:
            ValidationError: If the value does not conform
        """
        try:
            return parse(schema, value, mode or self.config.mode)
        except ValidationError as e:
            if self.config.log_failures:
                logger.log(
                    self.config.failure_log_level_value,
                    f"Validation failed for {schema.name} schema: {e.message} "
                    f"({len(e.issues)} issues)",
                )
            raise

    def try_parse(
        self,
        schema: "Schema",
        value: Any,
        mode: Optional[Union[ParseMode, str]] = None,
    ) -> Union[Ok[Any], Err[ValidationError]]:
        """Like parse(), but return Ok(value) or Err(ValidationError)."""
        try:
            return Ok(self.parse(schema, value, mode))
        except ValidationError as e:
            return Err(e)
