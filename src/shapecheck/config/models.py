"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, Field

from shapecheck.domain.kinds import ParseMode

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class ParserConfig(BaseModel):
    """Defaults applied by SchemaParser."""

    mode: ParseMode = Field(default=ParseMode.PASSTHROUGH)
    log_failures: bool = False
    failure_log_level: LogLevelName = "INFO"

    model_config = {"frozen": True}

    @property
    def failure_log_level_value(self) -> int:
        """Numeric logging level for failure records."""
        return LOG_LEVELS[self.failure_log_level]


class LoggingConfig(BaseModel):
    """Package logging setup, applied with shapecheck.configure_logging()."""

    level: LogLevelName = "WARNING"
    format: str = Field(default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")

    model_config = {"frozen": True}

    @property
    def level_value(self) -> int:
        return LOG_LEVELS[self.level]


class ShapecheckConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    parser: ParserConfig = Field(default_factory=ParserConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
