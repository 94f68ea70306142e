"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - ShapecheckConfig: Root configuration object
    - ParserConfig: Default parse mode and failure logging
    - LoggingConfig: Package log level and format

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Settings may be embedded as one section of an application config
"""

from shapecheck.config.models import LoggingConfig, ParserConfig, ShapecheckConfig
from shapecheck.config.loader import ConfigLoader, load_config

__all__ = [
    "ShapecheckConfig",
    "ParserConfig",
    "LoggingConfig",
    "ConfigLoader",
    "load_config",
]
