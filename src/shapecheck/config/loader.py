"""
Configuration Loader - YAML Settings for Shapecheck.

Settings live either in a file of their own or in one section of a larger
application config:

    # shapecheck.yaml
    parser:
      mode: strict
      log_failures: true

    # app.yaml, loaded with section="validation"
    database: {...}
    validation:
      parser:
        mode: strip

Missing sections and keys fall back to the model defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from shapecheck.config.models import ShapecheckConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Reads and validates shapecheck settings from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Directory that relative config paths are resolved against
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        section: Optional[str] = None,
    ) -> ShapecheckConfig:
        """
        Load settings from a YAML file.

        Args:
            config_path: Path to the YAML file
            section: Top-level key holding the settings, when they are
                embedded in a larger application config

        Returns:
            Validated ShapecheckConfig object

        Raises:
            FileNotFoundError: If the file doesn't exist
            KeyError: If section is given but absent from the file
            ValueError: If the settings are not a mapping
            pydantic.ValidationError: If a setting is invalid
        """
        path = Path(config_path)
        if not path.is_absolute():
            path = self._base_path / path

        with path.open(encoding="utf-8") as f:
            document = yaml.safe_load(f)

        settings = document
        if section is not None:
            if not isinstance(document, dict) or section not in document:
                raise KeyError(f"Section {section!r} not found in {path}")
            settings = document[section]

        config = self.load_from_dict(settings or {}, source=str(path))
        logger.debug(
            f"Loaded configuration from {path}: mode={config.parser.mode.value}, "
            f"log_failures={config.parser.log_failures}"
        )
        return config

    def load_from_dict(
        self,
        settings: Dict[str, Any],
        source: str = "<dict>",
    ) -> ShapecheckConfig:
        """Validate settings given as a dictionary."""
        if not isinstance(settings, dict):
            raise ValueError(
                f"{source}: settings must be a mapping, got {type(settings).__name__}"
            )
        return ShapecheckConfig.model_validate(settings)


def load_config(
    config_path: Union[str, Path],
    section: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> ShapecheckConfig:
    """
    Convenience function to load settings.

    Args:
        config_path: Path to YAML config file
        section: Optional top-level key holding the settings
        base_path: Base path for resolving relative paths

    Returns:
        Validated ShapecheckConfig object
    """
    return ConfigLoader(base_path=base_path).load(config_path, section)
