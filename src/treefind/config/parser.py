"""
YAML settings parser for treefind.

This module loads optional YAML settings files, validates them against the
FinderSettings model and reports problems as ConfigurationError with a
message that names the offending file.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Union
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from ..core.errors import ConfigurationError
from ..models.config import FinderSettings


logger = logging.getLogger(__name__)


@dataclass
class SettingsParseResult:
    """
    Result of a settings parsing operation.

    Attributes:
        settings: The parsed and validated settings
        warnings: List of non-fatal warnings
        settings_path: Path to the settings file used
        is_default: Whether default settings were used
    """
    settings: FinderSettings
    warnings: List[str]
    settings_path: Optional[Path]
    is_default: bool


class SettingsParser:
    """
    YAML settings parser with validation and error handling.

    Unknown top-level keys are reported as warnings rather than errors; in
    strict mode any warning is fatal.
    """

    KNOWN_KEYS = {'spinner', 'follow_links', 'log_level'}

    def __init__(self, strict_mode: bool = False):
        """
        Initialize the settings parser.

        Args:
            strict_mode: If True, treat warnings as errors
        """
        self.strict_mode = strict_mode
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load(self, settings_path: Optional[Union[str, Path]] = None) -> SettingsParseResult:
        """
        Load and parse settings from a file, or fall back to defaults.

        Args:
            settings_path: Path to a YAML settings file. If None, defaults are used.

        Returns:
            SettingsParseResult containing the parsed settings and metadata

        Raises:
            ConfigurationError: If the file cannot be read or holds invalid settings
        """
        if settings_path is None:
            self.logger.debug("No settings file given, using defaults")
            return SettingsParseResult(
                settings=FinderSettings(),
                warnings=[],
                settings_path=None,
                is_default=True
            )

        settings_path = Path(settings_path)
        if not settings_path.exists():
            raise ConfigurationError(f"Settings file not found: {settings_path}")

        data = self._load_yaml_file(settings_path)

        warnings = [f"Unknown settings key ignored: {key}" for key in sorted(set(data) - self.KNOWN_KEYS)]
        if self.strict_mode and warnings:
            raise ConfigurationError(f"Settings warnings in strict mode: {'; '.join(warnings)}")

        known = {key: value for key, value in data.items() if key in self.KNOWN_KEYS}
        try:
            settings = FinderSettings.from_dict(known)
        except ValidationError as e:
            raise ConfigurationError(f"Settings validation failed for {settings_path}: {e}") from e

        for warning in warnings:
            self.logger.warning(warning)
        self.logger.info(f"Settings loaded from {settings_path}")

        return SettingsParseResult(
            settings=settings,
            warnings=warnings,
            settings_path=settings_path,
            is_default=False
        )

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load and parse a YAML file.

        Raises:
            ConfigurationError: If file cannot be read or parsed
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()

            if not content.strip():
                self.logger.warning(f"Settings file is empty: {file_path}")
                return {}

            data = yaml.safe_load(content)
            if data is None:
                return {}

            if not isinstance(data, dict):
                raise ConfigurationError(f"Settings file must contain a YAML object, got {type(data).__name__}")

            return data

        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {file_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read settings file {file_path}: {e}") from e


def load_settings(settings_path: Optional[Union[str, Path]] = None, strict_mode: bool = False) -> FinderSettings:
    """
    Convenience function to load settings.

    Args:
        settings_path: Path to a YAML settings file, or None for defaults
        strict_mode: If True, treat warnings as errors

    Returns:
        Validated FinderSettings object
    """
    return SettingsParser(strict_mode=strict_mode).load(settings_path).settings
