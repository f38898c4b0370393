"""
Settings management package for treefind.

This package provides loading and validation of optional YAML settings files.
"""

from ..core.errors import ConfigurationError
from .parser import (
    SettingsParser,
    SettingsParseResult,
    load_settings
)

__all__ = [
    'SettingsParser',
    'SettingsParseResult',
    'ConfigurationError',
    'load_settings'
]
