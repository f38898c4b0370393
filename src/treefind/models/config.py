"""
Configuration data models for treefind.

Settings cover the spinner animation, symlink handling during traversal and
the log level. Every field has a default so an empty settings file is valid.
"""

import logging
from typing import Dict, List, Any
from pydantic import BaseModel, Field, field_validator


DEFAULT_GLYPHS = ["-", "/", "|", "\\"]


class SpinnerConfig(BaseModel):
    """
    Configuration for the progress spinner.

    Attributes:
        label: Text rendered in front of the rotating glyph
        glyphs: Glyph sequence rendered once per cycle
        interval_ms: Delay between two glyphs, in milliseconds
    """

    label: str = Field("Searching", description="Text rendered before the glyph")
    glyphs: List[str] = Field(default_factory=lambda: list(DEFAULT_GLYPHS), min_length=1,
                              description="Glyph sequence rendered once per cycle")
    interval_ms: int = Field(100, gt=0, le=10000, description="Delay between glyphs in milliseconds")

    @field_validator('glyphs')
    @classmethod
    def validate_glyphs(cls, v: List[str]) -> List[str]:
        """Glyphs must be non-empty single-line strings."""
        for glyph in v:
            if not glyph or '\n' in glyph or '\r' in glyph:
                raise ValueError(f"Invalid spinner glyph: {glyph!r}")
        return v

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000.0

    @property
    def cycle_seconds(self) -> float:
        """Upper bound on how long the spinner takes to notice it should stop."""
        return self.interval_seconds * len(self.glyphs)


class FinderSettings(BaseModel):
    """
    Top-level settings for a search run.

    Attributes:
        spinner: Spinner animation settings
        follow_links: Whether the traversal descends into symlinked directories
        log_level: Name of the logging level used by the command line entry point
    """

    spinner: SpinnerConfig = Field(default_factory=SpinnerConfig, description="Spinner settings")
    follow_links: bool = Field(False, description="Descend into symlinked directories")
    log_level: str = Field("WARNING", description="Logging level name")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the logging level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {v}")
        return level

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FinderSettings':
        """Create settings from a dictionary."""
        return cls.model_validate(data)
