"""
Search request data model for treefind.

A request names the directory to walk, the substring to look for and an
optional file extension filter. It is built once from the command line and
shared read-only with both workers for the duration of a search.
"""

from typing import Any, Dict
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, field_validator


WILDCARD_EXTENSION = "*"


class SearchRequest(BaseModel):
    """
    Immutable parameters of a single search run.

    Attributes:
        source: Root path to traverse (the root itself is a candidate entry)
        target: Substring matched against full paths and, for files, base names
        extension: File extension filter; "*" disables filtering
    """

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., min_length=1, description="Root path to traverse")
    target: str = Field(..., description="Substring to look for; empty matches everything")
    extension: str = Field(WILDCARD_EXTENSION, description="File extension filter")

    @field_validator('source')
    @classmethod
    def validate_source(cls, v: str) -> str:
        """Reject blank sources; keep the path exactly as given otherwise."""
        if not v.strip():
            raise ValueError("Source directory cannot be empty")
        return v

    @field_validator('extension')
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Normalize the extension to a lowercase, dot-prefixed suffix."""
        v = (v or "").strip()
        if v in ("", WILDCARD_EXTENSION, "*.*"):
            return WILDCARD_EXTENSION
        if v.startswith("*."):
            v = v[1:]
        if not v.startswith('.'):
            v = '.' + v
        return v.lower()

    def has_extension_filter(self) -> bool:
        """Check if file matches are restricted to one extension."""
        return self.extension != WILDCARD_EXTENSION

    def accepts_extension(self, name: str) -> bool:
        """Check if a file name passes the extension filter."""
        if not self.has_extension_filter():
            return True
        return name.lower().endswith(self.extension)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the request to a dictionary representation."""
        return self.model_dump()

    def __str__(self) -> str:
        parts = [f"Target: '{self.target}'", f"Source: {Path(self.source)}"]
        if self.has_extension_filter():
            parts.append(f"Extension: {self.extension}")
        return " | ".join(parts)
