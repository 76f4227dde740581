"""
Configuration data model for minigrep.

This module defines the immutable value holding the query, the file to search
and whether matching is case-sensitive.
"""

from typing import Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class SearchConfig(BaseModel):
    """
    Configuration parameters for a single minigrep run.

    An empty query or filename is accepted here: absence of an argument is
    reported by the resolver before a SearchConfig is ever built.

    Attributes:
        query: Text to search for
        filename: Path of the file to search
        case_sensitive: Whether matching is case-sensitive (default: True)
    """

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., description="Text to search for")
    filename: str = Field(..., description="Path of the file to search")
    case_sensitive: bool = Field(True, description="Whether matching is case-sensitive")

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearchConfig':
        """Create a SearchConfig instance from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        mode = "case-sensitive" if self.case_sensitive else "case-insensitive"
        return f"Query: '{self.query}' | File: {self.filename} | {mode}"
