"""Exception types raised by orgchart."""

from __future__ import annotations

from typing import Any


class OrgChartError(Exception):
    """Base exception for orgchart errors."""


class ParseInputError(OrgChartError):
    """Raised when the parser is handed something that is not a document.

    Heuristic ambiguity never raises; this is reserved for missing or
    wrongly typed input.
    """


class StructureImportError(OrgChartError):
    """Raised when a user-supplied JSON structure cannot be imported."""

    def __init__(self, message: str, details: str | None = None):
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "details": self.details,
        }
