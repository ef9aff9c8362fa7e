"""
Base exporter class and registry.

All exporters inherit from BaseExporter and register themselves
with the ExporterRegistry.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar

from orgchart.classify.profiles import LanguageProfile, get_profile
from orgchart.hierarchy.projector import TableProjector, TableRow
from orgchart.hierarchy.tree import OrgNode

# Table schema shared by the delimited exporters
TABLE_COLUMNS = ["code", "department", "title", "name", "responsibilities", "level"]


class BaseExporter(ABC):
    """
    Abstract base class for structure exporters.

    Exporters render an organization tree to a string; ``export`` writes
    that string to a file with the exporter's extension.
    """

    EXPORTER_NAME: ClassVar[str] = "base"
    FILE_EXTENSION: ClassVar[str] = ""

    def __init__(self, profile: LanguageProfile | None = None, separator: str = "; ") -> None:
        self.profile = profile or get_profile()
        self.separator = separator

    @abstractmethod
    def render(self, root: OrgNode | None) -> str:
        """
        Render a tree.

        Args:
            root: Tree to render; None renders an empty document.

        Returns:
            The rendered document
        """
        pass

    def export(self, root: OrgNode | None, path: Path) -> Path:
        """
        Write the rendered tree to a file.

        Args:
            root: Tree to export
            path: Output file path

        Returns:
            Path to exported file
        """
        path = self._ensure_extension(Path(path))
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(self.render(root))
        return path

    def _rows(self, root: OrgNode | None) -> list[TableRow]:
        return TableProjector(self.profile, self.separator).project(root)

    def _ensure_extension(self, path: Path) -> Path:
        """Ensure the path has the correct extension."""
        if path.suffix.lower() != self.FILE_EXTENSION.lower():
            return path.with_suffix(self.FILE_EXTENSION)
        return path


class ExporterRegistry:
    """Registry of available exporters."""

    _exporters: ClassVar[dict[str, type[BaseExporter]]] = {}

    @classmethod
    def register(cls, exporter_class: type[BaseExporter]) -> type[BaseExporter]:
        """Register an exporter class."""
        cls._exporters[exporter_class.EXPORTER_NAME] = exporter_class
        return exporter_class

    @classmethod
    def get_exporter(cls, name: str, **kwargs: Any) -> BaseExporter | None:
        """Get an exporter by name."""
        exporter_class = cls._exporters.get(name)
        if exporter_class:
            return exporter_class(**kwargs)
        return None

    @classmethod
    def available_exporters(cls) -> list[str]:
        """Get list of available exporter names."""
        return list(cls._exporters.keys())

    @classmethod
    def _require(cls, format: str, **kwargs: Any) -> BaseExporter:
        exporter = cls.get_exporter(format, **kwargs)
        if exporter is None:
            available = ", ".join(cls.available_exporters())
            raise ValueError(f"Unknown export format: {format}. Available: {available}")
        return exporter

    @classmethod
    def render(cls, root: OrgNode | None, format: str, **kwargs: Any) -> str:
        """Render a tree using the specified format."""
        return cls._require(format, **kwargs).render(root)

    @classmethod
    def export(cls, root: OrgNode | None, path: Path, format: str, **kwargs: Any) -> Path:
        """Export a tree using the specified format."""
        return cls._require(format, **kwargs).export(root, path)
