"""Core data models and abstractions for orgchart."""

from orgchart.core.config import ParserConfig
from orgchart.core.errors import OrgChartError, ParseInputError, StructureImportError
from orgchart.core.models import (
    DEFAULT_LEVEL,
    NOT_SPECIFIED,
    VACANCY_LABEL,
    Employee,
    IdSequence,
    Modality,
    generate_id,
)

__all__ = [
    "DEFAULT_LEVEL",
    "NOT_SPECIFIED",
    "VACANCY_LABEL",
    "Employee",
    "IdSequence",
    "Modality",
    "OrgChartError",
    "ParseInputError",
    "ParserConfig",
    "StructureImportError",
    "generate_id",
]
