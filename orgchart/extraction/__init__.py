"""Employee extractors, one per input modality."""

from orgchart.extraction.base import BaseExtractor, ExtractorRegistry
from orgchart.extraction.flat import FlatTextExtractor
from orgchart.extraction.indented import IndentedTextExtractor
from orgchart.extraction.tabular import ColumnMap, CodedTableExtractor, UncodedTableExtractor

__all__ = [
    "BaseExtractor",
    "CodedTableExtractor",
    "ColumnMap",
    "ExtractorRegistry",
    "FlatTextExtractor",
    "IndentedTextExtractor",
    "UncodedTableExtractor",
]
