"""
pdftidy
=======

Extract text from PDF files with pdfplumber and turn a fixed region of a
page into a typed long-format (tidy) table.

Main Components:
- extractors: PDF text extraction and (page, line, text) records
- parsers: Fixed-region table parsing and wide-to-long reshaping
- models: Data models for type safety
- services: High-level extraction orchestration
- utils: Helper functions
"""

__version__ = "1.0.0"

# Convenience imports for common use cases
from pdftidy.exceptions import (
    PdfTidyError,
    RegionNotFound,
    ColumnCountMismatch,
    TypeCoercionError,
)
from pdftidy.extractors import PDFTextExtractor, split_lines
from pdftidy.models import LineRecord, TableSpec
from pdftidy.parsers import (
    FixedRegionTableParser,
    select_region,
    split_columns,
    to_long_format,
    coerce_types,
)
from pdftidy.services import ExtractionServiceFactory
from pdftidy.config import load_table_spec

__all__ = [
    'PdfTidyError',
    'RegionNotFound',
    'ColumnCountMismatch',
    'TypeCoercionError',
    'PDFTextExtractor',
    'split_lines',
    'LineRecord',
    'TableSpec',
    'FixedRegionTableParser',
    'select_region',
    'split_columns',
    'to_long_format',
    'coerce_types',
    'ExtractionServiceFactory',
    'load_table_spec',
]
