"""
Data models for PDF extraction results.
Imports all models for easy access.
"""
from .base import (
    Statistics,
    PageData,
    LineRecord,
    BaseExtractionResult
)
from .table import (
    SUPPORTED_TYPES,
    TableSpec,
    TableExtractionResult,
    DetectedTablesResult
)

__all__ = [
    # Base models
    'Statistics',
    'PageData',
    'LineRecord',
    'BaseExtractionResult',
    # Table models
    'SUPPORTED_TYPES',
    'TableSpec',
    'TableExtractionResult',
    'DetectedTablesResult',
]
