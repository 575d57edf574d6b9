"""
Service classes for orchestrating PDF extraction workflows.
"""
from .extraction_service import (
    ExtractionStrategy,
    FixedRegionExtractionStrategy,
    DetectedTablesExtractionStrategy,
    ExtractionService,
    ExtractionServiceFactory,
)

__all__ = [
    'ExtractionStrategy',
    'FixedRegionExtractionStrategy',
    'DetectedTablesExtractionStrategy',
    'ExtractionService',
    'ExtractionServiceFactory',
]
