"""
Parsers for turning line records into structured tables.
"""
from .region import (
    FixedRegionTableParser,
    select_region,
    split_columns,
    to_long_format,
    coerce_types,
)

__all__ = [
    'FixedRegionTableParser',
    'select_region',
    'split_columns',
    'to_long_format',
    'coerce_types',
]
