"""
Utility functions and helpers for PDF extraction.
"""
from .helpers import (
    save_json,
    load_json,
    save_table,
    table_to_records,
    get_statistics,
    normalize_table_cells,
)

__all__ = [
    'save_json',
    'load_json',
    'save_table',
    'table_to_records',
    'get_statistics',
    'normalize_table_cells',
]
