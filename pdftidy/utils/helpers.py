"""
Utility functions and helpers for PDF extraction.
"""
import json
from pathlib import Path
from typing import List, Dict, Any, Optional

import pandas as pd


def save_json(data: Dict[str, Any], output_path: str | Path) -> None:
    """
    Save data to JSON file.

    Args:
        data: Data to save
        output_path: Path to output JSON file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def load_json(input_path: str | Path) -> Dict[str, Any]:
    """
    Load data from JSON file.

    Args:
        input_path: Path to input JSON file

    Returns:
        Loaded data dictionary
    """
    input_path = Path(input_path)
    with open(input_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def save_table(table: pd.DataFrame, output_path: str | Path) -> None:
    """
    Save a table as CSV, or as JSON records when the path ends in .json.

    Args:
        table: Table to save
        output_path: Destination path
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if output_path.suffix.lower() == '.json':
        table.to_json(output_path, orient='records', indent=2, force_ascii=False)
    else:
        table.to_csv(output_path, index=False)


def table_to_records(table: pd.DataFrame) -> List[Dict[str, Any]]:
    """Rows of a table as JSON-compatible dictionaries."""
    return json.loads(table.to_json(orient='records', force_ascii=False))


def get_statistics(pages_data: List[Dict[str, Any]], total_lines: int = 0) -> Dict[str, Any]:
    """
    Calculate statistics for extracted pages.

    Args:
        pages_data: List of page dictionaries
        total_lines: Number of line records produced from the pages

    Returns:
        Dictionary with statistics
    """
    total_chars = sum(len(page.get('text', '')) for page in pages_data)
    total_words = sum(len(page.get('text', '').split()) for page in pages_data)

    return {
        'total_pages': len(pages_data),
        'total_lines': total_lines,
        'total_characters': total_chars,
        'total_words': total_words,
        'avg_chars_per_page': total_chars / len(pages_data) if pages_data else 0,
        'avg_words_per_page': total_words / len(pages_data) if pages_data else 0,
    }


def normalize_table_cells(tables: Optional[List[List[List[Any]]]]) -> Optional[List[List[List[Optional[str]]]]]:
    """
    Normalize table cell values to Optional[str] format.
    Keeps None, converts other non-string types to string.

    Args:
        tables: Raw table data from pdfplumber

    Returns:
        Normalized tables with Optional[str] cells
    """
    if tables is None:
        return None

    return [
        [
            [cell if cell is None or isinstance(cell, str) else str(cell) for cell in row]
            for row in table
        ]
        for table in tables
    ]
