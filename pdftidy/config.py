"""
Loading table layouts from JSON files.
"""
from pathlib import Path

from pdftidy.models import TableSpec
from pdftidy.utils import load_json


def load_table_spec(path: str | Path) -> TableSpec:
    """
    Load and validate a TableSpec from a JSON file.

    Example file::

        {
            "page": 2,
            "first_line": 8,
            "last_line": 10,
            "labels": ["n_patches", "y2015", "y2016", "y2017"],
            "id_columns": ["n_patches"],
            "value_columns": "y(\\\\d+)",
            "variable_name": "year",
            "column_types": {"n_patches": "int", "year": "int", "value": "int"}
        }

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the layout is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Table spec not found: {path}")
    return TableSpec.model_validate(load_json(path))
