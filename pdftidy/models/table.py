"""
Models describing a fixed-region table layout and the extraction results.
"""
import re
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from .base import BaseExtractionResult, PageData

# Type names accepted in TableSpec.column_types, mapped to their converters.
SUPPORTED_TYPES = {
    'int': int,
    'float': float,
    'str': str,
}


class TableSpec(BaseModel):
    """Where a table lives on the page and how to reshape it."""

    page: int = Field(..., ge=1, description="Page holding the table (1-based)")
    first_line: int = Field(..., ge=1, description="First line of the region (inclusive)")
    last_line: int = Field(..., ge=1, description="Last line of the region (inclusive)")
    labels: List[str] = Field(..., min_length=1, description="Column labels, by position")
    delimiter: str = Field(default=r"\s+", description="Regex separating columns")
    id_columns: List[str] = Field(
        default_factory=list,
        description="Columns carried over verbatim into the long table"
    )
    value_columns: Optional[Union[str, List[str]]] = Field(
        default=None,
        description=(
            "Regex matched against labels, or an explicit list of labels, selecting "
            "the columns to pivot. None pivots every non-id column."
        )
    )
    variable_name: str = Field(default="variable", description="Name of the variable column")
    value_name: str = Field(default="value", description="Name of the value column")
    column_types: Dict[str, str] = Field(
        default_factory=dict,
        description="Column name to type name ('int', 'float' or 'str')"
    )

    @field_validator('labels')
    @classmethod
    def validate_labels(cls, v):
        if any(not label for label in v):
            raise ValueError("labels must be non-empty strings")
        duplicates = sorted({label for label in v if v.count(label) > 1})
        if duplicates:
            raise ValueError(f"duplicate labels: {', '.join(duplicates)}")
        return v

    @field_validator('delimiter')
    @classmethod
    def validate_delimiter(cls, v):
        try:
            pattern = re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid delimiter pattern {v!r}: {e}")
        if pattern.match(''):
            raise ValueError(f"delimiter pattern {v!r} matches the empty string")
        if pattern.groups:
            raise ValueError(f"delimiter pattern {v!r} must not contain capturing groups")
        return v

    @field_validator('value_columns')
    @classmethod
    def validate_value_columns(cls, v):
        if isinstance(v, str):
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"invalid value column pattern {v!r}: {e}")
        return v

    @field_validator('column_types')
    @classmethod
    def validate_column_types(cls, v):
        unknown = sorted(set(v.values()) - set(SUPPORTED_TYPES))
        if unknown:
            raise ValueError(
                f"unsupported column types: {', '.join(unknown)} "
                f"(expected one of {', '.join(SUPPORTED_TYPES)})"
            )
        return v

    @model_validator(mode='after')
    def validate_layout(self):
        if self.first_line > self.last_line:
            raise ValueError(
                f"first_line ({self.first_line}) is after last_line ({self.last_line})"
            )
        missing = [c for c in self.id_columns if c not in self.labels]
        if missing:
            raise ValueError(f"id columns not in labels: {', '.join(missing)}")
        if isinstance(self.value_columns, list):
            missing = [c for c in self.value_columns if c not in self.labels]
            if missing:
                raise ValueError(f"value columns not in labels: {', '.join(missing)}")
        if self.variable_name == self.value_name:
            raise ValueError("variable_name and value_name must differ")
        clashing = {self.variable_name, self.value_name} & set(self.id_columns)
        if clashing:
            raise ValueError(f"output names clash with id columns: {', '.join(sorted(clashing))}")
        return self

    @property
    def line_range(self) -> Tuple[int, int]:
        return (self.first_line, self.last_line)


class TableExtractionResult(BaseExtractionResult):
    """Long-format table extracted from a fixed page region."""

    extraction_mode: str = Field(default="fixed_region", description="Extraction mode")
    table_spec: TableSpec = Field(..., description="Layout used for the extraction")
    columns: List[str] = Field(default_factory=list, description="Output column names")
    row_count: int = Field(default=0, ge=0, description="Number of long-format rows")
    rows: List[Dict[str, Any]] = Field(default_factory=list, description="Long-format rows")


class DetectedTablesResult(BaseExtractionResult):
    """Tables segmented by pdfplumber itself, page by page."""

    extraction_mode: str = Field(default="detected_tables", description="Extraction mode")
    tables_found: int = Field(default=0, ge=0, description="Number of tables across all pages")
    pages: List[PageData] = Field(default_factory=list, description="Pages with their tables")
