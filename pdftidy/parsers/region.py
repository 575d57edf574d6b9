"""
Fixed-region table parsing: select a page's line range, split it into
labelled columns and reshape the result into a typed long-format table.
"""
import logging
import math
import re
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

import pandas as pd

from pdftidy.exceptions import (
    ColumnCountMismatch,
    InvalidLabelsError,
    RegionNotFound,
    TypeCoercionError,
    UnknownColumnError,
)
from pdftidy.models import LineRecord, SUPPORTED_TYPES, TableSpec

logger = logging.getLogger(__name__)

WHITESPACE = r"\s+"

# pandas dtype used for each coerced column type
DTYPES = {
    'int': 'int64',
    'float': 'float64',
    'str': object,
}

_ROW = '__source_row__'


def select_region(
    lines: Sequence[LineRecord],
    page: int,
    line_range: Tuple[int, int]
) -> List[LineRecord]:
    """
    Select the line records of one page within an inclusive line range.

    Args:
        lines: Line records of the whole document
        page: Page number (1-based)
        line_range: (first, last) line numbers, both inclusive

    Returns:
        Selected records in reading order

    Raises:
        RegionNotFound: If the page is absent or the range falls outside it
    """
    first, last = line_range
    page_lines = [record for record in lines if record.page == page]
    if not page_lines or first < 1 or first > last or last > len(page_lines):
        raise RegionNotFound(page, first, last, len(page_lines))

    selected = [record for record in page_lines if first <= record.line <= last]
    logger.debug("Selected %d line(s) from page %d", len(selected), page)
    return selected


def _check_labels(labels: Sequence[str]) -> List[str]:
    labels = list(labels)
    if not labels:
        raise InvalidLabelsError("At least one column label is required")
    if any(not isinstance(label, str) or not label for label in labels):
        raise InvalidLabelsError("Column labels must be non-empty strings")
    duplicates = sorted({label for label in labels if labels.count(label) > 1})
    if duplicates:
        raise InvalidLabelsError(f"Duplicate column labels: {', '.join(duplicates)}")
    return labels


def split_columns(
    selected: Sequence[LineRecord],
    labels: Sequence[str],
    delimiter: str = WHITESPACE
) -> pd.DataFrame:
    """
    Split each selected line into columns and label them by position.

    With the default whitespace delimiter, surrounding whitespace is stripped
    first and single or repeated spaces and tabs all separate columns alike.
    Other delimiters split the text as is, so empty edge cells are kept.

    Args:
        selected: Line records to split
        labels: One label per expected column
        delimiter: Regex separating columns (no capturing groups)

    Returns:
        Wide table of strings, one row per line

    Raises:
        InvalidLabelsError: If labels are empty or not unique
        ColumnCountMismatch: If any line does not yield exactly len(labels) pieces
    """
    labels = _check_labels(labels)
    pattern = re.compile(delimiter)
    if pattern.groups:
        raise ValueError(f"Delimiter {delimiter!r} must not contain capturing groups")

    rows = []
    for record in selected:
        text = record.text.strip() if delimiter == WHITESPACE else record.text
        pieces = pattern.split(text)
        if len(pieces) != len(labels):
            raise ColumnCountMismatch(
                record.page, record.line, record.text, len(labels), len(pieces)
            )
        rows.append(pieces)

    return pd.DataFrame(rows, columns=labels, dtype=object)


def _match_value_columns(
    candidates: List[str],
    value_columns: Optional[Union[str, Sequence[str]]],
    available: List[str]
) -> Tuple[List[str], Dict[str, str]]:
    """Return the columns to pivot and the variable identifier of each."""
    if value_columns is None:
        return candidates, {c: c for c in candidates}

    if isinstance(value_columns, str):
        pattern = re.compile(value_columns)
        matched = [c for c in candidates if pattern.match(c)]
        if not matched:
            raise UnknownColumnError(value_columns, available)
        if pattern.groups:
            # A group that took no part in the match leaves the label as identifier
            return matched, {c: pattern.match(c).group(1) or c for c in matched}
        return matched, {c: c for c in matched}

    wanted = list(value_columns)
    for column in wanted:
        if column not in available:
            raise UnknownColumnError(column, available)
    matched = [c for c in candidates if c in wanted]
    if not matched:
        raise InvalidLabelsError("Value columns must not all be id columns")
    return matched, {c: c for c in matched}


def to_long_format(
    wide: pd.DataFrame,
    id_columns: Sequence[str] = (),
    value_columns: Optional[Union[str, Sequence[str]]] = None,
    variable_name: str = 'variable',
    value_name: str = 'value'
) -> pd.DataFrame:
    """
    Pivot value columns of a wide table into (variable, value) pairs.

    Value columns are picked by a regex matched from the start of each label,
    by an explicit list of labels, or (with None) as every non-id column. When
    the regex has a capturing group, the variable identifier is the first
    group, e.g. ``y(\\d+)`` turns ``y2015`` into ``2015``. Columns that are
    neither id nor value columns are dropped.

    Rows come out ordered by source row, then by value column order.

    Args:
        wide: Wide table
        id_columns: Columns carried over verbatim
        value_columns: Regex, list of labels, or None
        variable_name: Name of the output variable column
        value_name: Name of the output value column

    Returns:
        Long-format table with the id columns, variable_name and value_name

    Raises:
        UnknownColumnError: If an id or value column is missing, or the regex matches nothing
        InvalidLabelsError: If output names clash with id columns
    """
    available = [str(c) for c in wide.columns]
    id_columns = list(id_columns)
    for column in id_columns:
        if column not in available:
            raise UnknownColumnError(column, available)
    if variable_name == value_name or {variable_name, value_name} & set(id_columns):
        raise InvalidLabelsError(
            f"Output columns {variable_name!r} and {value_name!r} must be distinct "
            f"and not among the id columns"
        )

    candidates = [c for c in available if c not in id_columns]
    matched, identifiers = _match_value_columns(candidates, value_columns, available)

    # Melt over positional names so a label may equal variable_name or value_name
    positional = {c: f'__value_{i}__' for i, c in enumerate(matched)}
    frame = wide[id_columns + matched].rename(columns=positional).reset_index(drop=True)
    frame.insert(0, _ROW, range(len(frame)))
    long = frame.melt(
        id_vars=[_ROW] + id_columns,
        value_vars=list(positional.values()),
        var_name=variable_name,
        value_name=value_name,
    )
    long = long.sort_values(_ROW, kind='stable').drop(columns=_ROW).reset_index(drop=True)
    variables = {positional[c]: identifiers[c] for c in matched}
    long[variable_name] = long[variable_name].map(variables).astype(object)

    logger.debug(
        "Pivoted %d row(s) x %d column(s) into %d long row(s)",
        len(wide), len(matched), len(long)
    )
    return long


# ASCII digits only; int() and float() also take underscores and other scripts
INT_TEXT = re.compile(r'[+-]?[0-9]+')
FLOAT_TEXT = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def _to_int(raw):
    if isinstance(raw, str):
        if not INT_TEXT.fullmatch(raw.strip()):
            raise ValueError(f"{raw!r} is not a whole number")
        value = int(raw.strip())
    elif isinstance(raw, float) and not raw.is_integer():
        raise ValueError(f"{raw!r} is not a whole number")
    else:
        value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise OverflowError(f"{raw!r} does not fit in a 64-bit integer")
    return value


def _to_float(raw):
    if isinstance(raw, str):
        if not FLOAT_TEXT.fullmatch(raw.strip()):
            raise ValueError(f"{raw!r} is not a number")
        value = float(raw.strip())
    else:
        value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"{raw!r} is not a finite number")
    return value


CONVERTERS: Dict[str, Callable] = {
    'int': _to_int,
    'float': _to_float,
    'str': str,
}


def _type_name(declared) -> str:
    if isinstance(declared, type):
        declared = declared.__name__
    if declared not in SUPPORTED_TYPES:
        raise ValueError(
            f"Unsupported column type {declared!r} "
            f"(expected one of {', '.join(SUPPORTED_TYPES)})"
        )
    return declared


def coerce_types(table: pd.DataFrame, column_types: Dict[str, Union[str, type]]) -> pd.DataFrame:
    """
    Convert columns to their declared types, all or nothing.

    Args:
        table: Table to convert (left unmodified)
        column_types: Column name to 'int', 'float' or 'str' (or the builtin type)

    Returns:
        A new table with the converted columns

    Raises:
        UnknownColumnError: If a declared column is missing
        TypeCoercionError: On the first cell that cannot be converted
    """
    available = [str(c) for c in table.columns]
    converted = {}
    for column, declared in column_types.items():
        if column not in available:
            raise UnknownColumnError(column, available)
        type_name = _type_name(declared)
        convert = CONVERTERS[type_name]
        values = []
        for row, raw in table[column].items():
            try:
                values.append(convert(raw))
            except (TypeError, ValueError, OverflowError):
                raise TypeCoercionError(column, row, raw, type_name) from None
        converted[column] = pd.Series(values, index=table.index, dtype=DTYPES[type_name])

    result = table.copy()
    for column, series in converted.items():
        result[column] = series
    return result


class FixedRegionTableParser:
    """Run the region pipeline for one TableSpec."""

    def __init__(self, spec: TableSpec):
        self.spec = spec

    def select(self, lines: Sequence[LineRecord]) -> List[LineRecord]:
        return select_region(lines, self.spec.page, self.spec.line_range)

    def parse_wide(self, lines: Sequence[LineRecord]) -> pd.DataFrame:
        """Selected region as a wide table of strings."""
        return split_columns(self.select(lines), self.spec.labels, self.spec.delimiter)

    def parse(self, lines: Sequence[LineRecord]) -> pd.DataFrame:
        """Selected region as a typed long-format table."""
        wide = self.parse_wide(lines)
        long = to_long_format(
            wide,
            id_columns=self.spec.id_columns,
            value_columns=self.spec.value_columns,
            variable_name=self.spec.variable_name,
            value_name=self.spec.value_name,
        )
        table = coerce_types(long, self.spec.column_types)
        logger.info(
            "Parsed page %d lines %d-%d into %d row(s)",
            self.spec.page, self.spec.first_line, self.spec.last_line, len(table)
        )
        return table
