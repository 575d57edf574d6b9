"""
Exceptions raised while extracting and reshaping PDF tables.
"""
from typing import Optional


class PdfTidyError(Exception):
    """Base class for all pdftidy errors."""


class DocumentPasswordError(PdfTidyError):
    """Raised when the PDF cannot be opened with the supplied passwords."""

    def __init__(self, pdf_path: str):
        self.pdf_path = pdf_path
        super().__init__(f"Could not decrypt {pdf_path}: password missing or incorrect")


class DocumentReadError(PdfTidyError):
    """Raised when pdfplumber cannot open or parse the file as a PDF."""

    def __init__(self, pdf_path: str, reason: str):
        self.pdf_path = pdf_path
        self.reason = reason
        super().__init__(f"Could not read {pdf_path} as a PDF: {reason}")


class RegionNotFound(PdfTidyError, ValueError):
    """Raised when a page/line selection matches no line records."""

    def __init__(self, page: int, first_line: int, last_line: int, page_line_count: int = 0):
        self.page = page
        self.first_line = first_line
        self.last_line = last_line
        self.page_line_count = page_line_count
        if page_line_count:
            detail = f"page {page} has {page_line_count} lines"
        else:
            detail = f"page {page} is not in the document"
        super().__init__(
            f"No lines selected for page {page}, lines {first_line}-{last_line} ({detail})"
        )


class ColumnCountMismatch(PdfTidyError, ValueError):
    """Raised when a line does not split into exactly one piece per label."""

    def __init__(self, page: int, line: int, text: str, expected: int, actual: int):
        self.page = page
        self.line = line
        self.text = text
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Page {page}, line {line}: expected {expected} columns, got {actual} "
            f"in {text!r}"
        )


class InvalidLabelsError(PdfTidyError, ValueError):
    """Raised when column labels are empty or not unique."""


class UnknownColumnError(PdfTidyError, KeyError):
    """Raised when a referenced column is not present in the table."""

    def __init__(self, column: str, available: Optional[list] = None):
        self.column = column
        self.available = list(available or [])
        super().__init__(column)

    def __str__(self) -> str:
        return f"Unknown column {self.column!r} (available: {', '.join(self.available)})"


class TypeCoercionError(PdfTidyError, ValueError):
    """Raised when a cell cannot be converted to its column's declared type."""

    def __init__(self, column: str, row, value, type_name: str):
        self.column = column
        self.row = row
        self.value = value
        self.type_name = type_name
        super().__init__(
            f"Cannot convert {value!r} in column {column!r}, row {row} to {type_name}"
        )
