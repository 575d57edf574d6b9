"""
PDF text extraction using pdfplumber.
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pdfplumber
from pdfminer.pdfdocument import PDFPasswordIncorrect

from pdftidy.exceptions import DocumentPasswordError, DocumentReadError

logger = logging.getLogger(__name__)

# Settings passed to page.extract_tables when segmenting tables automatically
DEFAULT_TABLE_SETTINGS = {
    "vertical_strategy": "lines",
    "horizontal_strategy": "lines",
    "snap_tolerance": 5,
    "join_tolerance": 5,
    "edge_tolerance": 5,
}


def _is_password_error(exc: Optional[BaseException]) -> bool:
    # Newer pdfplumber releases wrap pdfminer errors in their own exception type
    while exc is not None:
        if isinstance(exc, PDFPasswordIncorrect):
            return True
        if exc.args and isinstance(exc.args[0], PDFPasswordIncorrect):
            return True
        exc = exc.__cause__ or exc.__context__
    return False


class PDFTextExtractor:
    """Extract per-page text and tables from PDF files using pdfplumber."""

    def __init__(self, table_settings: Optional[Dict[str, Any]] = None):
        """
        Initialize the PDF extractor.

        Args:
            table_settings: Overrides for pdfplumber's table finder, used by extract_tables
        """
        self.table_settings = {**DEFAULT_TABLE_SETTINGS, **(table_settings or {})}

    def _open(
        self,
        pdf_path: Path,
        user_password: Optional[str] = None,
        owner_password: Optional[str] = None
    ):
        """Open the PDF, trying the user password first and then the owner password."""
        candidates = [p for p in (user_password, owner_password) if p is not None] or [None]
        for password in candidates:
            try:
                return pdfplumber.open(pdf_path, password=password)
            except Exception as e:
                if not _is_password_error(e):
                    raise DocumentReadError(str(pdf_path), str(e) or type(e).__name__) from e
                logger.debug("Password rejected for %s", pdf_path)
        raise DocumentPasswordError(str(pdf_path))

    def extract_text(
        self,
        pdf_path: str | Path,
        user_password: Optional[str] = None,
        owner_password: Optional[str] = None,
        show_progress: bool = False
    ) -> List[Dict[str, Any]]:
        """
        Extract text from PDF file.

        Args:
            pdf_path: Path to PDF file
            user_password: Optional user password for encrypted documents
            owner_password: Optional owner password for encrypted documents
            show_progress: If True, display progress messages

        Returns:
            List of page dictionaries with 'page_num', 'text', 'width' and 'height' keys
        """
        pdf_path = Path(pdf_path)
        if not pdf_path.exists():
            raise FileNotFoundError(f"PDF file not found: {pdf_path}")

        pages_data = []
        with self._open(pdf_path, user_password, owner_password) as pdf:
            total_pages = len(pdf.pages)
            logger.info("Reading %d page(s) from %s", total_pages, pdf_path)
            for page_num, page in enumerate(pdf.pages, start=1):
                text = page.extract_text()
                pages_data.append({
                    'page_num': page_num,
                    'text': text or '',
                    'width': page.width,
                    'height': page.height,
                })
                if show_progress:
                    print(f"\r  ✓ Processed page {page_num}/{total_pages}        ", flush=True)

        return pages_data

    def extract_tables(
        self,
        pdf_path: str | Path,
        user_password: Optional[str] = None,
        owner_password: Optional[str] = None,
        show_progress: bool = False
    ) -> List[Dict[str, Any]]:
        """
        Extract pdfplumber's automatically segmented tables from each page.

        Args:
            pdf_path: Path to PDF file
            user_password: Optional user password for encrypted documents
            owner_password: Optional owner password for encrypted documents
            show_progress: If True, display progress messages

        Returns:
            List of page dictionaries with 'page_num', 'text', 'width', 'height'
            and 'tables' keys; each table is a list of rows of cell strings
        """
        pdf_path = Path(pdf_path)
        if not pdf_path.exists():
            raise FileNotFoundError(f"PDF file not found: {pdf_path}")

        pages_data = []
        with self._open(pdf_path, user_password, owner_password) as pdf:
            total_pages = len(pdf.pages)
            for page_num, page in enumerate(pdf.pages, start=1):
                tables = page.extract_tables(table_settings=self.table_settings) or []
                logger.debug("Page %d: %d table(s) detected", page_num, len(tables))
                pages_data.append({
                    'page_num': page_num,
                    'text': page.extract_text() or '',
                    'width': page.width,
                    'height': page.height,
                    'tables': tables,
                })
                if show_progress:
                    print(f"\r  ✓ Scanned page {page_num}/{total_pages} for tables        ", flush=True)

        return pages_data
