"""
Extraction service that orchestrates PDF extraction using OOP principles.
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional
from pathlib import Path

import pandas as pd

from pdftidy.extractors import PDFTextExtractor, split_lines
from pdftidy.models import (
    DetectedTablesResult,
    LineRecord,
    PageData,
    Statistics,
    TableExtractionResult,
    TableSpec,
)
from pdftidy.parsers import FixedRegionTableParser
from pdftidy.utils import get_statistics, normalize_table_cells, table_to_records

logger = logging.getLogger(__name__)


class ExtractionStrategy(ABC):
    """Abstract base class for extraction strategies."""

    # Whether the strategy consumes pdfplumber's detected tables
    uses_detected_tables = False

    @abstractmethod
    def extract(
        self,
        pages_data: List[Dict[str, Any]],
        source_pdf: str,
        show_progress: bool = False
    ) -> Dict[str, Any]:
        """
        Extract data from pages.

        Args:
            pages_data: List of page dictionaries
            source_pdf: Path to source PDF
            show_progress: Whether to print step messages

        Returns:
            Dictionary with extraction results
        """
        pass

    def get_statistics(self, pages_data: List[Dict[str, Any]], total_lines: int = 0) -> Statistics:
        """Calculate statistics."""
        return Statistics(**get_statistics(pages_data, total_lines))


class FixedRegionExtractionStrategy(ExtractionStrategy):
    """Strategy reading a fixed line range of one page as a long-format table."""

    def __init__(self, parser: FixedRegionTableParser):
        """
        Initialize fixed-region strategy.

        Args:
            parser: FixedRegionTableParser configured with the table layout
        """
        self.parser = parser

    def extract_table(self, pages_data: List[Dict[str, Any]]) -> pd.DataFrame:
        """Typed long-format table for the configured region."""
        lines = split_lines(page.get('text', '') for page in pages_data)
        return self.parser.parse(lines)

    def extract(
        self,
        pages_data: List[Dict[str, Any]],
        source_pdf: str,
        show_progress: bool = False
    ) -> Dict[str, Any]:
        """Extract the configured region and wrap it in a result model."""
        if show_progress:
            print("🔄 Step 2/3: Splitting lines and parsing region...", end="", flush=True)
        lines = split_lines(page.get('text', '') for page in pages_data)
        table = self.parser.parse(lines)
        if show_progress:
            print(f" ✓ ({len(table)} rows)", flush=True)

        result = TableExtractionResult(
            source_pdf=str(source_pdf),
            statistics=self.get_statistics(pages_data, len(lines)),
            table_spec=self.parser.spec,
            columns=[str(c) for c in table.columns],
            row_count=len(table),
            rows=table_to_records(table),
        )
        return result.model_dump(mode='json')


class DetectedTablesExtractionStrategy(ExtractionStrategy):
    """Strategy returning the tables pdfplumber segments on its own."""

    uses_detected_tables = True

    def extract(
        self,
        pages_data: List[Dict[str, Any]],
        source_pdf: str,
        show_progress: bool = False
    ) -> Dict[str, Any]:
        """Collect detected tables page by page."""
        if show_progress:
            print("🔄 Step 2/3: Collecting detected tables...", end="", flush=True)

        validated_pages = []
        tables_found = 0
        for page_dict in pages_data:
            tables = normalize_table_cells(page_dict.get('tables')) or []
            tables_found += len(tables)
            validated_pages.append(PageData(
                page_num=page_dict['page_num'],
                text=page_dict.get('text', ''),
                width=page_dict.get('width'),
                height=page_dict.get('height'),
                tables=tables,
            ))

        if show_progress:
            print(f" ✓ ({tables_found} tables)", flush=True)

        result = DetectedTablesResult(
            source_pdf=str(source_pdf),
            statistics=self.get_statistics(
                pages_data, len(split_lines(page.get('text', '') for page in pages_data))
            ),
            tables_found=tables_found,
            pages=validated_pages,
        )
        return result.model_dump(mode='json')


class ExtractionService:
    """Service class that orchestrates PDF extraction."""

    def __init__(
        self,
        extractor: PDFTextExtractor,
        strategy: ExtractionStrategy
    ):
        """
        Initialize extraction service.

        Args:
            extractor: PDFTextExtractor instance
            strategy: ExtractionStrategy to use
        """
        self.extractor = extractor
        self.strategy = strategy

    def _read_pages(
        self,
        pdf_path: str | Path,
        user_password: Optional[str],
        owner_password: Optional[str],
        show_progress: bool
    ) -> List[Dict[str, Any]]:
        if self.strategy.uses_detected_tables:
            read = self.extractor.extract_tables
        else:
            read = self.extractor.extract_text
        return read(
            pdf_path,
            user_password=user_password,
            owner_password=owner_password,
            show_progress=show_progress,
        )

    def extract(
        self,
        pdf_path: str | Path,
        user_password: Optional[str] = None,
        owner_password: Optional[str] = None,
        show_progress: bool = False
    ) -> Dict[str, Any]:
        """
        Extract data from PDF.

        Args:
            pdf_path: Path to PDF file
            user_password: Optional user password
            owner_password: Optional owner password
            show_progress: Whether to show progress indicators

        Returns:
            Dictionary with extraction results
        """
        pages_data = self._read_pages(pdf_path, user_password, owner_password, show_progress)
        logger.info("Extracted %d page(s) from %s", len(pages_data), pdf_path)
        return self.strategy.extract(pages_data, str(pdf_path), show_progress=show_progress)

    def extract_table(
        self,
        pdf_path: str | Path,
        user_password: Optional[str] = None,
        owner_password: Optional[str] = None
    ) -> pd.DataFrame:
        """Typed long-format table; only available for fixed-region extraction."""
        if not isinstance(self.strategy, FixedRegionExtractionStrategy):
            raise TypeError("extract_table requires a fixed-region extraction service")
        pages_data = self._read_pages(pdf_path, user_password, owner_password, False)
        return self.strategy.extract_table(pages_data)

    def extract_lines(
        self,
        pdf_path: str | Path,
        user_password: Optional[str] = None,
        owner_password: Optional[str] = None
    ) -> List[LineRecord]:
        """Line records of the whole document, for locating a table region."""
        pages_data = self.extractor.extract_text(
            pdf_path, user_password=user_password, owner_password=owner_password
        )
        return split_lines(page.get('text', '') for page in pages_data)

    def get_summary(self, result: Dict[str, Any]) -> Dict[str, Any]:
        """Get summary information from extraction result."""
        summary = {'pages_processed': result.get('statistics', {}).get('total_pages', 0)}
        if result.get('extraction_mode') == 'detected_tables':
            summary['tables_found'] = result.get('tables_found', 0)
        else:
            summary['rows'] = result.get('row_count', 0)
            summary['columns'] = result.get('columns', [])
        return summary


class ExtractionServiceFactory:
    """Factory class for creating extraction services."""

    @staticmethod
    def create_fixed_region_service(spec: TableSpec) -> ExtractionService:
        """
        Create extraction service for a fixed table region.

        Args:
            spec: Table layout

        Returns:
            ExtractionService configured for fixed-region extraction
        """
        strategy = FixedRegionExtractionStrategy(parser=FixedRegionTableParser(spec))
        return ExtractionService(extractor=PDFTextExtractor(), strategy=strategy)

    @staticmethod
    def create_detected_tables_service(
        table_settings: Optional[Dict[str, Any]] = None
    ) -> ExtractionService:
        """
        Create extraction service returning pdfplumber's detected tables.

        Args:
            table_settings: Overrides for pdfplumber's table finder

        Returns:
            ExtractionService configured for detected-table extraction
        """
        extractor = PDFTextExtractor(table_settings=table_settings)
        return ExtractionService(extractor=extractor, strategy=DetectedTablesExtractionStrategy())
