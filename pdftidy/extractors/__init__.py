"""
Extractors turning PDF files into page text and line records.
"""
from .pdf_text_extractor import PDFTextExtractor
from .lines import split_lines, lines_to_frame

__all__ = [
    'PDFTextExtractor',
    'split_lines',
    'lines_to_frame',
]
