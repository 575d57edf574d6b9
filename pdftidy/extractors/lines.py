"""
Split per-page text into (page, line, text) records.
"""
import logging
import re
from typing import Iterable, List

import pandas as pd

from pdftidy.models import LineRecord

logger = logging.getLogger(__name__)

LINE_TERMINATOR = re.compile(r'\r\n|\r|\n')


def split_lines(page_texts: Iterable[str]) -> List[LineRecord]:
    """
    Turn the document's page texts into ordered line records.

    Pages are numbered from 1 in input order and lines from 1 within each
    page. An empty page yields a single empty line, and a trailing terminator
    yields a trailing empty line, so every page contributes
    (number of terminators + 1) records.

    Args:
        page_texts: Raw text of each page, in page order

    Returns:
        Line records ordered by (page, line)
    """
    records = []
    for page_num, text in enumerate(page_texts, start=1):
        lines = LINE_TERMINATOR.split(text or '')
        records.extend(
            LineRecord(page=page_num, line=line_num, text=line)
            for line_num, line in enumerate(lines, start=1)
        )
        logger.debug("Page %d: %d lines", page_num, len(lines))
    return records


def lines_to_frame(lines: Iterable[LineRecord]) -> pd.DataFrame:
    """Line records as a DataFrame with page, line and text columns."""
    return pd.DataFrame(
        [(r.page, r.line, r.text) for r in lines],
        columns=['page', 'line', 'text'],
    )
