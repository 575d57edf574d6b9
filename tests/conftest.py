"""
Pytest configuration and shared fixtures for pdftidy tests.
"""
import pytest
from hypothesis import settings
from pdfminer.pdfdocument import PDFPasswordIncorrect

from pdftidy.extractors import pdf_text_extractor

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.load_profile("dev")


def build_page_texts():
    """Three pages; page 2 has 20 lines with a small table on lines 8-10."""
    page_two = [f"filler line {n}" for n in range(1, 21)]
    page_two[7] = "5 10 12 9"
    page_two[8] = "6  11\t13 10"
    page_two[9] = "7 9 14 8"
    return [
        "Survey report\nSummary",
        "\n".join(page_two),
        "Appendix",
    ]


@pytest.fixture
def page_texts():
    return build_page_texts()


class FakePage:
    def __init__(self, text, tables=None, width=612.0, height=792.0):
        self._text = text
        self._tables = tables or []
        self.width = width
        self.height = height
        self.table_settings = None

    def extract_text(self):
        return self._text

    def extract_tables(self, table_settings=None):
        self.table_settings = table_settings
        return self._tables


class FakePDF:
    def __init__(self, pages):
        self.pages = pages
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False


class FakePdfplumber:
    """Stands in for pdfplumber.open and records every call."""

    def __init__(self, pages, password=None):
        self.pages = pages
        self.password = password
        self.calls = []
        self.opened = []

    def open(self, path, password=None):
        self.calls.append((path, password))
        if self.password is not None and password != self.password:
            raise PDFPasswordIncorrect()
        pdf = FakePDF(self.pages)
        self.opened.append(pdf)
        return pdf


@pytest.fixture
def pdf_file(tmp_path):
    path = tmp_path / "report.pdf"
    path.write_bytes(b"%PDF-1.4\n")
    return path


@pytest.fixture
def fake_pdfplumber(monkeypatch):
    """Patch pdfplumber.open with a fake serving the three sample pages."""
    fake = FakePdfplumber([FakePage(text) for text in build_page_texts()])
    monkeypatch.setattr(pdf_text_extractor.pdfplumber, "open", fake.open)
    return fake
