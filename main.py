#!/usr/bin/env python3
"""
Main entry point for pdftidy.
Reads a PDF, then either dumps its line records, extracts a fixed table
region described by a JSON spec, or collects pdfplumber's detected tables.
"""
import argparse
import logging
import sys
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from pdftidy.config import load_table_spec
from pdftidy.exceptions import PdfTidyError
from pdftidy.extractors import PDFTextExtractor, lines_to_frame, split_lines
from pdftidy.services import ExtractionServiceFactory
from pdftidy.utils import save_json, save_table


def generate_output_filename(input_path: str, suffix: str = "_table.csv") -> str:
    """
    Generate a meaningful output filename based on input filename.

    Args:
        input_path: Path to input PDF file
        suffix: Ending appended to the file stem

    Returns:
        Output filename (e.g., report.pdf -> report_table.csv)
    """
    return f"{Path(input_path).stem}{suffix}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pdftidy',
        description='Extract a fixed table region from a PDF as a long-format table',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Find the page and line numbers of the table
  pdftidy report.pdf --lines

  # Extract the region described in spec.json to report_table.csv
  pdftidy report.pdf --spec spec.json
  pdftidy report.pdf --spec spec.json -o table.json

  # Tables pdfplumber segments on its own
  pdftidy report.pdf --detected
        """
    )
    parser.add_argument('input', type=str, help='Input PDF file path (required)')
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument('--spec', type=str, default=None,
                      help='JSON file describing the table region and reshaping')
    mode.add_argument('--lines', action='store_true',
                      help='Write every (page, line, text) record instead of a table')
    mode.add_argument('--detected', action='store_true',
                      help="Write pdfplumber's automatically detected tables as JSON")
    parser.add_argument('-o', '--output', type=str, default=None,
                        help='Output file path (.csv or .json; auto-generated if not provided)')
    parser.add_argument('--password', type=str, default=None,
                        help='User password for encrypted PDFs')
    parser.add_argument('--owner-password', type=str, default=None,
                        help='Owner password for encrypted PDFs')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s %(name)s %(levelname)s: %(message)s'
        )

    # Validate input file exists
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {args.input}")
        return 1

    passwords = {'user_password': args.password, 'owner_password': args.owner_password}
    print(f"📄 Processing: {args.input}", flush=True)

    try:
        if args.lines:
            output = args.output or generate_output_filename(args.input, "_lines.csv")
            print("🔄 Step 1/2: Extracting lines...", end="", flush=True)
            pages_data = PDFTextExtractor().extract_text(input_path, **passwords)
            lines = split_lines(page["text"] for page in pages_data)
            print(f" ✓ ({len(lines)} lines)", flush=True)
            print("🔄 Step 2/2: Saving results...", end="", flush=True)
            save_table(lines_to_frame(lines), output)
            print(" ✓", flush=True)

        elif args.detected:
            output = args.output or generate_output_filename(args.input, "_detected.json")
            service = ExtractionServiceFactory.create_detected_tables_service()
            print("🔄 Step 1/3: Extracting text and tables from PDF...", flush=True)
            result = service.extract(input_path, show_progress=True, **passwords)
            print("🔄 Step 3/3: Saving results...", end="", flush=True)
            save_json(result, output)
            print(" ✓", flush=True)
            summary = service.get_summary(result)
            print(f"\n📊 Extraction Summary:")
            print(f"  - Tables detected: {summary['tables_found']}")
            print(f"  - Pages processed: {summary['pages_processed']}")

        else:
            output = args.output or generate_output_filename(args.input)
            spec = load_table_spec(args.spec)
            service = ExtractionServiceFactory.create_fixed_region_service(spec)
            print("🔄 Step 1/3: Extracting text from PDF...", flush=True)
            result = service.extract(input_path, show_progress=True, **passwords)
            print("🔄 Step 3/3: Saving results...", end="", flush=True)
            if output.lower().endswith('.json'):
                save_json(result, output)
            else:
                save_table(pd.DataFrame(result["rows"], columns=result["columns"]), output)
            print(" ✓", flush=True)
            summary = service.get_summary(result)
            print(f"\n📊 Extraction Summary:")
            print(f"  - Rows: {summary['rows']}")
            print(f"  - Columns: {', '.join(summary['columns'])}")
            print(f"  - Pages processed: {summary['pages_processed']}")

    # ValueError covers malformed JSON in the spec file
    except (PdfTidyError, ValidationError, ValueError, OSError) as e:
        print(f"\n❌ Error: {e}", flush=True)
        return 1

    print(f"\n✅ Done! Results saved to: {output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
