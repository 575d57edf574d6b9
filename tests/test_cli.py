"""
Tests for the command-line entry point.
"""
import json

import pandas as pd
import pytest

import main


@pytest.fixture
def spec_file(tmp_path):
    path = tmp_path / "spec.json"
    path.write_text(json.dumps({
        "page": 2,
        "first_line": 8,
        "last_line": 10,
        "labels": ["a", "b", "c", "d"],
        "id_columns": ["a"],
        "column_types": {"a": "int", "value": "int"},
    }), encoding="utf-8")
    return path


def test_generate_output_filename():
    assert main.generate_output_filename("docs/report.pdf") == "report_table.csv"
    assert main.generate_output_filename("report.pdf", "_lines.csv") == "report_lines.csv"


def test_spec_to_csv(fake_pdfplumber, pdf_file, spec_file, tmp_path, capsys):
    output = tmp_path / "out.csv"
    code = main.main([str(pdf_file), "--spec", str(spec_file), "-o", str(output)])

    assert code == 0
    table = pd.read_csv(output)
    assert list(table.columns) == ["a", "variable", "value"]
    assert len(table) == 9
    assert table.iloc[0].tolist() == [5, "b", 10]
    assert "Rows: 9" in capsys.readouterr().out


def test_spec_to_json(fake_pdfplumber, pdf_file, spec_file, tmp_path):
    output = tmp_path / "out.json"
    assert main.main([str(pdf_file), "--spec", str(spec_file), "-o", str(output)]) == 0
    result = json.loads(output.read_text(encoding="utf-8"))
    assert result["row_count"] == 9


def test_lines_mode(fake_pdfplumber, pdf_file, tmp_path):
    output = tmp_path / "lines.csv"
    assert main.main([str(pdf_file), "--lines", "-o", str(output)]) == 0
    lines = pd.read_csv(output, keep_default_na=False)
    assert len(lines) == 23
    assert lines.iloc[9].tolist() == [2, 8, "5 10 12 9"]


def test_detected_mode(fake_pdfplumber, pdf_file, tmp_path):
    output = tmp_path / "detected.json"
    assert main.main([str(pdf_file), "--detected", "-o", str(output)]) == 0
    result = json.loads(output.read_text(encoding="utf-8"))
    assert result["extraction_mode"] == "detected_tables"
    assert result["tables_found"] == 0


def test_missing_input(tmp_path, spec_file, capsys):
    code = main.main([str(tmp_path / "missing.pdf"), "--spec", str(spec_file)])
    assert code == 1
    assert "Input file not found" in capsys.readouterr().out


def test_extraction_error_exit_code(fake_pdfplumber, pdf_file, tmp_path, capsys):
    spec_path = tmp_path / "bad.json"
    spec_path.write_text(json.dumps({
        "page": 5, "first_line": 1, "last_line": 2, "labels": ["a"],
    }), encoding="utf-8")
    code = main.main([str(pdf_file), "--spec", str(spec_path), "-o", str(tmp_path / "x.csv")])
    assert code == 1
    assert "page 5 is not in the document" in capsys.readouterr().out


def test_mode_is_required(pdf_file):
    with pytest.raises(SystemExit):
        main.main([str(pdf_file)])


def test_malformed_spec_file_exit_code(fake_pdfplumber, pdf_file, tmp_path, capsys):
    spec_path = tmp_path / "broken.json"
    spec_path.write_text('{"page": 2,', encoding="utf-8")
    code = main.main([str(pdf_file), "--spec", str(spec_path), "-o", str(tmp_path / "x.csv")])
    assert code == 1
    assert "Error" in capsys.readouterr().out


def test_non_pdf_input_exit_code(tmp_path, capsys):
    notes = tmp_path / "notes.pdf"
    notes.write_text("not a PDF at all", encoding="utf-8")
    code = main.main([str(notes), "--lines", "-o", str(tmp_path / "lines.csv")])
    assert code == 1
    assert "Could not read" in capsys.readouterr().out


def test_capturing_delimiter_in_spec_exit_code(fake_pdfplumber, pdf_file, tmp_path, capsys):
    spec_path = tmp_path / "spec.json"
    spec_path.write_text(json.dumps({
        "page": 2, "first_line": 8, "last_line": 10,
        "labels": ["a", "b", "c", "d"], "delimiter": "( )",
    }), encoding="utf-8")
    code = main.main([str(pdf_file), "--spec", str(spec_path), "-o", str(tmp_path / "x.csv")])
    assert code == 1
    assert "capturing groups" in capsys.readouterr().out
