"""
Tests for TableSpec validation and loading layouts from JSON.
"""
import json

import pytest
from pydantic import ValidationError

from pdftidy.config import load_table_spec
from pdftidy.models import LineRecord, TableSpec


def make_spec(**overrides):
    values = {
        "page": 2,
        "first_line": 8,
        "last_line": 10,
        "labels": ["a", "b", "c", "d"],
        "id_columns": ["a"],
    }
    values.update(overrides)
    return TableSpec(**values)


def test_defaults():
    spec = make_spec()
    assert spec.delimiter == r"\s+"
    assert spec.value_columns is None
    assert spec.variable_name == "variable"
    assert spec.value_name == "value"
    assert spec.column_types == {}
    assert spec.line_range == (8, 10)


@pytest.mark.parametrize("overrides", [
    {"page": 0},
    {"first_line": 11},
    {"labels": []},
    {"labels": ["a", "a", "c", "d"]},
    {"labels": ["a", "", "c", "d"]},
    {"id_columns": ["z"]},
    {"value_columns": ["b", "z"]},
    {"value_columns": "y(\\d+"},
    {"delimiter": "["},
    {"delimiter": "x*"},
    {"column_types": {"a": "date"}},
    {"variable_name": "value"},
    {"variable_name": "a"},
])
def test_invalid_layouts_are_rejected(overrides):
    with pytest.raises(ValidationError):
        make_spec(**overrides)


def test_line_record_rejects_zero_line():
    with pytest.raises(ValidationError):
        LineRecord(page=1, line=0, text="")


def test_line_record_is_immutable():
    record = LineRecord(page=1, line=1, text="x")
    with pytest.raises(ValidationError):
        record.text = "y"


def test_load_table_spec(tmp_path):
    path = tmp_path / "spec.json"
    path.write_text(json.dumps({
        "page": 2,
        "first_line": 8,
        "last_line": 10,
        "labels": ["n_patches", "y2015", "y2016", "y2017"],
        "id_columns": ["n_patches"],
        "value_columns": r"y(\d+)",
        "variable_name": "year",
        "column_types": {"n_patches": "int", "year": "int", "value": "int"},
    }), encoding="utf-8")

    spec = load_table_spec(path)
    assert spec.value_columns == r"y(\d+)"
    assert spec.column_types["year"] == "int"


def test_load_table_spec_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_table_spec(tmp_path / "nope.json")


def test_load_table_spec_invalid(tmp_path):
    path = tmp_path / "spec.json"
    path.write_text(json.dumps({"page": 1, "first_line": 1}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_table_spec(path)


def test_delimiter_with_capturing_group_is_rejected():
    with pytest.raises(ValidationError, match="capturing groups"):
        make_spec(delimiter="( )")


def test_delimiter_with_non_capturing_group_is_accepted():
    assert make_spec(delimiter="(?: |\t)+").delimiter == "(?: |\t)+"
