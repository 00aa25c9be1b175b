"""Tests for the record reader, preview pass and file sink."""

import csv
import os
from pathlib import Path

import pytest

from dataset_report_agent.core.csv_reader import (
    ParseStrategy,
    detect_encoding,
    open_records,
    pair_row,
    preview,
    resolve_csv_path,
)
from dataset_report_agent.core.errors import (
    DatasetNotFoundError,
    DatasetReportError,
    ReportWriteError,
)
from dataset_report_agent.core.file_sink import write_text


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------

class TestResolvePath:

    def test_existing_file(self, sample_csv):
        assert resolve_csv_path(sample_csv).name == "sample.csv"

    def test_missing_file(self):
        with pytest.raises(DatasetNotFoundError, match="CSV file not found"):
            resolve_csv_path("/nonexistent/file.csv")

    def test_directory_is_not_a_file(self, fixtures_dir):
        with pytest.raises(DatasetNotFoundError):
            resolve_csv_path(str(fixtures_dir))

    def test_not_found_is_a_file_not_found_error(self):
        with pytest.raises(FileNotFoundError):
            resolve_csv_path("/nonexistent/file.csv")


# ---------------------------------------------------------------------------
# Record reader
# ---------------------------------------------------------------------------

class TestOpenRecords:

    def test_quoted_keeps_embedded_commas_and_newlines(self, quoted_csv):
        with open_records(quoted_csv, ParseStrategy.QUOTED) as records:
            rows = list(records)
        assert rows[0] == ["id", "note", "amount"]
        assert rows[1] == ["1", "hello, world", "10"]
        assert rows[2] == ["2", "multi\nline", "20"]
        assert len(rows) == 4

    def test_naive_splits_on_every_comma(self, quoted_csv):
        with open_records(quoted_csv, ParseStrategy.NAIVE) as records:
            rows = list(records)
        assert rows[1] == ["1", '"hello', ' world"', "10"]
        # The quoted newline starts a new line in the naive reader
        assert len(rows) == 5

    def test_naive_strips_line_terminators(self, tmp_path):
        path = tmp_path / "crlf.csv"
        path.write_bytes(b"a,b\r\n1,2\r\n")
        with open_records(str(path), ParseStrategy.NAIVE) as records:
            assert list(records) == [["a", "b"], ["1", "2"]]

    def test_quoted_skips_blank_lines(self, tmp_path):
        path = tmp_path / "blank.csv"
        path.write_text("a,b\n1,2\n\n3,4\n\n", encoding="utf-8")
        with open_records(str(path)) as records:
            assert list(records) == [["a", "b"], ["1", "2"], ["3", "4"]]

    def test_quoted_field_larger_than_csv_default_limit(self, tmp_path):
        big = "x" * 200_000
        path = tmp_path / "big.csv"
        path.write_text(f'a,b\n"{big}",1\n', encoding="utf-8")
        limit_before = csv.field_size_limit()
        with open_records(str(path)) as records:
            assert list(records) == [["a", "b"], [big, "1"]]
        assert csv.field_size_limit() == limit_before

    def test_file_closed_when_iteration_stops_early(self, sample_csv):
        with open_records(sample_csv) as records:
            next(records)
            handle_records = records
        with pytest.raises((ValueError, StopIteration)):
            next(handle_records)

    def test_missing_file_raises(self):
        with pytest.raises(DatasetNotFoundError):
            with open_records("/nonexistent/file.csv"):
                pass

    def test_bom_is_not_part_of_header(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_text("\ufeffname,age\nAlice,30\n", encoding="utf-8")
        with open_records(str(path)) as records:
            assert next(records) == ["name", "age"]

    def test_empty_file_encoding_defaults_to_utf8(self, empty_csv):
        assert detect_encoding(Path(empty_csv)) == "utf-8"


class TestPairRow:

    def test_equal_lengths(self):
        assert pair_row(["a", "b"], ["1", "2"]) == {"a": "1", "b": "2"}

    def test_short_record_drops_missing_cells(self):
        assert pair_row(["a", "b", "c"], ["1"]) == {"a": "1"}

    def test_long_record_drops_extra_cells(self):
        assert pair_row(["a"], ["1", "2", "3"]) == {"a": "1"}

    def test_duplicate_header_keeps_last_value(self):
        assert pair_row(["a", "a"], ["1", "2"]) == {"a": "2"}


# ---------------------------------------------------------------------------
# Preview
# ---------------------------------------------------------------------------

class TestPreview:

    def test_counts_all_rows_and_samples_ten(self, fifteen_rows_csv):
        result = preview(fifteen_rows_csv)
        assert result.row_count == 15
        assert len(result.sample_rows) == 10
        assert result.sample_rows[0] == {"id": "1", "value": "v1"}
        assert result.sample_rows[-1] == {"id": "10", "value": "v10"}

    def test_headers_and_file_name(self, sample_csv):
        result = preview(sample_csv)
        assert result.file_name == "sample.csv"
        assert result.headers == ("Name", "Age", "City", "Salary")
        assert result.row_count == 5

    def test_headers_are_trimmed_values_are_not(self, tmp_path):
        path = tmp_path / "spaces.csv"
        path.write_text(" a , b \n 1 ,2\n", encoding="utf-8")
        result = preview(str(path))
        assert result.headers == ("a", "b")
        assert result.sample_rows[0] == {"a": " 1 ", "b": "2"}

    def test_naive_split_differs_from_quoted_parse(self, quoted_csv):
        # Preview ignores quoting: the embedded newline adds a row
        result = preview(quoted_csv)
        assert result.row_count == 4
        assert result.sample_rows[0]["note"] == '"hello'

    def test_header_only_file(self, header_only_csv):
        result = preview(header_only_csv)
        assert result.headers == ("id", "label")
        assert result.row_count == 0
        assert result.sample_rows == ()

    def test_empty_file(self, empty_csv):
        result = preview(empty_csv)
        assert result.headers == ()
        assert result.row_count == 0

    def test_missing_file(self):
        with pytest.raises(DatasetNotFoundError):
            preview("/nonexistent/file.csv")

    def test_to_dict_is_plain(self, sample_csv):
        payload = preview(sample_csv).to_dict()
        assert payload["headers"] == ["Name", "Age", "City", "Salary"]
        assert isinstance(payload["sample_rows"], list)
        assert payload["sample_rows"][0]["Name"] == "Alice"


# ---------------------------------------------------------------------------
# File sink
# ---------------------------------------------------------------------------

class TestWriteText:

    def test_creates_parent_directories(self, tmp_path):
        target = tmp_path / "a" / "b" / "c" / "out.txt"
        written = write_text(str(target), "hello")
        assert written == str(target)
        assert target.read_text(encoding="utf-8") == "hello"

    def test_returns_absolute_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        written = write_text("relative/out.md", "x")
        assert os.path.isabs(written)
        assert written.endswith(os.path.join("relative", "out.md"))
        assert (tmp_path / "relative" / "out.md").read_text(encoding="utf-8") == "x"

    def test_overwrites_existing_file(self, tmp_path):
        target = tmp_path / "out.txt"
        target.write_text("old", encoding="utf-8")
        write_text(str(target), "new")
        assert target.read_text(encoding="utf-8") == "new"

    def test_parent_is_a_file(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(ReportWriteError):
            write_text(str(blocker / "out.txt"), "x")

    def test_write_error_hierarchy(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(OSError):
            write_text(str(blocker / "out.txt"), "x")
        with pytest.raises(DatasetReportError):
            write_text(str(blocker / "out.txt"), "x")
