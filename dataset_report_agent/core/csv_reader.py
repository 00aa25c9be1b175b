"""Record reader for comma-separated files, plus the quick preview pass.

Two parsing strategies sit behind ``open_records``:

- ``NAIVE`` splits every line on a literal comma with no quoting support.
  It backs ``preview``, which only needs headers, a row count and a few
  sample rows.
- ``QUOTED`` uses the ``csv`` module, so quoted fields containing commas
  or newlines stay intact. It backs the statistics pass.

The two can disagree on files with quoted commas; that difference is kept.
"""

import csv
import enum
import os
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from dataset_report_agent.core.errors import DatasetNotFoundError
from dataset_report_agent.core.models import PreviewResult

PREVIEW_SAMPLE_ROWS = 10

_ENCODING_SAMPLE_BYTES = 65536  # 64KB sample for detection
_DEFAULT_ENCODING = "utf-8"
# csv rejects fields over 128KB by default; C long max on every platform
_FIELD_SIZE_LIMIT = 2**31 - 1


class ParseStrategy(enum.Enum):
    """How a line of text is split into cells."""
    NAIVE = "naive"
    QUOTED = "quoted"


def resolve_csv_path(file_path: str) -> Path:
    """Return the path if it names an existing, readable regular file.

    Raises:
        DatasetNotFoundError: otherwise.
    """
    path = Path(file_path)
    if not path.is_file() or not os.access(path, os.R_OK):
        raise DatasetNotFoundError(f"CSV file not found: {file_path}")
    return path


def detect_encoding(file_path: Path) -> str:
    """Detect the character encoding of a text file from its first 64KB.

    UTF-8 and ASCII are read as ``utf-8-sig`` so a byte-order mark never
    ends up inside the first column name.
    """
    from charset_normalizer import from_bytes

    with open(file_path, "rb") as fh:
        sample = fh.read(_ENCODING_SAMPLE_BYTES)

    if not sample:
        return _DEFAULT_ENCODING

    result = from_bytes(sample).best()
    if result is None:
        return _DEFAULT_ENCODING

    encoding = result.encoding
    if encoding.lower().replace("-", "").replace("_", "") in ("utf8", "ascii"):
        return "utf-8-sig"
    return encoding


def _split_lines(lines: Iterator[str]) -> Iterator[list[str]]:
    for line in lines:
        yield line.rstrip("\r\n").split(",")


def _parse_quoted(lines: Iterator[str]) -> Iterator[list[str]]:
    for record in csv.reader(lines):
        if record:  # blank line
            yield record


@contextmanager
def open_records(
    file_path: str, strategy: ParseStrategy = ParseStrategy.QUOTED,
) -> Iterator[Iterator[list[str]]]:
    """Open a CSV file and yield a lazy iterator over its records.

    The first record is the header. The file is closed when the ``with``
    block exits, whether or not the iterator was exhausted.

    Args:
        file_path: Path to the CSV file.
        strategy: Which splitting policy to apply.

    Raises:
        DatasetNotFoundError: if the path is missing or unreadable.
    """
    path = resolve_csv_path(file_path)
    encoding = detect_encoding(path)

    with open(path, "r", encoding=encoding, errors="replace", newline="") as fh:
        if strategy is ParseStrategy.NAIVE:
            yield _split_lines(fh)
            return

        previous_limit = csv.field_size_limit(_FIELD_SIZE_LIMIT)
        try:
            yield _parse_quoted(fh)
        finally:
            csv.field_size_limit(previous_limit)


def pair_row(header: Sequence[str], record: Sequence[str]) -> dict[str, str]:
    """Map header names to cells positionally.

    Only the shorter of the two lengths is covered; duplicate header names
    keep the last value.
    """
    return dict(zip(header, record))


def preview(file_path: str) -> PreviewResult:
    """Read headers, count every data row and keep the first 10 rows.

    Uses the naive comma split. Header cells are trimmed, data cells are
    left as they are.
    """
    sample_rows: list[dict[str, str]] = []
    row_count = 0

    with open_records(file_path, ParseStrategy.NAIVE) as records:
        first = next(records, None)
        headers = [cell.strip() for cell in first] if first is not None else []

        for record in records:
            row_count += 1
            if len(sample_rows) < PREVIEW_SAMPLE_ROWS:
                sample_rows.append(pair_row(headers, record))

    return PreviewResult(
        file_name=Path(file_path).name,
        headers=tuple(headers),
        row_count=row_count,
        sample_rows=tuple(sample_rows),
    )
