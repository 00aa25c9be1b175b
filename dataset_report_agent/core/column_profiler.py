"""Single-pass column profiling over the quote-aware record stream.

One ``ColumnAccumulator`` is created per header entry at the start of a
pass, fed every row, and turned into a ``ColumnStat`` at the end. Nothing
is shared between calls.
"""

import logging
import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from dataset_report_agent.core.csv_reader import (
    ParseStrategy,
    open_records,
    pair_row,
)
from dataset_report_agent.core.models import ColumnStat, DatasetStats
from dataset_report_agent.core.type_inference import infer_type

MAX_SAMPLE_VALUES = 5

_TRUE_TOKEN = "true"
_FALSE_TOKEN = "false"

logger = logging.getLogger(__name__)


def parse_number(value: str) -> float | None:
    """Parse a trimmed cell as a finite float, or return None.

    Digit-group underscores ("1_000") and the nan/inf spellings that
    ``float()`` tolerates are not treated as numbers.
    """
    if "_" in value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


@dataclass
class ColumnAccumulator:
    """Running statistics for one column during a profiling pass."""

    name: str
    total: int = 0
    missing: int = 0
    numeric_count: int = 0
    numeric_sum: float = 0.0
    unique_values: set[str] = field(default_factory=set)
    min: float | None = None
    max: float | None = None
    samples: list[str] = field(default_factory=list)
    value_counts: Counter = field(default_factory=Counter)
    true_count: int = 0
    false_count: int = 0

    def add(self, raw: str) -> None:
        value = raw.strip()
        self.total += 1

        if not value:
            self.missing += 1
            return

        self.unique_values.add(value)
        if len(self.samples) < MAX_SAMPLE_VALUES:
            self.samples.append(value)
        self.value_counts[value] += 1

        lowered = value.lower()
        if lowered == _TRUE_TOKEN:
            self.true_count += 1
        elif lowered == _FALSE_TOKEN:
            self.false_count += 1

        number = parse_number(value)
        if number is None:
            return

        self.numeric_count += 1
        self.numeric_sum += number
        if self.min is None or number < self.min:
            self.min = number
        if self.max is None or number > self.max:
            self.max = number

    @property
    def non_empty(self) -> int:
        return self.total - self.missing

    def to_stat(self, detect_boolean: bool = False) -> ColumnStat:
        return ColumnStat(
            name=self.name,
            inferred_type=infer_type(self, detect_boolean=detect_boolean),
            missing=self.missing,
            unique_count=len(self.unique_values),
            numeric_min=self.min,
            numeric_max=self.max,
            sample_values=tuple(self.samples),
        )


def accumulate(
    header: Sequence[str], records: Iterable[Sequence[str]],
) -> tuple[int, list[ColumnAccumulator]]:
    """Feed every data record into one accumulator per header entry.

    Records shorter than the header contribute an empty value for the
    missing columns; extra cells are dropped.

    Returns:
        Tuple of (row_count, accumulators in header order).
    """
    accumulators = [ColumnAccumulator(name=name) for name in header]
    row_count = 0

    for record in records:
        row = pair_row(header, record)
        row_count += 1
        for acc in accumulators:
            acc.add(row.get(acc.name, ""))

    return row_count, accumulators


def profile_file(file_path: str) -> tuple[str, int, list[ColumnAccumulator]]:
    """Run the accumulation pass over a file.

    A file with no data rows (empty, or header only) yields no
    accumulators at all, so the result never describes columns that were
    never observed.

    Returns:
        Tuple of (file_name, row_count, accumulators).

    Raises:
        DatasetNotFoundError: if the path is missing or unreadable.
    """
    file_name = Path(file_path).name

    with open_records(file_path, ParseStrategy.QUOTED) as records:
        header = next(records, None)
        if header is None:
            logger.debug("Empty file %s", file_path)
            return file_name, 0, []
        row_count, accumulators = accumulate(header, records)

    if row_count == 0:
        logger.debug("No data rows in %s", file_path)
        return file_name, 0, []

    return file_name, row_count, accumulators


def profile(file_path: str) -> DatasetStats:
    """Compute per-column statistics for a CSV file.

    Raises:
        DatasetNotFoundError: if the path is missing or unreadable.
    """
    file_name, row_count, accumulators = profile_file(file_path)
    columns = tuple(acc.to_stat() for acc in accumulators)

    logger.info(
        "Profiled %s: %d rows, %d columns", file_name, row_count, len(columns),
    )
    return DatasetStats(
        file_name=file_name,
        row_count=row_count,
        column_count=len(columns),
        columns=columns,
    )
