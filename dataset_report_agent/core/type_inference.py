"""Column type inference from a finished accumulator."""

from typing import TYPE_CHECKING

from dataset_report_agent.core.models import BOOLEAN, NUMERIC, STRING, UNKNOWN

if TYPE_CHECKING:
    from dataset_report_agent.core.column_profiler import ColumnAccumulator

NUMERIC_THRESHOLD = 0.9


def infer_type(acc: "ColumnAccumulator", detect_boolean: bool = False) -> str:
    """Label a column as numeric, string or unknown.

    A column is numeric when at least 90% of all its cells (empty cells
    included) parse as numbers. With ``detect_boolean`` a column whose
    non-empty values are all true/false tokens is labelled boolean; the
    statistics report never enables it.
    """
    if acc.total == 0:
        return UNKNOWN

    if detect_boolean and acc.non_empty > 0:
        if acc.true_count + acc.false_count == acc.non_empty:
            return BOOLEAN

    if acc.numeric_count / acc.total >= NUMERIC_THRESHOLD:
        return NUMERIC
    return STRING
