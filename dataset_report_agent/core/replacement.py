"""Default-fill suggestions for missing values.

Reuses the accumulators of a profiling pass; boolean detection is on here
because filling a true/false column with its mode reads better as a vote.
"""

from typing import TYPE_CHECKING

from dataset_report_agent.core.column_profiler import profile_file
from dataset_report_agent.core.models import (
    BOOLEAN,
    NUMERIC,
    STRING,
    ReplacementSuggestion,
)
from dataset_report_agent.core.type_inference import infer_type

if TYPE_CHECKING:
    from dataset_report_agent.core.column_profiler import ColumnAccumulator


def suggest_replacement(acc: "ColumnAccumulator", inferred_type: str) -> str:
    """Pick a single value to fill the missing cells of a column.

    - numeric: mean of the parsed values to 2 decimals, "0" if none parsed
    - string: most frequent non-empty value; ties go to the value seen
      first in the file
    - boolean: majority of true/false, ties go to "true"
    - anything else: empty string
    """
    if inferred_type == NUMERIC:
        if acc.numeric_count == 0:
            return "0"
        return f"{acc.numeric_sum / acc.numeric_count:.2f}"

    if inferred_type == STRING:
        # Counter.most_common keeps insertion order among equal counts
        top = acc.value_counts.most_common(1)
        return top[0][0] if top else ""

    if inferred_type == BOOLEAN:
        return "true" if acc.true_count >= acc.false_count else "false"

    return ""


def suggest_replacements(file_path: str) -> list[ReplacementSuggestion]:
    """Suggest a fill value for every column of a CSV file, in header order.

    Raises:
        DatasetNotFoundError: if the path is missing or unreadable.
    """
    _, _, accumulators = profile_file(file_path)

    suggestions = []
    for acc in accumulators:
        inferred = infer_type(acc, detect_boolean=True)
        suggestions.append(ReplacementSuggestion(
            column=acc.name,
            inferred_type=inferred,
            missing=acc.missing,
            suggested_value=suggest_replacement(acc, inferred),
        ))
    return suggestions
