"""Markdown rendering of dataset statistics."""

import re

from dataset_report_agent.core.file_sink import write_text
from dataset_report_agent.core.models import DatasetStats

_LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")

_TABLE_HEADER = "| Name | Type | Missing | Unique | Min | Max | Sample values |"
_TABLE_DIVIDER = "|------|------|---------|--------|-----|-----|---------------|"


def escape_markdown(value: str) -> str:
    """Make a string safe for a Markdown table cell."""
    escaped = value.replace("|", "\\|")
    escaped = _LINE_BREAK_PATTERN.sub(" ", escaped)
    return escaped.strip()


def _format_bound(value: float | None) -> str:
    return "" if value is None else str(value)


def render_markdown(stats: DatasetStats) -> str:
    """Render the statistics as a self-contained Markdown document.

    Columns appear in their original header order.
    """
    lines = [
        f"# Dataset Report: {stats.file_name}",
        "",
        f"- Total rows: {stats.row_count}",
        f"- Total columns: {stats.column_count}",
        "",
        "## Columns",
        _TABLE_HEADER,
        _TABLE_DIVIDER,
    ]

    for col in stats.columns:
        samples = ", ".join(escape_markdown(v) for v in col.sample_values)
        lines.append(
            f"| {escape_markdown(col.name)} | {col.inferred_type} | "
            f"{col.missing} | {col.unique_count} | "
            f"{_format_bound(col.numeric_min)} | {_format_bound(col.numeric_max)} | "
            f"{samples} |"
        )

    return "\n".join(lines) + "\n"


def render_report(stats: DatasetStats, file_path: str) -> str:
    """Render the statistics and write them to a Markdown file.

    Returns:
        The absolute path of the written report.

    Raises:
        ReportWriteError: if the report cannot be written.
    """
    return write_text(file_path, render_markdown(stats))
