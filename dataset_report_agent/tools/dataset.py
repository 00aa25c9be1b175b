"""Dataset tools exposed to the agent.

Each tool wraps one engine operation, takes plain string/dict arguments
and returns a JSON-serialisable dict. Failures come back as
``{"error": ...}`` so the model can read them and decide what to do.
"""

import logging
import os
from pathlib import Path
from typing import Any

from google.adk.tools import ToolContext

from dataset_report_agent.config import Config
from dataset_report_agent.core import replacement
from dataset_report_agent.core.column_profiler import profile
from dataset_report_agent.core.csv_reader import preview
from dataset_report_agent.core.errors import DatasetNotFoundError, ReportWriteError
from dataset_report_agent.core.file_sink import write_text
from dataset_report_agent.core.models import DatasetStats
from dataset_report_agent.core.report_renderer import render_report

logger = logging.getLogger(__name__)


def _resolve_report_path(output_path: str, file_name: str) -> str:
    """Resolve the report path, generating a default if not provided."""
    if output_path:
        return os.path.abspath(output_path)
    stem = Path(file_name).stem or "dataset"
    return os.path.abspath(os.path.join(Config.OUTPUT_DIR, f"{stem}_report.md"))


def read_csv(file_path: str, tool_context: ToolContext = None) -> dict[str, Any]:
    """Read a CSV file and return headers, total row count and up to 10 sample rows.

    Fast preview: lines are split on commas without quote handling.

    Args:
        file_path: Path to the CSV file.
    """
    try:
        result = preview(file_path)
    except DatasetNotFoundError as exc:
        logger.warning("read_csv failed: %s", exc)
        return {"error": str(exc), "file_path": file_path}

    if tool_context is not None:
        tool_context.state["current_file"] = file_path

    return result.to_dict()


def compute_stats(file_path: str, tool_context: ToolContext = None) -> dict[str, Any]:
    """Compute per-column statistics for a CSV file.

    Returns for each column: name, inferred type (numeric, string or
    unknown), missing count, unique count, numeric min/max and up to 5
    sample values. Profiles ALL columns in one call.

    Args:
        file_path: Path to the CSV file.
    """
    try:
        stats = profile(file_path)
    except DatasetNotFoundError as exc:
        logger.warning("compute_stats failed: %s", exc)
        return {"error": str(exc), "file_path": file_path}

    payload = stats.to_dict()
    if tool_context is not None:
        tool_context.state["current_file"] = file_path
        tool_context.state["last_stats"] = payload

    return payload


def suggest_replacements(file_path: str, tool_context: ToolContext = None) -> dict[str, Any]:
    """Suggest one value per column for filling missing entries.

    Numeric columns get their mean (2 decimals), text columns their most
    frequent value, true/false columns the majority token.

    Args:
        file_path: Path to the CSV file.
    """
    try:
        suggestions = replacement.suggest_replacements(file_path)
    except DatasetNotFoundError as exc:
        logger.warning("suggest_replacements failed: %s", exc)
        return {"error": str(exc), "file_path": file_path}

    return {
        "file_name": Path(file_path).name,
        "suggestions": [s.to_dict() for s in suggestions],
    }


def save_file(path: str, content: str, tool_context: ToolContext = None) -> dict[str, Any]:
    """Save text content to a file path, creating folders as needed.

    Args:
        path: Destination file path. An existing file is overwritten.
        content: Text to write.
    """
    try:
        output_path = write_text(path, content)
    except ReportWriteError as exc:
        logger.warning("save_file failed: %s", exc)
        return {"error": str(exc), "output_path": path}

    return {"status": "success", "output_path": output_path}


def _stats_from_state(tool_context: ToolContext, file_path: str) -> dict | None:
    """Return last_stats from state if it describes the requested file."""
    if tool_context is None:
        return None
    last_stats = tool_context.state.get("last_stats")
    if not last_stats:
        return None
    if file_path and last_stats.get("file_name") != Path(file_path).name:
        return None
    return last_stats


def save_stats_md(
    path: str = "",
    stats: dict | None = None,
    file_path: str = "",
    tool_context: ToolContext = None,
) -> dict[str, Any]:
    """Save dataset statistics to a Markdown report file.

    Uses, in order: the stats passed in, the stats from the last
    compute_stats call (only when no file_path is given or it names the
    same file), or a fresh profile of file_path.

    Args:
        path: Destination .md path. Defaults to {output_dir}/{stem}_report.md.
        stats: A payload previously returned by compute_stats.
        file_path: CSV file to report on.
    """
    if not stats:
        stats = _stats_from_state(tool_context, file_path)

    try:
        if stats:
            if not isinstance(stats, dict):
                return {"error": "Invalid stats payload: expected an object"}
            dataset_stats = DatasetStats.from_dict(stats)
        elif file_path:
            dataset_stats = profile(file_path)
        else:
            return {
                "error": "No statistics available. Run compute_stats or pass file_path.",
            }
    except DatasetNotFoundError as exc:
        logger.warning("save_stats_md failed: %s", exc)
        return {"error": str(exc), "file_path": file_path}
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        return {"error": f"Invalid stats payload: {exc}"}

    output_path = _resolve_report_path(path, dataset_stats.file_name)
    try:
        written = render_report(dataset_stats, output_path)
    except ReportWriteError as exc:
        logger.warning("save_stats_md failed: %s", exc)
        return {"error": str(exc), "output_path": output_path}

    return {
        "status": "success",
        "output_path": written,
        "format": "markdown",
        "rows": dataset_stats.row_count,
        "columns": dataset_stats.column_count,
    }
