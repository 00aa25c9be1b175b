"""Command-line entry point for the dataset reporter.

Runs the deterministic pipeline: preview → profile → Markdown report.
The LLM agent is bypassed since the flow is fixed.

Usage:
    python main.py path/to/file.csv
    python main.py path/to/file.csv --output reports/file.md --suggest
    python main.py path/to/file.csv --json
"""

import argparse
import json
import logging
import os
import sys
import time
from pathlib import Path

from dataset_report_agent.config import Config
from dataset_report_agent.core.column_profiler import profile
from dataset_report_agent.core.csv_reader import preview
from dataset_report_agent.core.errors import DatasetReportError
from dataset_report_agent.core.replacement import suggest_replacements
from dataset_report_agent.core.report_renderer import render_report

logging.basicConfig(level=Config.LOG_LEVEL)
logger = logging.getLogger(__name__)


def _default_report_path(csv_path: str) -> str:
    return os.path.join(Config.OUTPUT_DIR, f"{Path(csv_path).stem}_report.md")


def run_pipeline(csv_path: str, output_path: str = "", suggest: bool = False) -> dict:
    """Preview, profile and report on a CSV file.

    Returns:
        Dict with the preview, stats, report path and (optionally)
        replacement suggestions.
    """
    start = time.time()

    preview_result = preview(csv_path)
    logger.info(
        "Previewed %s: %d rows, %d headers",
        preview_result.file_name, preview_result.row_count, len(preview_result.headers),
    )

    stats = profile(csv_path)

    report_path = render_report(stats, output_path or _default_report_path(csv_path))
    logger.info("Wrote report %s", report_path)

    result = {
        "preview": preview_result.to_dict(),
        "stats": stats.to_dict(),
        "report_path": report_path,
    }
    if suggest:
        result["suggestions"] = [s.to_dict() for s in suggest_replacements(csv_path)]

    logger.info("Pipeline complete for %s in %.1fs", csv_path, time.time() - start)
    return result


def _summarize(result: dict) -> str:
    stats = result["stats"]
    lines = [
        f"File: {stats['file_name']}  Rows: {stats['row_count']}  Columns: {stats['column_count']}",
    ]
    for col in stats["columns"]:
        lines.append(
            f"  - {col['name']}: type={col['inferred_type']} "
            f"missing={col['missing']} unique={col['unique_count']}"
        )
    for s in result.get("suggestions", []):
        lines.append(f"  fill {s['column']} with {s['suggested_value']!r}")
    lines.append(f"Report: {result['report_path']}")
    return "\n".join(lines)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Profile a CSV file and write a Markdown dataset report."
    )
    parser.add_argument("file", help="Path to input CSV file")
    parser.add_argument(
        "--output",
        default="",
        help="Report path (default: $DATASET_REPORT_OUTPUT_DIR/<stem>_report.md)",
    )
    parser.add_argument(
        "--suggest",
        action="store_true",
        help="Also suggest fill values for missing entries",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full JSON payload instead of the summary",
    )
    args = parser.parse_args()

    try:
        result = run_pipeline(args.file, args.output, suggest=args.suggest)
    except DatasetReportError:
        logger.exception("Pipeline failed for %s", args.file)
        sys.exit(1)

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print(_summarize(result))


if __name__ == "__main__":  # pragma: no cover
    main()
