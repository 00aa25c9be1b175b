"""Persist text content to disk."""

import os
from pathlib import Path

from dataset_report_agent.core.errors import ReportWriteError


def write_text(file_path: str, content: str) -> str:
    """Write content to a path, creating parent directories as needed.

    An existing file is overwritten.

    Returns:
        The absolute path of the written file.

    Raises:
        ReportWriteError: if the directory cannot be created or the file
            cannot be written.
    """
    path = Path(os.path.abspath(file_path))
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ReportWriteError(f"Could not write {path}: {exc}") from exc
    return str(path)
