"""Value objects produced by the profiling engine.

All of them are frozen snapshots owned by the call that built them. The
``to_dict`` helpers give the JSON-serialisable shape handed to the agent.
"""

from dataclasses import dataclass, field
from typing import Any

NUMERIC = "numeric"
STRING = "string"
BOOLEAN = "boolean"
UNKNOWN = "unknown"


@dataclass(frozen=True)
class ColumnStat:
    """Final statistics for one column."""

    name: str
    inferred_type: str
    missing: int
    unique_count: int
    numeric_min: float | None = None
    numeric_max: float | None = None
    sample_values: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "inferred_type": self.inferred_type,
            "missing": self.missing,
            "unique_count": self.unique_count,
            "numeric_min": self.numeric_min,
            "numeric_max": self.numeric_max,
            "sample_values": list(self.sample_values),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ColumnStat":
        numeric_min = data.get("numeric_min")
        numeric_max = data.get("numeric_max")
        return cls(
            name=str(data["name"]),
            inferred_type=str(data.get("inferred_type", UNKNOWN)),
            missing=int(data.get("missing", 0)),
            unique_count=int(data.get("unique_count", 0)),
            numeric_min=float(numeric_min) if numeric_min is not None else None,
            numeric_max=float(numeric_max) if numeric_max is not None else None,
            sample_values=tuple(str(v) for v in data.get("sample_values", ())),
        )


@dataclass(frozen=True)
class DatasetStats:
    """Aggregate statistics for a whole file, columns in header order."""

    file_name: str
    row_count: int
    column_count: int
    columns: tuple[ColumnStat, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_name": self.file_name,
            "row_count": self.row_count,
            "column_count": self.column_count,
            "columns": [col.to_dict() for col in self.columns],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DatasetStats":
        """Rebuild stats from a payload previously returned to the agent.

        ``column_count`` falls back to the number of columns when absent.
        """
        columns = tuple(ColumnStat.from_dict(c) for c in data.get("columns", ()))
        return cls(
            file_name=str(data.get("file_name", "")),
            row_count=int(data.get("row_count", 0)),
            column_count=int(data.get("column_count", len(columns))),
            columns=columns,
        )


@dataclass(frozen=True)
class PreviewResult:
    """Header, total row count and the first few rows of a file."""

    file_name: str
    headers: tuple[str, ...]
    row_count: int
    sample_rows: tuple[dict[str, str], ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_name": self.file_name,
            "headers": list(self.headers),
            "row_count": self.row_count,
            "sample_rows": [dict(row) for row in self.sample_rows],
        }


@dataclass(frozen=True)
class ReplacementSuggestion:
    """Proposed fill value for the missing entries of one column."""

    column: str
    inferred_type: str
    missing: int
    suggested_value: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "column": self.column,
            "inferred_type": self.inferred_type,
            "missing": self.missing,
            "suggested_value": self.suggested_value,
        }
