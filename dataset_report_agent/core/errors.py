"""Error types raised by the profiling engine.

Soft problems (short/long rows, cells that do not parse as numbers) are
absorbed by the engine and never raised.
"""


class DatasetReportError(Exception):
    """Base class for engine errors surfaced to the caller."""


class DatasetNotFoundError(DatasetReportError, FileNotFoundError):
    """The requested CSV path does not exist or is not readable."""


class ReportWriteError(DatasetReportError, OSError):
    """Writing an output file (or creating its directory) failed."""
