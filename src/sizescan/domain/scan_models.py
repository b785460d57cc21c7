from __future__ import annotations

"""
Scan Domain Data Models.

Defines the immutable values that flow through a scan: the tunable
configuration, resolved file sizes, the mergeable per-subtree summary and
the whole-scan outcome handed back to interface layers (CLI).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from sizescan.domain.path_models import File

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanConfig:
    """
    Per-invocation scan settings.

    Attributes:
        top_n: Maximum number of largest files retained in the ranking.
    """
    top_n: int

    def __post_init__(self) -> None:
        if isinstance(self.top_n, bool) or not isinstance(self.top_n, int) or self.top_n < 1:
            raise ValueError(f"top_n must be a positive integer, received {self.top_n!r}.")


@dataclass(frozen=True)
class FileSize:
    """
    A file together with its resolved byte length.

    Ranking uses ``size`` only (largest first). Two entries with the same
    size occupy the same rank slot, so only one of them is retained in a
    PathScan ranking.
    """
    path: File
    size: int

    @property
    def rank_key(self) -> int:
        """Sort key placing larger files first."""
        return -self.size


@dataclass(frozen=True)
class PathScan:
    """
    Aggregated, bounded summary of one scanned subtree.

    Attributes:
        largest_files: Ranked files, size descending, one entry per size value.
        total_size: Exact byte sum over every file visited.
        total_count: Exact number of files visited.
    """
    largest_files: Tuple[FileSize, ...] = ()
    total_size: int = 0
    total_count: int = 0

    @classmethod
    def empty(cls) -> "PathScan":
        return cls((), 0, 0)

    @classmethod
    def of_file(cls, file_size: FileSize) -> "PathScan":
        return cls((file_size,), file_size.size, 1)


@dataclass(frozen=True)
class ScanOutcome:
    """
    Result of a whole-tree scan: exactly one of ``scan`` or ``error`` is set.
    """
    scan: Optional[PathScan] = None
    error: Optional[OSError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, scan: PathScan) -> "ScanOutcome":
        return cls(scan=scan, error=None)

    @classmethod
    def failure(cls, error: OSError) -> "ScanOutcome":
        return cls(scan=None, error=error)


@dataclass(frozen=True)
class ScanReportResult:
    """
    Unified result object of a complete scan pipeline execution.

    Flattened to plain types so it can be serialized directly (``--json``).

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        root_path: Normalized root that was scanned.
        top_n: Ranking bound used for the scan.
        total_size: Total bytes found under the root.
        total_count: Total files found under the root.
        largest_files: Ranked files as {"path", "size"} dictionaries.
        elapsed_ms: Wall-clock duration of the scan.
        report: Rendered human-readable report text.
    """
    ok: bool
    error: str

    root_path: str
    top_n: int

    total_size: int = 0
    total_count: int = 0
    largest_files: List[Dict[str, Any]] = field(default_factory=list)

    elapsed_ms: int = 0
    report: str = ""

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(
        root_path: str,
        top_n: int,
        scan: PathScan,
        elapsed_ms: int,
        report: str,
) -> ScanReportResult:
    """
    Create a successful scan result instance.

    Args:
        root_path: Normalized root directory scanned.
        top_n: Ranking bound.
        scan: Aggregated summary of the root.
        elapsed_ms: Scan duration.
        report: Rendered report text.

    Returns:
        ScanReportResult: An immutable success result object.
    """
    return ScanReportResult(
        ok=True,
        error="",
        root_path=root_path,
        top_n=top_n,
        total_size=scan.total_size,
        total_count=scan.total_count,
        largest_files=[{"path": fs.path.path, "size": fs.size} for fs in scan.largest_files],
        elapsed_ms=elapsed_ms,
        report=report,
    )


def create_error_result(
        error: str,
        root_path: str,
        top_n: int,
        elapsed_ms: int = 0,
        report: str = "",
) -> ScanReportResult:
    """
    Create a failed scan result instance. No partial totals are carried.

    Args:
        error: Detailed error description.
        root_path: Target root directory.
        top_n: Ranking bound that was requested.
        elapsed_ms: Time spent before the failure was resolved.
        report: Rendered failure line.

    Returns:
        ScanReportResult: An immutable error result object.
    """
    return ScanReportResult(
        ok=False,
        error=error,
        root_path=root_path,
        top_n=top_n,
        elapsed_ms=elapsed_ms,
        report=report or error,
    )
