from __future__ import annotations

"""
Scan Report Renderer.

Turns a resolved PathScan into the plain-text "largest files" report
printed by the CLI. Pure functions only; nothing here touches the disk.
"""

from typing import List

from sizescan.domain.constants import BYTE_UNIT_BASE, BYTE_UNIT_PREFIXES
from sizescan.domain.scan_models import PathScan


def render_large_files_report(scan: PathScan, root_path: str) -> str:
    """
    Render the ranking and totals of a scan.

    Args:
        scan: Aggregated summary of the root.
        root_path: Root path as given by the user.

    Returns:
        str: Multi-line report, or a single line when no file was found.
    """
    if not scan.largest_files:
        return f"No files found under path: {root_path}"

    lines: List[str] = [
        f"Largest {len(scan.largest_files)} file(s) found under path: {root_path}"
    ]
    for fs in scan.largest_files:
        lines.append(
            f"{_percent_of(fs.size, scan.total_size)}%  {format_byte_string(fs.size)}  {fs.path.path}"
        )
    lines.append(
        f"{scan.total_count} total files found, having total size "
        f"{format_byte_string(scan.total_size)} bytes."
    )
    return "\n".join(lines) + "\n"


def render_scan_failure(root_path: str, error: BaseException) -> str:
    return f"Scan of '{root_path}' failed: {type(error).__name__}: {error}"


def format_byte_string(num: int) -> str:
    """
    Format a byte count with decimal units.

    >>> format_byte_string(999)
    '999 B'
    >>> format_byte_string(1500)
    '1.5 KB'
    """
    if num < BYTE_UNIT_BASE:
        return f"{num} B"

    exp = 0
    value = float(num)
    while value >= BYTE_UNIT_BASE and exp < len(BYTE_UNIT_PREFIXES):
        value /= BYTE_UNIT_BASE
        exp += 1
    return f"{value:.1f} {BYTE_UNIT_PREFIXES[exp - 1]}B"


def _percent_of(size: int, total: int) -> int:
    # Zero-byte trees still list their files
    if total <= 0:
        return 0
    return (size * 100) // total
