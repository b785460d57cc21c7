from __future__ import annotations

"""
Scan pipeline.

Coordinates one complete run on behalf of the interface layer:
1. Validates configuration and normalizes the root path.
2. Classifies the root as File or Directory through the Filesystem.
3. Executes the concurrent tree scan, timing it.
4. Renders the report (or the failure line) and packs a ScanReportResult.
"""

import logging
import os
import time
from typing import Any, Dict, Optional

from sizescan.core.analysis.report_renderer import (
    render_large_files_report,
    render_scan_failure,
)
from sizescan.core.pipeline.validator import validate_config
from sizescan.core.services.scanner import scan_tree
from sizescan.domain.scan_models import (
    ScanReportResult,
    create_error_result,
    create_success_result,
)
from sizescan.infra.fs import Filesystem, LocalFilesystem, normalize_path

logger = logging.getLogger(__name__)


def run_scan(
        config: Optional[Dict[str, Any]],
        filesystem: Optional[Filesystem] = None,
) -> ScanReportResult:
    """
    Run a full scan described by ``config``.

    Args:
        config: Raw configuration (validated here, non-strict).
        filesystem: Filesystem capability; defaults to LocalFilesystem.

    Returns:
        ScanReportResult: Success with totals and report, or a failure result.
    """
    clean_conf, warnings = validate_config(config or {}, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    root_path = normalize_path(clean_conf["input_path"], os.getcwd())
    top_n = clean_conf["top_n"]
    max_workers = clean_conf["max_workers"] or None
    fs = filesystem or LocalFilesystem()

    try:
        root = fs.classify(root_path)
    except OSError as e:
        logger.error(f"Cannot classify scan root: {e}")
        return create_error_result(
            error=f"{type(e).__name__}: {e}",
            root_path=root_path,
            top_n=top_n,
            report=render_scan_failure(root_path, e),
        )

    start = time.monotonic()
    outcome = scan_tree(root, top_n, fs, max_workers=max_workers)
    elapsed_ms = int((time.monotonic() - start) * 1000)

    if not outcome.ok:
        return create_error_result(
            error=f"{type(outcome.error).__name__}: {outcome.error}",
            root_path=root_path,
            top_n=top_n,
            elapsed_ms=elapsed_ms,
            report=render_scan_failure(root_path, outcome.error),
        )

    report = render_large_files_report(outcome.scan, root_path) + f"\nElapsed {elapsed_ms}ms"
    return create_success_result(
        root_path=root_path,
        top_n=top_n,
        scan=outcome.scan,
        elapsed_ms=elapsed_ms,
        report=report,
    )
