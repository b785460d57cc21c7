from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. PathScan constructors and ScanConfig validation.
2. Immutability of frozen dataclasses.
3. Data integrity of ScanReportResult factories (Success/Error).
"""

import dataclasses

import pytest

from sizescan.domain.path_models import File
from sizescan.domain.scan_models import (
    FileSize,
    PathScan,
    ScanConfig,
    ScanOutcome,
    ScanReportResult,
    create_error_result,
    create_success_result,
)


def test_path_scan_constructors() -> None:
    fs = FileSize(File("/data/big.iso"), 4096)

    assert PathScan.empty() == PathScan((), 0, 0)
    assert PathScan.of_file(fs) == PathScan((fs,), 4096, 1)


def test_rank_key_orders_largest_first() -> None:
    small = FileSize(File("s"), 1)
    large = FileSize(File("l"), 100)

    assert sorted([small, large], key=lambda f: f.rank_key) == [large, small]


def test_models_are_frozen() -> None:
    scan = PathScan.empty()
    with pytest.raises(dataclasses.FrozenInstanceError):
        scan.total_size = 10  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        File("x").path = "y"  # type: ignore[misc]


@pytest.mark.parametrize("top_n", [0, -3, True, "5"])
def test_scan_config_rejects_invalid_top_n(top_n) -> None:
    with pytest.raises(ValueError):
        ScanConfig(top_n)


def test_scan_outcome_is_exclusive() -> None:
    ok = ScanOutcome.success(PathScan.empty())
    failed = ScanOutcome.failure(OSError("denied"))

    assert ok.ok and ok.error is None
    assert not failed.ok and failed.scan is None


def test_create_success_result_flattens_scan() -> None:
    scan = PathScan((FileSize(File("/r/e"), 2000), FileSize(File("/r/b"), 1000)), 3600, 4)

    result = create_success_result("/r", 2, scan, elapsed_ms=12, report="text")

    assert isinstance(result, ScanReportResult)
    assert result.ok is True
    assert result.error == ""
    assert result.total_size == 3600
    assert result.total_count == 4
    assert result.largest_files == [
        {"path": "/r/e", "size": 2000},
        {"path": "/r/b", "size": 1000},
    ]


def test_create_error_result_carries_no_totals() -> None:
    result = create_error_result("PermissionError: denied", "/r", 10)

    assert result.ok is False
    assert result.total_count == 0
    assert result.largest_files == []
    assert result.report == "PermissionError: denied"
