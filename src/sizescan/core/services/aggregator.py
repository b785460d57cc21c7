from __future__ import annotations

"""
Bounded-Rank Aggregation.

Merge rule for PathScan values: totals are summed exactly, while the
ranked file lists are merged and cut back to the configured bound. The
empty PathScan is the identity, so any number of subtree summaries can
be folded together in any grouping.
"""

import heapq
from typing import Iterable, List

from sizescan.domain.scan_models import FileSize, PathScan


class TopNMerger:
    """
    Combines PathScan values while retaining at most ``top_n`` ranked files.

    Ranking is by size only: when both operands hold a file of the same
    size, the entry from the left operand is kept and the other dropped.
    """

    def __init__(self, top_n: int) -> None:
        if top_n < 1:
            raise ValueError(f"top_n must be a positive integer, received {top_n!r}.")
        self.top_n = top_n

    def empty(self) -> PathScan:
        return PathScan.empty()

    def combine(self, left: PathScan, right: PathScan) -> PathScan:
        return PathScan(
            largest_files=self._merge_ranked(left.largest_files, right.largest_files),
            total_size=left.total_size + right.total_size,
            total_count=left.total_count + right.total_count,
        )

    def combine_all(self, scans: Iterable[PathScan]) -> PathScan:
        """Left fold over ``scans`` seeded with the empty PathScan."""
        acc = self.empty()
        for scan in scans:
            acc = self.combine(acc, scan)
        return acc

    def _merge_ranked(self, left: Iterable[FileSize], right: Iterable[FileSize]) -> tuple:
        # heapq.merge is stable: on equal keys, items from `left` come first
        merged: List[FileSize] = []
        last_size = None
        for fs in heapq.merge(left, right, key=lambda f: f.rank_key):
            if fs.size == last_size:
                continue
            merged.append(fs)
            last_size = fs.size
            if len(merged) == self.top_n:
                break
        return tuple(merged)
