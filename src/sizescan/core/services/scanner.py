from __future__ import annotations

"""
Concurrent Tree Scanner.

Recursively walks a directory tree and folds every file into a single
bounded PathScan. Each directory dispatches its children as independent
asyncio tasks; blocking filesystem calls are pushed onto a thread pool so
sibling subtrees make progress concurrently.

Error policy: a failed stat or listing aborts the enclosing subtree and
every ancestor. When several siblings fail, the one reported is the
first in listing order, not the first to finish. Siblings are never
cancelled; their results are awaited and then discarded.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from sizescan.core.services.aggregator import TopNMerger
from sizescan.domain.path_models import File, FilePath
from sizescan.domain.scan_models import FileSize, PathScan, ScanConfig, ScanOutcome
from sizescan.infra.fs import Filesystem

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def scan_tree(
        root: FilePath,
        top_n: int,
        filesystem: Filesystem,
        *,
        max_workers: Optional[int] = None,
) -> ScanOutcome:
    """
    Scan a tree and return its aggregated summary or the captured failure.

    Runs a private event loop, so it must not be called from inside a
    running loop; use ``scan_tree_async`` there instead.

    Args:
        root: File or Directory to scan.
        top_n: Maximum number of largest files to retain.
        filesystem: Filesystem capability used for every access.
        max_workers: Thread pool size for filesystem calls (None: executor default).

    Returns:
        ScanOutcome: Either the root PathScan or the first OSError in traversal order.

    Raises:
        ValueError: If top_n is not a positive integer.
    """
    config = ScanConfig(top_n)
    return asyncio.run(_run(root, config, filesystem, max_workers))


async def scan_tree_async(
        root: FilePath,
        top_n: int,
        filesystem: Filesystem,
        *,
        max_workers: Optional[int] = None,
) -> ScanOutcome:
    """Awaitable variant of scan_tree for callers that already run a loop."""
    config = ScanConfig(top_n)
    return await _run(root, config, filesystem, max_workers)


async def scan_path(
        path: FilePath,
        config: ScanConfig,
        filesystem: Filesystem,
        executor: ThreadPoolExecutor,
) -> PathScan:
    """
    Compute the PathScan of a single subtree.

    Args:
        path: Subtree root.
        config: Scan settings.
        filesystem: Filesystem capability.
        executor: Pool running the blocking filesystem calls.

    Returns:
        PathScan: Aggregated summary of the subtree.

    Raises:
        OSError: The first filesystem failure in traversal order.
    """
    return await _scan_subtree(path, TopNMerger(config.top_n), filesystem, executor)


async def resolve_file_size(
        file: File,
        filesystem: Filesystem,
        executor: ThreadPoolExecutor,
) -> FileSize:
    """Stat a file once; failures propagate unchanged."""
    loop = asyncio.get_running_loop()
    size = await loop.run_in_executor(executor, filesystem.length, file)
    return FileSize(file, size)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

async def _run(
        root: FilePath,
        config: ScanConfig,
        filesystem: Filesystem,
        max_workers: Optional[int],
) -> ScanOutcome:
    logger.info(f"Scanning {root.path} (top {config.top_n})")

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="sizescan") as executor:
        try:
            scan = await scan_path(root, config, filesystem, executor)
        except OSError as e:
            logger.warning(f"Scan of {root.path} failed: {e}")
            return ScanOutcome.failure(e)

    logger.info(f"Scan of {root.path} complete: {scan.total_count} files, {scan.total_size} bytes")
    return ScanOutcome.success(scan)


async def _scan_subtree(
        path: FilePath,
        merger: TopNMerger,
        filesystem: Filesystem,
        executor: ThreadPoolExecutor,
) -> PathScan:
    if isinstance(path, File):
        file_size = await resolve_file_size(path, filesystem, executor)
        return PathScan.of_file(file_size)

    loop = asyncio.get_running_loop()
    children = await loop.run_in_executor(executor, filesystem.list_files, path)

    results = await asyncio.gather(
        *(_scan_subtree(child, merger, filesystem, executor) for child in children),
        return_exceptions=True,
    )

    for child, result in zip(children, results):
        if isinstance(result, BaseException):
            logger.debug(f"Subtree {child.path} failed, aborting {path.path}: {result}")
            raise result

    return merger.combine_all(results)
