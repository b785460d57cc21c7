from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An in-memory Filesystem double with scripted failures and delays.
3. Shared fixtures for configuration dictionaries and on-disk trees.
"""

import errno
import os
import sys
import threading
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from sizescan.domain.path_models import Directory, File, FilePath  # noqa: E402
from sizescan.infra.fs import Filesystem  # noqa: E402


# -----------------------------------------------------------------------------
# Filesystem Double
# -----------------------------------------------------------------------------
class BrokenDir:
    """Tree marker for a directory whose listing raises ``error``."""

    def __init__(self, error: OSError) -> None:
        self.error = error


class FakeFilesystem(Filesystem):
    """
    Filesystem built from a nested dict.

    Values: int -> file size, dict -> directory, OSError -> file whose stat
    fails, BrokenDir -> directory whose listing fails. Children are listed
    in dict insertion order.
    """

    def __init__(
            self,
            tree: Dict[str, Any],
            *,
            root: str = "/root",
            delays: Optional[Dict[str, float]] = None,
    ) -> None:
        self.root = Directory(root)
        self.delays = delays or {}
        self.calls: List[str] = []
        self._lock = threading.Lock()
        self._sizes: Dict[str, Any] = {}
        self._listings: Dict[str, Any] = {}
        self._index(root, tree)

    def _index(self, path: str, node: Any) -> FilePath:
        if isinstance(node, dict):
            self._listings[path] = [self._index(f"{path}/{name}", child) for name, child in node.items()]
            return Directory(path)
        if isinstance(node, BrokenDir):
            self._listings[path] = node.error
            return Directory(path)
        self._sizes[path] = node
        return File(path)

    def _record(self, path: str) -> None:
        with self._lock:
            self.calls.append(path)
        delay = self.delays.get(path)
        if delay:
            time.sleep(delay)

    def classify(self, path: str) -> FilePath:
        self._record(path)
        if path in self._listings:
            return Directory(path)
        if path in self._sizes:
            return File(path)
        raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)

    def length(self, file: File) -> int:
        self._record(file.path)
        size = self._sizes[file.path]
        if isinstance(size, OSError):
            raise size
        return size

    def list_files(self, directory: Directory) -> List[FilePath]:
        self._record(directory.path)
        listing = self._listings[directory.path]
        if isinstance(listing, OSError):
            raise listing
        return list(listing)


@pytest.fixture
def make_fs():
    """Factory fixture: make_fs(tree, **kwargs) -> FakeFilesystem."""
    return FakeFilesystem


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the keys produced by 'sizescan.domain.config.get_default_config'.
    """
    return {
        "input_path": "/tmp/test_input",
        "top_n": 5,
        "max_workers": 4,
        "log_level": "INFO",
        "log_file": "",
    }


@pytest.fixture
def disk_tree(tmp_path: Path) -> Path:
    """
    Create the reference tree on disk.

    /tree
      a (500 B)
      b (1000 B)
      c (100 B)
      /d
        e (2000 B)
    """
    root = tmp_path / "tree"
    root.mkdir()
    (root / "a").write_bytes(b"x" * 500)
    (root / "b").write_bytes(b"x" * 1000)
    (root / "c").write_bytes(b"x" * 100)
    (root / "d").mkdir()
    (root / "d" / "e").write_bytes(b"x" * 2000)
    return root
