from __future__ import annotations

"""
SizeScan: concurrent largest-file finder.

Walks a directory tree, keeps a bounded ranking of the largest files and
reports total file count and byte size for the whole subtree.
"""

__version__ = "1.0.0"
