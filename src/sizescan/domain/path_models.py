from __future__ import annotations

"""
Path Domain Models.

A scanned location is tagged once, when it is discovered, as either a
regular file or a directory. The tag decides how the scanner treats it;
the path string itself is only ever dereferenced through a Filesystem,
which also tags the scan root.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class File:
    """A regular file location."""
    path: str


@dataclass(frozen=True)
class Directory:
    """A directory location whose children are scanned recursively."""
    path: str


FilePath = Union[File, Directory]

