from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the read-only Filesystem capability consumed by the scanner,
its default implementation over the 'os' module, and cross-platform
path helpers (user data directory, path normalization).
"""

import errno
import logging
import os
import stat as statmod
from abc import ABC, abstractmethod
from typing import List, Optional

from sizescan.domain.path_models import Directory, File, FilePath

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "SizeScan"
UNIX_APP_DIR_NAME = ".sizescan"

# -----------------------------------------------------------------------------
# FILESYSTEM CAPABILITY
# -----------------------------------------------------------------------------

class Filesystem(ABC):
    """
    Read-only access to file lengths and directory listings.

    Implementations must be safe to call concurrently from many threads
    and must signal every access failure by raising OSError.
    """

    @abstractmethod
    def classify(self, path: str) -> FilePath:
        """
        Tag a root path as a File or a Directory.

        Raises:
            FileNotFoundError: If the path is neither a directory nor a regular file.
        """

    @abstractmethod
    def length(self, file: File) -> int:
        """
        Return the byte length of a file.

        Raises:
            OSError: If the file cannot be stat-ed.
        """

    @abstractmethod
    def list_files(self, directory: Directory) -> List[FilePath]:
        """
        Return the immediate children of a directory.

        Entries that are neither regular files nor directories are omitted.
        The order must be stable for a single call.

        Raises:
            OSError: If the directory cannot be read.
        """


class LocalFilesystem(Filesystem):
    """Filesystem backed by the host operating system."""

    def classify(self, path: str) -> FilePath:
        # The root itself is resolved through symlinks
        if os.path.isdir(path):
            return Directory(path)
        if os.path.isfile(path):
            return File(path)
        raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)

    def length(self, file: File) -> int:
        return os.stat(file.path).st_size

    def list_files(self, directory: Directory) -> List[FilePath]:
        children: List[FilePath] = []
        with os.scandir(directory.path) as it:
            for entry in it:
                # Symlinks are never followed: no cycle detection is done
                if entry.is_symlink():
                    continue
                try:
                    mode = entry.stat(follow_symlinks=False).st_mode
                except FileNotFoundError:
                    # Removed between readdir and stat
                    continue
                if statmod.S_ISDIR(mode):
                    children.append(Directory(entry.path))
                elif statmod.S_ISREG(mode):
                    children.append(File(entry.path))
        children.sort(key=lambda p: p.path)
        logger.debug(f"Listed {len(children)} entries in {directory.path}")
        return children

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/SizeScan
    - Linux/Mac: ~/.sizescan

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Could not create user data dir '{path}': {e}")

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)
