from __future__ import annotations

"""
Domain Constants.

Centralized defaults shared by the configuration layer, the scan
pipeline and the report renderer.
"""

from typing import Tuple

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# SCAN DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_TOP_N = 10
DEFAULT_MAX_WORKERS = 0  # 0 -> ThreadPoolExecutor default sizing

# -----------------------------------------------------------------------------
# REPORT FORMATTING
# -----------------------------------------------------------------------------

# Decimal (SI) prefixes, one per power of 1000
BYTE_UNIT_PREFIXES: Tuple[str, ...] = ("K", "M", "G", "T", "P", "E")
BYTE_UNIT_BASE = 1000
