"""
Output file naming.

This module builds the file names of exported images. Titles are reduced to
a portable subset of ASCII before they become part of a file name.
"""

import re
import time
import unicodedata
from typing import Optional

SVG_FILE_PREFIX = "graph_circular_layout_"

_DISALLOWED = re.compile(r"[^A-Za-z0-9._-]+")


def sanitize_title(title: str) -> str:
    """Reduce a title to characters that are safe in a file name.

    The title is NFKD-normalized, characters that are still non-ASCII are
    dropped, and each run of remaining characters other than letters,
    digits, "-", "_" and "." becomes a single "_".

    Example:
        >>> sanitize_title("Café Üser: v1")
        'Cafe_User_v1'
        >>> sanitize_title("core-2.0")
        'core-2.0'
    """
    normalized = unicodedata.normalize("NFKD", title)
    ascii_only = normalized.encode("ascii", "ignore").decode("ascii")
    return _DISALLOWED.sub("_", ascii_only).strip("_")


def current_millis() -> int:
    return time.time_ns() // 1_000_000


def build_output_filename(
    title: Optional[str] = None, timestamp_ms: Optional[int] = None
) -> str:
    """Return the file name of an exported SVG image.

    Args:
        title: Optional image title; omitted if it sanitizes to nothing.
        timestamp_ms: Unix time in milliseconds. Defaults to now.

    Example:
        >>> build_output_filename("Core", 1700000000000)
        'graph_circular_layout_Core_1700000000000.svg'
        >>> build_output_filename(None, 1700000000000)
        'graph_circular_layout_1700000000000.svg'
    """
    if timestamp_ms is None:
        timestamp_ms = current_millis()
    safe_title = sanitize_title(title) if title else ""
    title_part = f"{safe_title}_" if safe_title else ""
    return f"{SVG_FILE_PREFIX}{title_part}{timestamp_ms}.svg"
