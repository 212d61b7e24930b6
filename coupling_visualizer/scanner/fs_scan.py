"""
Filesystem traversal.

This module discovers the source files of a tree. Only file names are
considered; contents are read by the analyzer.
"""

from __future__ import annotations

import os
from typing import Iterator


def iter_source_files(root: str, extension: str = ".java") -> Iterator[str]:
    """Yield every regular file under root whose name ends with extension.

    Directories and file names are visited in sorted order so repeated runs
    over an unchanged tree see the files in the same order.
    """
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in sorted(filenames):
            if not filename.endswith(extension):
                continue
            path = os.path.join(dirpath, filename)
            if os.path.isfile(path):
                yield path
