from __future__ import annotations

import fnmatch
import os
import re
from pathlib import Path
from typing import Iterator

from rawsync.utils.errors import PatternError

from .interfaces import DirectoryLister

_SINGLE_EXTENSION = re.compile(r"^\*\.[^*?\[\]/\\]+$")


def validate_pattern(pattern: str) -> str:
    if not isinstance(pattern, str) or not _SINGLE_EXTENSION.match(pattern):
        raise PatternError(str(pattern))
    return pattern


class OsDirectoryLister(DirectoryLister):
    """List a single directory level with ``os.scandir``.

    Both listings are generators: the directory is opened on the first ``next()``
    and the scandir handle is released when the generator is exhausted or closed.
    Access faults surface as ``OSError`` from ``next()``.
    """

    def __init__(self, follow_symlinks: bool = True):
        self.follow_symlinks = follow_symlinks

    def iter_files(self, directory: Path, pattern: str) -> Iterator[Path]:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_file(follow_symlinks=self.follow_symlinks) and fnmatch.fnmatch(entry.name, pattern):
                    yield Path(entry.path)

    def iter_directories(self, directory: Path) -> Iterator[Path]:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=self.follow_symlinks):
                    yield Path(entry.path)
