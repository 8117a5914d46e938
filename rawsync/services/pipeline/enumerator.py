from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional

from .interfaces import DirectoryLister, PathEnumerator, PathWalk
from .listing import OsDirectoryLister, validate_pattern
from .models import ListingFault

logger = logging.getLogger(__name__)


def _release(cursor: Optional[Iterator[Path]]) -> None:
    close = getattr(cursor, "close", None)
    if close is not None:
        close()


class _Frame:
    """A directory on the walk stack together with its two cursors."""

    __slots__ = ("directory", "files", "subdirectories")

    def __init__(self, directory: Path, files: Iterator[Path], subdirectories: Iterator[Path]):
        self.directory = directory
        self.files: Optional[Iterator[Path]] = files
        self.subdirectories: Optional[Iterator[Path]] = subdirectories

    def next_file(self) -> Optional[Path]:
        if self.files is None:
            return None
        path = next(self.files, None)
        if path is None:
            _release(self.files)
            self.files = None
        return path

    def next_subdirectory(self) -> Optional[Path]:
        if self.subdirectories is None:
            return None
        path = next(self.subdirectories, None)
        if path is None:
            _release(self.subdirectories)
            self.subdirectories = None
        return path

    def close(self) -> None:
        _release(self.files)
        _release(self.subdirectories)
        self.files = None
        self.subdirectories = None


class TreeWalk(PathWalk):
    """Depth-first, pre-order iterator over files matching a pattern.

    The walk keeps an explicit stack of frames, the root at the bottom and the
    directory currently being listed on top. A listing fault in any directory
    below the root is appended to the shared ``errors`` list and the directory is
    skipped. Faults listing the root itself propagate to the caller unchanged.
    """

    def __init__(self, root: Path, pattern: str, errors: list[ListingFault], lister: DirectoryLister):
        self.root = Path(root)
        self.pattern = pattern
        self.lister = lister
        self._errors = errors
        self._stack: list[_Frame] = []
        self._started = False

    @property
    def errors(self) -> tuple[ListingFault, ...]:
        return tuple(self._errors)

    @property
    def depth(self) -> int:
        return len(self._stack)

    def __iter__(self) -> "TreeWalk":
        return self

    def __next__(self) -> Path:
        if not self._started:
            self._started = True
            try:
                self._stack.append(self._open(self.root))
            except OSError:
                self.close()
                raise

        while self._stack:
            frame = self._stack[-1]
            try:
                path = frame.next_file()
                if path is not None:
                    return path
                subdirectory = frame.next_subdirectory()
            except OSError as exc:
                if len(self._stack) == 1:
                    self.close()
                    raise
                self._record(frame.directory, exc)
                self._stack.pop().close()
                continue

            if subdirectory is None:
                self._stack.pop().close()
                continue

            try:
                child = self._open(subdirectory)
            except OSError as exc:
                self._record(subdirectory, exc)
                continue
            self._stack.append(child)

        raise StopIteration

    def reset(self) -> None:
        """Release every cursor; the next call lists the root again. Errors are kept."""
        self._release_stack()
        self._started = False

    def close(self) -> None:
        self._release_stack()
        self._started = True

    def __enter__(self) -> "TreeWalk":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _open(self, directory: Path) -> _Frame:
        files = self.lister.iter_files(directory, self.pattern)
        try:
            subdirectories = self.lister.iter_directories(directory)
        except OSError:
            _release(files)
            raise
        return _Frame(directory, files, subdirectories)

    def _release_stack(self) -> None:
        while self._stack:
            self._stack.pop().close()

    def _record(self, directory: Path, error: OSError) -> None:
        fault = ListingFault.from_error(directory, error)
        self._errors.append(fault)
        logger.debug("Skipping directory %s (%s): %s", directory, fault.kind.value, error)


class SafeFileEnumerator(PathEnumerator):
    """Lazy recursive enumeration of ``pattern`` matches under ``root``.

    Each iteration starts a fresh :class:`TreeWalk` that re-lists the file system.
    All walks started from one enumerator append to the same error list, which may
    also be supplied by the caller to collect faults across several enumerators.
    """

    def __init__(
        self,
        root: Path | str,
        pattern: str,
        errors: Optional[list[ListingFault]] = None,
        lister: Optional[DirectoryLister] = None,
    ):
        self.root = Path(root)
        self.pattern = validate_pattern(pattern)
        self.lister = lister or OsDirectoryLister()
        self._errors = errors if errors is not None else []

    @property
    def errors(self) -> tuple[ListingFault, ...]:
        return tuple(self._errors)

    def walk(self) -> TreeWalk:
        return TreeWalk(self.root, self.pattern, self._errors, self.lister)

    def __iter__(self) -> TreeWalk:
        return self.walk()
