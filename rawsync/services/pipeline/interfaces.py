from __future__ import annotations

from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable

from .models import ListingFault, MatchResult


@runtime_checkable
class DirectoryLister(Protocol):
    def iter_files(self, directory: Path, pattern: str) -> Iterator[Path]: ...

    def iter_directories(self, directory: Path) -> Iterator[Path]: ...


@runtime_checkable
class PathWalk(Protocol):
    def __iter__(self) -> Iterator[Path]: ...

    def __next__(self) -> Path: ...

    def reset(self) -> None: ...

    def close(self) -> None: ...

    def __enter__(self) -> "PathWalk": ...

    def __exit__(self, exc_type, exc, tb) -> None: ...


@runtime_checkable
class PathEnumerator(Protocol):
    @property
    def errors(self) -> tuple[ListingFault, ...]: ...

    def walk(self) -> PathWalk: ...


@runtime_checkable
class Matcher(Protocol):
    def match(self, raw_path: Path) -> MatchResult: ...
