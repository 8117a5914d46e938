from __future__ import annotations

import errno
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FaultKind(str, Enum):
    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"
    PATH_TOO_LONG = "path_too_long"
    OTHER = "other"


@dataclass(slots=True)
class ListingFault:
    """A directory that could not be listed during a walk."""

    path: Path
    kind: FaultKind
    message: str
    error: OSError

    @classmethod
    def from_error(cls, path: Path, error: OSError) -> "ListingFault":
        return cls(path=Path(path), kind=classify_fault(error), message=str(error), error=error)


def classify_fault(error: OSError) -> FaultKind:
    if isinstance(error, (FileNotFoundError, NotADirectoryError)):
        return FaultKind.NOT_FOUND
    if isinstance(error, PermissionError):
        return FaultKind.ACCESS_DENIED
    if error.errno == errno.ENAMETOOLONG:
        return FaultKind.PATH_TOO_LONG
    return FaultKind.OTHER


class MatchStatus(str, Enum):
    MATCHED = "matched"
    UNMATCHED = "unmatched"
    NOT_IN_RAW_DIR = "not_in_raw_dir"


@dataclass(slots=True)
class MatchResult:
    raw_path: Path
    status: MatchStatus
    candidates: list[Path] = field(default_factory=list)
    jpeg_path: Path | None = None
