from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .interfaces import Matcher
from .models import MatchResult, MatchStatus

RAW_DIR_NAME = "raw"
JPEG_EXTENSIONS = (".JPG",)


class RawJpegMatcher(Matcher):
    """Pair ``<shoot>/raw/NAME.NEF`` with ``<shoot>/NAME.JPG``."""

    def __init__(self, raw_dir_name: str = RAW_DIR_NAME, jpeg_extensions: Iterable[str] = JPEG_EXTENSIONS):
        self.raw_dir_name = raw_dir_name.lower()
        self.jpeg_extensions = tuple(jpeg_extensions)

    def match(self, raw_path: Path) -> MatchResult:
        raw_path = Path(raw_path)
        raw_dir = raw_path.parent
        shoot_dir = raw_dir.parent
        if raw_dir.name.lower() != self.raw_dir_name or shoot_dir == raw_dir:
            return MatchResult(raw_path=raw_path, status=MatchStatus.NOT_IN_RAW_DIR)

        candidates = [shoot_dir / f"{raw_path.stem}{ext}" for ext in self.jpeg_extensions]
        for candidate in candidates:
            if candidate.is_file():
                return MatchResult(
                    raw_path=raw_path,
                    status=MatchStatus.MATCHED,
                    candidates=candidates,
                    jpeg_path=candidate,
                )
        return MatchResult(raw_path=raw_path, status=MatchStatus.UNMATCHED, candidates=candidates)
