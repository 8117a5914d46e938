from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Optional

from rawsync.models import ScanOutcome, ScanRequest, UnmatchedRaw
from rawsync.services.pipeline.enumerator import SafeFileEnumerator
from rawsync.services.pipeline.interfaces import Matcher, PathEnumerator
from rawsync.services.pipeline.matcher import RawJpegMatcher
from rawsync.services.pipeline.models import ListingFault, MatchStatus
from rawsync.telemetry.log import log_error, log_timing

logger = logging.getLogger(__name__)

UnmatchedCallback = Callable[[UnmatchedRaw], None]


def run_scan(
    request: ScanRequest,
    on_unmatched: Optional[UnmatchedCallback] = None,
    *,
    enumerator: Optional[PathEnumerator] = None,
    matcher: Optional[Matcher] = None,
) -> ScanOutcome:
    """Walk ``request.directory`` and collect RAW files without a sibling JPEG.

    Unreadable subdirectories are skipped by the enumerator and reported in
    ``faults``. A fault listing the root ends the walk early; it is logged and
    returned as ``root_error`` together with whatever was found before it.
    Errors raised by ``on_unmatched`` propagate to the caller.
    """
    enumerator = enumerator or SafeFileEnumerator(request.directory, request.pattern)
    matcher = matcher or RawJpegMatcher(request.raw_dir_name, request.jpeg_extensions)

    outcome = ScanOutcome()
    started = time.perf_counter()

    with enumerator.walk() as walk:
        while True:
            try:
                raw_path = next(walk)
            except StopIteration:
                break
            except OSError as exc:
                outcome.root_error = ListingFault.from_error(request.directory, exc)
                log_error(exc, {"root": str(request.directory), "fault": outcome.root_error.kind.value})
                break

            outcome.total_files += 1
            result = matcher.match(raw_path)

            if result.status is MatchStatus.MATCHED:
                outcome.matched_files += 1
                continue
            if result.status is MatchStatus.NOT_IN_RAW_DIR:
                outcome.skipped_files += 1
                continue

            try:
                size = _file_size(raw_path)
            except OSError as exc:
                logger.warning("Could not read size of %s: %s", raw_path, exc)
                outcome.skipped_files += 1
                continue

            item = UnmatchedRaw(path=raw_path, size=size)
            outcome.unmatched.append(item)
            outcome.total_bytes += size
            if on_unmatched:
                on_unmatched(item)

    outcome.faults = list(enumerator.errors)
    log_timing(
        "scan",
        (time.perf_counter() - started) * 1000,
        {
            "root": str(request.directory),
            "total_files": outcome.total_files,
            "unmatched_files": len(outcome.unmatched),
            "faults": len(outcome.faults),
        },
    )
    return outcome


def _file_size(path: Path) -> int:
    return path.stat().st_size
