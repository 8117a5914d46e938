"""Command-line entry point: list RAW files that have no JPEG next to their raw folder."""
import logging
import os
import sys
from typing import Optional, TextIO

from pydantic import ValidationError

from rawsync.config import get_settings
from rawsync.models import ScanRequest, UnmatchedRaw
from rawsync.services.scanner import run_scan
from rawsync.telemetry.log import setup_logging

logger = logging.getLogger(__name__)


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error['msg']}" if location else error["msg"]


def main(stdout: Optional[TextIO] = None) -> int:
    out = stdout or sys.stdout

    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Invalid scan settings: {_first_error(exc)}", file=out)
        return 0
    setup_logging(settings.log_level, settings.log_format)

    try:
        request = ScanRequest(
            directory=settings.root,
            pattern=settings.pattern,
            raw_dir_name=settings.raw_dir_name,
            jpeg_extensions=settings.jpeg_extensions,
        )
    except ValidationError as exc:
        logger.error("Invalid scan settings: %s", exc)
        print(f"Invalid scan settings: {_first_error(exc)}", file=out)
        return 0

    def _print_unmatched(item: UnmatchedRaw) -> None:
        print(item.path, file=out, flush=True)

    try:
        outcome = run_scan(request, on_unmatched=_print_unmatched)
        if outcome.root_error is not None:
            print(f"{outcome.root_error.kind.value}: {outcome.root_error.message}", file=out)
            return 0
        print(outcome.formatted_total, file=out)
    except BrokenPipeError:
        logger.debug("Output closed before the scan finished")
        if out is sys.stdout:
            # Keep the interpreter's final stdout flush from failing again.
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
    return 0


if __name__ == "__main__":
    sys.exit(main())
