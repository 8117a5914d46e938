from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from rawsync.services.pipeline.listing import validate_pattern
from rawsync.services.pipeline.models import ListingFault
from rawsync.utils.bytesize import to_byte_size


class ScanRequest(BaseModel):
    directory: Path = Field(..., description="Root of the photo tree to walk.")
    pattern: str = Field("*.NEF", description="Single-extension glob for RAW files.")
    raw_dir_name: str = "raw"
    jpeg_extensions: tuple[str, ...] = (".JPG",)

    @field_validator("pattern")
    @classmethod
    def pattern_must_be_single_extension(cls, value: str) -> str:
        return validate_pattern(value)

    @field_validator("raw_dir_name")
    @classmethod
    def _must_not_be_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Raw directory name cannot be blank.")
        return value.strip()

    @field_validator("jpeg_extensions")
    @classmethod
    def _normalize_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        extensions = tuple(ext if ext.startswith(".") else f".{ext}" for ext in (e.strip() for e in value) if ext)
        if not extensions:
            raise ValueError("At least one JPEG extension is required.")
        return extensions


@dataclass(slots=True)
class UnmatchedRaw:
    path: Path
    size: int


@dataclass(slots=True)
class ScanOutcome:
    unmatched: list[UnmatchedRaw] = field(default_factory=list)
    total_files: int = 0
    matched_files: int = 0
    skipped_files: int = 0
    total_bytes: int = 0
    faults: list[ListingFault] = field(default_factory=list)
    root_error: Optional[ListingFault] = None

    @property
    def formatted_total(self) -> str:
        return to_byte_size(self.total_bytes)
