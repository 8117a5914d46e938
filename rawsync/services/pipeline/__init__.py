"""Directory walking and RAW/JPEG pairing."""

from .enumerator import SafeFileEnumerator, TreeWalk
from .listing import OsDirectoryLister, validate_pattern
from .matcher import RawJpegMatcher
from .models import FaultKind, ListingFault, MatchResult, MatchStatus

__all__ = [
    "FaultKind",
    "ListingFault",
    "MatchResult",
    "MatchStatus",
    "OsDirectoryLister",
    "RawJpegMatcher",
    "SafeFileEnumerator",
    "TreeWalk",
    "validate_pattern",
]
