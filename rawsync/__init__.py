"""Find camera RAW files that have no matching JPEG."""

__version__ = "0.1.0"
