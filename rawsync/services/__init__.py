"""Application services for RawSync."""
