"""Error types shared across RawSync."""


class AppError(Exception):
    """Base exception for application errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PatternError(AppError, ValueError):
    """Name pattern is not a single-extension glob such as ``*.NEF``."""
    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"Unsupported name pattern {pattern!r}; expected '*.<extension>'.")
