"""
Error taxonomy for a single conversion.

Every error that ``convert`` reports back to its caller derives from
ConversionError, so callers can catch one class and present the message.
"""

from typing import Any


class ConversionError(Exception):
    """Base exception for errors surfaced by a conversion."""

    code = "conversion_error"


class DepthExceeded(ConversionError):
    """Raised when the input nests deeper than the configured limit."""

    code = "depth_exceeded"

    def __init__(self, depth: int, limit: int):
        self.depth = depth
        self.limit = limit
        super().__init__(
            f"JSON nesting depth {depth} exceeds the configured limit of {limit}"
        )


class InvalidRootName(ConversionError):
    """Raised when the caller supplies an unusable root type name."""

    code = "invalid_root_name"

    def __init__(self, root_name: Any, reason: str = "must be a non-empty name"):
        self.root_name = root_name
        self.reason = reason
        super().__init__(f"Invalid root name {root_name!r}: {reason}")

