"""Custom exceptions for Site Counts."""


class SiteCountsException(Exception):
    """Base exception for Site Counts errors."""
    pass


class BlockRegistrationError(SiteCountsException):
    """Block metadata is missing, malformed, or already registered."""
    pass


class UnknownBlockError(SiteCountsException):
    """Render requested for a block type that was never registered."""
    pass
