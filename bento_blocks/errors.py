"""
Exceptions raised by the Bento Blocks rules engine.
"""


class BentoBlocksError(Exception):
    """Base class for all engine errors."""


class InvalidArgument(BentoBlocksError, ValueError):
    """Raised for malformed lifecycle inputs (missing board, bad player count)."""


class IllegalMove(BentoBlocksError):
    """Raised when a placement fails validation. The board is left untouched."""
