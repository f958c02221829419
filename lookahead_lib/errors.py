from __future__ import annotations
import typing


class LookaheadError(Exception):
    """
    Base class for all lookahead stream errors
    """
    
    pass


class InvalidArgument(LookaheadError, ValueError):
    """
    Raised for out-of-range arguments, such as a negative peek depth.
    The stream is never modified when this is raised.
    """
    
    pass


__all__ = [
    "LookaheadError",
    "InvalidArgument",
]
