from __future__ import annotations
import sys
import typing


_debug_enabled: bool = False


def set_debug(enabled: bool) -> None:
    """
    Turns the `debug` output on or off for the whole library
    """
    
    global _debug_enabled
    _debug_enabled = enabled


def is_debug() -> bool:
    return _debug_enabled


def debug(*args) -> None:
    """
    A convenience function to encapsulate debug printing.
    
    Silent unless enabled with `set_debug(True)`.
    """
    
    if not _debug_enabled:
        return
    
    print(*args, file=sys.stderr, flush=True)


__all__ = [
    "set_debug",
    "is_debug",
    "debug",
]
