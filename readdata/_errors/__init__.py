"""
This module centralizes custom exception types for the readdata package,
making them easily importable from a single location.
"""

from ._read import ParseError, ReadError

__all__ = [
    "ParseError",
    "ReadError",
]
