"""
This module defines the two failure kinds a read can end with.

`ReadError`:
Raised when the file itself cannot be opened or read (missing file,
permission denied, path is a directory, ...). It is an `OSError` carrying the
same ``errno`` and ``strerror`` as the error reported by the operating
system, with ``filename`` set to the path that was requested. The original
error is chained as ``__cause__``.

`ParseError`:
Raised when the content was read but is not valid for the selected format.
Its message names the public reader function and the path, followed by the
message of the underlying parser, e.g.::

    read_yaml_sync() failed to parse "index.js": mapping values are not ...

The parser's exception is chained as ``__cause__`` and left untouched.
"""

import os
from pathlib import Path


class ReadError(OSError):
    """Raised when a data file cannot be opened or read."""

    @classmethod
    def from_os_error(cls, path: str | Path, error: OSError) -> "ReadError":
        """Build a ReadError for ``path`` from the error raised by the OS."""
        errno = error.errno
        strerror = error.strerror or str(error)
        if errno is None:
            return cls(f"{strerror}: {os.fspath(path)!r}")
        return cls(errno, strerror, os.fspath(path))


class ParseError(ValueError):
    """Raised when a data file was read but could not be parsed."""

    def __init__(
        self,
        operation: str,
        path: str | Path,
        message: str,
        format: str | None = None,
    ):
        self.operation = operation
        self.path = os.fspath(path)
        self.format = format
        super().__init__(f'{operation}() failed to parse "{self.path}": {message}')
