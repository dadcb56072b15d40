"""
This module provides the first stage of every read: getting the text of a
data file off the disk.

`_read_text` opens the file, decodes it and turns operating system failures
into `ReadError` so callers only ever see the two failure kinds of the
package. Decoding failures are left as `UnicodeDecodeError`, the reader
reports them as parse failures since the bytes were read successfully.
"""

import codecs
import os
from pathlib import Path

from readdata._errors import ReadError

from .config import _get_option


def _validate_path(path: str | os.PathLike) -> None:
    if not isinstance(path, (str, os.PathLike)):
        raise TypeError(f"Path must be a string or a pathlib.Path object, got {path!r}.")


def _read_text(path: str | os.PathLike, encoding: str | None = None) -> str:
    """Read the full contents of ``path`` as text."""
    _validate_path(path)
    encoding = encoding or _get_option("encoding")
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ValueError(f"Unknown encoding: {encoding!r}") from e
    try:
        with Path(path).open(encoding=encoding) as f:
            return f.read()
    except OSError as e:
        raise ReadError.from_os_error(path, e) from e
