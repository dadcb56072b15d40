"""
This module provides the dispatcher, which reads a data file without the
caller naming its format.

The central component is the `_DataReader` class. It inspects the ``lang``
hint and the path's extension (see `formats.resolve_format`), selects the
matching `FormatReader` once, and forwards the call to it unchanged. Errors
raised by the selected reader propagate as they are.
"""

import logging
import os
from typing import Any

from readdata._utils.filesystem import _validate_path

from .formats import Format, resolve_format
from .readers import (
    Callback,
    FormatReader,
    Options,
    _deliver,
    _normalize_options,
    _split_callback,
    get_reader,
)

logger = logging.getLogger(__name__)


class _DataReader:
    """Select the reader for a path and read it."""

    def __init__(self, path: str | os.PathLike, lang: str | None = None) -> None:
        _validate_path(path)
        self.path = path
        self.format: Format = resolve_format(path, lang)
        self._reader: FormatReader = get_reader(self.format)
        logger.debug("Reading %s as %s", os.fspath(path), self.format.value)

    def read(self, options: dict[str, Any]) -> Any:
        return self._reader.read_sync(self.path, options)

    async def read_async(self, options: dict[str, Any]) -> Any:
        return await self._reader.read(self.path, options)


def read_data_sync(path: str | os.PathLike, options: Options = None, **kwargs: Any) -> Any:
    """
    Synchronously read a data file, choosing the reader by format hint or
    extension.

    Args:
        path: Path of the file to read.
        options: Options for the selected reader. ``lang`` overrides the
            extension, e.g. ``read_data_sync("notes.txt", lang="yaml")``.

    Returns:
        The parsed document.

    Raises:
        ReadError: If the file cannot be read.
        ParseError: If the file is not valid for the selected format.
    """
    opts = _normalize_options(options, kwargs)
    return _DataReader(path, opts.get("lang")).read(opts)


async def read_data(
    path: str | os.PathLike,
    options: Options | Callback = None,
    callback: Callback | None = None,
    **kwargs: Any,
) -> Any:
    """
    Asynchronously read a data file, choosing the reader by format hint or
    extension.

    With a ``callback`` the outcome is delivered as ``callback(error)`` or
    ``callback(None, data)`` and the coroutine returns None.
    """
    options, callback = _split_callback(options, callback)

    async def _run() -> Any:
        opts = _normalize_options(options, kwargs)
        return await _DataReader(path, opts.get("lang")).read_async(opts)

    if callback is None:
        return await _run()
    return await _deliver(callback, _run)
