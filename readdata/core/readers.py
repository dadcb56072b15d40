"""
This module provides the format readers, one per supported format.

Every reader is a `FormatReader` binding a `Format` to its parser function
from `readdata._utils.parsers`. A read is a two stage pipeline:

1. **Read**: `_read_text` loads the whole file as text. Failures surface as
   `ReadError`.
2. **Parse**: the format's parser turns the text into Python values.
   Failures surface as `ParseError`, whose message names the public
   function and the path.

Each reader offers both calling conventions:
- `read_sync(path, options)` blocks and returns the document or raises.
- `read(path, options, callback)` is a coroutine running both stages in a
  worker thread, one after the other. Without a callback it returns the
  document or raises. With a callback it always returns None and calls
  ``callback(error)`` or ``callback(None, document)`` exactly once.

The public ``read_<format>_sync`` / ``read_<format>`` functions are thin
wrappers over the reader table `_READERS`.
"""

import asyncio
import logging
import os
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from readdata._errors import ParseError
from readdata._utils.filesystem import _read_text, _validate_path
from readdata._utils.parsers import (
    _PARSE_ERRORS,
    _parse_cson,
    _parse_ini,
    _parse_json,
    _parse_toml,
    _parse_yaml,
)

from .formats import Format

logger = logging.getLogger(__name__)

Callback = Callable[..., Any]
Options = Mapping[str, Any] | str | None


def _normalize_options(options: Options, kwargs: dict[str, Any]) -> dict[str, Any]:
    """Merge the options bag and keyword arguments into one dictionary."""
    if options is None:
        opts = {}
    elif isinstance(options, str):
        # A bare string is the encoding, e.g. read_yaml_sync(path, "utf8")
        opts = {"encoding": options}
    elif isinstance(options, Mapping):
        opts = dict(options)
    else:
        raise TypeError(f"Options must be a mapping or an encoding string, got {options!r}.")

    opts.update(kwargs)
    return opts


def _split_callback(options: Any, callback: Callback | None) -> tuple[Options, Callback | None]:
    """Allow the callback to be passed in place of the options."""
    if callable(options) and callback is None:
        return None, options
    if callback is not None and not callable(callback):
        raise TypeError(f"Callback must be callable, got {callback!r}.")
    return options, callback


async def _deliver(callback: Callback, run: Callable[[], Awaitable[Any]]) -> None:
    """Await ``run`` and hand its outcome to a node-style callback, once."""
    try:
        value = await run()
    except Exception as e:
        callback(e)
        return None

    callback(None, value)
    return None


@dataclass(frozen=True)
class FormatReader:
    """Reads files of a single format, synchronously or asynchronously."""

    format: Format
    parser: Callable[..., Any]
    errors: tuple[type[BaseException], ...]

    @property
    def sync_name(self) -> str:
        return f"read_{self.format.value}_sync"

    @property
    def async_name(self) -> str:
        return f"read_{self.format.value}"

    @staticmethod
    def _split_read_options(options: dict[str, Any]) -> tuple[str | None, dict[str, Any]]:
        """Separate the options used to read the file from the parser's."""
        parser_options = dict(options)
        parser_options.pop("lang", None)
        encoding = parser_options.pop("encoding", None)
        return encoding, parser_options

    def _read(self, operation: str, path: str | os.PathLike, encoding: str | None) -> str:
        try:
            return _read_text(path, encoding)
        except UnicodeDecodeError as e:
            raise ParseError(operation, path, str(e), self.format.value) from e

    def _parse(
        self,
        operation: str,
        path: str | os.PathLike,
        text: str,
        options: dict[str, Any],
    ) -> Any:
        try:
            return self.parser(text, **options)
        # RecursionError: nesting deeper than the interpreter can follow
        except (*self.errors, RecursionError) as e:
            raise ParseError(operation, path, str(e), self.format.value) from e

    def read_sync(self, path: str | os.PathLike, options: Options = None, **kwargs: Any) -> Any:
        """Read and parse ``path``, raising ReadError or ParseError on failure."""
        encoding, parser_options = self._split_read_options(_normalize_options(options, kwargs))
        text = self._read(self.sync_name, path, encoding)
        return self._parse(self.sync_name, path, text, parser_options)

    async def _read_async(
        self, path: str | os.PathLike, options: Options, kwargs: dict[str, Any]
    ) -> Any:
        _validate_path(path)
        encoding, parser_options = self._split_read_options(_normalize_options(options, kwargs))
        # Parsing starts only once the whole file has been read
        text = await asyncio.to_thread(self._read, self.async_name, path, encoding)
        return await asyncio.to_thread(
            self._parse, self.async_name, path, text, parser_options
        )

    async def read(
        self,
        path: str | os.PathLike,
        options: Options | Callback = None,
        callback: Callback | None = None,
        **kwargs: Any,
    ) -> Any:
        """
        Asynchronously read and parse ``path``.

        Args:
            path: The file to read.
            options: Options for the parser, an encoding string, or the
                callback itself.
            callback: Optional ``callback(error)`` / ``callback(None, data)``.

        Returns:
            The parsed document, or None when a callback receives it.
        """
        options, callback = _split_callback(options, callback)
        if callback is None:
            return await self._read_async(path, options, kwargs)
        return await _deliver(callback, lambda: self._read_async(path, options, kwargs))


_READERS = {
    Format.JSON: FormatReader(Format.JSON, _parse_json, _PARSE_ERRORS["json"]),
    Format.YAML: FormatReader(Format.YAML, _parse_yaml, _PARSE_ERRORS["yaml"]),
    Format.INI: FormatReader(Format.INI, _parse_ini, _PARSE_ERRORS["ini"]),
    Format.TOML: FormatReader(Format.TOML, _parse_toml, _PARSE_ERRORS["toml"]),
    Format.CSON: FormatReader(Format.CSON, _parse_cson, _PARSE_ERRORS["cson"]),
}


def get_reader(fmt: Format | str) -> FormatReader:
    """Return the reader registered for ``fmt``."""
    resolved = Format.from_hint(fmt.value if isinstance(fmt, Format) else fmt)
    if resolved is None:
        raise ValueError(
            f"Unknown format: {fmt!r}. Valid formats are: {[f.value for f in Format]}"
        )
    return _READERS[resolved]


# --- JSON ---


def read_json_sync(path: str | os.PathLike, options: Options = None, **kwargs: Any) -> Any:
    """
    Synchronously read a JSON file.

    Args:
        path: Path of the file to read.
        options: Keyword arguments for `json.loads`, plus ``encoding``.

    Returns:
        The parsed JSON document.

    Raises:
        ReadError: If the file cannot be read.
        ParseError: If the file is not valid JSON.
    """
    return _READERS[Format.JSON].read_sync(path, options, **kwargs)


async def read_json(
    path: str | os.PathLike,
    options: Options | Callback = None,
    callback: Callback | None = None,
    **kwargs: Any,
) -> Any:
    """Asynchronously read a JSON file, see `FormatReader.read`."""
    return await _READERS[Format.JSON].read(path, options, callback, **kwargs)


# --- YAML ---


def read_yaml_sync(path: str | os.PathLike, options: Options = None, **kwargs: Any) -> Any:
    """
    Synchronously read a YAML file.

    Parsing is delegated to PyYAML. Pass ``schema="failsafe"`` to keep every
    scalar as a string, or an explicit ``Loader`` class.

    Raises:
        ReadError: If the file cannot be read.
        ParseError: If the file is not valid YAML.
    """
    return _READERS[Format.YAML].read_sync(path, options, **kwargs)


async def read_yaml(
    path: str | os.PathLike,
    options: Options | Callback = None,
    callback: Callback | None = None,
    **kwargs: Any,
) -> Any:
    """Asynchronously read a YAML file, see `FormatReader.read`."""
    return await _READERS[Format.YAML].read(path, options, callback, **kwargs)


# --- INI ---


def read_ini_sync(path: str | os.PathLike, options: Options = None, **kwargs: Any) -> Any:
    """Synchronously read an INI file into a dictionary of sections."""
    return _READERS[Format.INI].read_sync(path, options, **kwargs)


async def read_ini(
    path: str | os.PathLike,
    options: Options | Callback = None,
    callback: Callback | None = None,
    **kwargs: Any,
) -> Any:
    return await _READERS[Format.INI].read(path, options, callback, **kwargs)


# --- TOML ---


def read_toml_sync(path: str | os.PathLike, options: Options = None, **kwargs: Any) -> Any:
    """Synchronously read a TOML file."""
    return _READERS[Format.TOML].read_sync(path, options, **kwargs)


async def read_toml(
    path: str | os.PathLike,
    options: Options | Callback = None,
    callback: Callback | None = None,
    **kwargs: Any,
) -> Any:
    return await _READERS[Format.TOML].read(path, options, callback, **kwargs)


# --- CSON ---


def read_cson_sync(path: str | os.PathLike, options: Options = None, **kwargs: Any) -> Any:
    """Synchronously read a CSON (CoffeeScript Object Notation) file."""
    return _READERS[Format.CSON].read_sync(path, options, **kwargs)


async def read_cson(
    path: str | os.PathLike,
    options: Options | Callback = None,
    callback: Callback | None = None,
    **kwargs: Any,
) -> Any:
    return await _READERS[Format.CSON].read(path, options, callback, **kwargs)
