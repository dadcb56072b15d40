"""
This module defines the set of supported data formats and how a format is
chosen for a given path.

Resolution order for a read:
1. An explicit ``lang`` hint passed by the caller.
2. The last suffix of the path (``archive.tar.json`` is JSON).
3. The package-wide ``default_format`` option (``json`` out of the box).

Both hints and extensions are compared case-insensitively and may carry a
leading dot; ``yml`` is an alias of ``yaml``. Unknown values never raise,
they fall back to the default format.
"""

import logging
import os
from enum import Enum
from pathlib import Path

from readdata._utils.config import _get_option

logger = logging.getLogger(__name__)

_ALIASES = {
    "yml": "yaml",
}


class Format(str, Enum):
    """Identifier of a supported data format."""

    JSON = "json"
    YAML = "yaml"
    INI = "ini"
    TOML = "toml"
    CSON = "cson"

    @classmethod
    def from_hint(cls, hint: str | None) -> "Format | None":
        """Return the format named by ``hint``, or None if it names no format."""
        if hint is None:
            return None
        if not isinstance(hint, str):
            raise TypeError(f"Format hint must be a string, got {hint!r}.")
        if not hint:
            return None
        name = hint.strip().lstrip(".").lower()
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def default(cls) -> "Format":
        return cls(_get_option("default_format"))

    @classmethod
    def from_extension(cls, extension: str | None) -> "Format":
        """Map a file extension to a format, falling back to the default."""
        return cls.from_hint(extension) or cls.default()


def resolve_format(path: str | os.PathLike, lang: str | None = None) -> Format:
    """Choose the format used to read ``path``."""
    fmt = Format.from_hint(lang)
    if lang:
        if fmt is None:
            fmt = Format.default()
            logger.debug("Unknown format hint %r, falling back to %s", lang, fmt.value)
        return fmt

    return Format.from_extension(Path(path).suffix)
