"""
This module provides the optional readers: best-effort variants of the sync
readers for files that may legitimately be missing or broken.

`optional` wraps any sync reader so that a `ReadError` or `ParseError` (or
any other `OSError` / `ValueError` raised while reading) yields an empty
dictionary instead of propagating.
"""

import functools
import logging
import os
from collections.abc import Callable
from typing import Any

from .dispatch import read_data_sync
from .readers import (
    Options,
    read_cson_sync,
    read_ini_sync,
    read_json_sync,
    read_toml_sync,
    read_yaml_sync,
)

logger = logging.getLogger(__name__)


def optional(reader: Callable[..., Any], name: str | None = None) -> Callable[..., Any]:
    """Turn read and parse failures of ``reader`` into an empty dictionary."""

    @functools.wraps(reader)
    def wrapper(path: str | os.PathLike, options: Options = None, **kwargs: Any) -> Any:
        try:
            return reader(path, options, **kwargs)
        except (OSError, ValueError) as e:
            logger.debug("Optional read of %s failed: %s", path, e)
            return {}

    if name is not None:
        wrapper.__name__ = wrapper.__qualname__ = name
    wrapper.__doc__ = (
        f"Like `{reader.__name__}`, but return an empty dictionary if the file "
        f"cannot be read or parsed."
    )
    return wrapper


read_optional_json = optional(read_json_sync, "read_optional_json")
read_optional_yaml = optional(read_yaml_sync, "read_optional_yaml")
read_optional_ini = optional(read_ini_sync, "read_optional_ini")
read_optional_toml = optional(read_toml_sync, "read_optional_toml")
read_optional_cson = optional(read_cson_sync, "read_optional_cson")
read_optional_data = optional(read_data_sync, "read_optional_data")
