"""
This module manages global configuration settings for the readdata package.

It offers a simple, centralized mechanism for setting and retrieving
package-level options that affect how files are read and parsed. This is
useful for defining process-wide defaults without having to pass them to
every reader call.

Supported options:
- `encoding`: Text encoding used when reading a file (default ``utf-8``).
- `default_format`: Format used when neither a ``lang`` hint nor a known
  file extension is available (default ``json``).
- `yaml_schema`: YAML schema used when a YAML read does not pass ``schema``
  or ``Loader`` (default ``safe``).

The module exposes `set_readdata_option` and `reset_readdata_options` to
modify settings and an internal `_get_option` to retrieve them, providing a
controlled interface to a private, module-level settings dictionary.
"""

import codecs
from collections.abc import Iterable
from typing import Any

_DEFAULTS = {
    "encoding": "utf-8",
    "default_format": "json",
    "yaml_schema": "safe",
}

# A private dictionary to hold all package settings.
_settings = dict(_DEFAULTS)


def _validate_option_value(option: str, value: str) -> None:
    """Check that a value makes sense for the given option."""
    # Imported lazily, both modules depend on the settings table
    from readdata._utils.parsers import _YAML_SCHEMAS
    from readdata.core.formats import Format

    if option == "encoding":
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {value!r}") from e
    elif option == "default_format":
        if Format.from_hint(value) is None:
            raise ValueError(
                f"Invalid default format: {value!r}. "
                f"Valid formats are: {[f.value for f in Format]}"
            )
    elif option == "yaml_schema" and value.lower() not in _YAML_SCHEMAS:
        raise ValueError(
            f"Invalid YAML schema: {value!r}. Valid schemas are: {list(_YAML_SCHEMAS)}"
        )


def set_readdata_option(options: Iterable[str], values: Iterable[Any]) -> None:
    """
    Set one or more configuration options for the readdata package.

    Args:
        options (Iterable): The name of the option to set (e.g., 'encoding').
        values (Iterable): The value to set for each option.
    """

    if isinstance(options, str):
        options = [options]

    if isinstance(values, str):
        values = [values]

    if not isinstance(options, Iterable):
        raise TypeError("Key must be a string or an iterable of strings.")

    if not isinstance(values, Iterable):
        raise TypeError("Value must be a string or an iterable of strings.")

    options, values = list(options), list(values)
    if len(options) != len(values):
        raise ValueError(
            f"Got {len(options)} option(s) but {len(values)} value(s)."
        )

    for option, value in zip(options, values, strict=True):
        if not isinstance(option, str):
            raise TypeError("Key must be a string.")
        if option not in _settings:
            raise KeyError(
                f"Invalid option key: {option!r}. Valid options are: {list(_settings.keys())}"
            )
        if not isinstance(value, str):
            raise TypeError("Value must be a string.")

        _validate_option_value(option, value)
        _settings[option] = value


def reset_readdata_options() -> None:
    """Restore every option to its default value."""
    _settings.clear()
    _settings.update(_DEFAULTS)


def _get_option(key: str) -> Any:
    """
    Get a configuration option for the readdata package.

    Args:
        key (str): The name of the option to get.
    """
    return _settings.get(key)
