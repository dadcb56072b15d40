"""
This module is responsible for turning the text of a data file into plain
Python values. It is the second stage of every read, the first one being
`filesystem._read_text`.

It contains individual, private parser functions for every supported format:
- `_parse_json`: For JSON, via the standard library `json` module.
- `_parse_yaml`: For YAML, via PyYAML.
- `_parse_ini`: For INI, via the standard library `configparser`.
- `_parse_toml`: For TOML, via the standard library `tomllib`.
- `_parse_cson`: For CSON, via the `cson` package.

Each parser receives the text and the caller's pass-through options as
keyword arguments. Parsers do not catch their library's errors, the reader
wrapping them decides how to report a failure (see `_PARSE_ERRORS`).
"""

import configparser
import json
import tomllib
from typing import Any

import cson
import yaml
from speg.peg import ParseError as _CsonSyntaxError

from .config import _get_option

_YAML_SCHEMAS = {
    "failsafe": yaml.BaseLoader,  # every scalar stays a string
    "json": yaml.SafeLoader,
    "core": yaml.SafeLoader,
    "safe": yaml.SafeLoader,
    "default": yaml.SafeLoader,
    "full": yaml.FullLoader,
    "unsafe": yaml.UnsafeLoader,
}


def _yaml_loader(schema: str | None = None, loader: type | None = None) -> type:
    """Pick the PyYAML loader class for a schema name or explicit loader."""
    if loader is not None:
        if not (isinstance(loader, type) and hasattr(loader, "get_single_data")):
            raise TypeError(f"Loader must be a PyYAML loader class, got {loader!r}.")
        return loader

    if schema is None:
        schema = _get_option("yaml_schema")
    if not isinstance(schema, str):
        raise TypeError(f"YAML schema must be a string, got {schema!r}.")

    try:
        return _YAML_SCHEMAS[schema.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown YAML schema: {schema!r}. Valid schemas are: {list(_YAML_SCHEMAS)}"
        ) from None


def _parse_json(text: str, **options: Any) -> Any:
    """Convert JSON text to a Python object."""
    return json.loads(text, **options)


def _parse_yaml(
    text: str,
    schema: str | None = None,
    Loader: type | None = None,  # noqa: N803
) -> Any:
    """Convert a YAML document to a Python object."""
    return yaml.load(text, Loader=_yaml_loader(schema, Loader))


def _parse_ini(text: str, **options: Any) -> dict[str, dict[str, str]]:
    """Convert INI text to a dictionary of sections."""
    parser = configparser.ConfigParser(**options)
    parser.read_string(text)

    data = {}
    if parser.defaults():
        data[parser.default_section] = dict(parser.defaults())
    for section in parser.sections():
        data[section] = dict(parser[section])
    return data


def _parse_toml(text: str, **options: Any) -> dict[str, Any]:
    """Convert TOML text to a dictionary."""
    return tomllib.loads(text, **options)


def _parse_cson(text: str, **options: Any) -> Any:
    """Convert CSON text to a Python object."""
    return cson.loads(text, **options)


# Exceptions that mean "the content is invalid" for each parser
_PARSE_ERRORS = {
    "json": (json.JSONDecodeError,),
    "yaml": (yaml.YAMLError,),
    "ini": (configparser.Error,),
    "toml": (tomllib.TOMLDecodeError,),
    "cson": (_CsonSyntaxError, ValueError),
}
