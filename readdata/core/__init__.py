"""
This module exposes the core components of the readdata package: the
format readers, the dispatcher and the optional readers.
"""

from readdata.core.dispatch import read_data, read_data_sync
from readdata.core.formats import Format, resolve_format
from readdata.core.optional import (
    optional,
    read_optional_cson,
    read_optional_data,
    read_optional_ini,
    read_optional_json,
    read_optional_toml,
    read_optional_yaml,
)
from readdata.core.readers import (
    FormatReader,
    get_reader,
    read_cson,
    read_cson_sync,
    read_ini,
    read_ini_sync,
    read_json,
    read_json_sync,
    read_toml,
    read_toml_sync,
    read_yaml,
    read_yaml_sync,
)

__all__ = [
    "Format",
    "FormatReader",
    "get_reader",
    "optional",
    "read_cson",
    "read_cson_sync",
    "read_data",
    "read_data_sync",
    "read_ini",
    "read_ini_sync",
    "read_json",
    "read_json_sync",
    "read_optional_cson",
    "read_optional_data",
    "read_optional_ini",
    "read_optional_json",
    "read_optional_toml",
    "read_optional_yaml",
    "read_toml",
    "read_toml_sync",
    "read_yaml",
    "read_yaml_sync",
    "resolve_format",
]
