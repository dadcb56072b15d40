"""
This module serves as the main entry point for the readdata package,
exposing its primary public API.
"""

from readdata._errors import ParseError, ReadError
from readdata.core import (
    Format,
    FormatReader,
    get_reader,
    optional,
    read_cson,
    read_cson_sync,
    read_data,
    read_data_sync,
    read_ini,
    read_ini_sync,
    read_json,
    read_json_sync,
    read_optional_cson,
    read_optional_data,
    read_optional_ini,
    read_optional_json,
    read_optional_toml,
    read_optional_yaml,
    read_toml,
    read_toml_sync,
    read_yaml,
    read_yaml_sync,
    resolve_format,
)

# --- Define main API for readdata module ---
__all__ = [
    "Format",
    "FormatReader",
    "ParseError",
    "ReadError",
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
