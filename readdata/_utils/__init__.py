"""
This module exposes utility functions from sub-modules for use
within the readdata package.
"""

from readdata._utils.config import _get_option, reset_readdata_options, set_readdata_option
from readdata._utils.filesystem import _read_text, _validate_path
from readdata._utils.parsers import (
    _PARSE_ERRORS,
    _parse_cson,
    _parse_ini,
    _parse_json,
    _parse_toml,
    _parse_yaml,
)

# Define main API for internal _utils module
# only contains methods/objects used within the package
__all__ = [
    "_PARSE_ERRORS",
    "_get_option",
    "_parse_cson",
    "_parse_ini",
    "_parse_json",
    "_parse_toml",
    "_parse_yaml",
    "_read_text",
    "_validate_path",
    "reset_readdata_options",
    "set_readdata_option",
]
