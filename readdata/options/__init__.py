"""
This module provides a convenient entry point for setting global
configuration options for the readdata package.
"""

from readdata._utils import reset_readdata_options, set_readdata_option

__all__ = ["reset_readdata_options", "set_readdata_option"]
