"""
This module provides a convenient entry point for setting global
configuration options for the claymeta package.
"""

from claymeta._utils import reset_claymeta_options, set_claymeta_option

__all__ = ["reset_claymeta_options", "set_claymeta_option"]
