"""
This module exposes utility functions from sub-modules for use
within the claymeta package.
"""

from claymeta._utils.config import _get_option, reset_claymeta_options, set_claymeta_option
from claymeta._utils.inspect import ClassDescriptor, MethodDescriptor, ParameterDescriptor
from claymeta._utils.naming import _lcfirst, to_snake_case, to_studly_case
from claymeta._utils.parsers import _ConfigReader
from claymeta._utils.resolvers import (
    ClassResolver,
    ImportClassResolver,
    RegistryClassResolver,
)

# Define main API for internal _utils module
# only contains methods/objects used within the package
__all__ = [
    "ClassDescriptor",
    "ClassResolver",
    "ImportClassResolver",
    "MethodDescriptor",
    "ParameterDescriptor",
    "RegistryClassResolver",
    "_ConfigReader",
    "_get_option",
    "_lcfirst",
    "reset_claymeta_options",
    "set_claymeta_option",
    "to_snake_case",
    "to_studly_case",
]
