"""
This module centralizes custom exception types for the claymeta package,
making them easily importable from a single location.
"""

from ._discriminator import _validate_discriminator_type
from ._metadata import InheritanceConfigError, MetadataError, PropertyTypeDetectionError

__all__ = [
    "InheritanceConfigError",
    "MetadataError",
    "PropertyTypeDetectionError",
    "_validate_discriminator_type",
]
