"""
This module defines the exception raised when the metadata of an entity class
cannot be built from its configuration.

`MetadataError`:
This `ValueError` covers every configuration problem the metadata factory can
run into: a discriminator map without its `map` entry, a discriminator type
tag that does not resolve to an existing class, or a class that has to be
instantiated for type probing but requires constructor arguments. These
problems abort the whole `create_metadata` call, no partial metadata is
returned.
"""


class MetadataError(ValueError):
    """Raised when entity metadata cannot be built from a class."""

    pass


class InheritanceConfigError(MetadataError):
    """Raised for an invalid discriminator map on an entity class."""

    def __init__(self, detail: str):
        """Initialize the InheritanceConfigError with a detailed message."""
        super().__init__(f"Invalid entity inheritance configuration. {detail}")


class PropertyTypeDetectionError(MetadataError):
    """Raised when a class cannot be instantiated to probe a property type."""

    def __init__(self, class_name: str, property_name: str, detail: str):
        """Initialize the PropertyTypeDetectionError with a detailed message."""
        self.class_name = class_name
        self.property_name = property_name
        super().__init__(
            f"Unable to detect property type for '{class_name}::{property_name}'. {detail}"
        )
