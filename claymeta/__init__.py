"""
This module serves as the main entry point for the claymeta package,
exposing its primary public API.
"""

from claymeta._errors import InheritanceConfigError, MetadataError, PropertyTypeDetectionError
from claymeta._utils import ImportClassResolver, RegistryClassResolver
from claymeta.core import (
    ClayMetadataFactory,
    DiscriminatorMap,
    EntityMetadata,
    EntityMetadataFactory,
    load_discriminator_map,
)

# --- Define main API for claymeta module ---
__all__ = [
    "ClayMetadataFactory",
    "DiscriminatorMap",
    "EntityMetadata",
    "EntityMetadataFactory",
    "ImportClassResolver",
    "InheritanceConfigError",
    "MetadataError",
    "PropertyTypeDetectionError",
    "RegistryClassResolver",
    "load_discriminator_map",
]
