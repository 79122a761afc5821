"""
This module exposes the core components of the claymeta engine,
including the metadata factory and the metadata container it fills in.
"""

from claymeta.core._abstracts.factory import EntityMetadataFactory
from claymeta.core._probe import ProbeOutcome
from claymeta.core.discriminator import DiscriminatorMap, load_discriminator_map
from claymeta.core.factory import ClayMetadataFactory
from claymeta.core.metadata import EntityMetadata

__all__ = [
    "ClayMetadataFactory",
    "DiscriminatorMap",
    "EntityMetadata",
    "EntityMetadataFactory",
    "ProbeOutcome",
    "load_discriminator_map",
]
