"""
This module provides the abstract base class for entity metadata factories.
A factory turns an entity class into the `EntityMetadata` the mapping layer
uses to move values between objects and storage.
"""

from abc import ABC, abstractmethod

from claymeta.core.metadata import EntityMetadata


class EntityMetadataFactory(ABC):
    """Abstract base class for all entity metadata factories."""

    @abstractmethod
    def create_metadata(self, reference: type) -> EntityMetadata:
        """Build the metadata of an entity class."""
        pass

    def create_empty_metadata(self) -> EntityMetadata:
        """Return metadata with no entity name and no fields."""
        return EntityMetadata("")


__all__ = ["EntityMetadataFactory"]
