"""
This module contains the metadata factory of claymeta.

`ClayMetadataFactory` builds the field metadata of an entity class purely from
the names and signatures of its public accessor methods, no schema has to be
declared. It is the bridge between plain Python model classes and the mapping
layer that persists them.

Its key responsibilities include:
- **Method Scanning**: Every public method named `get<Property>`,
  `set<Property>` or `add<Property>` is registered as the getter, setter or
  adder of `property`. The class that first declares an accessor becomes the
  owning class of the property.

- **Subclass Expansion**: If the root class declares a discriminator map, each
  subclass it names is resolved and scanned as well, so a polymorphic family
  yields one merged set of accessors. Accessors already found on the root
  class are kept.

- **Property Resolution**: Every setter with a matching getter is examined.
  Setters taking another entity class are relationships and are left out.
  For container setters with an adder, the last parameter of the adder gives
  the element type. Container properties are arrays.

- **Type Probing**: Remaining properties are typed empirically by writing
  sample values through the setter of a fresh instance (see `_probe.py`).

The registries built while scanning live only for the duration of a single
`create_metadata` call. The factory keeps no state between calls, callers are
expected to cache the returned metadata.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import override

import pandas as pd

from claymeta._errors import InheritanceConfigError
from claymeta._utils import (
    ClassDescriptor,
    ClassResolver,
    ImportClassResolver,
    MethodDescriptor,
    _get_option,
    _lcfirst,
    to_snake_case,
)

from ._abstracts.factory import EntityMetadataFactory
from ._probe import detect_property_type
from .discriminator import DiscriminatorMap
from .metadata import EntityMetadata

logger = logging.getLogger(__name__)

_ACCESSOR_PATTERN = re.compile(r"^(get|set|add)[A-Z]")

_REGISTRY_BY_PREFIX = {"get": "getters", "set": "setters", "add": "adders"}


@dataclass
class _MethodRegistry:
    """Accessors found while scanning one entity family, keyed by property."""

    getters: dict[str, MethodDescriptor] = field(default_factory=dict)
    setters: dict[str, MethodDescriptor] = field(default_factory=dict)
    adders: dict[str, MethodDescriptor] = field(default_factory=dict)
    owning_class: dict[str, ClassDescriptor] = field(default_factory=dict)

    def register(
        self, kind: str, property_name: str, method: MethodDescriptor, ref: ClassDescriptor
    ) -> None:
        # First writer wins, subclasses never replace accessors of the root class
        getattr(self, kind).setdefault(property_name, method)
        self.owning_class.setdefault(property_name, ref)


class ClayMetadataFactory(EntityMetadataFactory):
    """Builds entity metadata by introspecting accessor methods.

    Attributes:
        resolver (ClassResolver): Resolves the class names of a discriminator
            map. Defaults to an `ImportClassResolver`.
    """

    def __init__(self, resolver: ClassResolver | None = None):
        """Initializes the ClayMetadataFactory.

        Args:
            resolver (ClassResolver | None, optional): Resolver used for
                discriminator class names. Defaults to None, which imports
                classes by their dotted name.
        """
        if resolver is not None and not isinstance(resolver, ClassResolver):
            raise TypeError("Argument 'resolver' must provide a 'resolve(name)' method.")
        self.resolver = resolver or ImportClassResolver()

    @override
    def create_metadata(self, reference: type) -> EntityMetadata:
        """Build the field metadata of an entity class.

        Args:
            reference (type): The entity class.

        Returns:
            EntityMetadata: The metadata of every plain, fully accessible
                property of the class and of its discriminator subclasses.

        Raises:
            TypeError: If 'reference' is not a class.
            MetadataError: If the discriminator map is invalid or a class to
                probe requires constructor arguments.
        """
        ref = ClassDescriptor(reference)
        registry = _MethodRegistry()

        self._find_clay_methods(registry, ref)

        entity_metadata = EntityMetadata(ref.name)

        # Only properties with both a setter and a getter can be round tripped
        for property_name, setter_method in registry.setters.items():
            getter_method = registry.getters.get(property_name)
            if getter_method is None:
                logger.debug(f"[MetadataFactory] Skipping '{property_name}': no getter")
                continue

            field_metadata = self._resolve_property(
                registry, property_name, setter_method, getter_method
            )
            if field_metadata is None:
                continue

            entity_metadata.add_field_metadata(to_snake_case(property_name), field_metadata)

        logger.debug(
            f"[MetadataFactory] Built metadata for {ref.name}: "
            f"{entity_metadata.get_field_names()}"
        )
        return entity_metadata

    def create_metadata_frame(self, references: Iterable[type]) -> pd.DataFrame:
        """Build the metadata of several classes as a single DataFrame.

        The frame is indexed by (entity, field) and has the columns type,
        getter and setter.
        """
        frames = {}
        for reference in references:
            metadata = self.create_metadata(reference)
            frames[metadata.entity] = metadata.to_frame()

        if not frames:
            return pd.DataFrame(
                columns=EntityMetadata.FRAME_COLUMNS,
                index=pd.MultiIndex.from_tuples([], names=["entity", "field"]),
            )
        return pd.concat(frames, names=["entity", "field"])

    def detect_property_type(
        self, reference: type, getter: str, setter: str, property_name: str
    ) -> str:
        """Detect the storage type of a property by probing an instance."""
        return detect_property_type(ClassDescriptor(reference), getter, setter, property_name)

    def _find_clay_methods(
        self, registry: _MethodRegistry, ref: ClassDescriptor, is_subclass: bool = False
    ) -> None:
        """Register the getters, setters and adders of a class."""
        for method in ref.get_public_methods():
            match = _ACCESSOR_PATTERN.match(method.name)
            if match is None:
                continue
            property_name = _lcfirst(method.name[3:])
            registry.register(
                _REGISTRY_BY_PREFIX[match.group(1)], property_name, method, ref
            )

        logger.debug(f"[MetadataFactory] Scanned {ref.name} (subclass={is_subclass})")

        # Only the root class can declare an entity family
        if is_subclass:
            return

        discriminator = ref.get_default_property(_get_option("discriminator_attribute"))
        if discriminator:
            self._find_subclass_clay_methods(registry, discriminator, ref.module)

    def _find_subclass_clay_methods(
        self,
        registry: _MethodRegistry,
        discriminator: DiscriminatorMap | dict,
        parent_namespace: str,
    ) -> None:
        """Resolve every subclass of a discriminator map and scan it."""
        if not isinstance(discriminator, DiscriminatorMap):
            discriminator = DiscriminatorMap.from_dict(discriminator)

        for type_tag in discriminator:
            subclass = self._resolve_subclass(discriminator, type_tag, parent_namespace)
            self._find_clay_methods(registry, ClassDescriptor(subclass), is_subclass=True)

    def _resolve_subclass(
        self, discriminator: DiscriminatorMap, type_tag: str, parent_namespace: str
    ) -> type:
        for name in discriminator.candidate_names(type_tag, parent_namespace):
            subclass = self.resolver.resolve(name)
            if subclass is not None:
                return subclass

        raise InheritanceConfigError(
            f"The subclass type '{type_tag}' did not map to a class that exists"
        )

    def _resolve_property(
        self,
        registry: _MethodRegistry,
        property_name: str,
        setter_method: MethodDescriptor,
        getter_method: MethodDescriptor,
    ) -> dict[str, str] | None:
        """Build the field metadata of a property, None for relationships."""
        value_param = setter_method.first_parameter
        if value_param is None:
            logger.debug(f"[MetadataFactory] Skipping '{property_name}': setter takes no value")
            return None

        # For collections, the adder tells the element type. Its last parameter
        # is the value, adders of associative collections take (key, value).
        # The adder then stands in as the setter of the field
        output_setter = setter_method
        adder_method = registry.adders.get(property_name)
        if value_param.is_container and adder_method is not None:
            value_param = adder_method.last_parameter or value_param
            output_setter = adder_method

        # Relationships with other entities belong to another mapping layer
        if value_param.class_namespace:
            logger.debug(
                f"[MetadataFactory] Skipping '{property_name}': relationship with "
                f"{value_param.class_name}"
            )
            return None

        if value_param.is_container:
            field_type = EntityMetadata.FIELD_TYPE_ARRAY
        else:
            field_type = detect_property_type(
                self._probe_class(registry, property_name, setter_method, getter_method),
                getter_method.name,
                setter_method.name,
                property_name,
            )

        return {
            EntityMetadata.METADATA_FIELD_TYPE: field_type,
            EntityMetadata.METADATA_FIELD_GETTER: getter_method.name,
            EntityMetadata.METADATA_FIELD_SETTER: output_setter.name,
        }

    @staticmethod
    def _probe_class(
        registry: _MethodRegistry,
        property_name: str,
        setter_method: MethodDescriptor,
        getter_method: MethodDescriptor,
    ) -> ClassDescriptor:
        """Pick the class to probe, one that has both accessors of the property."""
        ref = registry.owning_class[property_name]
        if ref.has_method(setter_method.name) and ref.has_method(getter_method.name):
            return ref
        # A subclass completed the accessor pair declared by its parent
        return ClassDescriptor(setter_method.declaring_class)
