"""
This module defines the discriminator map of a polymorphic entity family.

A root entity class may declare, as the class attribute named by the
`discriminator_attribute` option (`model_discriminator_map` by default), which
subclasses make up its family:

    class Vehicle:
        model_discriminator_map = {
            "map": {"car": True, "truck": "HeavyTruck"},
            "subclass_namespace": "fleet.models",
            "subclass_suffix": "Entity",
        }

Each type tag maps either to a class name or to `True`, meaning "use the type
tag as the class name". `subclass_namespace` defaults to the module of the
root class and `subclass_suffix` to an empty string. The camelCase spellings
`subclassNamespace` and `subclassSuffix` are accepted too, so maps shared with
other tooling can be used as they are.

Maps can also live in a YAML, JSON or TOML file and be loaded with
`load_discriminator_map`, the result can be assigned to the class attribute
directly.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from claymeta._errors import _validate_discriminator_type
from claymeta._utils import _ConfigReader, to_studly_case

_KEY_ALIASES = {
    "subclassNamespace": "subclass_namespace",
    "subclassSuffix": "subclass_suffix",
}


@dataclass(frozen=True)
class DiscriminatorMap:
    """
    Validated discriminator map of an entity family.

    This class is frozen. The class map is returned as a copy when accessed,
    so external mutation does not affect the stored map.
    """

    class_map: dict[str, str | bool] = field(default_factory=dict)
    subclass_namespace: str | None = None
    subclass_suffix: str = ""

    # Compared by value, the dict field leaves it unhashable
    __hash__ = None

    def __getattribute__(self, name: str):
        val = super().__getattribute__(name)
        if name == "class_map" and isinstance(val, dict):
            return dict(val)
        return val

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DiscriminatorMap":
        """Build a DiscriminatorMap from its raw mapping form."""
        if isinstance(data, Mapping):
            data = {_KEY_ALIASES.get(key, key): value for key, value in data.items()}
        data = _validate_discriminator_type(data)
        return cls(
            class_map=dict(data["map"]),
            subclass_namespace=data.get("subclass_namespace") or None,
            subclass_suffix=data.get("subclass_suffix") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        data = {"map": self.class_map, "subclass_suffix": self.subclass_suffix}
        if self.subclass_namespace:
            data["subclass_namespace"] = self.subclass_namespace
        return data

    def candidate_names(self, type_tag: str, fallback_namespace: str) -> list[str]:
        """
        Return the class names to try for a type tag, in resolution order.

        The names are: the class name as given, prefixed with the subclass
        namespace, and prefixed with the namespace and followed by the suffix.
        """
        class_name = self.class_map[type_tag]
        if class_name is True:
            class_name = type_tag
        class_name = to_studly_case(class_name)

        namespace = self.subclass_namespace or fallback_namespace
        namespaced = f"{namespace}.{class_name}" if namespace else class_name

        candidates = [class_name, namespaced, f"{namespaced}{self.subclass_suffix}"]
        # Keep the order, drop repeats (no namespace or no suffix)
        return list(dict.fromkeys(candidates))

    def __iter__(self) -> Iterator[str]:
        return iter(self.class_map)

    def __len__(self) -> int:
        return len(self.class_map)


def load_discriminator_map(path: str | Path) -> DiscriminatorMap:
    """
    Load a discriminator map from a YAML, JSON or TOML file.

    Args:
        path (str | Path): Path of the file to read.

    Returns:
        DiscriminatorMap: The validated discriminator map.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file type is not supported or cannot be decoded.
        InheritanceConfigError: If the content is not a valid discriminator map.
    """
    data = _ConfigReader(path).read()
    return DiscriminatorMap.from_dict(data or {})
