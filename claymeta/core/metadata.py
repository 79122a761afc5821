"""
This module defines `EntityMetadata`, the container the metadata factory
fills in for an entity class and hands to the mapping layer.

An `EntityMetadata` holds, for every persistable property of the entity, a
small record keyed by the storage field name:

    {"type": "integer", "getter": "getAge", "setter": "setAge"}

The type is one of the `FIELD_TYPE_*` constants. Relationship properties are
never recorded here. Callers are expected to cache the container, the factory
builds a new one on every call.

Besides lookups, the container offers `to_frame()`, a pandas view of the
fields that is handy for inspecting or documenting a model.
"""

from collections.abc import Mapping

import pandas as pd


class EntityMetadata:
    """Field level metadata of an entity class."""

    FIELD_TYPE_BOOL = "boolean"
    FIELD_TYPE_INT = "integer"
    FIELD_TYPE_FLOAT = "float"
    FIELD_TYPE_STRING = "string"
    FIELD_TYPE_DATETIME = "datetime"
    FIELD_TYPE_ARRAY = "array"

    FIELD_TYPES = (
        FIELD_TYPE_BOOL,
        FIELD_TYPE_INT,
        FIELD_TYPE_FLOAT,
        FIELD_TYPE_STRING,
        FIELD_TYPE_DATETIME,
        FIELD_TYPE_ARRAY,
    )

    METADATA_FIELD_TYPE = "type"
    METADATA_FIELD_GETTER = "getter"
    METADATA_FIELD_SETTER = "setter"

    FRAME_COLUMNS = [METADATA_FIELD_TYPE, METADATA_FIELD_GETTER, METADATA_FIELD_SETTER]

    def __init__(self, entity: str):
        if not isinstance(entity, str):
            raise TypeError("Entity name must be a string.")
        self._entity = entity
        self._fields: dict[str, dict[str, str]] = {}

    @property
    def entity(self) -> str:
        """The qualified name of the entity class, empty for empty metadata."""
        return self._entity

    @property
    def fields(self) -> dict[str, dict[str, str]]:
        """A copy of all field metadata, keyed by field name."""
        return {name: dict(meta) for name, meta in self._fields.items()}

    def add_field_metadata(self, name: str, metadata: Mapping[str, str]) -> None:
        """Record the metadata of a field. A later call for the same name wins."""
        if not isinstance(name, str) or not name:
            raise TypeError("Field name must be a non-empty string.")
        if not isinstance(metadata, Mapping):
            raise TypeError("Field metadata must be a mapping.")
        self._fields[name] = dict(metadata)

    def get_field_metadata(self, name: str) -> dict[str, str]:
        """Return a copy of the metadata of a field."""
        try:
            return dict(self._fields[name])
        except KeyError:
            raise KeyError(
                f"No metadata for field {name!r} on entity {self._entity!r}"
            ) from None

    def get_field_names(self) -> list[str]:
        return list(self._fields)

    def has_field(self, name: str) -> bool:
        return name in self._fields

    def get_field_type(self, name: str) -> str:
        return self.get_field_metadata(name).get(self.METADATA_FIELD_TYPE)

    def get_field_getter(self, name: str) -> str:
        return self.get_field_metadata(name).get(self.METADATA_FIELD_GETTER)

    def get_field_setter(self, name: str) -> str:
        return self.get_field_metadata(name).get(self.METADATA_FIELD_SETTER)

    def to_frame(self) -> pd.DataFrame:
        """Return the field metadata as a DataFrame indexed by field name."""
        if not self._fields:
            return pd.DataFrame(columns=self.FRAME_COLUMNS, index=pd.Index([], name="field"))

        frame = pd.DataFrame.from_dict(self._fields, orient="index")
        frame = frame.reindex(columns=self.FRAME_COLUMNS)
        frame.index.name = "field"
        return frame

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __repr__(self) -> str:
        return f"EntityMetadata(entity={self._entity!r}, fields={self.get_field_names()!r})"
