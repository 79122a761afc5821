"""
This module validates the raw discriminator map declared on an entity class
or loaded from a configuration file, before the metadata factory walks it.

Expected a mapping of the form:
{
    "map": {type_tag: class_name | True},
    "subclass_namespace": str,   # optional
    "subclass_suffix": str,      # optional
}
"""

from collections.abc import Mapping

from ._metadata import InheritanceConfigError


def _validate_discriminator_type(discriminator: Mapping) -> Mapping:
    """Validate type of a discriminator map.

    Checks that the discriminator is a mapping with a non-empty "map" entry,
    that every type tag is a string and that every mapped class name is either
    a string or the literal True.

    Args:
        discriminator (Mapping): The discriminator to validate.

    Returns:
        Mapping: The validated discriminator.

    Raises:
        InheritanceConfigError: If the discriminator is malformed.
    """
    if not isinstance(discriminator, Mapping):
        raise InheritanceConfigError("The discriminator must be a mapping")

    class_map = discriminator.get("map")
    if not class_map:
        raise InheritanceConfigError("The discriminator map was missing")
    if not isinstance(class_map, Mapping):
        raise InheritanceConfigError("The discriminator map must be a mapping")

    for type_tag, class_name in class_map.items():
        if not isinstance(type_tag, str):
            raise InheritanceConfigError(
                f"The subclass type {type_tag!r} must be a string"
            )
        if class_name is not True and not (isinstance(class_name, str) and class_name):
            raise InheritanceConfigError(
                f"The subclass type '{type_tag}' must map to a class name or True"
            )

    for key in ("subclass_namespace", "subclass_suffix"):
        value = discriminator.get(key)
        if value is not None and not isinstance(value, str):
            raise InheritanceConfigError(f"'{key}' must be a string")

    return discriminator
