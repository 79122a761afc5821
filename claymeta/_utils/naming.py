"""
This module provides the identifier case conversions used when turning
accessor-derived property names into storage field names, and discriminator
type tags into class names.

- `to_snake_case`: "fooBar" -> "foo_bar". Used for the keys of the entity
  metadata map.
- `to_studly_case`: "foo_bar" -> "FooBar". Used to turn discriminator type
  tags into class names. For dotted (module qualified) names only the last
  segment is converted, since module paths are case sensitive.
"""

import re

_SPLIT_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_SEPARATORS = re.compile(r"[_\-\s]+")


def to_snake_case(identifier: str) -> str:
    """Convert a camelCase or StudlyCase identifier to snake_case."""
    if not isinstance(identifier, str):
        raise TypeError("Identifier must be a string.")

    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", identifier)
    name = _SPLIT_BOUNDARY.sub(r"\1_\2", name)
    return name.lower()


def to_studly_case(identifier: str) -> str:
    """Convert a snake_case, kebab-case or camelCase identifier to StudlyCase."""
    if not isinstance(identifier, str):
        raise TypeError("Identifier must be a string.")

    prefix, dot, name = identifier.rpartition(".")
    # Keep the inner capitals, "fooBar" -> "FooBar" and not "Foobar"
    studly = "".join(part[:1].upper() + part[1:] for part in _SEPARATORS.split(name))
    return f"{prefix}{dot}{studly}"


def _lcfirst(s: str) -> str:
    """Lower-case the first character of a string."""
    return s[:1].lower() + s[1:]
