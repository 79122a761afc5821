"""
This module implements empirical type detection for entity properties.

When the signature of a setter does not tell which storage type a property
has, the metadata factory falls back to probing: it creates a default instance
of the class that owns the property, writes a fixed battery of sample values
through the setter and reads each one back through the getter. A sample that
comes back identical (same type, same value) counts as a match.

The scalar battery is tried first. The complex battery (datetime and array)
is only tried if no scalar matched. The matches are then narrowed down:
- a single match is the type,
- exactly integer and float means float, since a setter that keeps floats
  also keeps integer values untouched,
- anything else falls back to string.

A setter that raises for a sample simply rejects it. Probing assumes setters
are plain assignments, any side effect they have is triggered as well.
"""

import enum
import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from claymeta._errors import PropertyTypeDetectionError
from claymeta._utils import ClassDescriptor

from .metadata import EntityMetadata

logger = logging.getLogger(__name__)


class ProbeOutcome(enum.Enum):
    """Result of writing a sample value through a setter."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"


def _scalar_battery() -> dict[str, Any]:
    return {
        EntityMetadata.FIELD_TYPE_BOOL: True,
        EntityMetadata.FIELD_TYPE_INT: 46,
        EntityMetadata.FIELD_TYPE_FLOAT: 23.653,
        EntityMetadata.FIELD_TYPE_STRING: "test",
    }


def _complex_battery() -> dict[str, Any]:
    return {
        EntityMetadata.FIELD_TYPE_DATETIME: datetime.now(),
        EntityMetadata.FIELD_TYPE_ARRAY: [1, 2, 3],
    }


def _is_identical(expected: Any, actual: Any) -> bool:
    """Strict comparison: same type and same value, containers element-wise."""
    if actual is expected:
        return True
    if type(actual) is not type(expected):
        return False
    if isinstance(expected, (list, tuple)):
        return len(expected) == len(actual) and all(
            _is_identical(e, a) for e, a in zip(expected, actual, strict=True)
        )
    return expected == actual


def _try_apply(setter: Callable[[Any], Any], value: Any) -> ProbeOutcome:
    """Write a value through a setter, a raised exception means rejection."""
    try:
        setter(value)
    except Exception as e:
        logger.debug(f"[TypeProber] Setter rejected {value!r}: {e!r}")
        return ProbeOutcome.REJECTED
    return ProbeOutcome.ACCEPTED


def _check_field_type(
    results: list[str], instance: object, setter: str, getter: str, field_type: str, value: Any
) -> None:
    """Round trip a sample value and record the type if it comes back identical."""
    if _try_apply(getattr(instance, setter), value) is ProbeOutcome.REJECTED:
        return

    result = getattr(instance, getter)()
    if _is_identical(value, result):
        results.append(field_type)


def _disambiguate(results: list[str]) -> str:
    """Reduce the matched types to a single field type."""
    if len(results) == 1:
        return results[0]
    if set(results) == {EntityMetadata.FIELD_TYPE_INT, EntityMetadata.FIELD_TYPE_FLOAT}:
        return EntityMetadata.FIELD_TYPE_FLOAT
    return EntityMetadata.FIELD_TYPE_STRING


def detect_property_type(
    ref: ClassDescriptor, getter: str, setter: str, property_name: str
) -> str:
    """
    Detect the storage type of a property by probing a fresh instance.

    Args:
        ref (ClassDescriptor): The class owning the property accessors.
        getter (str): Name of the getter method.
        setter (str): Name of the setter method.
        property_name (str): Name of the property, used in error messages.

    Returns:
        str: One of the EntityMetadata.FIELD_TYPE_* constants.

    Raises:
        PropertyTypeDetectionError: If the class requires constructor arguments.
    """
    if ref.get_required_constructor_arity() > 0:
        raise PropertyTypeDetectionError(
            ref.name,
            property_name,
            "Cannot create an instance of the class, as it has a constructor "
            "with required arguments",
        )
    instance = ref.new_instance()

    # More than one sample may come back positive
    results: list[str] = []
    for field_type, value in _scalar_battery().items():
        _check_field_type(results, instance, setter, getter, field_type, value)

    if not results:
        for field_type, value in _complex_battery().items():
            _check_field_type(results, instance, setter, getter, field_type, value)

    field_type = _disambiguate(results)
    logger.debug(
        f"[TypeProber] {ref.name}::{property_name} matched {results} -> {field_type}"
    )
    return field_type
