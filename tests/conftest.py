"""
This module contains shared fixtures for testing.
"""

import pytest

from claymeta import ClayMetadataFactory
from claymeta.options import reset_claymeta_options
from tests.data.entities.people import Person
from tests.data.entities.vehicles import Vehicle


@pytest.fixture(autouse=True)
def _reset_options():
    """Restore package options after every test."""
    yield
    reset_claymeta_options()


@pytest.fixture
def factory() -> ClayMetadataFactory:
    """A factory resolving discriminator classes by import."""
    return ClayMetadataFactory()


@pytest.fixture
def person_metadata(factory):
    return factory.create_metadata(Person)


@pytest.fixture
def vehicle_metadata(factory):
    return factory.create_metadata(Vehicle)


@pytest.fixture
def expected_person_fields() -> dict[str, dict[str, str]]:
    """The metadata expected for the Person entity."""
    return {
        "name": {"type": "string", "getter": "getName", "setter": "setName"},
        "age": {"type": "integer", "getter": "getAge", "setter": "setAge"},
        "height": {"type": "float", "getter": "getHeight", "setter": "setHeight"},
        "weight": {"type": "float", "getter": "getWeight", "setter": "setWeight"},
        "active": {"type": "boolean", "getter": "getActive", "setter": "setActive"},
        "birth_date": {
            "type": "datetime",
            "getter": "getBirthDate",
            "setter": "setBirthDate",
        },
        "nicknames": {
            "type": "array",
            "getter": "getNicknames",
            "setter": "addNicknames",
        },
        "scores": {"type": "array", "getter": "getScores", "setter": "addScores"},
        "notes": {"type": "string", "getter": "getNotes", "setter": "setNotes"},
        "rejects": {"type": "string", "getter": "getRejects", "setter": "setRejects"},
    }
