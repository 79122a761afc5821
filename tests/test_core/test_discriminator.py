import json
from pathlib import Path

import pytest
import yaml

from claymeta import (
    ClayMetadataFactory,
    DiscriminatorMap,
    InheritanceConfigError,
    load_discriminator_map,
)

_RAW = {
    "map": {"car": True, "truck": "heavy_truck"},
    "subclass_namespace": "tests.data.entities.vehicles",
}


def test_from_dict():
    discriminator = DiscriminatorMap.from_dict(_RAW)
    assert discriminator.class_map == {"car": True, "truck": "heavy_truck"}
    assert discriminator.subclass_namespace == "tests.data.entities.vehicles"
    assert discriminator.subclass_suffix == ""
    assert list(discriminator) == ["car", "truck"]
    assert len(discriminator) == 2


def test_from_dict_camel_case_keys():
    discriminator = DiscriminatorMap.from_dict(
        {"map": {"boat": True}, "subclassNamespace": "fleet", "subclassSuffix": "Entity"}
    )
    assert discriminator.subclass_namespace == "fleet"
    assert discriminator.subclass_suffix == "Entity"


def test_class_map_is_copied():
    discriminator = DiscriminatorMap.from_dict(_RAW)
    discriminator.class_map["plane"] = True
    assert "plane" not in discriminator.class_map


def test_frozen():
    discriminator = DiscriminatorMap.from_dict(_RAW)
    with pytest.raises(AttributeError):
        discriminator.subclass_suffix = "Entity"


def test_unhashable():
    """Maps compare by value, but cannot be used as keys or set members."""
    discriminator = DiscriminatorMap.from_dict(_RAW)
    assert discriminator == DiscriminatorMap.from_dict(_RAW)
    with pytest.raises(TypeError, match="unhashable"):
        hash(discriminator)


def test_to_dict_round_trip():
    discriminator = DiscriminatorMap.from_dict(_RAW)
    assert DiscriminatorMap.from_dict(discriminator.to_dict()) == discriminator


@pytest.mark.parametrize(
    ("type_tag", "fallback", "expected"),
    [
        # True means the type tag is the class name
        ("car", "models", ["Car", "tests.data.entities.vehicles.Car"]),
        ("truck", "models", ["HeavyTruck", "tests.data.entities.vehicles.HeavyTruck"]),
    ],
)
def test_candidate_names(type_tag, fallback, expected):
    discriminator = DiscriminatorMap.from_dict(_RAW)
    assert discriminator.candidate_names(type_tag, fallback) == expected


def test_candidate_names_fallback_namespace_and_suffix():
    discriminator = DiscriminatorMap.from_dict(
        {"map": {"A": True}, "subclass_suffix": "Entity"}
    )
    assert discriminator.candidate_names("A", "NS") == ["A", "NS.A", "NS.AEntity"]


def test_candidate_names_without_namespace():
    discriminator = DiscriminatorMap.from_dict({"map": {"a": "pkg.models.thing"}})
    assert discriminator.candidate_names("a", "") == ["pkg.models.Thing"]


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ({}, "The discriminator map was missing"),
        ({"map": {}}, "The discriminator map was missing"),
        ({"subclass_suffix": "Entity"}, "The discriminator map was missing"),
        ({"map": ["car"]}, "The discriminator map must be a mapping"),
        ({"map": {1: True}}, "The subclass type 1 must be a string"),
        ({"map": {"car": False}}, "must map to a class name or True"),
        ({"map": {"car": ""}}, "must map to a class name or True"),
        ({"map": {"car": True}, "subclass_suffix": 1}, "'subclass_suffix' must be a string"),
        ("car", "The discriminator must be a mapping"),
    ],
)
def test_invalid_discriminator(raw, message):
    with pytest.raises(InheritanceConfigError, match=message):
        DiscriminatorMap.from_dict(raw)


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_load_yaml(tmp_path):
    path = _write(tmp_path / "vehicles.yaml", yaml.safe_dump(_RAW))
    assert load_discriminator_map(path) == DiscriminatorMap.from_dict(_RAW)


def test_load_json(tmp_path):
    path = _write(tmp_path / "vehicles.json", json.dumps(_RAW))
    assert load_discriminator_map(str(path)) == DiscriminatorMap.from_dict(_RAW)


def test_load_toml(tmp_path):
    content = (
        'subclass_namespace = "tests.data.entities.vehicles"\n'
        "\n"
        "[map]\n"
        "car = true\n"
        'truck = "heavy_truck"\n'
    )
    path = _write(tmp_path / "vehicles.toml", content)
    assert load_discriminator_map(path) == DiscriminatorMap.from_dict(_RAW)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Discriminator file not found"):
        load_discriminator_map(tmp_path / "missing.yaml")


def test_load_unsupported_extension(tmp_path):
    path = _write(tmp_path / "vehicles.ini", "[map]")
    with pytest.raises(ValueError, match="Unsupported file extension '.ini'"):
        load_discriminator_map(path)


def test_load_invalid_content(tmp_path):
    path = _write(tmp_path / "vehicles.json", "{not json")
    with pytest.raises(ValueError, match="Discriminator file vehicles.json is not valid JSON"):
        load_discriminator_map(path)


def test_load_invalid_yaml(tmp_path):
    path = _write(tmp_path / "vehicles.yaml", "map: [car\n")
    with pytest.raises(ValueError, match="vehicles.yaml is not valid YAML"):
        load_discriminator_map(path)


def test_load_invalid_toml(tmp_path):
    path = _write(tmp_path / "vehicles.toml", "map = \n")
    with pytest.raises(ValueError, match="vehicles.toml is not valid TOML"):
        load_discriminator_map(path)


def test_load_path_type():
    with pytest.raises(TypeError, match="Path must be a string"):
        load_discriminator_map(42)


def test_load_empty_file(tmp_path):
    path = _write(tmp_path / "vehicles.yml", "")
    with pytest.raises(InheritanceConfigError, match="The discriminator map was missing"):
        load_discriminator_map(path)


def test_loaded_map_on_class(tmp_path):
    """A loaded map can be assigned to the class attribute as it is."""
    from tests.data.entities.vehicles import Vehicle

    path = _write(tmp_path / "vehicles.yaml", yaml.safe_dump({"map": {"car": True}}))

    class Garage:
        model_discriminator_map = load_discriminator_map(path)

    # Garage lives in the test module, so the names must be qualified
    with pytest.raises(InheritanceConfigError, match="'car'"):
        ClayMetadataFactory().create_metadata(Garage)

    Garage.model_discriminator_map = DiscriminatorMap.from_dict(
        {"map": {"car": True}, "subclass_namespace": Vehicle.__module__}
    )
    metadata = ClayMetadataFactory().create_metadata(Garage)
    assert set(metadata.get_field_names()) == {"wheels", "brand", "doors"}
