"""
This module reads discriminator map files. A map can be kept next to the
models in YAML, JSON or TOML and loaded into the plain mapping form that
`DiscriminatorMap.from_dict` validates.

`_ConfigReader` picks the format from the file extension. Every format is
described by its label, the mode the file is opened in, its loader and the
exception the loader raises for malformed content, so a decoding failure is
reported the same way whatever the format.
"""

import json
import tomllib
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True)
class _FileFormat:
    label: str
    binary: bool
    load: Callable[[Any], Any]
    decode_error: type[Exception]


_TOML = _FileFormat("TOML", True, tomllib.load, tomllib.TOMLDecodeError)
_YAML = _FileFormat("YAML", False, yaml.safe_load, yaml.YAMLError)
_JSON = _FileFormat("JSON", False, json.load, json.JSONDecodeError)

_FORMATS = {".toml": _TOML, ".yaml": _YAML, ".yml": _YAML, ".json": _JSON}


class _ConfigReader:
    """Read a discriminator map file into a dictionary."""

    def __init__(self, path: Path | str) -> None:
        if not isinstance(path, (Path, str)):
            raise TypeError("Path must be a string or a pathlib.Path object.")

        self.path = Path(path)
        self.extension = self.path.suffix.lower()
        if self.extension not in _FORMATS:
            raise ValueError(
                f"Unsupported file extension {self.extension!r} for a discriminator "
                f"map. Supported extensions are: {sorted(_FORMATS)}"
            )
        self.format = _FORMATS[self.extension]

    def read(self) -> dict | None:
        """Parse the file, None for an empty YAML document."""
        fmt = self.format
        try:
            if fmt.binary:
                with self.path.open("rb") as f:
                    return fmt.load(f)
            with self.path.open(encoding="utf-8") as f:
                return fmt.load(f)
        except FileNotFoundError as e:
            raise FileNotFoundError(f"Discriminator file not found: {self.path}") from e
        except fmt.decode_error as e:
            raise ValueError(
                f"Discriminator file {self.path.name} is not valid {fmt.label}: {e}"
            ) from e
