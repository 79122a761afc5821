"""
This module provides the class-name resolvers used to turn the class names
found in a discriminator map into real classes.

A resolver is any object with a `resolve(name)` method returning the class, or
`None` when no class goes by that name. The metadata factory tries the
candidate names in order and stops at the first one that resolves, so a
resolver must never raise for an unknown name.

- `ImportClassResolver`: The default. Treats the name as a dotted import path
  (`package.module.ClassName`), imports the module and looks the class up.
- `RegistryClassResolver`: Looks names up in an explicit mapping. Useful when
  entity classes are not importable by name, e.g. classes created at runtime.
"""

import importlib
import inspect
from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClassResolver(Protocol):
    """Resolves a class name to a class."""

    def resolve(self, name: str) -> type | None: ...


class ImportClassResolver:
    """Resolve dotted names by importing their module."""

    def resolve(self, name: str) -> type | None:
        module_name, _, attr_path = name.rpartition(".")
        if not module_name or not attr_path:
            return None

        try:
            module = importlib.import_module(module_name)
        except ImportError:
            # Names may also point at a nested class, "pkg.mod.Outer.Inner"
            return self._resolve_nested(module_name, attr_path)

        obj = getattr(module, attr_path, None)
        return obj if inspect.isclass(obj) else None

    def _resolve_nested(self, module_name: str, attr_path: str) -> type | None:
        outer = self.resolve(module_name)
        if outer is None:
            return None
        obj = getattr(outer, attr_path, None)
        return obj if inspect.isclass(obj) else None


class RegistryClassResolver:
    """Resolve names from an explicit name -> class mapping."""

    def __init__(self, classes: Mapping[str, type] | None = None):
        self._classes = dict(classes or {})

    def register(self, cls: type, name: str | None = None) -> None:
        """Register a class under a name, its importable name by default."""
        if not inspect.isclass(cls):
            raise TypeError(f"Only classes can be registered, got {cls!r}.")
        self._classes[name or f"{cls.__module__}.{cls.__qualname__}"] = cls

    def resolve(self, name: str) -> type | None:
        return self._classes.get(name)


__all__ = ["ClassResolver", "ImportClassResolver", "RegistryClassResolver"]
