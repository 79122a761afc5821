"""
This module provides the reflection layer that `claymeta`'s metadata factory
relies on. It turns a Python class into uniform descriptor objects, so the
factory never has to touch `inspect` or `typing` directly.

Key Objects:
- `ParameterDescriptor`: One parameter of a public method. Knows its declared
  type, whether that type is a container (list, dict, tuple, set and their
  generic aliases) and, when the declared type is a class, that class's
  qualified name and namespace.

- `MethodDescriptor`: A public method, with its name, the class declaring it
  and its ordered parameters (`self`/`cls` excluded).

- `ClassDescriptor`: A class handle exposing its qualified name, namespace,
  public methods, class attribute defaults, the number of required
  constructor arguments and the ability to build a default instance.

Namespaces follow Python modules, with one adjustment: classes coming from
`builtins` or from the value-type modules of the standard library (`datetime`,
`decimal`, `uuid`, ...) report an empty namespace. They play
the role of global classes, which can never be the target of an entity
relationship.
"""

import collections.abc
import inspect
import types
import typing
from dataclasses import dataclass, field
from typing import Any

# Declared types treated as containers. Subclasses count as well.
_CONTAINER_TYPES = (
    list,
    tuple,
    set,
    frozenset,
    dict,
    collections.abc.Sequence,
    collections.abc.Mapping,
    collections.abc.Set,
)

# Modules whose classes are plain values rather than entities
_GLOBAL_MODULES = frozenset(
    {"builtins", "datetime", "decimal", "fractions", "uuid", "pathlib", "ipaddress", "typing"}
)

_VARIADIC_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def _namespace_of(cls: type) -> str:
    """Return the namespace of a class, empty for builtin and value-type classes."""
    module = getattr(cls, "__module__", None) or ""
    if module.partition(".")[0] in _GLOBAL_MODULES:
        return ""
    return module


def _qualified_name(cls: type) -> str:
    """Return the dotted name a class can be imported by."""
    namespace = getattr(cls, "__module__", None)
    if not namespace or namespace == "builtins":
        return cls.__qualname__
    return f"{namespace}.{cls.__qualname__}"


def _unwrap_optional(annotation: Any) -> Any:
    """Reduce Optional[X] and X | None to X."""
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_container_type(annotation: Any) -> bool:
    """Check whether a declared type describes a container."""
    if annotation is inspect.Parameter.empty or annotation is None:
        return False

    annotation = _unwrap_optional(annotation)

    # Unwrap generic aliases such as list[int] or typing.Dict[str, Foo]
    origin = typing.get_origin(annotation)
    if origin is not None:
        annotation = origin

    # str and bytes are sequences, but they are scalar values for storage
    if annotation in (str, bytes, bytearray):
        return False

    return inspect.isclass(annotation) and issubclass(annotation, _CONTAINER_TYPES)


@dataclass(frozen=True)
class ParameterDescriptor:
    """A single method parameter and its declared type."""

    name: str
    annotation: Any = inspect.Parameter.empty
    has_default: bool = False

    @property
    def is_container(self) -> bool:
        """True if the declared type is a list, dict, tuple or set like type."""
        return _is_container_type(self.annotation)

    @property
    def declared_class(self) -> type | None:
        """The declared class, or None for missing, generic or container types."""
        if self.annotation is inspect.Parameter.empty:
            return None
        annotation = _unwrap_optional(self.annotation)
        if self.is_container or not inspect.isclass(annotation):
            return None
        return annotation

    @property
    def class_name(self) -> str:
        cls = self.declared_class
        return _qualified_name(cls) if cls is not None else ""

    @property
    def class_namespace(self) -> str:
        cls = self.declared_class
        return _namespace_of(cls) if cls is not None else ""


@dataclass(frozen=True)
class MethodDescriptor:
    """A public method of a class."""

    name: str
    declaring_class: type
    parameters: tuple[ParameterDescriptor, ...] = field(default_factory=tuple)

    @property
    def first_parameter(self) -> ParameterDescriptor | None:
        return self.parameters[0] if self.parameters else None

    @property
    def last_parameter(self) -> ParameterDescriptor | None:
        return self.parameters[-1] if self.parameters else None


def _declaring_class(cls: type, name: str) -> type:
    """Find the class in the MRO whose namespace defines the attribute."""
    for klass in inspect.getmro(cls):
        if name in vars(klass):
            return klass
    return cls


def _resolve_hints(func: Any) -> dict[str, Any]:
    """Resolve annotations, falling back to the raw ones for broken hints."""
    try:
        return typing.get_type_hints(func)
    except (NameError, TypeError, AttributeError):
        return dict(getattr(func, "__annotations__", {}) or {})


def _describe_parameters(func: Any, bound: bool) -> tuple[ParameterDescriptor, ...]:
    """Build parameter descriptors for a function.

    Args:
        func: The plain function object.
        bound: Whether the first parameter is bound (self or cls) and must be
            dropped.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        # Builtin methods without a signature, nothing to inspect
        return ()

    hints = _resolve_hints(func)
    params = list(sig.parameters.values())
    if bound and params:
        params = params[1:]

    return tuple(
        ParameterDescriptor(
            name=param.name,
            annotation=hints.get(param.name, param.annotation),
            has_default=param.default is not inspect.Parameter.empty,
        )
        for param in params
        if param.kind not in _VARIADIC_KINDS
    )


def _describe_method(cls: type, name: str) -> MethodDescriptor | None:
    """Describe a public routine of a class, or None if it is not one."""
    owner = _declaring_class(cls, name)
    raw = inspect.getattr_static(cls, name)

    if isinstance(raw, staticmethod):
        func, bound = raw.__func__, False
    elif isinstance(raw, classmethod):
        func, bound = raw.__func__, True
    elif inspect.isroutine(raw):
        func, bound = raw, True
    else:
        # Properties, nested classes and plain attributes are not methods
        return None

    return MethodDescriptor(
        name=name,
        declaring_class=owner,
        parameters=_describe_parameters(func, bound),
    )


@dataclass(frozen=True)
class ClassDescriptor:
    """Reflection handle for a class."""

    cls: type

    def __post_init__(self):
        if not inspect.isclass(self.cls):
            raise TypeError(f"Expected a class, got {self.cls!r}.")

    @property
    def name(self) -> str:
        """The qualified, importable name of the class."""
        return _qualified_name(self.cls)

    @property
    def short_name(self) -> str:
        return self.cls.__name__

    @property
    def module(self) -> str:
        """The module the class is defined in."""
        return self.cls.__module__

    @property
    def namespace(self) -> str:
        """The module of the class, empty for builtin and value-type classes."""
        return _namespace_of(self.cls)

    def get_public_methods(self) -> list[MethodDescriptor]:
        """List the public methods of the class, inherited ones included."""
        methods = []
        for name in dir(self.cls):
            if name.startswith("_"):
                continue
            method = _describe_method(self.cls, name)
            if method is not None:
                methods.append(method)
        return methods

    def get_default_property(self, name: str, default: Any = None) -> Any:
        """Read the default value of a class attribute."""
        return getattr(self.cls, name, default)

    def get_required_constructor_arity(self) -> int:
        """Count the constructor parameters that have no default value."""
        init = self.cls.__init__
        if init is object.__init__:
            return 0

        try:
            sig = inspect.signature(init)
        except (TypeError, ValueError):
            return 0

        # Drop 'self'
        params = list(sig.parameters.values())[1:]
        return sum(
            1
            for param in params
            if param.default is inspect.Parameter.empty
            and param.kind not in _VARIADIC_KINDS
        )

    def has_method(self, name: str) -> bool:
        return callable(getattr(self.cls, name, None))

    def new_instance(self) -> object:
        """Create a default instance of the class."""
        return self.cls()


__all__ = ["ClassDescriptor", "MethodDescriptor", "ParameterDescriptor"]
