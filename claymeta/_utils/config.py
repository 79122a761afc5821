"""
This module manages global configuration settings for the claymeta package.

It offers a simple, centralized mechanism for setting and retrieving
package-level options that affect how the metadata factory reads entity
classes, without having to pass them to every factory instance.

The primary use case is renaming the class attribute that holds the
discriminator map of a polymorphic entity family (`discriminator_attribute`,
`"model_discriminator_map"` by default).

The module exposes `set_claymeta_option` to modify settings and an internal
`_get_option` to retrieve them, providing a controlled interface to a private,
module-level settings dictionary.
"""

from collections.abc import Iterable
from typing import Any

_DEFAULTS = {
    "discriminator_attribute": "model_discriminator_map",
}

# A private dictionary to hold all package settings.
_settings = dict(_DEFAULTS)


def set_claymeta_option(options: Iterable[str], values: Iterable[Any]) -> None:
    """
    Set a configuration option for the claymeta package.

    Args:
        options (Iterable): The name of the option to set
            (e.g., 'discriminator_attribute').
        values (Any): The value to set for the option.
    """

    if isinstance(options, str):
        options = [options]

    if isinstance(values, str):
        values = [values]

    if not isinstance(options, Iterable):
        raise TypeError("Key must be a string or an iterable of strings.")

    if not isinstance(values, Iterable):
        raise TypeError("Value must be a string or an iterable of strings.")

    for option, value in zip(options, values, strict=True):
        if not isinstance(option, str):
            raise TypeError("Key must be a string.")
        if option not in _settings:
            raise KeyError(
                f"Invalid option key: {option!r}. Valid options are: {list(_settings.keys())}"
            )
        if not isinstance(value, str) or not value:
            raise TypeError("Value must be a non-empty string.")

        _settings[option] = value


def reset_claymeta_options() -> None:
    """Restore every option to its default value."""
    _settings.clear()
    _settings.update(_DEFAULTS)


def _get_option(key: str) -> Any:
    """
    Get a configuration option for the claymeta package.

    Args:
        key (str): The name of the option to get.
    """
    return _settings.get(key)
