"""Exceptions raised by tomlenv.

Usage:
    from tomlenv.exceptions import TomlEnvError, ParseError

    try:
        config = from_str(AppConfig, text)
    except TomlEnvError as exc:
        print(exc.to_dict())
"""

from tomlenv.exceptions.base import (
    ConfigurationError,
    DeserializeError,
    ParseError,
    ShapeError,
    TomlEnvError,
    UnsupportedTypeError,
)

__all__ = [
    "TomlEnvError",
    "ParseError",
    "ShapeError",
    "UnsupportedTypeError",
    "DeserializeError",
    "ConfigurationError",
]
