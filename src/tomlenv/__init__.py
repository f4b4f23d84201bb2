"""tomlenv - TOML configuration merged into the process environment.

Values from a TOML document are written into the environment under their
underscore-joined, uppercased key unless a variable with the lowercase or
uppercase name already exists; the environment always wins. The merged
environment is then validated into a typed object with pydantic.

Modules:
- flatten: Turn nested tables into FlattenedEntry(key, value) pairs
- merge: Precedence rules between the document and the environment
- environ: Environment views (process environment, in-memory fake)
- deserialize: Case-insensitive environment -> typed object
- loader: TomlEnvLoader, from_str, from_file
- logger: Structured logging for override diagnostics
- exceptions: Structured error classes
"""

__version__ = "1.0.0"

from tomlenv.deserialize import deserialize, environment_snapshot
from tomlenv.dotenv_source import DotenvSource
from tomlenv.environ import EnvironmentView, MemoryEnvironment, OsEnvironment
from tomlenv.exceptions import (
    ConfigurationError,
    DeserializeError,
    ParseError,
    ShapeError,
    TomlEnvError,
    UnsupportedTypeError,
)
from tomlenv.flatten import FlattenedEntry, flatten, iter_flattened
from tomlenv.loader import TomlEnvLoader, from_file, from_str
from tomlenv.logger import Logger, StructuredLogger, create_logger, get_logger
from tomlenv.merge import MergeResult, MergeSource, apply_entry, merge_entries
from tomlenv.settings import LoaderSettings

__all__ = [
    "__version__",
    # Loading
    "TomlEnvLoader",
    "from_str",
    "from_file",
    "LoaderSettings",
    # Core steps
    "FlattenedEntry",
    "flatten",
    "iter_flattened",
    "MergeResult",
    "MergeSource",
    "apply_entry",
    "merge_entries",
    "deserialize",
    "environment_snapshot",
    "DotenvSource",
    # Environment views
    "EnvironmentView",
    "OsEnvironment",
    "MemoryEnvironment",
    # Logger
    "Logger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Exceptions
    "TomlEnvError",
    "ParseError",
    "ShapeError",
    "UnsupportedTypeError",
    "DeserializeError",
    "ConfigurationError",
]
