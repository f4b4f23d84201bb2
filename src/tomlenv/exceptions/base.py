"""Base exception classes for tomlenv.

Every tomlenv exception carries structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging
"""

from typing import Any, Dict, Optional


class TomlEnvError(Exception):
    """Base exception for all tomlenv errors.

    Attributes:
        code: Machine-readable error code (e.g., "PARSE_ERROR")
        message: Human-readable error message
        details: Optional additional context for debugging
    """

    default_code = "TOMLENV_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize error with structured information.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (defaults to the class code)
            details: Optional additional context
        """
        self.code = code or self.default_code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ParseError(TomlEnvError):
    """The configuration document is not valid TOML."""

    default_code = "PARSE_ERROR"


class ShapeError(TomlEnvError):
    """The parsed document root is not a table."""

    default_code = "SHAPE_ERROR"


class UnsupportedTypeError(TomlEnvError):
    """A leaf value has no flattening rule.

    Only strings and integers can be written into the environment. Floats,
    booleans, dates and arrays stop the load instead of being coerced.
    """

    default_code = "UNSUPPORTED_TYPE"

    def __init__(self, key: str, value: Any):
        self.key = key
        self.value = value
        super().__init__(
            f"Unimplemented handler for value type at '{key}': {value!r}",
            details={
                "key": key,
                "value": repr(value),
                "value_type": type(value).__name__,
            },
        )


class DeserializeError(TomlEnvError):
    """The merged environment could not populate the target type."""

    default_code = "DESERIALIZE_ERROR"


class ConfigurationError(TomlEnvError):
    """Loader settings or input files are invalid or unreadable."""

    default_code = "CONFIGURATION_ERROR"
