"""Loader settings read from the environment.

Environment variables (default prefix TOMLENV):
    {prefix}_LOG_LEVEL: DEBUG shows every override decision (default: INFO)
    {prefix}_LOG_FORMAT: console or json (default: console)
    {prefix}_ENV_FILE: .env file applied before the TOML merge
    {prefix}_VAR_PREFIX: Only deserialize variables with this prefix
    {prefix}_ABORT_ON_UNSUPPORTED: Exit the process on unsupported values
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from tomlenv.exceptions import ConfigurationError

_ALLOWED_LOG_FORMATS = {"console", "json"}
_TRUTHY = {"1", "true", "yes", "on"}


def _parse_bool(value: Optional[str]) -> bool:
    return bool(value) and value.strip().lower() in _TRUTHY


@dataclass
class LoaderSettings:
    """Options for TomlEnvLoader and the tomlenv command.

    Attributes:
        log_level: Level name for the loader's logger
        log_format: console or json
        env_file: Optional .env file seeded into the environment
        var_prefix: Optional prefix filter for deserialization
        abort_on_unsupported: Raise SystemExit instead of UnsupportedTypeError
    """

    log_level: str = "INFO"
    log_format: str = "console"
    env_file: Optional[Path] = None
    var_prefix: Optional[str] = None
    abort_on_unsupported: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.env_file, str):
            self.env_file = Path(self.env_file) if self.env_file else None
        self.var_prefix = self.var_prefix or None
        self.log_level = self.log_level.upper()
        self.log_format = self.log_format.lower()
        self.validate()

    @classmethod
    def from_env(
        cls,
        prefix: str = "TOMLENV",
        environ: Optional[Mapping[str, str]] = None,
    ) -> "LoaderSettings":
        """Load settings from environment variables.

        Args:
            prefix: Environment variable prefix
            environ: Mapping to read instead of os.environ
        """
        data = os.environ if environ is None else environ
        return cls(
            log_level=data.get(f"{prefix}_LOG_LEVEL", "INFO"),
            log_format=data.get(f"{prefix}_LOG_FORMAT", "console"),
            env_file=data.get(f"{prefix}_ENV_FILE") or None,
            var_prefix=data.get(f"{prefix}_VAR_PREFIX"),
            abort_on_unsupported=_parse_bool(data.get(f"{prefix}_ABORT_ON_UNSUPPORTED")),
        )

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    @property
    def json_logs(self) -> bool:
        return self.log_format == "json"

    def validate(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(
                f"Invalid log level '{self.log_level}'",
                details={"log_level": self.log_level},
            )
        if self.log_format not in _ALLOWED_LOG_FORMATS:
            raise ConfigurationError(
                f"Invalid log format '{self.log_format}'. Expected one of {sorted(_ALLOWED_LOG_FORMATS)}.",
                details={"log_format": self.log_format},
            )


__all__ = ["LoaderSettings"]
