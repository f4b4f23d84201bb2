"""Load a typed configuration from TOML merged into the environment.

Example:
    from pydantic import BaseModel
    from tomlenv import from_file

    class AppConfig(BaseModel):
        database_host: str
        database_port: int

    # config.toml:
    #   [database]
    #   host = "localhost"
    #   port = 5432
    #
    # DATABASE_PORT=6543 in the environment beats the file.
    config = from_file(AppConfig, "config.toml")

The environment is modified in place and stays modified after the call.
Nothing is rolled back when a load fails partway.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Type, TypeVar

from tomlenv.deserialize import deserialize
from tomlenv.dotenv_source import DotenvSource
from tomlenv.environ import EnvironmentView, OsEnvironment
from tomlenv.exceptions import ConfigurationError, ParseError, ShapeError, UnsupportedTypeError
from tomlenv.flatten import iter_flattened
from tomlenv.logger import Logger, create_logger, get_default_logger
from tomlenv.merge import MergeResult, MergeSource, apply_entry
from tomlenv.settings import LoaderSettings

T = TypeVar("T")

Parser = Callable[[str], Any]


class TomlEnvLoader:
    """Merge TOML documents into an environment and deserialize the result.

    Attributes:
        env: Environment view that is read and mutated
        logger: Receives override diagnostics at DEBUG level
        prefix: Only variables with this prefix are deserialized
        abort_on_unsupported: Exit the process instead of raising on
            values with no flattening rule
        env_file: .env file applied before every merge
    """

    def __init__(
        self,
        env: Optional[EnvironmentView] = None,
        logger: Optional[Logger] = None,
        parser: Parser = tomllib.loads,
        prefix: Optional[str] = None,
        abort_on_unsupported: bool = False,
        env_file: Optional[Path | str] = None,
    ) -> None:
        self.env = env if env is not None else OsEnvironment()
        self.logger = logger if logger is not None else get_default_logger()
        self.parser = parser
        self.prefix = prefix
        self.abort_on_unsupported = abort_on_unsupported
        self.env_file = Path(env_file) if env_file else None

    @classmethod
    def from_settings(cls, settings: Optional[LoaderSettings] = None, **overrides: Any) -> "TomlEnvLoader":
        """Build a loader from LoaderSettings (read from the environment by default)."""
        settings = settings or LoaderSettings.from_env()
        options: Dict[str, Any] = {
            "prefix": settings.var_prefix,
            "abort_on_unsupported": settings.abort_on_unsupported,
            "env_file": settings.env_file,
        }
        if "logger" not in overrides:
            options["logger"] = create_logger(level=settings.level, json_format=settings.json_logs)
        options.update(overrides)
        return cls(**options)

    def parse(self, text: str) -> Any:
        try:
            return self.parser(text)
        except tomllib.TOMLDecodeError as exc:
            details = {
                key: getattr(exc, key)
                for key in ("lineno", "colno")
                if getattr(exc, key, None) is not None
            }
            raise ParseError(f"Invalid TOML document: {exc}", details=details) from exc
        except ValueError as exc:
            raise ParseError(f"Invalid configuration document: {exc}") from exc

    def merge_tree(self, tree: Any) -> List[MergeResult]:
        """Flatten an already parsed document into the environment.

        Raises:
            ShapeError: If the root is not a table; nothing is modified
            UnsupportedTypeError: On the first leaf that is neither str nor int
        """
        if not isinstance(tree, Mapping):
            raise ShapeError(
                "Extracting the root table failed: root is not a table",
                details={"root_type": type(tree).__name__},
            )

        if self.env_file is not None:
            DotenvSource(self.env_file).apply(self.env, self.logger)

        results: List[MergeResult] = []
        try:
            for entry in iter_flattened(tree):
                results.append(apply_entry(entry, self.env, self.logger))
        except UnsupportedTypeError as exc:
            if self.abort_on_unsupported:
                self.logger.critical(exc.message, key=exc.key, value_type=type(exc.value).__name__)
                raise SystemExit(1) from exc
            raise

        from_config = sum(1 for r in results if r.source is MergeSource.CONFIG)
        self.logger.debug(
            f"Merged {len(results)} key(s): {from_config} from config, "
            f"{len(results) - from_config} kept from environment"
        )
        return results

    def merge_text(self, text: str) -> List[MergeResult]:
        return self.merge_tree(self.parse(text))

    def load(self, target: Type[T], text: str) -> T:
        """Merge ``text`` into the environment and build ``target`` from it."""
        self.merge_text(text)
        return deserialize(target, self.env, self.prefix)

    def load_file(self, target: Type[T], path: Path | str) -> T:
        return self.load(target, read_document(path))


def read_document(path: Path | str) -> str:
    """Read a configuration file as UTF-8 text.

    Raises:
        ConfigurationError: If the file cannot be read
    """
    config_path = Path(path)
    try:
        return config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(
            f"Cannot read configuration file {config_path}: {exc}",
            details={"path": str(config_path)},
        ) from exc


def from_str(target: Type[T], text: str, **kwargs: Any) -> T:
    """Load ``target`` from TOML text merged into the process environment."""
    return TomlEnvLoader(**kwargs).load(target, text)


def from_file(target: Type[T], path: Path | str, **kwargs: Any) -> T:
    """Load ``target`` from a TOML file merged into the process environment."""
    return TomlEnvLoader(**kwargs).load_file(target, path)


__all__ = ["TomlEnvLoader", "from_file", "from_str", "read_document"]
