"""Seed the environment from a .env file before the TOML merge.

Precedence (low -> high): TOML document, .env file, process environment.
A variable that already exists is never replaced.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values

from tomlenv.environ import EnvironmentView
from tomlenv.exceptions import ConfigurationError
from tomlenv.logger import Logger


class DotenvSource:
    """Apply ``KEY=value`` pairs from a .env file to an environment view."""

    def __init__(self, env_file: Optional[Path | str] = None) -> None:
        self.env_file = Path(env_file) if env_file else None

    @property
    def path(self) -> Path:
        return self.env_file or Path.cwd() / ".env"

    def read(self) -> Dict[str, str]:
        """Read the file, dropping keys declared without a value.

        Raises:
            ConfigurationError: If an explicitly given file does not exist
        """
        env_path = self.path
        if not env_path.exists():
            if self.env_file is not None:
                raise ConfigurationError(
                    f"Env file not found: {env_path}",
                    details={"env_file": str(env_path)},
                )
            return {}
        return {k: v for k, v in dotenv_values(env_path).items() if v is not None}

    def apply(self, env: EnvironmentView, logger: Optional[Logger] = None) -> Dict[str, str]:
        """Set every file value whose name is absent in every case spelling.

        A key is skipped when the exact, lowercase or uppercase spelling
        already exists, so a .env value can never displace a process
        variable during the case-folding merge that follows.

        Returns:
            The pairs that were written
        """
        applied: Dict[str, str] = {}
        for key, value in self.read().items():
            if any(env.get(name) is not None for name in (key, key.lower(), key.upper())):
                continue
            env.set(key, value)
            applied[key] = value

        if logger and applied:
            logger.debug(f"Loaded {len(applied)} variable(s) from {self.path}")
        return applied


__all__ = ["DotenvSource"]
