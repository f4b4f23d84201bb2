"""Merge flattened configuration entries into an environment view.

The environment always wins. For a key K with file value V:

    lower(K) set, upper(K) set    -> keep lower(K), remove upper(K)
    lower(K) set, upper(K) unset  -> keep lower(K), V discarded
    lower(K) unset, upper(K) set  -> keep upper(K), V discarded
    neither set                   -> upper(K) = V

Mixed-case spellings of K are never looked at.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from tomlenv.environ import EnvironmentView
from tomlenv.flatten import FlattenedEntry
from tomlenv.logger import Logger


class MergeSource(str, Enum):
    """Where the surviving value of a merged key came from."""

    CONFIG = "config"
    ENV_LOWER = "env_lower"
    ENV_UPPER = "env_upper"
    ENV_BOTH = "env_both"


@dataclass(frozen=True)
class MergeResult:
    """Outcome of merging one entry.

    Attributes:
        key: Flattened key from the document
        env_key: Variable name that holds the value after the merge
        value: The winning value
        source: Which side the value came from
    """

    key: str
    env_key: str
    value: str
    source: MergeSource

    @property
    def from_config(self) -> bool:
        return self.source is MergeSource.CONFIG


def apply_entry(
    entry: FlattenedEntry,
    env: EnvironmentView,
    logger: Optional[Logger] = None,
) -> MergeResult:
    """Merge a single entry, never overwriting an existing variable."""
    lower_key = entry.key.lower()
    upper_key = entry.key.upper()
    lower = env.get(lower_key)
    upper = env.get(upper_key) if upper_key != lower_key else None

    if lower is not None and upper is not None:
        env.remove(upper_key)
        if logger:
            logger.debug(
                f"Environment var '{lower_key}' overridden with '{lower}' "
                f"(unused '{upper_key}'='{upper}')"
            )
        return MergeResult(entry.key, lower_key, lower, MergeSource.ENV_BOTH)

    if lower is not None:
        if logger:
            logger.debug(
                f"Environment var '{lower_key}' overridden with '{lower}' "
                f"(in config '{entry.value}')"
            )
        source = MergeSource.ENV_UPPER if lower_key == upper_key else MergeSource.ENV_LOWER
        return MergeResult(entry.key, lower_key, lower, source)

    if upper is not None:
        if logger:
            logger.debug(
                f"Environment var '{upper_key}' overridden with '{upper}' "
                f"(in config '{entry.value}')"
            )
        return MergeResult(entry.key, upper_key, upper, MergeSource.ENV_UPPER)

    env.set(upper_key, entry.value)
    return MergeResult(entry.key, upper_key, entry.value, MergeSource.CONFIG)


def merge_entries(
    entries: Iterable[FlattenedEntry],
    env: EnvironmentView,
    logger: Optional[Logger] = None,
) -> List[MergeResult]:
    """Apply entries in order; each one sees the writes of those before it."""
    return [apply_entry(entry, env, logger) for entry in entries]


__all__ = ["MergeResult", "MergeSource", "apply_entry", "merge_entries"]
