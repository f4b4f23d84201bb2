"""Flatten a parsed TOML tree into environment-variable entries.

Nested tables join their keys with an underscore:

    [database]
    host = "localhost"      ->  FlattenedEntry("database_host", "localhost")
    port = 5432             ->  FlattenedEntry("database_port", "5432")

Only strings and integers have a flattening rule. Any other leaf raises
UnsupportedTypeError and the load stops.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Mapping, Optional

from tomlenv.exceptions import UnsupportedTypeError

KEY_SEPARATOR = "_"


@dataclass(frozen=True)
class FlattenedEntry:
    """A scalar leaf of the document addressed by its underscore-joined path."""

    key: str
    value: str


def join_key(prefix: Optional[str], key: str) -> str:
    return f"{prefix}{KEY_SEPARATOR}{key}" if prefix else key


def flatten_scalar(key: str, value: Any) -> str:
    """Render a leaf as an environment string.

    Raises:
        UnsupportedTypeError: For anything other than str or int
    """
    if isinstance(value, str):
        return value
    # bool subclasses int but true/false have no defined rendering
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise UnsupportedTypeError(key, value)


def iter_flattened(table: Mapping[str, Any], prefix: Optional[str] = None) -> Iterator[FlattenedEntry]:
    """Yield entries depth-first in the table's stored order.

    Entries before an unsupported leaf are yielded before the error is
    raised, which lets a caller merge them as it goes.
    """
    for key, value in table.items():
        full_key = join_key(prefix, key)
        if isinstance(value, Mapping):
            yield from iter_flattened(value, full_key)
        else:
            yield FlattenedEntry(full_key, flatten_scalar(full_key, value))


def flatten(table: Mapping[str, Any]) -> List[FlattenedEntry]:
    """Flatten a whole table, failing before returning anything on a bad leaf."""
    return list(iter_flattened(table))


__all__ = ["FlattenedEntry", "KEY_SEPARATOR", "flatten", "flatten_scalar", "iter_flattened", "join_key"]
