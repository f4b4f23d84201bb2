"""In-memory environment view for testing.

Lets the merge table be exercised without touching the real process
environment.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Tuple


class MemoryEnvironment:
    """Dict-backed environment view.

    Example:
        env = MemoryEnvironment({"db_host": "localhost"})
        env.set("DB_PORT", "5432")
        env.snapshot()  # {"db_host": "localhost", "DB_PORT": "5432"}
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._store: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value

    def remove(self, key: str) -> None:
        self._store.pop(key, None)

    def items(self) -> Iterable[Tuple[str, str]]:
        return list(self._store.items())

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of the stored variables."""
        return self._store.copy()

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"MemoryEnvironment({self._store!r})"
