"""Environment view bound to the live process environment."""

from __future__ import annotations

import os
from typing import Iterable, List, Optional, Tuple


class OsEnvironment:
    """Reads and writes ``os.environ``.

    The mapping is looked up on every call rather than captured once, so
    ``monkeypatch.setattr(os, "environ", ...)`` and ``patch.dict`` apply.
    """

    def get(self, key: str) -> Optional[str]:
        return os.environ.get(key)

    def set(self, key: str, value: str) -> None:
        os.environ[key] = value

    def remove(self, key: str) -> None:
        os.environ.pop(key, None)

    def items(self) -> Iterable[Tuple[str, str]]:
        pairs: List[Tuple[str, str]] = list(os.environ.items())
        return pairs

    def __repr__(self) -> str:
        return "OsEnvironment()"
