"""Protocol for environment views.

The merge algorithm only ever reads, writes and removes single keys, so any
object with these methods can stand in for the process environment.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, Tuple, runtime_checkable


@runtime_checkable
class EnvironmentView(Protocol):
    """Case-sensitive key/value store holding environment variables.

    Example:
        class DictEnvironment:
            def get(self, key: str) -> Optional[str]:
                ...
            def set(self, key: str, value: str) -> None:
                ...
            # ... remove, items

        env: EnvironmentView = DictEnvironment()
    """

    def get(self, key: str) -> Optional[str]:
        """Return the value stored under exactly ``key``, or None."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under exactly ``key``."""
        ...

    def remove(self, key: str) -> None:
        """Delete ``key``; a missing key is not an error."""
        ...

    def items(self) -> Iterable[Tuple[str, str]]:
        """Iterate over every (key, value) pair currently stored."""
        ...
