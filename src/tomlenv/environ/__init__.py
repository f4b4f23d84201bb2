"""Environment views used by the merger and the deserializer.

Example:
    from tomlenv.environ import MemoryEnvironment, OsEnvironment

    env = OsEnvironment()            # the real process environment
    fake = MemoryEnvironment({...})  # isolated, for tests
"""

from tomlenv.environ.base import EnvironmentView
from tomlenv.environ.memory import MemoryEnvironment
from tomlenv.environ.os_environ import OsEnvironment

__all__ = [
    "EnvironmentView",
    "MemoryEnvironment",
    "OsEnvironment",
]
