"""Materialize a typed configuration object from the environment.

Variable names are matched to field names case-insensitively: the snapshot
lowercases every key before validation, and pydantic coerces the string
values into the declared field types.

Example:
    class AppConfig(BaseModel):
        database_host: str
        database_port: int

    config = deserialize(AppConfig, OsEnvironment())
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Set, Type, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from tomlenv.environ import EnvironmentView
from tomlenv.exceptions import DeserializeError

T = TypeVar("T")


def environment_snapshot(env: EnvironmentView, prefix: Optional[str] = None) -> Dict[str, str]:
    """Return the environment keyed by lowercase name.

    When several spellings fold to the same name, the all-lowercase one wins,
    the same precedence the merger applies.

    Args:
        env: Environment to read
        prefix: Keep only keys starting with this prefix (case-insensitive),
            with the prefix stripped
    """
    folded_prefix = prefix.lower() if prefix else ""
    snapshot: Dict[str, str] = {}
    exact_lower: Set[str] = set()

    for key, value in env.items():
        name = key.lower()
        if folded_prefix:
            if not name.startswith(folded_prefix) or name == folded_prefix:
                continue
            name = name[len(folded_prefix):]
        if key == key.lower():
            exact_lower.add(name)
        elif name in exact_lower:
            continue
        snapshot[name] = value

    return snapshot


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", repr(target))


def deserialize(target: Type[T], env: EnvironmentView, prefix: Optional[str] = None) -> T:
    """Validate the environment snapshot into ``target``.

    ``target`` may be a pydantic model, a dataclass or a TypedDict; anything
    ``pydantic.TypeAdapter`` accepts. Variables with no matching field are
    ignored.

    Raises:
        DeserializeError: If a field is missing or a value does not convert
    """
    snapshot = environment_snapshot(env, prefix)
    try:
        return TypeAdapter(target).validate_python(snapshot)
    except PydanticValidationError as exc:
        errors = [
            {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in exc.errors()
        ]
        raise DeserializeError(
            f"Cannot build {_type_name(target)} from environment: "
            f"{exc.error_count()} validation error(s)",
            details={"target": _type_name(target), "errors": errors},
        ) from exc


__all__ = ["deserialize", "environment_snapshot"]
