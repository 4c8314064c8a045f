"""Field checks shared by the bridge settings objects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import ValidationError


def require_mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValidationError(f"`{path}` must be an object")
    return value


def require_bool(value: Any, path: str) -> bool:
    # bool is checked by type so "true", 1 and None are all rejected.
    if not isinstance(value, bool):
        raise ValidationError(f"`{path}` must be a boolean")
    return value


def require_non_empty_str(value: Any, path: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"`{path}` must be a non-empty string")
    return value


def require_choice(value: Any, path: str, choices: tuple[str, ...]) -> str:
    if value not in choices:
        raise ValidationError(f"`{path}` must be one of: " + ", ".join(choices))
    return value
