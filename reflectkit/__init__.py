"""Read, write and construct objects by field and method name.

The module-level functions share one process-wide container. Code that wants
its own cache builds one with :func:`create_container` and passes it around.
"""

from __future__ import annotations

import threading
from typing import Any, Mapping, Optional, TypeVar

from .application import ReflectionConfig, ReflectionContainer, bootstrap_app, create_container
from .domain import (
    CoercionError,
    FieldAccessError,
    FieldDescriptor,
    InstantiationError,
    Json,
    MethodNotFoundError,
    RecordSourceError,
    ReflectionError,
    TypeLoadError,
    UnknownEnumMemberError,
    coerce,
)
from .infrastructure import load_type

T = TypeVar("T")

_default: ReflectionContainer | None = None
_default_lock = threading.Lock()


def default_container() -> ReflectionContainer:
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = create_container()
    return _default


def resolve(owner: type, field_name: str) -> Optional[FieldDescriptor]:
    return default_container().resolve(owner, field_name)


def fields(owner: type) -> tuple[FieldDescriptor, ...]:
    return default_container().fields(owner)


def get_field(instance: Any, field_name: str) -> Any:
    return default_container().get(instance, field_name)


def set_field(instance: Any, field_name: str, value: Any) -> None:
    default_container().set(instance, field_name, value)


def invoke(instance: Any, method_name: str) -> Any:
    return default_container().invoke(instance, method_name)


def instantiate(cls: type[T]) -> T:
    return default_container().instantiate(cls)


def hydrate(cls: type[T], row: Mapping[str, Any]) -> T:
    return default_container().hydrate(cls, row)


__all__ = [
    "ReflectionConfig",
    "ReflectionContainer",
    "bootstrap_app",
    "create_container",
    "default_container",
    "resolve",
    "fields",
    "get_field",
    "set_field",
    "invoke",
    "instantiate",
    "hydrate",
    "load_type",
    "coerce",
    "FieldDescriptor",
    "Json",
    "ReflectionError",
    "CoercionError",
    "UnknownEnumMemberError",
    "FieldAccessError",
    "MethodNotFoundError",
    "InstantiationError",
    "TypeLoadError",
    "RecordSourceError",
]
