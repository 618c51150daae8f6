from __future__ import annotations

import enum
import inspect
from typing import Any, TypeVar

from .declared_types import zero_value
from .errors import InstantiationError
from .repositories import FieldScanner

T = TypeVar("T")


class InstanceFactory:
    """Allocates instances without running ``__init__`` or ``__post_init__``.

    Every declared field along the MRO is set to its zero value: ``0``,
    ``0.0``, ``False``, ``""``, ``b""`` for the builtin scalars and ``None``
    for everything else. Dataclass defaults and default factories are not
    applied since they belong to the constructor.
    """

    def __init__(self, scanner: FieldScanner):
        self._scanner = scanner

    def instantiate(self, cls: type[T]) -> T:
        self._check_instantiable(cls)
        try:
            instance = object.__new__(cls)
        except TypeError as exc:
            raise InstantiationError(cls, str(exc)) from exc
        for owner in reversed(cls.__mro__):
            if owner is object:
                continue
            for descriptor in self._scanner.declared_fields(owner):
                try:
                    object.__setattr__(instance, descriptor.name, zero_value(descriptor.annotation))
                except (AttributeError, TypeError) as exc:
                    raise InstantiationError(cls, f"cannot reset field {descriptor.name!r}") from exc
        return instance

    def _check_instantiable(self, cls: Any) -> None:
        if not inspect.isclass(cls):
            raise InstantiationError(cls, "not a class")
        if inspect.isabstract(cls):
            raise InstantiationError(cls, "abstract class")
        if getattr(cls, "_is_protocol", False):
            raise InstantiationError(cls, "protocol class")
        if issubclass(cls, enum.Enum):
            raise InstantiationError(cls, "enum members are fixed")
