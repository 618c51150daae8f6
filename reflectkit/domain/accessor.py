from __future__ import annotations

from typing import Any, Optional

from .coercion import coerce
from .errors import FieldAccessError
from .models import FieldDescriptor
from .repositories import FieldCache


class FieldAccessor:
    """Reads and writes declared fields by name.

    Writes go through ``object.__setattr__`` so frozen dataclasses, ``Final``
    annotations and custom ``__setattr__`` guards never block them. A name that
    is not declared on the instance's own class is ignored on write and reads
    as ``None``.
    """

    def __init__(self, cache: FieldCache):
        self._cache = cache

    def get(self, instance: Any, field_name: str) -> Any:
        descriptor = self._cache.resolve(type(instance), field_name)
        if descriptor is None:
            return None
        return self.read(instance, descriptor)

    def set(self, instance: Any, field_name: str, value: Any) -> None:
        descriptor = self._cache.resolve(type(instance), field_name)
        if descriptor is None:
            return
        self.assign(instance, descriptor, value)

    def read(self, instance: Any, descriptor: FieldDescriptor) -> Any:
        try:
            return object.__getattribute__(instance, descriptor.name)
        except AttributeError as exc:
            raise FieldAccessError(descriptor.owner, descriptor.name, "read") from exc

    def assign(self, instance: Any, descriptor: FieldDescriptor, value: Any) -> None:
        coerced = coerce(value, descriptor.declared_type)
        try:
            object.__setattr__(instance, descriptor.name, coerced)
        except Exception as exc:
            raise FieldAccessError(descriptor.owner, descriptor.name, "assign") from exc

    def resolve_owned(self, instance: Any, field_name: str) -> Optional[FieldDescriptor]:
        """Find ``field_name`` on the nearest class in the MRO that declares it."""
        for owner in type(instance).__mro__:
            if owner is object:
                break
            descriptor = self._cache.resolve(owner, field_name)
            if descriptor is not None:
                return descriptor
        return None
