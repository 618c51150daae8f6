from __future__ import annotations

from typing import Any, Iterable, Mapping, TypeVar

from ..domain.accessor import FieldAccessor
from ..domain.factory import InstanceFactory
from .metrics import metrics

T = TypeVar("T")


class RecordHydrator:
    def __init__(self, factory: InstanceFactory, accessor: FieldAccessor):
        self._factory = factory
        self._accessor = accessor

    def hydrate(self, cls: type[T], row: Mapping[str, Any]) -> T:
        instance = self._factory.instantiate(cls)
        for key, value in row.items():
            descriptor = self._accessor.resolve_owned(instance, key)
            if descriptor is not None:
                self._accessor.assign(instance, descriptor, value)
        return instance

    @metrics.wrap_sync(
        "records:hydrate_many",
        source="mappers",
        extra_fn=lambda self, cls, rows: {"type": cls.__qualname__},
    )
    def hydrate_many(self, cls: type[T], rows: Iterable[Mapping[str, Any]]) -> list[T]:
        return [self.hydrate(cls, row) for row in rows]
