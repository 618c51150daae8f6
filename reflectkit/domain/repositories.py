from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .models import FieldDescriptor


class FieldScanner(Protocol):
    def declared_fields(self, owner: type) -> Sequence[FieldDescriptor]: ...

    def find(self, owner: type, name: str) -> Optional[FieldDescriptor]: ...


class FieldCache(Protocol):
    def resolve(self, owner: type, name: str) -> Optional[FieldDescriptor]: ...

    def fields(self, owner: type) -> Sequence[FieldDescriptor]: ...
