from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FieldDescriptor:
    owner: type
    name: str
    declared_type: Any
    immutable: bool = False
    annotation: Any = field(default=None, compare=False)

    def __str__(self) -> str:
        flag = " (immutable)" if self.immutable else ""
        type_name = getattr(self.declared_type, "__name__", repr(self.declared_type))
        return f"{self.owner.__name__}.{self.name}: {type_name}{flag}"
