from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Json:
    """Opaque JSON text. Nothing is validated until ``loads`` is called."""

    raw: str

    def loads(self) -> Any:
        return json.loads(self.raw)

    def __str__(self) -> str:
        return self.raw
