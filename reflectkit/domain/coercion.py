from __future__ import annotations

import enum
import uuid
from datetime import date, datetime
from typing import Any

from .declared_types import unwrap
from .errors import CoercionError, UnknownEnumMemberError
from .value_objects import Json


def coerce(value: Any, declared_type: Any) -> Any:
    """Convert ``value`` to ``declared_type`` when the pair is in the table.

    Recognized pairs:

    * text -> ``Enum`` subclass, by member name
    * text -> ``datetime``, ISO 8601
    * text -> ``Json``, verbatim
    * text -> ``UUID``
    * ``datetime`` -> ``date``, dropping the time of day

    Anything else is returned untouched.
    """
    target = unwrap(declared_type)
    if not isinstance(target, type):
        return value
    if isinstance(value, datetime) and target is date:
        return value.date()
    if _already(value, target):
        return value
    if isinstance(value, str):
        return _coerce_text(value, target)
    return value


def _already(value: Any, target: type) -> bool:
    # Protocols and typing.Any reject isinstance checks.
    try:
        return isinstance(value, target)
    except TypeError:
        return False


def _coerce_text(text: str, target: type) -> Any:
    if issubclass(target, enum.Enum):
        return parse_enum(text, target)
    if target is datetime:
        try:
            return datetime.fromisoformat(text)
        except ValueError as exc:
            raise CoercionError(text, target, str(exc)) from exc
    if target is Json:
        return Json(text)
    if target is uuid.UUID:
        try:
            return uuid.UUID(text)
        except ValueError as exc:
            raise CoercionError(text, target, str(exc)) from exc
    return text


def parse_enum(name: str, enum_type: type[enum.Enum]) -> enum.Enum:
    try:
        return enum_type[name]
    except KeyError as exc:
        raise UnknownEnumMemberError(name, enum_type) from exc
