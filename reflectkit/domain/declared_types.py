from __future__ import annotations

import dataclasses
import types
from typing import Annotated, Any, ClassVar, Final, Union, get_args, get_origin

_NONE_TYPE = type(None)
_UNION_ORIGINS = (Union, types.UnionType)

# Zero values for the builtin scalar types; every other type defaults to None.
ZERO_VALUES: dict[type, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
    str: "",
    bytes: b"",
}


def is_class_level(annotation: Any) -> bool:
    if annotation is ClassVar or get_origin(annotation) is ClassVar:
        return True
    if isinstance(annotation, dataclasses.InitVar) or annotation is dataclasses.InitVar:
        return True
    if isinstance(annotation, str):
        head = annotation.split("[", 1)[0].strip()
        return head in {"ClassVar", "typing.ClassVar", "InitVar", "dataclasses.InitVar"}
    return False


def is_final(annotation: Any) -> bool:
    if annotation is Final or get_origin(annotation) is Final:
        return True
    if get_origin(annotation) is Annotated:
        return is_final(get_args(annotation)[0])
    if isinstance(annotation, str):
        head = annotation.split("[", 1)[0].strip()
        return head in {"Final", "typing.Final"}
    return False


def is_optional(annotation: Any) -> bool:
    origin = get_origin(annotation)
    if origin is Final or origin is Annotated:
        return is_optional(get_args(annotation)[0])
    return origin in _UNION_ORIGINS and _NONE_TYPE in get_args(annotation)


def unwrap(annotation: Any) -> Any:
    """Strip ``Final``, ``Annotated`` and ``Optional`` down to the semantic type.

    Unions of several real types are returned as they are.
    """
    current = annotation
    while True:
        if current is Final:
            return object
        origin = get_origin(current)
        if origin is Final or origin is Annotated:
            current = get_args(current)[0]
            continue
        if origin in _UNION_ORIGINS:
            members = [arg for arg in get_args(current) if arg is not _NONE_TYPE]
            if len(members) == 1:
                current = members[0]
                continue
        return current


def zero_value(annotation: Any) -> Any:
    if is_optional(annotation):
        return None
    return ZERO_VALUES.get(unwrap(annotation))
