from __future__ import annotations

from typing import Any


class ReflectionError(RuntimeError):
    """Base class for every failure raised by reflectkit."""


class CoercionError(ReflectionError):
    def __init__(self, value: Any, declared_type: Any, reason: str):
        self.value = value
        self.declared_type = declared_type
        type_name = getattr(declared_type, "__name__", repr(declared_type))
        super().__init__(f"Cannot coerce {value!r} to {type_name}: {reason}")


class UnknownEnumMemberError(CoercionError):
    def __init__(self, value: str, enum_type: type):
        super().__init__(value, enum_type, "unknown enum member")


class FieldAccessError(ReflectionError):
    def __init__(self, owner: type, field_name: str, action: str):
        self.owner = owner
        self.field_name = field_name
        super().__init__(f"Cannot {action} field {owner.__name__}.{field_name}")


class MethodNotFoundError(ReflectionError):
    def __init__(self, type_name: str, method_name: str):
        self.type_name = type_name
        self.method_name = method_name
        super().__init__(f"Method not found: {type_name}.{method_name}")


class InstantiationError(ReflectionError):
    def __init__(self, target: Any, reason: str):
        self.target = target
        name = getattr(target, "__name__", repr(target))
        super().__init__(f"Cannot instantiate {name}: {reason}")


class TypeLoadError(ReflectionError):
    pass


class RecordSourceError(ReflectionError):
    pass
