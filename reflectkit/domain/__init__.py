from .accessor import FieldAccessor
from .coercion import coerce, parse_enum
from .errors import (
    CoercionError,
    FieldAccessError,
    InstantiationError,
    MethodNotFoundError,
    RecordSourceError,
    ReflectionError,
    TypeLoadError,
    UnknownEnumMemberError,
)
from .factory import InstanceFactory
from .invoker import MethodInvoker
from .models import FieldDescriptor
from .repositories import FieldCache, FieldScanner
from .value_objects import Json

__all__ = [
    "FieldAccessor",
    "MethodInvoker",
    "InstanceFactory",
    "FieldDescriptor",
    "Json",
    "FieldCache",
    "FieldScanner",
    "coerce",
    "parse_enum",
    "ReflectionError",
    "CoercionError",
    "UnknownEnumMemberError",
    "FieldAccessError",
    "MethodNotFoundError",
    "InstantiationError",
    "TypeLoadError",
    "RecordSourceError",
]
