from .field_cache import ABSENT, InMemoryFieldCache
from .mappers import RecordHydrator
from .records_loader import load_records_from_yaml
from .scanner import ClassFieldScanner
from .type_loader import load_type

__all__ = [
    "ABSENT",
    "InMemoryFieldCache",
    "ClassFieldScanner",
    "RecordHydrator",
    "load_records_from_yaml",
    "load_type",
]
