from __future__ import annotations

import logging
import threading
from typing import Optional, Union

from ..domain.models import FieldDescriptor
from ..domain.repositories import FieldScanner
from .scanner import ClassFieldScanner

logger = logging.getLogger(__name__)


class _Absent:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<absent>"


ABSENT = _Absent()

CacheEntry = Union[FieldDescriptor, _Absent]


class InMemoryFieldCache:
    """Memoizes ``(class, field name)`` lookups for the life of the process.

    Misses are stored too, so an undeclared name is scanned once. Scans run
    outside the lock; the first stored result wins, which keeps concurrent
    lookups of one key on the same descriptor.
    """

    def __init__(self, scanner: FieldScanner | None = None):
        self._scanner = scanner or ClassFieldScanner()
        self._entries: dict[tuple[type, str], CacheEntry] = {}
        self._lists: dict[type, tuple[FieldDescriptor, ...]] = {}
        self._lock = threading.Lock()

    def resolve(self, owner: type, name: str) -> Optional[FieldDescriptor]:
        key = (owner, name)
        entry = self._entries.get(key)
        if entry is None:
            entry = self._store(key, self._scan(owner, name))
        return None if entry is ABSENT else entry

    def fields(self, owner: type) -> tuple[FieldDescriptor, ...]:
        listed = self._lists.get(owner)
        if listed is not None:
            return listed
        scanned = self._scanner.declared_fields(owner)
        with self._lock:
            stored = tuple(
                self._entries.setdefault((owner, descriptor.name), descriptor) for descriptor in scanned
            )
            return self._lists.setdefault(owner, stored)

    def __len__(self) -> int:
        return len(self._entries)

    def _scan(self, owner: type, name: str) -> CacheEntry:
        descriptor = self._scanner.find(owner, name)
        logger.debug("Scanned %s for field %r: %s", owner.__qualname__, name, descriptor or ABSENT)
        return descriptor if descriptor is not None else ABSENT

    def _store(self, key: tuple[type, str], entry: CacheEntry) -> CacheEntry:
        with self._lock:
            return self._entries.setdefault(key, entry)
