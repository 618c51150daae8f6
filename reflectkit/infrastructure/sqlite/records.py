from __future__ import annotations

from typing import Any, Optional, Sequence, TypeVar

from ..mappers import RecordHydrator
from ..metrics import metrics
from .database import SQLiteDatabase

T = TypeVar("T")


def _type_extra(self, cls, *args, **kwargs) -> dict:
    return {"type": cls.__qualname__}


class SQLiteRecordsRepository:
    """Runs a query and hydrates every row into an instance of ``cls``.

    Column names are matched to field names; columns with no matching field
    are ignored.
    """

    def __init__(self, db: SQLiteDatabase, hydrator: RecordHydrator):
        self._db = db
        self._hydrator = hydrator

    @metrics.wrap_async("db:records.fetch_all", source="database", extra_fn=_type_extra)
    async def fetch_all(self, cls: type[T], sql: str, params: Sequence[Any] = ()) -> list[T]:
        async with self._db.connect() as conn:
            cur = await conn.execute(sql, tuple(params))
            rows = await cur.fetchall()
        return [self._hydrator.hydrate(cls, dict(row)) for row in rows]

    @metrics.wrap_async("db:records.fetch_one", source="database", extra_fn=_type_extra)
    async def fetch_one(self, cls: type[T], sql: str, params: Sequence[Any] = ()) -> Optional[T]:
        async with self._db.connect() as conn:
            cur = await conn.execute(sql, tuple(params))
            row = await cur.fetchone()
        return self._hydrator.hydrate(cls, dict(row)) if row else None
