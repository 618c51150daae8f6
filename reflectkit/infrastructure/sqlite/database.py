from __future__ import annotations

import sqlite3
from contextlib import asynccontextmanager
from datetime import date, datetime

import aiosqlite


def _convert_timestamp(raw: bytes) -> datetime:
    return datetime.fromisoformat(raw.decode("utf-8"))


def _convert_date(raw: bytes) -> date:
    return date.fromisoformat(raw.decode("utf-8"))


def install_converters() -> None:
    """Decode DATE and TIMESTAMP columns into date and datetime objects.

    sqlite3 keeps converters in a process-wide registry, so this replaces
    whatever the stdlib or another library registered under these names for
    every connection opened with PARSE_DECLTYPES afterwards.
    """
    sqlite3.register_converter("timestamp", _convert_timestamp)
    sqlite3.register_converter("date", _convert_date)


class SQLiteDatabase:
    def __init__(self, path: str):
        self.path = path
        install_converters()

    async def execute_script(self, script: str) -> None:
        async with self.connect() as conn:
            await conn.executescript(script)
            await conn.commit()

    @asynccontextmanager
    async def connect(self):
        conn = await aiosqlite.connect(self.path, detect_types=sqlite3.PARSE_DECLTYPES)
        conn.row_factory = aiosqlite.Row
        try:
            yield conn
        finally:
            await conn.close()
