from .database import SQLiteDatabase, install_converters
from .records import SQLiteRecordsRepository

__all__ = [
    "SQLiteDatabase",
    "SQLiteRecordsRepository",
    "install_converters",
]
