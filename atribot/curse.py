"""Curses on request, from a database graded by strength."""

from __future__ import annotations

import sqlite3
from os import PathLike
from typing import Union

StrPath = Union[str, "PathLike[str]"]

MIN_LEVEL = "min"
MAX_LEVEL = "max"

# Words that, said to the bot, make it curse back at full strength.
TRIGGER_WORDS = (
    "他妈", "公交车", "你妈", "操", "屎", "去死", "快死", "我日", "逼", "尼玛",
    "艾滋", "癌症", "有病", "烦你", "你爹", "屮", "cnm",
)


class CurseBook:
    """Curses kept in an SQLite table with a level column."""

    def __init__(self, path: StrPath) -> None:
        self._db = sqlite3.connect(path)
        with self._db:
            self._db.execute(
                "CREATE TABLE IF NOT EXISTS curse "
                "(id INTEGER PRIMARY KEY NOT NULL, text TEXT, level TEXT)"
            )

    def __enter__(self) -> CurseBook:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def random_curse(self, level: str = MIN_LEVEL) -> str:
        """Return a random curse of the level; LookupError if there is none."""
        row = self._db.execute(
            "SELECT text FROM curse WHERE level = ? ORDER BY RANDOM() LIMIT 1",
            (level,),
        ).fetchone()
        if row is None:
            raise LookupError(f"no curse of level {level!r}")
        return row[0] or ""

    def count(self) -> int:
        """Return how many curses are stored."""
        (n,) = self._db.execute("SELECT COUNT(*) FROM curse").fetchone()
        return n

    def close(self) -> None:
        """Close the database."""
        self._db.close()