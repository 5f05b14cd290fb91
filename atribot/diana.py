"""A store of short fan essays ("小作文") kept in SQLite."""

from __future__ import annotations

import hashlib
import sqlite3
from os import PathLike
from typing import Union

StrPath = Union[str, "PathLike[str]"]

HENTAI_ID = -3802576048116006195


def essay_id(text: str) -> int:
    """Signed 64-bit id: the first 8 bytes of the MD5 digest, little-endian."""
    digest = hashlib.md5(text.encode()).digest()
    return int.from_bytes(digest[:8], "little", signed=True)


class EssayStore:
    """Essays in an SQLite table keyed by their digest id."""

    def __init__(self, path: StrPath) -> None:
        self._db = sqlite3.connect(path)
        with self._db:
            self._db.execute(
                "CREATE TABLE IF NOT EXISTS text "
                "(id INTEGER PRIMARY KEY NOT NULL, data TEXT)"
            )

    def __enter__(self) -> EssayStore:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def add(self, text: str) -> int:
        """Store an essay and return its id; the same text is stored once."""
        eid = essay_id(text)
        with self._db:
            self._db.execute(
                "INSERT OR REPLACE INTO text (id, data) VALUES (?, ?)", (eid, text)
            )
        return eid

    def random(self) -> str:
        """Return a random essay; LookupError if there is none."""
        row = self._db.execute(
            "SELECT data FROM text ORDER BY RANDOM() LIMIT 1"
        ).fetchone()
        if row is None:
            raise LookupError("no essay in the store")
        return row[0] or ""

    def hentai(self) -> str:
        """Return the one especially unhinged essay; LookupError if missing."""
        row = self._db.execute(
            "SELECT data FROM text WHERE id = ?", (HENTAI_ID,)
        ).fetchone()
        if row is None:
            raise LookupError("the essay is missing")
        return row[0] or ""

    def count(self) -> int:
        """Return how many essays are stored."""
        (n,) = self._db.execute("SELECT COUNT(*) FROM text").fetchone()
        return n

    def close(self) -> None:
        """Close the database."""
        self._db.close()