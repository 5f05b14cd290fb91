"""Jokes and compliments about a named person, picked from a database."""

from __future__ import annotations

import sqlite3
from os import PathLike
from typing import Union

StrPath = Union[str, "PathLike[str]"]

NAME_PLACEHOLDER = "%name"


class JokeBook:
    """Joke templates in an SQLite table; '%name' marks where the name goes."""

    def __init__(self, path: StrPath) -> None:
        self._db = sqlite3.connect(path)
        with self._db:
            self._db.execute(
                "CREATE TABLE IF NOT EXISTS jokes "
                "(id INTEGER PRIMARY KEY NOT NULL, text TEXT)"
            )

    def __enter__(self) -> JokeBook:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def random_joke(self, name: str) -> str:
        """Return a random joke about ``name``; LookupError if there is none."""
        row = self._db.execute(
            "SELECT text FROM jokes ORDER BY RANDOM() LIMIT 1"
        ).fetchone()
        if row is None:
            raise LookupError("no joke in the book")
        return (row[0] or "").replace(NAME_PLACEHOLDER, name)

    def count(self) -> int:
        """Return how many jokes are stored."""
        (n,) = self._db.execute("SELECT COUNT(*) FROM jokes").fetchone()
        return n

    def close(self) -> None:
        """Close the database."""
        self._db.close()