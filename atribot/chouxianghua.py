"""Abstract speech: replace characters with emoji that sound like them."""

from __future__ import annotations

import sqlite3
from os import PathLike
from typing import Union

StrPath = Union[str, "PathLike[str]"]


class AbstractDictionary:
    """A pinyin and emoji dictionary kept in an SQLite database."""

    def __init__(self, path: StrPath) -> None:
        self._db = sqlite3.connect(path)
        with self._db:
            self._db.execute(
                "CREATE TABLE IF NOT EXISTS pinyin "
                "(word TEXT PRIMARY KEY NOT NULL, pronunciation TEXT)"
            )
            self._db.execute(
                "CREATE TABLE IF NOT EXISTS emoji "
                "(pronunciation TEXT PRIMARY KEY NOT NULL, emoji TEXT)"
            )

    def __enter__(self) -> AbstractDictionary:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _lookup(self, query: str, key: str) -> str:
        row = self._db.execute(query, (key,)).fetchone()
        return (row[0] or "") if row else ""

    def pinyin(self, word: str) -> str:
        """Return the pronunciation of a character, or '' if unknown."""
        return self._lookup("SELECT pronunciation FROM pinyin WHERE word = ?", word)

    def emoji(self, pronunciation: str) -> str:
        """Return the emoji for a pronunciation, or '' if there is none."""
        return self._lookup(
            "SELECT emoji FROM emoji WHERE pronunciation = ?", pronunciation
        )

    def translate(self, text: str) -> str:
        """Rewrite text, preferring emoji for character pairs over single ones."""
        out: list[str] = []
        i = 0
        while i < len(text):
            if i + 1 < len(text):
                pair = self.emoji(self.pinyin(text[i]) + self.pinyin(text[i + 1]))
                if pair:
                    out.append(pair)
                    i += 2
                    continue
            out.append(self.emoji(self.pinyin(text[i])) or text[i])
            i += 1
        return "".join(out)

    def close(self) -> None:
        """Close the database."""
        self._db.close()