"""CP short stories: fill a random story with two people's names."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from os import PathLike
from typing import Union

StrPath = Union[str, "PathLike[str]"]


@dataclass(frozen=True)
class CpStory:
    """A story template with its two original characters."""

    id: int
    gong: str
    shou: str
    story: str


def fill_story(story: CpStory, gong: str, shou: str) -> str:
    """Put the given names into the story in place of its characters."""
    text = story.story.replace("<攻>", gong)
    text = text.replace("<受>", shou)
    text = text.replace(story.gong, gong)
    return text.replace(story.shou, gong)


def split_names(args: str) -> tuple[str, str]:
    """Return the first two space-separated names; ValueError if fewer."""
    params = args.split(" ")
    if len(params) < 2:
        raise ValueError("请用空格分开两个人名")
    return params[0], params[1]


class StoryBook:
    """Stories kept in an SQLite database."""

    def __init__(self, path: StrPath) -> None:
        self._db = sqlite3.connect(path)
        with self._db:
            self._db.execute(
                "CREATE TABLE IF NOT EXISTS cp_story "
                "(id INTEGER PRIMARY KEY NOT NULL, gong TEXT, shou TEXT, story TEXT)"
            )

    def __enter__(self) -> StoryBook:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def random_story(self) -> CpStory:
        """Pick a random story; LookupError if there is none."""
        row = self._db.execute(
            "SELECT id, gong, shou, story FROM cp_story ORDER BY RANDOM() LIMIT 1"
        ).fetchone()
        if row is None:
            raise LookupError("no story in the book")
        sid, gong, shou, story = row
        return CpStory(sid, gong or "", shou or "", story or "")

    def close(self) -> None:
        """Close the database."""
        self._db.close()