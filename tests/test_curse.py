import sqlite3

import pytest

from atribot.curse import MAX_LEVEL, MIN_LEVEL, CurseBook


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "curse.db"
    with sqlite3.connect(path) as db:
        db.execute("CREATE TABLE curse (id INTEGER PRIMARY KEY NOT NULL, text TEXT, level TEXT)")
        db.executemany(
            "INSERT INTO curse (id, text, level) VALUES (?, ?, ?)",
            [(1, "轻", "min"), (2, "也轻", "min"), (3, "重", "max")],
        )
    return path


def test_count(db_path):
    with CurseBook(db_path) as book:
        assert book.count() == 3


def test_random_curse_by_level(db_path):
    with CurseBook(db_path) as book:
        assert book.random_curse(MAX_LEVEL) == "重"
        for _ in range(10):
            assert book.random_curse(MIN_LEVEL) in {"轻", "也轻"}


def test_unknown_level_raises(db_path):
    with CurseBook(db_path) as book:
        with pytest.raises(LookupError):
            book.random_curse("mid")


def test_empty_book(tmp_path):
    with CurseBook(tmp_path / "new.db") as book:
        assert book.count() == 0
        with pytest.raises(LookupError):
            book.random_curse()