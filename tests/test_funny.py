import sqlite3

import pytest

from atribot.funny import JokeBook


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "jokes.db"
    JokeBook(path).close()
    with sqlite3.connect(path) as db:
        db.execute("INSERT INTO jokes (id, text) VALUES (?, ?)", (1, "%name 真厉害，%name!"))
    return path


def test_name_is_filled_everywhere(db_path):
    with JokeBook(db_path) as book:
        assert book.random_joke("小明") == "小明 真厉害，小明!"


def test_count(db_path):
    with JokeBook(db_path) as book:
        assert book.count() == 1


def test_empty_book_raises(tmp_path):
    with JokeBook(tmp_path / "empty.db") as book:
        assert book.count() == 0
        with pytest.raises(LookupError):
            book.random_joke("小明")