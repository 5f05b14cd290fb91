import pytest

from atribot.drift_bottle import (
    DEFAULT_CHANNEL,
    Bottle,
    EmptySeaError,
    NoSuchChannelError,
    Sea,
    crc64_iso,
    new_bottle,
    parse_throw_command,
)


def test_crc64_iso_check_value():
    assert crc64_iso(b"123456789") == 0xB90956C775A41001


def test_crc64_iso_empty():
    assert crc64_iso(b"") == 0


def test_new_bottle_id_is_signed_crc():
    b = new_bottle(1, 2, "a", "b")
    assert b.id % 2**64 == crc64_iso(b"1_2_a_b")
    assert -(2**63) <= b.id < 2**63
    assert (b.qq, b.grp, b.name, b.msg) == (1, 2, "a", "b")


def test_new_bottle_deterministic():
    assert new_bottle(5, 0, "n", "m") == new_bottle(5, 0, "n", "m")
    assert new_bottle(5, 0, "n", "m").id != new_bottle(5, 0, "n", "x").id


def test_parse_throw_full():
    assert parse_throw_command("在群123丢漂流瓶到频道abc hello", 5) == (123, "abc", "hello")


def test_parse_throw_defaults():
    assert parse_throw_command("丢漂流瓶 hi there", 7) == (7, DEFAULT_CHANNEL, "hi there")


def test_parse_throw_not_a_command():
    assert parse_throw_command("hello", 1) is None


def test_parse_throw_empty_message():
    with pytest.raises(ValueError):
        parse_throw_command("丢漂流瓶 ", 1)


def test_parse_throw_group_overflow():
    with pytest.raises(ValueError):
        parse_throw_command("在群99999999999999999999丢漂流瓶 hi", 1)


@pytest.fixture
def sea(tmp_path):
    s = Sea(tmp_path / "sea.db")
    yield s
    s.close()


def test_throw_fetch_destroy(sea):
    b = new_bottle(10, 0, "Alice", "hello")
    sea.throw(b, DEFAULT_CHANNEL)
    assert sea.count() == 1
    assert sea.fetch(DEFAULT_CHANNEL, 42) == b
    sea.destroy(b, DEFAULT_CHANNEL)
    assert sea.count() == 0
    with pytest.raises(EmptySeaError):
        sea.fetch(DEFAULT_CHANNEL, 42)


def test_throw_same_bottle_twice_replaces(sea):
    b = new_bottle(10, 0, "Alice", "hello")
    sea.throw(b)
    sea.throw(b)
    assert sea.count() == 1


def test_fetch_respects_group(sea):
    b = Bottle(id=1, qq=2, grp=5, name="n", msg="m")
    sea.throw(b)
    with pytest.raises(EmptySeaError):
        sea.fetch(DEFAULT_CHANNEL, 6)
    assert sea.fetch(DEFAULT_CHANNEL, 5) == b


def test_channels_are_separate(sea):
    sea.create_channel("abc")
    sea.throw(new_bottle(1, 0, "n", "m"), "abc")
    assert sea.count("abc") == 1
    assert sea.count(DEFAULT_CHANNEL) == 0


def test_unknown_channel(sea):
    with pytest.raises(NoSuchChannelError):
        sea.count("missing")
    with pytest.raises(NoSuchChannelError):
        sea.throw(new_bottle(1, 0, "n", "m"), "missing")


def test_empty_channel_name(sea):
    with pytest.raises(ValueError):
        sea.create_channel("")


def test_bottles_persist(tmp_path):
    path = tmp_path / "sea.db"
    b = new_bottle(3, 0, "n", "persisted")
    with Sea(path) as s:
        s.throw(b)
    with Sea(path) as s:
        assert s.fetch(DEFAULT_CHANNEL, 1) == b