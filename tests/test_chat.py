import random

import pytest

from atribot.chat import AirConditioner, PokeResponder, TokenBucket, name_reply


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_token_bucket_exhausts_and_refills():
    clock = FakeClock()
    bucket = TokenBucket(300, 8, clock)
    assert bucket.acquire(3)
    assert bucket.acquire(3)
    assert not bucket.acquire(3)
    assert bucket.acquire(1)
    assert bucket.acquire(1)
    assert not bucket.acquire(1)
    clock.now += 300
    assert bucket.acquire(8)
    assert not bucket.acquire(1)


def test_token_bucket_never_exceeds_burst():
    clock = FakeClock()
    bucket = TokenBucket(10, 2, clock)
    clock.now += 1000
    assert bucket.acquire(2)
    assert not bucket.acquire(1)


def test_token_bucket_rejects_bad_parameters():
    with pytest.raises(ValueError):
        TokenBucket(0, 8)


def test_poke_responder_escalates_then_goes_quiet():
    clock = FakeClock()
    poke = PokeResponder(clock=clock)
    replies = [poke.respond(1, "ATRI") for _ in range(6)]
    assert replies[0].startswith("请不要戳")
    assert replies[1].startswith("请不要戳")
    assert replies[2].startswith("喂(#`O′) 戳")
    assert replies[3].startswith("喂(#`O′) 戳")
    assert replies[4] is None
    assert all("ATRI" in r for r in replies[:4])


def test_poke_groups_are_independent():
    clock = FakeClock()
    poke = PokeResponder(clock=clock)
    for _ in range(5):
        poke.respond(1, "ATRI")
    assert poke.respond(2, "ATRI").startswith("请不要戳")


def test_air_conditioner_switch_messages():
    ac = AirConditioner()
    assert ac.turn_on(5) == "❄️哔~"
    assert ac.turn_off(5) == "💤哔~"


def test_air_conditioner_default_when_off():
    ac = AirConditioner()
    assert ac.status(7) == "💤\n群温度 26℃"
    assert ac.set_temperature(7, "18") == ac.status(7)


def test_air_conditioner_sets_temperature_when_on():
    ac = AirConditioner()
    ac.turn_on(7)
    report = ac.set_temperature(7, "18")
    assert report.startswith("❄️风速中")
    assert report.endswith("18℃")
    assert ac.status(7) == report


def test_turning_off_forgets_temperature():
    ac = AirConditioner()
    ac.turn_on(3)
    ac.set_temperature(3, 30)
    ac.turn_off(3)
    ac.turn_on(3)
    assert ac.status(3).endswith("26℃")


def test_name_reply_mentions_or_is_known():
    rng = random.Random(1)
    for _ in range(20):
        reply = name_reply("ATRI", rng)
        assert "ATRI" in reply or reply == "(っ●ω●)っ在~"