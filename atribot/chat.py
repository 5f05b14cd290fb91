"""Small talk: answering to the bot's name, pokes and the group air conditioner."""

from __future__ import annotations

import random
import time
from collections.abc import Callable

DEFAULT_TEMPERATURE = 26
POKE_INTERVAL = 300.0
POKE_BURST = 8


class TokenBucket:
    """A bucket of ``burst`` tokens that refills completely over ``interval`` seconds."""

    def __init__(
        self,
        interval: float,
        burst: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval <= 0 or burst <= 0:
            raise ValueError("interval and burst must be positive")
        self.interval = interval
        self.burst = burst
        self._clock = clock
        self._tokens = float(burst)
        self._last = clock()

    def _refill(self) -> None:
        now = self._clock()
        elapsed = max(0.0, now - self._last)
        self._last = now
        self._tokens = min(
            float(self.burst), self._tokens + elapsed * self.burst / self.interval
        )

    def acquire(self, n: int = 1) -> bool:
        """Take ``n`` tokens if that many are available; report whether it did."""
        self._refill()
        if self._tokens >= n:
            self._tokens -= n
            return True
        return False


class PokeResponder:
    """Answers pokes, growing quiet when a group pokes too often."""

    def __init__(
        self,
        interval: float = POKE_INTERVAL,
        burst: int = POKE_BURST,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._interval = interval
        self._burst = burst
        self._clock = clock
        self._buckets: dict[int, TokenBucket] = {}

    def _bucket(self, group_id: int) -> TokenBucket:
        bucket = self._buckets.get(group_id)
        if bucket is None:
            bucket = TokenBucket(self._interval, self._burst, self._clock)
            self._buckets[group_id] = bucket
        return bucket

    def respond(self, group_id: int, nickname: str) -> str | None:
        """Return the answer to a poke in the group, or None to stay silent."""
        bucket = self._bucket(group_id)
        if bucket.acquire(3):
            return f"请不要戳{nickname} >_<"
        if bucket.acquire(1):
            return f"喂(#`O′) 戳{nickname}干嘛！"
        return None


class AirConditioner:
    """A pretend air conditioner kept per group."""

    def __init__(self) -> None:
        self._temperatures: dict[int, int] = {}
        self._switches: dict[int, bool] = {}

    def turn_on(self, group_id: int) -> str:
        """Switch the group's air conditioner on."""
        self._switches[group_id] = True
        return "❄️哔~"

    def turn_off(self, group_id: int) -> str:
        """Switch the group's air conditioner off and forget its temperature."""
        self._switches[group_id] = False
        self._temperatures.pop(group_id, None)
        return "💤哔~"

    def _report(self, group_id: int) -> str:
        temperature = self._temperatures[group_id]
        head = "❄️风速中" if self._switches.get(group_id, False) else "💤"
        return f"{head}\n群温度 {temperature}℃"

    def set_temperature(self, group_id: int, temperature: int | str) -> str:
        """Set the temperature when switched on; report the current state."""
        self._temperatures.setdefault(group_id, DEFAULT_TEMPERATURE)
        if self._switches.get(group_id, False):
            self._temperatures[group_id] = int(temperature)
        return self._report(group_id)

    def status(self, group_id: int) -> str:
        """Report the group's temperature and whether the unit is running."""
        self._temperatures.setdefault(group_id, DEFAULT_TEMPERATURE)
        return self._report(group_id)


def name_reply(nickname: str, rng: random.Random | None = None) -> str:
    """Return the answer to being called by name."""
    rng = rng or random.Random()
    return rng.choice(
        [
            nickname + "在此，有何贵干~",
            "(っ●ω●)っ在~",
            "这里是" + nickname + "(っ●ω●)っ",
            nickname + "不在呢~",
        ]
    )