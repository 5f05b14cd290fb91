"""Helps the undecided pick one of several options."""

from __future__ import annotations

import random

SEPARATOR = "还是"


def choose(args: str, nickname: str, rng: random.Random | None = None) -> str:
    """Split the options on '还是', list them and announce a random pick."""
    rng = rng or random.Random()
    options = args.split(SEPARATOR)
    listing = "\n".join(f"{n}, {option}" for n, option in enumerate(options, 1))
    result = rng.choice(options)
    return f"> {nickname}\n你的选项有:\n{listing}\n你最终会选: {result}"