"""Genshin-style wish simulator: pool contents, pity rules and ten-pull results."""

from __future__ import annotations

import random
import re
import zipfile
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

StrPath = Union[str, "PathLike[str]"]

_MASK64 = (1 << 64) - 1
_NAME_RE = re.compile(r"_(.*)\.png")
_ARCHIVE_PREFIX_LEN = len("Genshin/")

FIVE_CHARACTER = (5, False)
FOUR_CHARACTER = (4, False)
FIVE_WEAPON = (5, True)
FOUR_WEAPON = (4, True)
THREE_WEAPON = (3, True)

# The order in which pulls are laid out on the result card.
DISPLAY_ORDER = (FIVE_CHARACTER, FOUR_CHARACTER, FIVE_WEAPON, FOUR_WEAPON, THREE_WEAPON)

_FOLDERS = {
    "five": FIVE_CHARACTER,
    "five2": FIVE_WEAPON,
    "four": FOUR_CHARACTER,
    "four2": FOUR_WEAPON,
    "Three": THREE_WEAPON,
}


@dataclass(frozen=True)
class Storage:
    """Per-session setting word; bit 0 selects the five-star-only pool."""

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value & _MASK64)

    def is_five_star_mode(self) -> bool:
        """Whether every pull is a five-star."""
        return self.value & 1 == 1

    def with_mode(self, five_star: bool) -> Storage:
        """Return a copy with the five-star mode switched on or off."""
        if five_star:
            return Storage(self.value | 1)
        return Storage(self.value & 0xFFFFFFFF_FFFFFFFE)


def item_name(path: str) -> str:
    """Return the display name in an image path such as 'five/火_迪卢克.png'."""
    match = _NAME_RE.search(path)
    if match is None:
        raise ValueError(f"not an item image: {path!r}")
    return match.group(1)


def _element_icon(path: str) -> str:
    base = path[path.rfind("/") + 1:]
    element, sep, _ = base.partition("_")
    if not sep:
        raise ValueError(f"not an item image: {path!r}")
    return element + ".png"


@dataclass(frozen=True)
class Pull:
    """One result of a wish: the item image, its rarity and whether it is a weapon."""

    path: str
    stars: int
    weapon: bool

    @property
    def name(self) -> str:
        return item_name(self.path)

    @property
    def icon(self) -> str:
        """File name of the element or weapon-type icon drawn over the item."""
        return _element_icon(self.path)


@dataclass(frozen=True)
class Pool:
    """Item image paths, grouped by rarity and kind."""

    five: tuple[str, ...] = ()
    five2: tuple[str, ...] = ()
    four: tuple[str, ...] = ()
    four2: tuple[str, ...] = ()
    three: tuple[str, ...] = ()

    def category(self, stars: int, weapon: bool) -> tuple[str, ...]:
        """Return the items of one rarity and kind."""
        return {
            FIVE_CHARACTER: self.five,
            FIVE_WEAPON: self.five2,
            FOUR_CHARACTER: self.four,
            FOUR_WEAPON: self.four2,
            THREE_WEAPON: self.three,
        }.get((stars, weapon), ())

    @classmethod
    def from_zip(cls, path: StrPath) -> Pool:
        """Read the item folders of a resource archive rooted at 'Genshin/'."""
        buckets: dict[str, list[str]] = {folder: [] for folder in _FOLDERS}
        with zipfile.ZipFile(path) as archive:
            for info in archive.infolist():
                if info.is_dir():
                    continue
                name = info.filename[_ARCHIVE_PREFIX_LEN:]
                folder, sep, _ = name.rpartition("/")
                if sep and folder in buckets:
                    buckets[folder].append(name)
        return cls(
            five=tuple(buckets["five"]),
            five2=tuple(buckets["five2"]),
            four=tuple(buckets["four"]),
            four2=tuple(buckets["four2"]),
            three=tuple(buckets["Three"]),
        )


def five_star_summary(characters: Sequence[str], weapons: Sequence[str]) -> str:
    """Announce the five-star characters and weapons that were pulled."""
    text = ""
    if characters:
        text += "★五星角色★\n" + "".join(f"{name} * " for name in characters)
    if weapons:
        text += ("\n" if text else "") + "★五星武器★\n"
        text += "".join(f"{name} * " for name in weapons)
    return text


@dataclass
class DrawResult:
    """Pulls in display order, the five-star announcement and whether one was hit."""

    pulls: list[Pull]
    summary: str
    lucky: bool


@dataclass
class Gacha:
    """Draws from a pool; every ninth ordinary wish opens with a five-star."""

    pool: Pool
    rng: random.Random = field(default_factory=random.Random)
    total: int = 0

    def _pick(self, key: tuple[int, bool], groups: dict[tuple[int, bool], list[str]]) -> None:
        items = self.pool.category(*key)
        if not items:
            raise ValueError(f"the pool has no {key[0]}-star {'weapons' if key[1] else 'characters'}")
        groups[key].append(self.rng.choice(items))

    def _five(self, groups: dict[tuple[int, bool], list[str]]) -> None:
        self._pick(FIVE_CHARACTER if self.rng.randrange(2) == 0 else FIVE_WEAPON, groups)

    def _ordinary(self, groups: dict[tuple[int, bool], list[str]]) -> None:
        roll = self.rng.randrange(1000)
        if roll <= 800:
            key = THREE_WEAPON
        elif roll <= 885:
            key = FOUR_CHARACTER
        elif roll <= 970:
            key = FOUR_WEAPON
        elif roll <= 985:
            key = FIVE_CHARACTER
        else:
            key = FIVE_WEAPON
        self._pick(key, groups)

    def draw(self, nums: int = 10, storage: Storage | None = None) -> DrawResult:
        """Make ``nums`` wishes under the given setting."""
        if nums < 0:
            raise ValueError("nums must not be negative")
        storage = storage or Storage()
        groups: dict[tuple[int, bool], list[str]] = {key: [] for key in DISPLAY_ORDER}
        if self.total % 9 == 0:
            self._five(groups)
            nums -= 1
        if storage.is_five_star_mode():
            for _ in range(nums):
                self._five(groups)
        else:
            for _ in range(nums):
                self._ordinary(groups)
            fours = groups[FOUR_CHARACTER] or groups[FOUR_WEAPON]
            if not fours and groups[THREE_WEAPON]:
                groups[THREE_WEAPON].pop()
                self._pick(
                    FOUR_CHARACTER if self.rng.randrange(2) == 0 else FOUR_WEAPON, groups
                )
            self.total += 1
        pulls = [
            Pull(path, stars, weapon)
            for stars, weapon in DISPLAY_ORDER
            for path in groups[(stars, weapon)]
        ]
        characters = _names(groups[FIVE_CHARACTER])
        weapons = _names(groups[FIVE_WEAPON])
        return DrawResult(
            pulls=pulls,
            summary=five_star_summary(characters, weapons),
            lucky=bool(characters or weapons),
        )


def _names(paths: Iterable[str]) -> list[str]:
    return [item_name(path) for path in paths]