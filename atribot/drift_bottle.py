"""Drift bottles: messages thrown into a channel and fished out at random."""

from __future__ import annotations

import re
import sqlite3
import threading
from dataclasses import dataclass
from os import PathLike
from typing import Union

StrPath = Union[str, "PathLike[str]"]

DEFAULT_CHANNEL = "global"

_CRC64_ISO_POLY = 0xD800000000000000
_MASK64 = (1 << 64) - 1
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def _make_table(poly: int) -> tuple[int, ...]:
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            crc = (crc >> 1) ^ poly if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_CRC64_TABLE = _make_table(_CRC64_ISO_POLY)

_THROW_RE = re.compile(r"(在群\d+)?丢漂流瓶(到频道\w+)?\s+(.*)", re.ASCII)


class NoSuchChannelError(LookupError):
    """Raised when a channel has not been created."""


class EmptySeaError(LookupError):
    """Raised when no bottle can be fished out."""


def crc64_iso(data: bytes) -> int:
    """CRC-64 with the ISO polynomial, reflected, all-ones init and final xor."""
    crc = _MASK64
    for byte in data:
        crc = _CRC64_TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ _MASK64


@dataclass(frozen=True)
class Bottle:
    """A message in a bottle; ``grp`` 0 may be fished anywhere."""

    id: int
    qq: int
    grp: int
    name: str
    msg: str


def new_bottle(qq: int, grp: int, name: str, msg: str) -> Bottle:
    """Make a bottle whose id is the signed CRC-64 of its contents."""
    crc = crc64_iso(f"{qq}_{grp}_{name}_{msg}".encode())
    signed = crc - (1 << 64) if crc > _INT64_MAX else crc
    return Bottle(id=signed, qq=qq, grp=grp, name=name, msg=msg)


def parse_throw_command(text: str, group_id: int) -> tuple[int, str, str] | None:
    """Parse '(在群N)丢漂流瓶(到频道C) msg' into (group, channel, message).

    Returns None when the text is not a throw command; raises ValueError for
    an invalid group number or an empty message.
    """
    match = _THROW_RE.fullmatch(text)
    if match is None:
        return None
    group_part, channel_part, msg = match.groups()
    grp = group_id
    if group_part:
        grp = int(group_part[len("在群"):])
        if not _INT64_MIN <= grp <= _INT64_MAX:
            raise ValueError("群号非法!")
    channel = channel_part[len("到频道"):] if channel_part else DEFAULT_CHANNEL
    if not msg:
        raise ValueError("消息为空!")
    return grp, channel, msg


def _quote(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


class Sea:
    """Channels of bottles stored in an SQLite database, one table each."""

    def __init__(self, path: StrPath) -> None:
        self._db = sqlite3.connect(path, check_same_thread=False)
        self._lock = threading.RLock()
        self.create_channel(DEFAULT_CHANNEL)

    def __enter__(self) -> Sea:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _require(self, channel: str) -> str:
        row = self._db.execute(
            "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?",
            (channel,),
        ).fetchone()
        if row is None:
            raise NoSuchChannelError(f"no such channel: {channel}")
        return _quote(channel)

    def create_channel(self, channel: str) -> None:
        """Create a channel if it does not exist yet."""
        if not channel:
            raise ValueError("频道名为空!")
        with self._lock, self._db:
            self._db.execute(
                f"CREATE TABLE IF NOT EXISTS {_quote(channel)} "
                "(id INTEGER PRIMARY KEY NOT NULL, qq INTEGER, grp INTEGER, "
                "name TEXT, msg TEXT)"
            )

    def throw(self, bottle: Bottle, channel: str = DEFAULT_CHANNEL) -> None:
        """Put a bottle into a channel, replacing an identical one."""
        with self._lock, self._db:
            table = self._require(channel)
            self._db.execute(
                f"INSERT OR REPLACE INTO {table} (id, qq, grp, name, msg) "
                "VALUES (?, ?, ?, ?, ?)",
                (bottle.id, bottle.qq, bottle.grp, bottle.name, bottle.msg),
            )

    def fetch(self, channel: str, grp: int) -> Bottle:
        """Pick a random bottle open to everyone or meant for ``grp``."""
        with self._lock:
            table = self._require(channel)
            row = self._db.execute(
                f"SELECT id, qq, grp, name, msg FROM {table} "
                "WHERE grp = 0 OR grp = ? ORDER BY RANDOM() LIMIT 1",
                (grp,),
            ).fetchone()
        if row is None:
            raise EmptySeaError(f"no bottle in channel {channel}")
        return Bottle(*row)

    def destroy(self, bottle: Bottle, channel: str = DEFAULT_CHANNEL) -> None:
        """Remove a bottle from a channel."""
        with self._lock, self._db:
            table = self._require(channel)
            self._db.execute(f"DELETE FROM {table} WHERE id = ?", (bottle.id,))

    def count(self, channel: str = DEFAULT_CHANNEL) -> int:
        """Return how many bottles float in a channel."""
        with self._lock:
            table = self._require(channel)
            (n,) = self._db.execute(f"SELECT COUNT(*) FROM {table}").fetchone()
        return n

    def close(self) -> None:
        """Close the database."""
        with self._lock:
            self._db.close()