"""Server self-check and the packed default rate-limit setting."""

from __future__ import annotations

import math
import re

import psutil

LIMIT_MAX = 65536
_LIMIT_RE = re.compile(r"设置默认限速为每\s*(\d+)\s*(分钟|秒)\s*(\d+)\s*次触发")


def _round(x: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def pack_limit(seconds: int, burst: int) -> int:
    """Pack an interval and a burst into one stored integer."""
    return (seconds & 0xFFFF) | ((burst << 16) & 0xFFFF0000)


def unpack_limit(data: int) -> tuple[int, int]:
    """Return the (seconds, burst) pair packed into a stored integer."""
    return data & 0xFFFF, (data >> 16) & 0xFFFF


def parse_limit_command(text: str) -> tuple[int, int] | None:
    """Parse '设置默认限速为每 m 分钟|秒 n 次触发' into (seconds, burst).

    Returns None when the text is not such a command; raises ValueError when
    the interval or the burst is out of range.
    """
    match = _LIMIT_RE.fullmatch(text)
    if match is None:
        return None
    seconds = int(match.group(1))
    if match.group(2) == "分钟":
        seconds *= 60
    if not 0 < seconds < LIMIT_MAX:
        raise ValueError("interval too big")
    burst = int(match.group(3))
    if not 0 < burst < LIMIT_MAX:
        raise ValueError("burst too big")
    return seconds, burst


def _cpu_percent() -> int:
    try:
        return _round(psutil.cpu_percent(interval=1))
    except Exception:
        return -1


def _mem_percent() -> int:
    try:
        return _round(psutil.virtual_memory().percent)
    except Exception:
        return -1


def _disk_percent() -> str:
    try:
        parts = psutil.disk_partitions(all=True)
    except Exception as exc:
        return str(exc)
    lines = []
    for part in parts:
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except Exception as exc:
            lines.append(f"\n  - {exc}")
            continue
        used = _round(usage.percent)
        if used > 0:
            lines.append(
                f"\n  - {part.mountpoint}({usage.total // 1024 // 1024}M) {used}%"
            )
    return "".join(lines)


def system_status() -> str:
    """Report CPU, memory and disk usage of the machine."""
    return (
        f"* CPU占用: {_cpu_percent()}%\n"
        f"* RAM占用: {_mem_percent()}%\n"
        f"* 硬盘使用: {_disk_percent()}"
    )