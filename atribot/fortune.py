"""Daily fortune: background themes and the vertical layout of the omikuji text."""

from __future__ import annotations

THEMES = (
    "车万", "DC4", "爱因斯坦", "星空列车", "樱云之恋", "富婆妹", "李清歌",
    "公主连结", "原神", "明日方舟", "碧蓝航线", "碧蓝幻想", "战双", "阴阳师",
    "赛马娘", "东方归言录", "奇异恩典", "夏日口袋", "ASoul",
)
DEFAULT_THEME = THEMES[0]
COLUMN_LENGTH = 9
GLYPH_PADDING = 10
ORIGIN_X = 115.0
ORIGIN_Y = 320.0

_INDEX = {name: i for i, name in enumerate(THEMES)}


def theme_index(name: str) -> int:
    """Return the stored value for a theme; ValueError if there is none."""
    try:
        return _INDEX[name] & 0xFF
    except KeyError:
        raise ValueError("没有这个底图哦～") from None


def theme_name(data: int) -> str:
    """Return the theme for a stored value, falling back to the default."""
    index = data & 0xFF
    return THEMES[index] if index < len(THEMES) else DEFAULT_THEME


def _half(total: int) -> int:
    return -(-total // 2) if total < 0 else total // 2


def rows_count(total: int, div: int) -> int:
    """Number of groups of ``div`` needed to hold ``total`` items."""
    count = int(total / div)
    if total % div != 0:
        count += 1
    return count


def offset(total: int, now: int, distance: float) -> float:
    """Offset of item ``now`` (from 1) in a centred run of ``total`` items."""
    if total % 2 == 0:
        return (now - _half(total) - 1) * distance
    return (now - _half(total) - 1.5) * distance


def text_layout(
    text: str, char_width: float, char_height: float
) -> list[tuple[str, float, float]]:
    """Place each character of the text in right-to-left columns.

    ``char_width`` and ``char_height`` are the measured size of one glyph;
    returns (character, x, y) for every character in order.
    """
    tw = char_width + GLYPH_PADDING
    th = char_height + GLYPH_PADDING
    chars = list(text)
    n = len(chars)
    columns = rows_count(n, COLUMN_LENGTH)
    placed = []
    if columns == 2:
        div = rows_count(n, 2)
        for i, ch in enumerate(chars):
            col = rows_count(i + 1, div)
            col_len = min(n - (col - 1) * div, div)
            row = i % div + 1
            x = -offset(columns, col, tw) + ORIGIN_X
            if col == 1:
                y = offset(COLUMN_LENGTH, row, th) + ORIGIN_Y
            else:
                y = offset(COLUMN_LENGTH, row + (COLUMN_LENGTH - col_len), th) + ORIGIN_Y
            placed.append((ch, x, y))
        return placed
    for i, ch in enumerate(chars):
        col = rows_count(i + 1, COLUMN_LENGTH)
        col_len = min(n - (col - 1) * COLUMN_LENGTH, COLUMN_LENGTH)
        row = i % COLUMN_LENGTH + 1
        x = -offset(columns, col, tw) + ORIGIN_X
        y = offset(col_len, row, th) + ORIGIN_Y
        placed.append((ch, x, y))
    return placed