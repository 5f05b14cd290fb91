"""AI reply mode selection, stored per group or per private chat."""

from __future__ import annotations

REPLY_MODES = ("青云客", "小爱")
DEFAULT_MODE = REPLY_MODES[0]


def session_id(group_id: int, user_id: int) -> int:
    """Key settings by group, or by the negated user id in private chats."""
    return group_id if group_id != 0 else -user_id


def reply_mode_index(name: str) -> int:
    """Return the stored index of a reply mode; ValueError if unknown."""
    try:
        return REPLY_MODES.index(name)
    except ValueError:
        raise ValueError("no such mode") from None


def reply_mode_name(index: int) -> str:
    """Return the reply mode for a stored index, falling back to the default."""
    if 0 <= index < len(REPLY_MODES):
        return REPLY_MODES[index]
    return DEFAULT_MODE