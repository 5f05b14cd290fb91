"""Bilibili video links: find the video id and summarise the video's data."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

VIDEO_API = "https://api.bilibili.com/x/web-interface/view?"
CARD_API = "http://api.bilibili.com/x/web-interface/card?"
ORIGIN = "https://www.bilibili.com/video/"

TEXT = "text"
IMAGE = "image"

Segment = tuple[str, str]

_VIDEO_URL_RE = re.compile(r"https://www.bilibili.com/video/([0-9a-zA-Z]+)")


def format_count(n: int) -> str:
    """Render a count, in units of ten thousand (万) from 10000 upwards."""
    if abs(n) >= 10000:
        return f"{n / 10000:.2f}万"
    return str(n)


def extract_video_id(url: str) -> str | None:
    """Return the av or BV id in a bilibili video URL, or None if there is none."""
    match = _VIDEO_URL_RE.search(url)
    return match.group(1) if match else None


def video_query(video_id: str) -> str:
    """Return the API URL that describes the video with the given av or BV id."""
    if video_id.startswith("av"):
        return VIDEO_API + "aid=" + video_id[2:]
    if video_id.startswith("BV"):
        return VIDEO_API + "bvid=" + video_id
    raise ValueError(f"not a video id: {video_id!r}")


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    return value if isinstance(value, Mapping) else {}


def format_video(
    video_id: str, data: Mapping[str, Any], owner_fans: int | None = None
) -> list[Segment]:
    """Summarise a video API response as a list of message segments.

    ``owner_fans`` is the uploader's follower count; it is needed unless the
    video is a cooperation, whose staff entries carry their own counts.
    """
    info = _section(data, "data")
    stat = _section(info, "stat")
    segments: list[Segment] = [(TEXT, f"标题: {info.get('title', '')}\n")]
    if _section(info, "rights").get("is_cooperation") == 1:
        for member in info.get("staff") or []:
            segments.append(
                (
                    TEXT,
                    f"{member.get('title', '')}: {member.get('name', '')}, "
                    f"粉丝: {format_count(member.get('follower', 0))}\n",
                )
            )
    else:
        if owner_fans is None:
            raise ValueError("the uploader's follower count is required")
        owner = _section(info, "owner")
        segments.append(
            (TEXT, f"UP主: {owner.get('name', '')}, 粉丝: {format_count(owner_fans)}\n")
        )

    def count(key: str) -> str:
        return format_count(stat.get(key, 0))

    segments.append((TEXT, f"播放: {count('view')}, 弹幕: {count('danmaku')}\n"))
    segments.append((IMAGE, info.get("pic", "")))
    segments.append(
        (
            TEXT,
            f"\n点赞: {count('like')}, 投币: {count('coin')}\n"
            f"收藏: {count('favorite')}, 分享: {count('share')}\n{ORIGIN}{video_id}",
        )
    )
    return segments