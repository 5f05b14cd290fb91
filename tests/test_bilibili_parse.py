import pytest

from atribot.bilibili_parse import (
    IMAGE,
    ORIGIN,
    TEXT,
    VIDEO_API,
    extract_video_id,
    format_count,
    format_video,
    video_query,
)


def test_format_count_small_numbers_unchanged():
    assert format_count(9999) == "9999"
    assert format_count(0) == "0"


def test_format_count_uses_wan():
    assert format_count(12345) == "1.23万"
    assert format_count(10000).endswith("万")


def test_extract_video_id():
    assert extract_video_id("https://www.bilibili.com/video/BV1xx411c7BF") == "BV1xx411c7BF"
    assert extract_video_id("see https://www.bilibili.com/video/av1605?p=1") == "av1605"


def test_extract_video_id_missing():
    assert extract_video_id("https://example.com/nothing") is None


def test_video_query():
    assert video_query("av1605") == VIDEO_API + "aid=1605"
    assert video_query("BV1xx411c7BF") == VIDEO_API + "bvid=BV1xx411c7BF"


def test_video_query_rejects_other_ids():
    with pytest.raises(ValueError):
        video_query("xx123")


def _response(cooperation=0):
    return {
        "data": {
            "title": "A title",
            "pic": "http://img.example.com/p.jpg",
            "rights": {"is_cooperation": cooperation},
            "owner": {"mid": 1, "name": "Uploader"},
            "stat": {"view": 12, "danmaku": 3, "like": 4, "coin": 5, "favorite": 6, "share": 7},
            "staff": [
                {"title": "UP主", "name": "Alice", "follower": 42},
                {"title": "参演", "name": "Bob", "follower": 7},
            ],
        }
    }


def test_format_video_single_uploader():
    segments = format_video("av1605", _response(), owner_fans=99)
    assert segments[0] == (TEXT, "标题: A title\n")
    assert segments[1] == (TEXT, "UP主: Uploader, 粉丝: 99\n")
    assert segments[2] == (TEXT, "播放: 12, 弹幕: 3\n")
    assert segments[3] == (IMAGE, "http://img.example.com/p.jpg")
    assert segments[4] == (TEXT, "\n点赞: 4, 投币: 5\n收藏: 6, 分享: 7\n" + ORIGIN + "av1605")


def test_format_video_cooperation_lists_staff():
    segments = format_video("BV1xx411c7BF", _response(cooperation=1))
    assert segments[1] == (TEXT, "UP主: Alice, 粉丝: 42\n")
    assert segments[2] == (TEXT, "参演: Bob, 粉丝: 7\n")
    assert segments[-1][1].endswith(ORIGIN + "BV1xx411c7BF")


def test_format_video_requires_owner_fans():
    with pytest.raises(ValueError):
        format_video("av1", _response())