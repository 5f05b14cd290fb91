"""City epidemic statistics: parse the report tree and look up a city."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

REPORT_URL = (
    "https://api.inews.qq.com/newsqa/v1/query/inner/publish/modules/list"
    "?modules=statisGradeCityDetail,diseaseh5Shelf"
)


@dataclass
class Area:
    """Statistics for one region and the regions below it."""

    name: str
    today_confirm: int = 0
    today_wzz_add: Any = None
    now_confirm: int = 0
    confirm: int = 0
    dead: int = 0
    heal: int = 0
    grade: str = ""
    wzz: int = 0
    children: list[Area] = field(default_factory=list)


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    return value if isinstance(value, Mapping) else {}


def _area(data: Mapping[str, Any]) -> Area:
    today = _section(data, "today")
    total = _section(data, "total")
    return Area(
        name=data.get("name", ""),
        today_confirm=today.get("confirm", 0),
        today_wzz_add=today.get("wzz_add"),
        now_confirm=total.get("nowConfirm", 0),
        confirm=total.get("confirm", 0),
        dead=total.get("dead", 0),
        heal=total.get("heal", 0),
        grade=total.get("grade", ""),
        wzz=total.get("wzz", 0),
        children=[_area(child) for child in data.get("children") or []],
    )


def parse_report(data: str | bytes | Mapping[str, Any]) -> tuple[Area, str]:
    """Return the root of the area tree and the report's update time."""
    if isinstance(data, (str, bytes, bytearray)):
        data = json.loads(data)
    shelf = _section(_section(data, "data"), "diseaseh5Shelf")
    trees = shelf.get("areaTree") or []
    if not trees:
        raise ValueError("the report holds no area data")
    return _area(trees[0]), shelf.get("lastUpdateTime", "")


def find_city(area: Area | None, name: str) -> Area | None:
    """Search the tree depth first for the region with the given name."""
    if area is None:
        return None
    if area.name == name:
        return area
    for child in area.children:
        found = find_city(child, name)
        if found is not None:
            return found
    return None


def _show(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_report(area: Area, update_time: str) -> str:
    """Render a region's statistics as a chat message."""
    return (
        f"【{area.name}】疫情数据\n"
        f"新增人数：{area.today_confirm}\n"
        f"现有确诊：{area.now_confirm}\n"
        f"累计确诊：{area.confirm}\n"
        f"治愈人数：{area.heal}\n"
        f"死亡人数：{area.dead}\n"
        f"无症状人数：{area.wzz}\n"
        f"新增无症状：{_show(area.today_wzz_add)}\n"
        f"更新时间：\n『{update_time}』"
    )