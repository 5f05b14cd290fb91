import random
import zipfile

import pytest

from atribot.genshin import (
    DISPLAY_ORDER,
    Gacha,
    Pool,
    Pull,
    Storage,
    five_star_summary,
    item_name,
)


@pytest.fixture
def pool():
    return Pool(
        five=("five/火_迪卢克.png", "five/冰_七七.png"),
        five2=("five2/剑_天空之刃.png",),
        four=("four/水_行秋.png", "four/雷_菲谢尔.png"),
        four2=("four2/弓_西风猎弓.png",),
        three=("Three/剑_黎明神剑.png", "Three/弓_弹弓.png"),
    )


def test_storage_mode_round_trip():
    on = Storage(6).with_mode(True)
    assert on.is_five_star_mode()
    off = on.with_mode(False)
    assert not off.is_five_star_mode()
    assert off.value == 6


def test_storage_default_is_ordinary():
    assert not Storage().is_five_star_mode()


def test_item_name_and_icon():
    assert item_name("five/火_迪卢克.png") == "迪卢克"
    assert Pull("five/火_迪卢克.png", 5, False).icon == "火.png"


def test_item_name_rejects_other_files():
    with pytest.raises(ValueError):
        item_name("bg0.jpg")


def test_summary_both():
    assert five_star_summary(["迪卢克"], ["天空之刃"]) == (
        "★五星角色★\n迪卢克 * \n★五星武器★\n天空之刃 * "
    )


def test_summary_weapons_only_and_empty():
    assert five_star_summary([], ["天空之刃"]) == "★五星武器★\n天空之刃 * "
    assert five_star_summary([], []) == ""


def test_first_draw_is_guaranteed_five_star(pool):
    result = Gacha(pool, random.Random(1)).draw(10)
    assert len(result.pulls) == 10
    assert result.lucky
    assert any(p.stars == 5 for p in result.pulls)


def test_five_star_mode(pool):
    g = Gacha(pool, random.Random(2), total=1)
    result = g.draw(10, Storage(1))
    assert [p.stars for p in result.pulls] == [5] * 10
    assert g.total == 1


def test_total_counts_ordinary_draws(pool):
    g = Gacha(pool, random.Random(3))
    g.draw(10, Storage())
    g.draw(10, Storage())
    assert g.total == 2


@pytest.mark.parametrize("seed", range(30))
def test_ordinary_draw_invariants(pool, seed):
    result = Gacha(pool, random.Random(seed), total=1).draw(10)
    assert len(result.pulls) == 10
    stars = [p.stars for p in result.pulls]
    assert 4 in stars or 3 not in stars
    order = [DISPLAY_ORDER.index((p.stars, p.weapon)) for p in result.pulls]
    assert order == sorted(order)
    assert result.lucky == (5 in stars)
    for p in result.pulls:
        assert p.path in pool.category(p.stars, p.weapon)


def test_empty_category_raises():
    with pytest.raises(ValueError):
        Gacha(Pool(), random.Random(0)).draw(10)


def test_pool_from_zip(tmp_path):
    path = tmp_path / "Genshin.zip"
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("Genshin/five/火_迪卢克.png", b"x")
        zf.writestr("Genshin/Three/剑_黎明神剑.png", b"x")
        zf.writestr("Genshin/gacha/FiveStar.png", b"x")
        zf.writestr("Genshin/bg0.jpg", b"x")
    pool = Pool.from_zip(path)
    assert pool.five == ("five/火_迪卢克.png",)
    assert pool.three == ("Three/剑_黎明神剑.png",)
    assert pool.four == ()