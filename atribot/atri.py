"""ATRI's canned replies: greetings by time of day and keyword reactions.

Replies are ``(kind, data)`` pairs where kind is ``"text"``, ``"image"`` or
``"record"``; for images and records the data is a resource file name.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass

TEXT = "text"
IMAGE = "image"
RECORD = "record"

Reply = tuple[str, str]

SLEEP_TALK = (
    "zzzz......", "zzzzzzzz......", "zzz...好涩哦..zzz....",
    "别...不要..zzz..那..zzz..", "嘻嘻..zzz..呐~..zzzz..", "...zzz....哧溜哧溜....",
)
MORNING_EARLY = (
    "啊......早上好...(哈欠)", "唔......吧唧...早上...哈啊啊~~~\n早上好......",
    "早上好......", "早上好呜......呼啊啊~~~~",
    "啊......早上好。\n昨晚也很激情呢！", "吧唧吧唧......怎么了...已经早上了么...",
    "早上好！", "......看起来像是傍晚，其实已经早上了吗？", "早上好......欸~~~脸好近呢",
)
MORNING_LATE = (
    "哼！这个点还早啥，昨晚干啥去了！？", "熬夜了对吧熬夜了对吧熬夜了对吧？？？！",
    "是不是熬夜是不是熬夜是不是熬夜？！",
)
MORNING_EVENING = ("早个啥？哼唧！我都准备洗洗睡了！", "不是...你看看几点了，哼！", "晚上好哇")
NOON = (
    "午安w", "午觉要好好睡哦，ATRI会陪伴在你身旁的w",
    "嗯哼哼~睡吧，就像平常一样安眠吧~o(≧▽≦)o", "睡你午觉去！哼唧！！",
)
NIGHT_MORNING = (
    "你可猝死算了吧！", "？啊这",
    "亲，这边建议赶快去睡觉呢~~~", "不可忍不可忍不可忍！！为何这还不猝死！！",
)
NIGHT_AFTERNOON = (
    "难不成？？晚上不想睡觉？？现在休息", "就......挺离谱的...现在睡觉",
    "现在还是白天哦，睡觉还太早了",
)
NIGHT_EVENING = (
    "嗯哼哼~睡吧，就像平常一样安眠吧~o(≧▽≦)o", "......(打瞌睡)",
    "呼...呼...已经睡着了哦~...呼......", "......我、我会在这守着你的，请务必好好睡着",
)
HIGH_PERFORMANCE = (
    "当然，我是高性能的嘛~！", "小事一桩，我是高性能的嘛",
    "怎么样？还是我比较高性能吧？", "哼哼！我果然是高性能的呢！",
    "因为我是高性能的嘛！嗯哼！", "因为我是高性能的呢！",
    "哎呀~，我可真是太高性能了", "正是，因为我是高性能的",
    "是的。我是高性能的嘛♪", "毕竟我可是高性能的！",
    "嘿嘿，我的高性能发挥出来啦♪", "我果然是很高性能的机器人吧！",
    "是吧！谁叫我这么高性能呢！哼哼！", "交给我吧，有高性能的我陪着呢",
    "呣......我的高性能，毫无遗憾地施展出来了......",
)
NO_PROBLEM = (
    "当然，我是高性能的嘛~！", "没事没事，因为我是高性能的嘛！嗯哼！",
    "没事的，因为我是高性能的呢！", "正是，因为我是高性能的",
    "是的。我是高性能的嘛♪", "毕竟我可是高性能的！",
    "那种程度的事不算什么的。\n别看我这样，我可是高性能的", "没问题的，我可是高性能的",
)
QUESTION_MARKS = ("?", "？", "嗯？", "(。´・ω・)ん?", "ん？")

_ROBOT_TEXTS = ("萝卜子是对机器人的蔑称！", "是亚托莉......萝卜子可是对机器人的蔑称")
_LOVE_WORDS = (
    "喜欢", "爱你", "爱", "suki", "daisuki", "すき",
    "好き", "贴贴", "老婆", "亲一个", "mua",
)
_INSULT_WORDS = (
    "草你妈", "操你妈", "脑瘫", "废柴", "fw", "five", "废物",
    "战斗", "爬", "爪巴", "sb", "SB", "傻B",
)
_PRAISE_WORDS = ("高性能", "太棒了", "すごい", "sugoi", "斯国一", "よかった")
_COMFORT_WORDS = ("没事", "没关系", "大丈夫", "还好", "不要紧", "没出大问题", "没伤到哪")
_ASK_WORDS = ("好吗", "是吗", "行不行", "能不能", "可不可以")


def _pick(rng: random.Random, kind: str, items: Sequence[str]) -> Reply:
    return kind, rng.choice(list(items))


def is_awake(hour: int) -> bool:
    """ATRI sleeps from 1 to 6 o'clock and answers nothing then."""
    return not 1 <= hour < 6


def morning_reply(hour: int, rng: random.Random | None = None) -> str:
    """Answer to 'good morning' depending on the hour."""
    rng = rng or random.Random()
    if hour < 6:
        return rng.choice(SLEEP_TALK)
    if hour < 9:
        return rng.choice(MORNING_EARLY)
    if hour < 18:
        return rng.choice(MORNING_LATE)
    return rng.choice(MORNING_EVENING)


def noon_reply(hour: int, rng: random.Random | None = None) -> str | None:
    """Answer to 'good afternoon', only around noon."""
    rng = rng or random.Random()
    if 11 < hour < 15:
        return rng.choice(NOON)
    return None


def night_reply(hour: int, rng: random.Random | None = None) -> str:
    """Answer to 'good night' depending on the hour."""
    rng = rng or random.Random()
    if hour < 6:
        return rng.choice(SLEEP_TALK)
    if hour < 11:
        return rng.choice(NIGHT_MORNING)
    if hour < 15:
        return rng.choice(NOON)
    if hour < 19:
        return rng.choice(NIGHT_AFTERNOON)
    return rng.choice(NIGHT_EVENING)


def _robot(rng: random.Random) -> Reply | None:
    if rng.randrange(2) == 0:
        return _pick(rng, TEXT, _ROBOT_TEXTS)
    return RECORD, "RocketPunch.amr"


def _maybe_image(*files: str) -> Callable[[random.Random], Reply | None]:
    def handler(rng: random.Random) -> Reply | None:
        if rng.randrange(2) == 0:
            return _pick(rng, IMAGE, files)
        return None

    return handler


def _puzzled(*files: str) -> Callable[[random.Random], Reply | None]:
    def handler(rng: random.Random) -> Reply | None:
        roll = rng.randrange(5)
        if roll == 0:
            return _pick(rng, TEXT, QUESTION_MARKS)
        if roll in (1, 2):
            return _pick(rng, IMAGE, files)
        return None

    return handler


def _always(kind: str, *items: str) -> Callable[[random.Random], Reply | None]:
    return lambda rng: _pick(rng, kind, items)


@dataclass(frozen=True)
class _Rule:
    full: bool
    words: tuple[str, ...]
    handler: Callable[[random.Random], Reply | None]

    def matches(self, text: str) -> bool:
        if self.full:
            return text in self.words
        return any(word in text for word in self.words)


_RULES = (
    _Rule(True, ("萝卜子",), _robot),
    _Rule(True, _LOVE_WORDS, _always(IMAGE, "SUKI.jpg", "SUKI1.jpg", "SUKI2.png")),
    _Rule(False, _INSULT_WORDS, _always(IMAGE, "FN.jpg", "WQ.jpg", "WQ1.jpg")),
    _Rule(False, _PRAISE_WORDS, _always(TEXT, *HIGH_PERFORMANCE)),
    _Rule(False, _COMFORT_WORDS, _always(TEXT, *NO_PROBLEM)),
    _Rule(False, _ASK_WORDS, _maybe_image("YES.png", "NO.jpg")),
    _Rule(False, ("啊这",), _maybe_image("AZ.jpg", "AZ1.jpg")),
    _Rule(False, ("我好了",), _always(TEXT, "不许好！", "憋回去！")),
    _Rule(True, ("？", "?", "¿"), _puzzled("WH.jpg", "WH1.jpg", "WH2.jpg", "WH3.jpg")),
    _Rule(False, ("离谱",), _puzzled("WH.jpg")),
    _Rule(False, ("答应我",), _always(TEXT, "我无法回应你的请求")),
)


def keyword_reply(text: str, rng: random.Random | None = None) -> Reply | None:
    """React to a message addressed to ATRI; the first matching rule decides."""
    rng = rng or random.Random()
    for rule in _RULES:
        if rule.matches(text):
            return rule.handler(rng)
    return None