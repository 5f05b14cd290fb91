import logging

import pytest

from atribot.logformat import TRACE, ColorFormatter, level_color


def _record(level, msg, *args):
    return logging.LogRecord("t", level, __file__, 1, msg, args, None)


@pytest.mark.parametrize(
    "level, code",
    [
        (logging.CRITICAL, "\x1b[1;31m"),
        (logging.ERROR, "\x1b[31m"),
        (logging.WARNING, "\x1b[33m"),
        (logging.INFO, "\x1b[37m"),
        (logging.DEBUG, "\x1b[32m"),
        (TRACE, "\x1b[36m"),
    ],
)
def test_level_color(level, code):
    assert level_color(level) == code


def test_unknown_level_uses_info_color():
    assert level_color(33) == level_color(logging.INFO)


def test_format_info_line():
    out = ColorFormatter().format(_record(logging.INFO, "hello"))
    assert out == "\x1b[37m[INFO] hello \n\x1b[0m"


def test_format_applies_arguments_and_uppercases_level():
    out = ColorFormatter().format(_record(logging.WARNING, "n=%d", 3))
    assert out.startswith(level_color(logging.WARNING) + "[WARNING] ")
    assert "n=3" in out
    assert out.endswith(" \n\x1b[0m")


def test_format_through_logger(capsys):
    logger = logging.getLogger("atribot.test.logformat")
    logger.propagate = False
    handler = logging.StreamHandler()
    handler.terminator = ""
    handler.setFormatter(ColorFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        logger.error("boom")
    finally:
        logger.removeHandler(handler)
    err = capsys.readouterr().err
    assert err == "\x1b[31m[ERROR] boom \n\x1b[0m"