"""Command line entry point: builds the bot configuration from flags or a file."""

from __future__ import annotations

import argparse
import logging
import os
import re
import sys
from collections.abc import Iterable, Sequence

from atribot.config import BotConfig, WSClient, ZeroConfig, load_config, save_config
from atribot.logformat import ColorFormatter

log = logging.getLogger("atribot")

DEFAULT_URL = "ws://127.0.0.1:6700"
DEFAULT_NICKNAME = "芙兰朵露"
EXTRA_NICKNAMES = ("ATRI", "atri", "亚托莉", "アトリ")
BUILTIN_SUPERUSERS = (2214364672,)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def parse_superusers(args: Iterable[str]) -> list[int]:
    """Return the 64-bit integers among the arguments, then the built-in owners."""
    users = []
    for arg in args:
        if not _INT_RE.fullmatch(arg):
            continue
        value = int(arg)
        if _INT64_MIN <= value <= _INT64_MAX:
            users.append(value)
    users.extend(BUILTIN_SUPERUSERS)
    return users


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the bot's command line."""
    parser = argparse.ArgumentParser(prog="atribot", add_help=False)
    parser.add_argument("-d", dest="debug", action="store_true",
                        help="Enable debug level log and higher.")
    parser.add_argument("-w", dest="warning", action="store_true",
                        help="Enable warning level log and higher.")
    parser.add_argument("-h", dest="help", action="store_true",
                        help="Display this help.")
    parser.add_argument("-t", dest="token", default="",
                        help="Set AccessToken of WSClient.")
    parser.add_argument("-u", dest="url", default=DEFAULT_URL,
                        help="Set Url of WSClient.")
    parser.add_argument("-n", dest="nickname", default=DEFAULT_NICKNAME,
                        help="Set default nickname.")
    parser.add_argument("-p", dest="prefix", default="/",
                        help="Set command prefix.")
    parser.add_argument("-c", dest="config", default="",
                        help="Run from config file.")
    parser.add_argument("-s", dest="save", default="",
                        help="Save default config to file and exit.")
    parser.add_argument("superusers", nargs="*", help="Super user ids.")
    return parser


def _config_from_args(ns: argparse.Namespace) -> BotConfig:
    if ns.config:
        return load_config(ns.config)
    return BotConfig(
        zero=ZeroConfig(
            nickname=[ns.nickname, *EXTRA_NICKNAMES],
            command_prefix=ns.prefix,
            super_users=parse_superusers(ns.superusers),
        ),
        ws=[WSClient(ns.url, ns.token)],
    )


def build_config(argv: Sequence[str] | None = None) -> BotConfig:
    """Build the configuration that the given command line describes."""
    return _config_from_args(build_parser().parse_args(argv))


def _configure_logging(debug: bool, warning: bool) -> None:
    level = logging.INFO
    if debug and not warning:
        level = logging.DEBUG
    if warning:
        level = logging.WARNING
    log.setLevel(level)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        if os.name == "nt":
            handler.setFormatter(ColorFormatter())
            handler.terminator = ""
        log.addHandler(handler)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line, prepare the configuration and return an exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)
    if ns.help:
        print("Usage:")
        print(parser.format_help(), end="")
        return 0
    _configure_logging(ns.debug, ns.warning)
    config = _config_from_args(ns)
    if ns.config:
        log.info("[main] 从 %s 读取配置文件", ns.config)
    elif ns.save:
        save_config(config, ns.save)
        log.info("[main] 配置文件已保存到 %s", ns.save)
        return 0
    log.debug("[main] %d 个连接, 超级用户 %s", len(config.ws), config.zero.super_users)
    return 0


if __name__ == "__main__":
    sys.exit(main())