"""Bot configuration: the framework settings plus the websocket clients."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from os import PathLike
from typing import Any, Union

StrPath = Union[str, "PathLike[str]"]

_WS_FIELDS = ("url", "access_token")


class ConfigError(ValueError):
    """Raised when a configuration document has the wrong shape."""


@dataclass
class WSClient:
    """A forward websocket connection to a OneBot endpoint."""

    url: str
    access_token: str = field(default_factory=str)


@dataclass
class ZeroConfig:
    """Framework settings: names the bot answers to, prefix and super users."""

    nickname: list[str] = field(default_factory=list)
    command_prefix: str = ""
    super_users: list[int] = field(default_factory=list)


@dataclass
class BotConfig:
    """The whole configuration file: framework settings and drivers."""

    zero: ZeroConfig = field(default_factory=ZeroConfig)
    ws: list[WSClient] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the configuration."""
        return asdict(self)


def _get(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key, default)
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(f"{key!r} must be of type {kind.__name__}")
    return value


def _str_list(data: dict[str, Any], key: str) -> list[str]:
    items = _get(data, key, list, [])
    if not all(isinstance(item, str) for item in items):
        raise ConfigError(f"{key!r} must be a list of strings")
    return list(items)


def _int_list(data: dict[str, Any], key: str) -> list[int]:
    items = _get(data, key, list, [])
    if not all(isinstance(i, int) and not isinstance(i, bool) for i in items):
        raise ConfigError(f"{key!r} must be a list of integers")
    return list(items)


def _ws_client(data: Any) -> WSClient:
    if not isinstance(data, dict):
        raise ConfigError("every websocket client must be an object")
    values = {key: _get(data, key, str, "") for key in _WS_FIELDS}
    return WSClient(**values)


def config_from_dict(data: Any) -> BotConfig:
    """Build a configuration from its decoded JSON form."""
    if not isinstance(data, dict):
        raise ConfigError("configuration must be an object")
    zero = _get(data, "zero", dict, {})
    return BotConfig(
        zero=ZeroConfig(
            nickname=_str_list(zero, "nickname"),
            command_prefix=_get(zero, "command_prefix", str, ""),
            super_users=_int_list(zero, "super_users"),
        ),
        ws=[_ws_client(item) for item in _get(data, "ws", list, [])],
    )


def load_config(path: StrPath) -> BotConfig:
    """Read a configuration file written as JSON."""
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"invalid configuration file: {exc}") from exc
    return config_from_dict(data)


def save_config(config: BotConfig, path: StrPath) -> None:
    """Write the configuration to a file as JSON."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, ensure_ascii=False)
        f.write("\n")