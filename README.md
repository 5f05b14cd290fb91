# atribot

A toolkit for a group chat bot: its configuration file, its command line,
and a set of chat features that work on their own — the ATRI persona
replies, a group "air conditioner" and poke replies, a choice helper,
emoji mixing URLs, video link parsing, epidemic reports, drift bottles,
daily fortune text layout, gacha draws and several small text collections
backed by SQLite.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `atribot` command builds the bot configuration from its options.

```
atribot -h
```

Options:

- `-h` print the usage and exit
- `-d` debug level logging, `-w` warning level and higher (`-w` wins over `-d`)
- `-t` access token for the WebSocket client
- `-u` WebSocket URL (default `ws://127.0.0.1:6700`)
- `-n` default nickname (default `芙兰朵露`); `ATRI`, `atri`, `亚托莉` and
  `アトリ` are always added after it
- `-p` command prefix (default `/`)
- `-c FILE` read the configuration from a JSON file
- `-s FILE` save the configuration built from the options to a JSON file and exit

Remaining arguments that are 64-bit integers become super users; a
built-in owner id is always appended.

```
atribot -n 亚托莉 -s config.json 123456 654321
atribot -c config.json
```

On Windows the command logs through `atribot.logformat.ColorFormatter`,
which prints each record as a coloured `[LEVEL] message` line.

From Python the same work is done by `atribot.cli.build_config(argv)`,
and configuration files are handled with `atribot.config.load_config`,
`atribot.config.save_config` and `atribot.config.config_from_dict`
(which raises `ConfigError` on a malformed document).

## Library use

Each feature lives in its own module and takes its randomness or storage
from the caller:

```python
import random

from atribot.ai_false import pack_limit
from atribot.atri import is_awake, morning_reply
from atribot.bilibili_parse import format_count
from atribot.choose import choose

rng = random.Random()

is_awake(3)            # False: ATRI sleeps between 1 and 6 o'clock
morning_reply(8, rng)  # a morning greeting fitting the hour
format_count(12345)    # "1.23万"
pack_limit(60, 3)      # 196668: 3 triggers per 60 s, packed into one integer
print(choose("可口可乐还是百事可乐", "nick", rng))
```

Modules with plain functions:

- `atribot.atri`: `is_awake`, `morning_reply`, `noon_reply`, `night_reply`
  and `keyword_reply`, which returns a `(kind, data)` pair for text,
  image or record replies.
- `atribot.aireply`: `session_id`, `reply_mode_index`, `reply_mode_name`.
- `atribot.emojimix`: `face_to_emoji`, `match_emojis` and `mix_urls`,
  working on `Segment` values.
- `atribot.bilibili_parse`: `extract_video_id`, `video_query`,
  `format_video`, `format_count`.
- `atribot.epidemic`: `parse_report`, `find_city`, `format_report` over an
  `Area` tree.
- `atribot.ai_false`: `pack_limit`, `unpack_limit`, `parse_limit_command`
  and `system_status`, which reports CPU, memory and disk use via psutil.
- `atribot.fortune`: `theme_index`, `theme_name`, `rows_count`, `offset`
  and `text_layout`, which places each character of a fortune text.
- `atribot.cpstory`: `fill_story` and `split_names`.
- `atribot.diana`: `essay_id`.
- `atribot.drift_bottle`: `new_bottle`, `crc64_iso`, `parse_throw_command`.

Stateful features are small classes:

- `atribot.chat.AirConditioner` and `atribot.chat.PokeResponder` keep
  per-group state; `atribot.chat.TokenBucket` is the rate limiter behind
  pokes; `atribot.chat.name_reply` answers being called by name.
- `atribot.drift_bottle.Sea` stores bottles in SQLite channels
  (`create_channel`, `throw`, `fetch`, `destroy`, `count`).
- `atribot.genshin.Gacha` draws pulls from a `Pool` (which can be read
  from a resource zip with `Pool.from_zip`), with the pool mode kept in a
  `Storage` value; `item_name` and `five_star_summary` name the results.
- `atribot.diana.EssayStore`, `atribot.curse.CurseBook`,
  `atribot.funny.JokeBook`, `atribot.cpstory.StoryBook` and
  `atribot.chouxianghua.AbstractDictionary` read their text from SQLite
  databases; they work as context managers and are closed with `close()`.

## What it does not do

- The `atribot` command only builds, loads or saves the configuration; it
  does not connect to a WebSocket endpoint or run a bot.
- Nothing makes network requests: video data, epidemic reports, emoji
  sticker checks and AI chat replies must be fetched by the caller.
- No images are drawn: the fortune module computes text positions and the
  gacha module returns the pulls, but neither renders a picture.
- The text databases are created empty; their contents are not included.