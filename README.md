# ina

Building blocks for a chat server assistant bot. The package has no runtime
dependencies and works on plain data only.

## Modules

- `ina.color` – `Color`, an RGB color with 8-bit components. `Color.parse`
  accepts `#RRGGBB`, `rgb(r, g, b)` (integers, or scaled floats when any
  component contains a `.`), `hsl(h, s, l)` and a decimal packed value, and
  raises `ColorParseError` otherwise. Also `from_u32`, `from_scaled`,
  `from_hsl`, `rgb`, `rgb_scaled`, `hsl` and `to_list`; `str()` gives
  `rgb(r, g, b)` and the format specs `x` / `X` give `#rrggbb` / `#RRGGBB`.
- `ina.search` – `fuzzy_contains(strictness, string, pattern)` with
  `Strictness.loose`, `Strictness.firm` and `Strictness.strict`, each with an
  `ignore_casing` flag.
- `ina.secret` – `discord_token()`, `development_guild_id()`,
  `development_channel_id()` and `encryption_key()` read the environment
  variables `DISCORD_TOKEN`, `DEVELOPMENT_GUILD_ID`, `DEVELOPMENT_CHANNEL_ID`
  and `ENCRYPTION_KEY`. A missing variable, or an identifier that is not a
  non-zero 64-bit integer, raises `SecretError`.
- `ina.constants` – `DISCORD_CDN_URL`, `TWEMOJI_CDN_URL`, the `Category`
  enum with `CATEGORY_LIST`, the palette colors (`SUCCESS`, `FAILURE`, …) and
  `branding(debug)` / `backdrop(debug)`.
- `ina.custom_id` – `CustomId`, a command/variant pair carrying a list of
  data strings, encoded with NUL between parts and form feed between data
  entries, limited to 100 UTF-8 bytes. Invalid identifiers raise subclasses of
  `CustomIdError` (`MissingPartError`, `InvalidCommandError`,
  `InvalidVariantError`, `InvalidDataError`, `ExceededMaxLengthError`).
- `ina.anchor` – `Anchor`, a reference to a message by guild, channel and
  message identifiers, with `display_link()`.
- `ina.builder` – `MediaGalleryBuilder`, `MediaGalleryItemBuilder` and
  `TextInputBuilder`. `build()` returns the value as is; `try_build()` also
  validates it and raises `ValueError` when a limit is broken.
- `ina.modal` – `ModalBuilder` producing a `Modal`; `try_build()` raises
  `InvalidTitleError`, `InvalidCustomIdError` or `MaximumInputsError`.
- `ina.extension` – `ImageHash`, `creation_date(snowflake)`,
  `InteractionLabel`, and the `User`, `Member`, `PartialMember` and `Guild`
  models with `display_name()`, `display_tag()` and hash accessors.
- `ina.convert` – `parse_emoji` (Unicode or `<a:name:id>`, raising
  `EmojiError`), `emoji_image_url`, `sticker_image_url`, `guild_icon_url`,
  `user_avatar_url`, `member_avatar_url`, and `EmbedAuthor` via
  `guild_embed_author`, `user_embed_author` and `member_embed_author`.

## Installation

```sh
pip install .
```

For running the tests:

```sh
pip install ".[test]"
pytest
```

## Examples

Colors:

```python
from ina.color import Color

red = Color.parse("#FF0000")
print(red)                                                # rgb(255, 0, 0)
print(f"{red:x}")                                         # #ff0000
print(Color.parse("hsl(120, 1, 0.5)").rgb() == 0x00FF00)  # True
```

Fuzzy search:

```python
from ina.search import Strictness, fuzzy_contains

fuzzy_contains(Strictness.loose(True), "Hello, World!", "world hello")  # True
fuzzy_contains(Strictness.strict(False), "Hello, World!", "world")      # False
```

Custom identifiers:

```python
from ina.custom_id import CustomId

custom_id = CustomId("role", "select").with_str("1234")
again = CustomId.parse(str(custom_id))
print(again.get(0, int))  # 1234
```

Message anchors:

```python
from ina.anchor import Anchor

anchor = Anchor.new_private(channel_id=10, message_id=20)
print(anchor.display_link())  # https://discord.com/channels/@me/10/20
```

Emojis:

```python
from ina.convert import emoji_image_url, parse_emoji

emoji = parse_emoji("<a:party_blob:123>")
print(emoji_image_url(emoji))  # https://cdn.discordapp.com/emojis/123.gif
```

## What this package does not do

There is no bot here: no gateway connection, no HTTP requests, no command
handling, no persistent storage, no localization files and no logging setup.
Models such as `User` or `Anchor` hold data you supply; nothing fetches,
sends, edits or deletes messages, and there is no command to run.