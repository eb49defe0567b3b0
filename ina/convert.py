"""Conversions from models to emojis, image URLs and embed authors."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any, Union

from ina.constants import DISCORD_CDN_URL, TWEMOJI_CDN_URL
from ina.extension import ImageHash

_STICKER_GIF_CDN_URL = "https://media.discordapp.net"
_U64_MAX = 0xFFFF_FFFF_FFFF_FFFF
_DIGITS = re.compile(r"\+?[0-9]+")


class EmojiError(ValueError):
    """Raised when a string cannot be parsed as an emoji."""


@dataclass(frozen=True)
class UnicodeEmoji:
    """A standard Unicode emoji."""

    name: str


@dataclass(frozen=True)
class CustomEmoji:
    """A custom emoji identified by its snowflake."""

    id: int
    name: str | None = None
    animated: bool = False


Emoji = Union[UnicodeEmoji, CustomEmoji]


def _extension(hash_: ImageHash) -> str:
    return "gif" if hash_.is_animated() else "png"


def _parse_emoji_id(text: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise EmojiError(f"invalid emoji identifier: {text!r}")
    value = int(text)
    if value == 0:
        raise EmojiError("emoji identifier must be non-zero")
    if value > _U64_MAX:
        raise EmojiError("emoji identifier is too large")
    return value


def parse_emoji(string: str) -> Emoji:
    """Parse a Unicode emoji or a custom emoji of the form ``<a:name:id>``."""
    if not string:
        raise EmojiError("expected a non-empty string")
    if not string.startswith("<"):
        return UnicodeEmoji(string)
    if not string.endswith(">"):
        raise EmojiError("missing closing angle bracket")

    sections = iter(string.strip("<>").split(":"))

    header = next(sections, None)
    if header is None:
        raise EmojiError("missing animated header")
    if header not in ("", "a"):
        raise EmojiError(f"invalid animated header: '{header}'")
    animated = header == "a"

    name = next(sections, None)
    if name is None:
        raise EmojiError("missing emoji name")
    if len(name) <= 1:
        raise EmojiError("emoji name must be at least two characters")
    if not all(c.isalnum() or c == "_" for c in name):
        raise EmojiError("emoji name must be entirely alphanumeric including underscores")

    raw_id = next(sections, None)
    if raw_id is None:
        raise EmojiError("missing emoji identifier")

    remaining = list(sections)
    if remaining:
        raise EmojiError(f"unexpected section(s) in emoji string: {remaining!r}")

    return CustomEmoji(_parse_emoji_id(raw_id), name, animated)


def emoji_image_url(emoji: Emoji) -> str:
    """The image URL of an emoji; Unicode emojis resolve to Twemoji images."""
    if isinstance(emoji, CustomEmoji):
        extension = "gif" if emoji.animated else "png"
        return f"{DISCORD_CDN_URL}/emojis/{emoji.id}.{extension}"
    code = "-".join(f"{ord(c):x}" for c in emoji.name)
    return f"{TWEMOJI_CDN_URL}/{code}.png"


class StickerFormat(enum.IntEnum):
    """The file format of a sticker."""

    PNG = 1
    APNG = 2
    LOTTIE = 3
    GIF = 4


_STICKER_EXTENSIONS = {
    StickerFormat.PNG: "png",
    StickerFormat.APNG: "png",
    StickerFormat.LOTTIE: "json",
    StickerFormat.GIF: "gif",
}


def sticker_image_url(sticker_id: int, format_type: StickerFormat | int) -> str:
    """The image URL of a sticker with the given format."""
    try:
        fmt = StickerFormat(format_type)
    except ValueError:
        raise ValueError("unknown sticker format") from None
    base = _STICKER_GIF_CDN_URL if fmt is StickerFormat.GIF else DISCORD_CDN_URL
    return f"{base}/stickers/{sticker_id}.{_STICKER_EXTENSIONS[fmt]}"


def guild_icon_url(guild: Any) -> str:
    """The icon URL of a guild with ``id`` and ``icon_hash()``."""
    hash_ = guild.icon_hash()
    if hash_ is None:
        raise ValueError("missing icon hash")
    return f"{DISCORD_CDN_URL}/icons/{guild.id}/{hash_}.{_extension(hash_)}"


def user_avatar_url(user: Any) -> str:
    """The avatar URL of a user with ``id`` and ``icon_hash()``."""
    hash_ = user.icon_hash()
    if hash_ is None:
        raise ValueError("missing avatar hash")
    return f"{DISCORD_CDN_URL}/avatars/{user.id}/{hash_}.{_extension(hash_)}"


def member_avatar_url(member: Any, guild_id: int) -> str:
    """The avatar URL of a guild member, preferring the guild-specific avatar."""
    user = member.user
    if user is None:
        raise ValueError("missing user identifier")
    if member.avatar is not None:
        hash_ = member.avatar
        return f"{DISCORD_CDN_URL}/guilds/{guild_id}/users/{user.id}/avatars/{hash_}.{_extension(hash_)}"
    if user.avatar is not None:
        hash_ = user.avatar
        return f"{DISCORD_CDN_URL}/avatars/{user.id}/{hash_}.{_extension(hash_)}"
    raise ValueError("missing avatar hash")


@dataclass(frozen=True)
class EmbedAuthor:
    """The author section of an embed."""

    name: str
    icon_url: str | None = None
    url: str | None = None


def guild_embed_author(guild: Any) -> EmbedAuthor:
    """An embed author showing a guild's name and icon."""
    return EmbedAuthor(guild.name, guild_icon_url(guild))


def user_embed_author(user: Any) -> EmbedAuthor:
    """An embed author showing a user's display name and avatar."""
    return EmbedAuthor(str(user.display_name()), user_avatar_url(user))


def member_embed_author(member: Any, guild_id: int) -> EmbedAuthor:
    """An embed author showing a member's display name and avatar."""
    return EmbedAuthor(str(member.display_name()), member_avatar_url(member, guild_id))