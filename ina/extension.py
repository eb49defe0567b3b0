"""User, member and guild models with display helpers, plus identifier and interaction utilities."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from ina.custom_id import CustomId, CustomIdError

DISCORD_EPOCH = datetime(2015, 1, 1, tzinfo=timezone.utc)
"""The moment from which snowflake timestamps are counted."""

_U64_MAX = 0xFFFF_FFFF_FFFF_FFFF
_I64_MAX = 0x7FFF_FFFF_FFFF_FFFF
_HASH_BYTES = 16
_ANIMATED_PREFIX = "a_"
_HEX_HASH = re.compile(r"[0-9A-Fa-f]{32}")


@dataclass(frozen=True)
class ImageHash:
    """A 128-bit image hash, optionally marked as animated."""

    value: bytes
    animated: bool = False

    def __post_init__(self) -> None:
        if len(self.value) != _HASH_BYTES:
            raise ValueError(f"image hash must be {_HASH_BYTES} bytes long, got {len(self.value)}")

    @classmethod
    def parse(cls, string: str) -> ImageHash:
        """Parse a hash such as ``a_`` followed by 32 hex digits."""
        animated = string.startswith(_ANIMATED_PREFIX)
        digits = string[len(_ANIMATED_PREFIX):] if animated else string
        if not _HEX_HASH.fullmatch(digits):
            raise ValueError(f"invalid image hash: {string!r}")
        return cls(bytes.fromhex(digits), animated)

    def is_animated(self) -> bool:
        """Whether the image is animated."""
        return self.animated

    def __str__(self) -> str:
        prefix = _ANIMATED_PREFIX if self.animated else ""
        return prefix + self.value.hex()


def creation_date(snowflake: int) -> datetime:
    """The creation time encoded in a non-zero snowflake identifier."""
    if not 1 <= snowflake <= _U64_MAX:
        raise ValueError(f"identifier must be a non-zero 64-bit integer, got {snowflake!r}")
    milliseconds = min(snowflake >> 22, _I64_MAX)
    return DISCORD_EPOCH + timedelta(milliseconds=milliseconds)


class InteractionType(enum.IntEnum):
    """The kind of an interaction."""

    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5

    @property
    def label(self) -> str:
        """The short name used in interaction labels."""
        return _INTERACTION_LABELS[self]


_INTERACTION_LABELS = {
    InteractionType.PING: "ping",
    InteractionType.APPLICATION_COMMAND: "command",
    InteractionType.MESSAGE_COMPONENT: "component",
    InteractionType.APPLICATION_COMMAND_AUTOCOMPLETE: "autocomplete",
    InteractionType.MODAL_SUBMIT: "modal",
}


def _kind_label(kind: InteractionType | int) -> str:
    try:
        return InteractionType(kind).label
    except ValueError:
        return "unknown"


@dataclass(frozen=True)
class InteractionLabel:
    """A compact description of an interaction, such as ``<command:ping:ID:USER>``.

    ``command_name`` is the invoked command's name for command data; ``custom_id`` is the
    encoded custom identifier for component or modal data.
    """

    kind: InteractionType | int
    id: int
    command_name: str | None = None
    custom_id: str | None = None
    author_id: int | None = None

    def __str__(self) -> str:
        parts = [_kind_label(self.kind)]
        if self.command_name is not None:
            parts.append(self.command_name)
        elif self.custom_id is not None:
            try:
                parsed = CustomId.parse(self.custom_id)
            except CustomIdError:
                pass
            else:
                parts.extend((parsed.command, parsed.variant))
        parts.append(str(self.id))
        if self.author_id is not None:
            parts.append(str(self.author_id))
        return "<" + ":".join(parts) + ">"


@dataclass(frozen=True)
class UserNameDisplay:
    """A user's name, preferring the guild nickname, then the display name."""

    nick: str | None
    name: str | None
    user: str

    def __str__(self) -> str:
        if self.nick is not None:
            return self.nick
        if self.name is not None:
            return self.name
        return self.user


@dataclass(frozen=True)
class UserTagDisplay:
    """A user's account tag: ``name#0001`` with a discriminator, ``@name`` without."""

    user: str
    tag: int | None = None

    def __str__(self) -> str:
        if self.tag:
            return f"{self.user}#{self.tag:04}"
        return f"@{self.user}"


_UNKNOWN = "unknown"


@dataclass(frozen=True)
class User:
    """A user account."""

    id: int
    name: str
    discriminator: int = 0
    global_name: str | None = None
    avatar: ImageHash | None = None
    banner: ImageHash | None = None

    def display_name(self) -> UserNameDisplay:
        return UserNameDisplay(None, self.global_name, self.name)

    def display_tag(self) -> UserTagDisplay:
        return UserTagDisplay(self.name, self.discriminator or None)

    def icon_hash(self) -> ImageHash | None:
        return self.avatar

    def banner_hash(self) -> ImageHash | None:
        return self.banner


@dataclass(frozen=True)
class Member:
    """A user's membership of a guild."""

    user: User
    nick: str | None = None
    avatar: ImageHash | None = None

    def display_name(self) -> UserNameDisplay:
        return UserNameDisplay(self.nick, self.user.global_name, self.user.name)

    def display_tag(self) -> UserTagDisplay:
        return self.user.display_tag()

    def icon_hash(self) -> ImageHash | None:
        return self.avatar if self.avatar is not None else self.user.avatar

    def banner_hash(self) -> ImageHash | None:
        return self.user.banner


@dataclass(frozen=True)
class PartialMember:
    """A guild member whose user may be absent."""

    user: User | None = None
    nick: str | None = None
    avatar: ImageHash | None = None

    def display_name(self) -> UserNameDisplay:
        if self.user is None:
            return UserNameDisplay(self.nick, None, _UNKNOWN)
        return UserNameDisplay(self.nick, self.user.global_name, self.user.name)

    def display_tag(self) -> UserTagDisplay:
        if self.user is None:
            return UserTagDisplay(_UNKNOWN, None)
        return self.user.display_tag()

    def icon_hash(self) -> ImageHash | None:
        if self.avatar is not None:
            return self.avatar
        return None if self.user is None else self.user.avatar

    def banner_hash(self) -> ImageHash | None:
        return None if self.user is None else self.user.banner


@dataclass(frozen=True)
class Guild:
    """A guild with its name and icon."""

    id: int
    name: str
    icon: ImageHash | None = None

    def icon_hash(self) -> ImageHash | None:
        return self.icon