"""References to existing messages."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any

_BASE_URL = "https://discord.com/channels"


@functools.total_ordering
@dataclass(frozen=True)
class Anchor:
    """A message located by guild, channel and message identifiers."""

    guild_id: int | None
    channel_id: int
    message_id: int

    @classmethod
    def new_guild(cls, guild_id: int, channel_id: int, message_id: int) -> Anchor:
        """An anchor to a message in a guild channel."""
        return cls(guild_id, channel_id, message_id)

    @classmethod
    def new_private(cls, channel_id: int, message_id: int) -> Anchor:
        """An anchor to a message in a private channel."""
        return cls(None, channel_id, message_id)

    @classmethod
    def from_message(cls, message: Any) -> Anchor:
        """An anchor built from an object with ``guild_id``, ``channel_id`` and ``id``."""
        return cls(message.guild_id, message.channel_id, message.id)

    def display_link(self) -> str:
        """A clickable link to the message."""
        location = "@me" if self.guild_id is None else str(self.guild_id)
        return f"{_BASE_URL}/{location}/{self.channel_id}/{self.message_id}"

    def _key(self) -> tuple[tuple[bool, int], int, int]:
        guild = (False, 0) if self.guild_id is None else (True, self.guild_id)
        return guild, self.channel_id, self.message_id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Anchor):
            return NotImplemented
        return self._key() < other._key()