"""Client secrets read from the environment."""

from __future__ import annotations

import os
import re

_U64_MAX = 0xFFFF_FFFF_FFFF_FFFF
_DIGITS = re.compile(r"\+?[0-9]+")


class SecretError(Exception):
    """Raised when a secret is missing or malformed."""


def _get(key: str) -> str:
    try:
        return os.environ[key]
    except KeyError:
        raise SecretError(f"environment variable not found: {key}") from None


def _get_id(key: str) -> int:
    text = _get(key)
    if not _DIGITS.fullmatch(text):
        raise SecretError(f"invalid identifier in {key}: {text!r}")
    value = int(text)
    if value == 0:
        raise SecretError(f"identifier in {key} must be non-zero")
    if value > _U64_MAX:
        raise SecretError(f"identifier in {key} is too large")
    return value


def discord_token() -> str:
    """The bot token from ``DISCORD_TOKEN``."""
    return _get("DISCORD_TOKEN")


def development_guild_id() -> int:
    """The development guild identifier from ``DEVELOPMENT_GUILD_ID``."""
    return _get_id("DEVELOPMENT_GUILD_ID")


def development_channel_id() -> int:
    """The development channel identifier from ``DEVELOPMENT_CHANNEL_ID``."""
    return _get_id("DEVELOPMENT_CHANNEL_ID")


def encryption_key() -> str:
    """The storage encryption key from ``ENCRYPTION_KEY``."""
    return _get("ENCRYPTION_KEY")