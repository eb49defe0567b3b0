"""Shared constants: CDN locations, localisation categories and palette colours."""

from __future__ import annotations

import enum

from ina.color import Color

DISCORD_CDN_URL = "https://cdn.discordapp.com"
"""The base Discord CDN URL."""

TWEMOJI_CDN_URL = "https://raw.githubusercontent.com/discord/twemoji/main/assets/72x72"
"""The base Twemoji CDN URL."""


class Category(str, enum.Enum):
    """Localisation categories."""

    COMMAND = "command"
    COMMAND_OPTION = "command-option"
    COMMAND_CHOICE = "command-choice"
    UNIT = "unit"
    UI = "ui"
    UI_BUTTON = "ui-button"
    UI_SELECT = "ui-select"
    UI_INPUT = "ui-input"

    def __str__(self) -> str:
        return self.value


CATEGORY_LIST: tuple[str, ...] = tuple(category.value for category in Category)
"""Every localisation category, in declaration order."""

BRANDING_A = Color.from_u32(0x2C_8F_E5)
BRANDING_B = Color.from_u32(0xE5_82_2C)
BACKDROP_A = Color.from_u32(0x1C_4A_72)
BACKDROP_B = Color.from_u32(0x72_44_1C)
SUCCESS = Color.from_u32(0x45_E0_51)
FAILURE = Color.from_u32(0xDC_3F_31)


def branding(debug: bool) -> Color:
    """The branding colour for a debug or release build."""
    return BRANDING_B if debug else BRANDING_A


def backdrop(debug: bool) -> Color:
    """The backdrop colour for a debug or release build."""
    return BACKDROP_B if debug else BACKDROP_A