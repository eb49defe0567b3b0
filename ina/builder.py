"""Message component models and builders that validate what they build."""

from __future__ import annotations

import copy
import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from ina.custom_id import COMPONENT_CUSTOM_ID_LENGTH

MEDIA_GALLERY_ITEMS_MIN = 1
"""Minimum number of items in a media gallery."""

MEDIA_GALLERY_ITEMS_MAX = 10
"""Maximum number of items in a media gallery."""

MEDIA_GALLERY_ITEM_DESCRIPTION_LENGTH = 1024
"""Maximum length of a media gallery item's description."""

TEXT_INPUT_LENGTH_MAX = 4000
"""Upper bound for a text input's minimum and maximum lengths."""

TEXT_INPUT_MAX_LENGTH_MIN = 1
"""Lowest permitted value for a text input's maximum length."""

TEXT_INPUT_PLACEHOLDER_LENGTH = 100
"""Maximum length of a text input's placeholder."""

TEXT_INPUT_VALUE_LENGTH = 4000
"""Maximum length of a text input's pre-filled value."""

_U16_MAX = 0xFFFF
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _check_i32(value: int) -> int:
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"numeric identifier must fit in 32 bits, got {value!r}")
    return value


def _check_u16(value: int) -> int:
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"length must be within 0..={_U16_MAX}, got {value!r}")
    return value


class ValidatedBuilder(ABC):
    """A builder whose output can be checked for validity when it is built."""

    @classmethod
    @abstractmethod
    def validate(cls, inner: Any) -> None:
        """Raise ``ValueError`` if ``inner`` is not valid."""

    @abstractmethod
    def build(self) -> Any:
        """Return the built value without validating it."""

    def try_build(self) -> Any:
        """Build the value and return it if it is valid."""
        inner = self.build()
        type(self).validate(inner)
        return inner


def _built(value: Any) -> Any:
    return value.build() if isinstance(value, ValidatedBuilder) else value


@dataclass
class UnfurledMediaItem:
    """A media reference; only the URL is meaningful when sent by a client."""

    url: str
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None
    content_type: str | None = None

    @classmethod
    def from_url(cls, url: str) -> UnfurledMediaItem:
        """A media item that points at ``url``."""
        return cls(url)


@dataclass
class MediaGalleryItem:
    """One entry of a media gallery."""

    media: UnfurledMediaItem
    description: str | None = None
    spoiler: bool | None = None


@dataclass
class MediaGallery:
    """A gallery of media items."""

    id: int | None = None
    items: list[MediaGalleryItem] = field(default_factory=list)


class TextInputStyle(enum.IntEnum):
    """The display style of a text input."""

    SHORT = 1
    PARAGRAPH = 2


@dataclass
class TextInput:
    """A text input field inside a modal."""

    custom_id: str
    style: TextInputStyle
    id: int | None = None
    label: str | None = None
    max_length: int | None = None
    min_length: int | None = None
    placeholder: str | None = None
    required: bool | None = None
    value: str | None = None


def _validate_media_gallery_item(item: MediaGalleryItem) -> None:
    if item.description is not None and len(item.description) > MEDIA_GALLERY_ITEM_DESCRIPTION_LENGTH:
        raise ValueError(
            f"media gallery item description is {len(item.description)} characters long, "
            f"at most {MEDIA_GALLERY_ITEM_DESCRIPTION_LENGTH} are permitted"
        )


class MediaGalleryBuilder(ValidatedBuilder):
    """Builds a :class:`MediaGallery`."""

    def __init__(self) -> None:
        self._inner = MediaGallery()

    def id(self, id: int) -> MediaGalleryBuilder:
        """Set the gallery's numeric identifier."""
        self._inner.id = _check_i32(id)
        return self

    def item(self, item: MediaGalleryItem | MediaGalleryItemBuilder) -> MediaGalleryBuilder:
        """Add an item to the gallery."""
        self._inner.items.append(_built(item))
        return self

    def build(self) -> MediaGallery:
        """The gallery as built so far."""
        return copy.deepcopy(self._inner)

    @classmethod
    def validate(cls, inner: MediaGallery) -> None:
        count = len(inner.items)
        if not MEDIA_GALLERY_ITEMS_MIN <= count <= MEDIA_GALLERY_ITEMS_MAX:
            raise ValueError(
                f"media gallery has {count} items, between {MEDIA_GALLERY_ITEMS_MIN} "
                f"and {MEDIA_GALLERY_ITEMS_MAX} are required"
            )
        for item in inner.items:
            _validate_media_gallery_item(item)


class MediaGalleryItemBuilder(ValidatedBuilder):
    """Builds a :class:`MediaGalleryItem`."""

    def __init__(self, media: UnfurledMediaItem) -> None:
        self._inner = MediaGalleryItem(media)

    @classmethod
    def url(cls, url: str) -> MediaGalleryItemBuilder:
        """A builder for an item that points at ``url``."""
        return cls(UnfurledMediaItem.from_url(url))

    def description(self, description: str) -> MediaGalleryItemBuilder:
        """Set the item's description."""
        self._inner.description = description
        return self

    def spoiler(self, spoiler: bool) -> MediaGalleryItemBuilder:
        """Set whether the item is hidden behind a spoiler."""
        self._inner.spoiler = spoiler
        return self

    def build(self) -> MediaGalleryItem:
        """The item as built so far."""
        return copy.deepcopy(self._inner)

    @classmethod
    def validate(cls, inner: MediaGalleryItem) -> None:
        _validate_media_gallery_item(inner)


class TextInputBuilder(ValidatedBuilder):
    """Builds a :class:`TextInput`."""

    def __init__(self, custom_id: str, style: TextInputStyle) -> None:
        self._inner = TextInput(custom_id, TextInputStyle(style))

    def id(self, id: int) -> TextInputBuilder:
        """Set the input's numeric identifier."""
        self._inner.id = _check_i32(id)
        return self

    def max_length(self, max: int) -> TextInputBuilder:
        """Set the maximum input length."""
        self._inner.max_length = _check_u16(max)
        return self

    def min_length(self, min: int) -> TextInputBuilder:
        """Set the minimum input length."""
        self._inner.min_length = _check_u16(min)
        return self

    def placeholder(self, placeholder: str) -> TextInputBuilder:
        """Set the placeholder text."""
        self._inner.placeholder = placeholder
        return self

    def required(self, required: bool) -> TextInputBuilder:
        """Set whether the input must be filled in."""
        self._inner.required = required
        return self

    def value(self, value: str) -> TextInputBuilder:
        """Set the pre-filled text."""
        self._inner.value = value
        return self

    def build(self) -> TextInput:
        """The input as built so far."""
        return copy.deepcopy(self._inner)

    @classmethod
    def validate(cls, inner: TextInput) -> None:
        if len(inner.custom_id) > COMPONENT_CUSTOM_ID_LENGTH:
            raise ValueError(
                f"custom identifier is {len(inner.custom_id)} characters long, "
                f"at most {COMPONENT_CUSTOM_ID_LENGTH} are permitted"
            )
        if inner.max_length is not None and not (
            TEXT_INPUT_MAX_LENGTH_MIN <= inner.max_length <= TEXT_INPUT_LENGTH_MAX
        ):
            raise ValueError(
                f"maximum length {inner.max_length} must be within "
                f"{TEXT_INPUT_MAX_LENGTH_MIN}..={TEXT_INPUT_LENGTH_MAX}"
            )
        if inner.min_length is not None and inner.min_length > TEXT_INPUT_LENGTH_MAX:
            raise ValueError(f"minimum length {inner.min_length} must be at most {TEXT_INPUT_LENGTH_MAX}")
        if inner.placeholder is not None and len(inner.placeholder) > TEXT_INPUT_PLACEHOLDER_LENGTH:
            raise ValueError(
                f"placeholder is {len(inner.placeholder)} characters long, "
                f"at most {TEXT_INPUT_PLACEHOLDER_LENGTH} are permitted"
            )
        if inner.value is not None and len(inner.value) > TEXT_INPUT_VALUE_LENGTH:
            raise ValueError(
                f"value is {len(inner.value)} characters long, at most {TEXT_INPUT_VALUE_LENGTH} are permitted"
            )