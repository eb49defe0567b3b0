"""Component custom identifiers that carry arbitrary string data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, TypeVar

COMPONENT_CUSTOM_ID_LENGTH = 100
"""Maximum length of a component custom identifier, in UTF-8 bytes."""

DATA_SEPARATOR = "\x0c"
"""Separates the individual data entries of an identifier."""

PART_SEPARATOR = "\x00"
"""Separates the command, variant and data parts of an identifier."""

T = TypeVar("T")


class CustomIdError(ValueError):
    """Base class for custom identifier errors."""


class MissingPartError(CustomIdError):
    """A part of the identifier was missing while parsing."""

    def __init__(self, part: str) -> None:
        super().__init__(f"missing identifier {part}")
        self.part = part


class InvalidCommandError(CustomIdError):
    """The command name is malformed."""

    def __init__(self, command: str) -> None:
        super().__init__(f"invalid identifier command '{command}'")
        self.command = command


class InvalidVariantError(CustomIdError):
    """The variant name is malformed."""

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid identifier variant '{value}'")
        self.value = value


class InvalidDataError(CustomIdError):
    """A stored data entry contains a separator character."""

    def __init__(self, data: str, char: str) -> None:
        super().__init__(f"invalid identifier data '{data}' contains unexpected character {char!r}")
        self.data = data
        self.char = char


class ExceededMaxLengthError(CustomIdError):
    """The encoded identifier would be too long."""

    def __init__(self, length: int) -> None:
        super().__init__(f"maximum length exceeded ({length}/{COMPONENT_CUSTOM_ID_LENGTH} bytes)")
        self.length = length


def _is_name(text: str) -> bool:
    return all(c.isalnum() or c in "-_" for c in text)


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))


@dataclass
class CustomId:
    """A command/variant pair with a list of stored data strings."""

    command: str
    variant: str
    storage: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.storage = list(self.storage)
        self._ensure_valid()

    @classmethod
    def parse(cls, string: str) -> CustomId:
        """Parse an identifier from its encoded form."""
        parts = string.split(PART_SEPARATOR, 2)
        if len(parts) < 2:
            raise MissingPartError("variant")
        if len(parts) < 3:
            raise MissingPartError("storage")
        command, variant, storage = parts

        identifier = cls(command, variant)
        for data in storage.split(DATA_SEPARATOR):
            identifier.push_str(data)
        return identifier

    def get_str(self, index: int) -> str | None:
        """The data string at ``index``, or ``None`` if there is none."""
        if 0 <= index < len(self.storage):
            return self.storage[index]
        return None

    def get(self, index: int, convert: Callable[[str], T]) -> T | None:
        """The data at ``index`` passed through ``convert``, or ``None`` if absent."""
        value = self.get_str(index)
        return None if value is None else convert(value)

    def push_str(self, data: str) -> None:
        """Append a data string; the identifier is left unchanged if it would become invalid."""
        self.storage.append(data)
        try:
            self._ensure_valid()
        except CustomIdError:
            self.storage.pop()
            raise

    def push(self, data: object) -> None:
        """Append the string form of ``data``."""
        self.push_str(str(data))

    def with_str(self, data: str) -> CustomId:
        """Append a data string and return this identifier."""
        self.push_str(data)
        return self

    def with_value(self, data: object) -> CustomId:
        """Append the string form of ``data`` and return this identifier."""
        self.push(data)
        return self

    def _ensure_valid(self) -> None:
        data_len = sum(_utf8_len(entry) for entry in self.storage)
        data_len += _utf8_len(DATA_SEPARATOR) * max(len(self.storage) - 1, 0)
        total = _utf8_len(self.command) + _utf8_len(self.variant) + data_len + _utf8_len(PART_SEPARATOR) * 2

        if total > COMPONENT_CUSTOM_ID_LENGTH:
            raise ExceededMaxLengthError(total)
        if not _is_name(self.command):
            raise InvalidCommandError(self.command)
        if not _is_name(self.variant):
            raise InvalidVariantError(self.command)

        for entry in self.storage:
            for separator in (DATA_SEPARATOR, PART_SEPARATOR):
                if separator in entry:
                    raise InvalidDataError(entry, separator)

    def __str__(self) -> str:
        storage = DATA_SEPARATOR.join(self.storage)
        return f"{self.command}{PART_SEPARATOR}{self.variant}{PART_SEPARATOR}{storage}"