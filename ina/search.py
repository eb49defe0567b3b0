"""Fuzzy substring searching."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class StrictnessLevel(enum.IntEnum):
    """How closely a pattern must match."""

    LOOSE = 0
    FIRM = 1
    STRICT = 2


@dataclass(frozen=True, order=True)
class Strictness:
    """A strictness level together with a case-sensitivity flag."""

    level: StrictnessLevel
    ignore_casing: bool = False

    @classmethod
    def loose(cls, ignore_casing: bool) -> Strictness:
        """Every word of the pattern must appear somewhere in the string."""
        return cls(StrictnessLevel.LOOSE, ignore_casing)

    @classmethod
    def firm(cls, ignore_casing: bool) -> Strictness:
        """The pattern must match, ignoring non-alphanumeric characters."""
        return cls(StrictnessLevel.FIRM, ignore_casing)

    @classmethod
    def strict(cls, ignore_casing: bool) -> Strictness:
        """The pattern must match nearly exactly."""
        return cls(StrictnessLevel.STRICT, ignore_casing)

    def is_loose(self) -> bool:
        return self.level is StrictnessLevel.LOOSE

    def is_firm(self) -> bool:
        return self.level is StrictnessLevel.FIRM

    def is_strict(self) -> bool:
        return self.level is StrictnessLevel.STRICT


def _alphanumeric(text: str) -> str:
    return "".join(c for c in text if c.isalnum())


def fuzzy_contains(strictness: Strictness, string: str, pattern: str) -> bool:
    """Return whether ``pattern`` is found in ``string`` under the given strictness."""
    if strictness.ignore_casing:
        string = string.lower()
        pattern = pattern.lower()

    if strictness.is_loose():
        string = _alphanumeric(string)
        pattern = "".join(c for c in pattern if c.isalnum() or c.isspace())
        return all(word in string for word in pattern.split())

    if strictness.is_firm():
        string = _alphanumeric(string)
        pattern = _alphanumeric(pattern)

    return pattern in string