"""Modifier enumerations and the axes they belong to."""
from __future__ import annotations

from enum import Enum, auto
from typing import Union


class Axis(Enum):
    """Independent modifier dimensions; at most one modifier per axis per glyph."""

    SKIN_TONE = auto()
    GENDER = auto()


class SkinTone(Enum):
    """Skin tones for people. NEUTRAL keeps the default, often yellow, rendering."""

    NEUTRAL = ""
    LIGHT = "\U0001F3FB"
    MEDIUM_LIGHT = "\U0001F3FC"
    MEDIUM = "\U0001F3FD"
    MEDIUM_DARK = "\U0001F3FE"
    DARK = "\U0001F3FF"

    @property
    def axis(self) -> Axis:
        return Axis.SKIN_TONE

    @property
    def fragment(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class Gender(Enum):
    """Genders for people. The fragment is a bare sign, without a variation selector."""

    NEUTRAL = ""
    MALE = "♂"
    FEMALE = "♀"

    @property
    def axis(self) -> Axis:
        return Axis.GENDER

    @property
    def fragment(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


Modifier = Union[SkinTone, Gender]
MODIFIER_TYPES = (SkinTone, Gender)
