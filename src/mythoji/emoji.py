from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from mythoji.categories import Category, Person
from mythoji.modifiers import Gender, Modifier, SkinTone
from mythoji.resolver import Glyph, resolve


@dataclass(frozen=True, slots=True)
class Emoji:
    """A category together with its optional modifiers.

    The combination is validated on construction, so an ``Emoji`` that exists
    always renders. ``str(emoji)`` is the resolved glyph.
    """

    category: Category = Person.PERSON
    skin_tone: Optional[SkinTone] = None
    gender: Optional[Gender] = None

    def __post_init__(self) -> None:
        if self.skin_tone is not None and not isinstance(self.skin_tone, SkinTone):
            raise TypeError(f"skin_tone must be a SkinTone, got {self.skin_tone!r}")
        if self.gender is not None and not isinstance(self.gender, Gender):
            raise TypeError(f"gender must be a Gender, got {self.gender!r}")
        resolve(self.category, self.modifiers)

    @property
    def modifiers(self) -> Tuple[Modifier, ...]:
        return tuple(m for m in (self.skin_tone, self.gender) if m is not None)

    @property
    def glyph(self) -> Glyph:
        return resolve(self.category, self.modifiers)

    def __str__(self) -> str:
        return self.glyph
