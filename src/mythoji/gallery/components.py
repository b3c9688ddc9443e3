"""Components used by the glyph gallery ECS."""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from mythoji.categories import Category, Family
from mythoji.modifiers import Axis, Gender, SkinTone


@dataclass
class GalleryState:
    """Singleton component: which family, page and modifiers are on screen."""
    family: Family = Family.PERSON
    page: int = 0
    selected_index: int = 0
    skin_tone: SkinTone = SkinTone.NEUTRAL
    gender: Gender = Gender.NEUTRAL


@dataclass(slots=True)
class GalleryCell:
    """One category drawn in the grid, with the glyph it currently resolves to.

    ``applied_axes`` lists the chosen modifier axes the category accepted.
    """
    index: int
    row: int
    col: int
    category: Category
    glyph: str
    applied_axes: FrozenSet[Axis] = frozenset()

    @property
    def label(self) -> str:
        return self.category.name.replace("_", " ").lower()


@dataclass
class GalleryTag:
    """Marker component so page entities can be cleaned up together."""
    pass
