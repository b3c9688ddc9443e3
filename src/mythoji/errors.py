from __future__ import annotations

from typing import Tuple

from mythoji.categories import Category
from mythoji.modifiers import Axis, Modifier


class GlyphResolutionError(ValueError):
    """Base class for modifier combinations that cannot be resolved."""


class UnsupportedModifierError(GlyphResolutionError):
    def __init__(self, category: Category, modifier: Modifier) -> None:
        self.category = category
        self.modifier = modifier
        super().__init__(
            f"{category!r} does not support the {modifier.axis.name.lower()} axis ({modifier!r})"
        )


class ConflictingModifierError(GlyphResolutionError):
    def __init__(self, axis: Axis, modifiers: Tuple[Modifier, ...]) -> None:
        self.axis = axis
        self.modifiers = modifiers
        names = ", ".join(repr(modifier) for modifier in modifiers)
        super().__init__(f"Only one {axis.name.lower()} modifier allowed, got {names}")
