"""Glyph resolution: base glyph plus per-axis modifier composition."""
from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, NewType

from mythoji.categories import Category, Person, is_category
from mythoji.errors import ConflictingModifierError, UnsupportedModifierError
from mythoji.glyphs import VARIATION_SELECTOR_16, ZWJ, base_glyph
from mythoji.modifiers import MODIFIER_TYPES, Axis, Gender, Modifier, SkinTone

Glyph = NewType("Glyph", str)

_NO_AXES: FrozenSet[Axis] = frozenset()
_PERSON_AXES: FrozenSet[Axis] = frozenset({Axis.SKIN_TONE, Axis.GENDER})


def supported_axes(category: Category) -> FrozenSet[Axis]:
    """Return the modifier axes ``category`` accepts."""
    if not is_category(category):
        raise TypeError(f"{category!r} is not a mythoji category")
    if isinstance(category, Person):
        return _PERSON_AXES
    return _NO_AXES


def _group_by_axis(modifiers: Iterable[Modifier]) -> Dict[Axis, Modifier]:
    grouped: Dict[Axis, List[Modifier]] = {}
    for modifier in modifiers:
        if not isinstance(modifier, MODIFIER_TYPES):
            raise TypeError(f"{modifier!r} is not a mythoji modifier")
        grouped.setdefault(modifier.axis, []).append(modifier)
    chosen: Dict[Axis, Modifier] = {}
    for axis, values in grouped.items():
        if len(values) > 1:
            raise ConflictingModifierError(axis, tuple(values))
        chosen[axis] = values[0]
    return chosen


def resolve(category: Category, modifiers: Iterable[Modifier] = ()) -> Glyph:
    """Compose the display glyph for ``category`` with optional modifiers.

    Modifiers on different axes may be given in any order; at most one per
    axis. A modifier for an axis the category lacks raises
    ``UnsupportedModifierError`` even when it is the neutral value.
    """
    if not is_category(category):
        raise TypeError(f"{category!r} is not a mythoji category")
    chosen = _group_by_axis(modifiers)
    axes = supported_axes(category)
    for axis, modifier in chosen.items():
        if axis not in axes:
            raise UnsupportedModifierError(category, modifier)

    glyph = base_glyph(category)
    tone = chosen.get(Axis.SKIN_TONE, SkinTone.NEUTRAL)
    gender = chosen.get(Axis.GENDER, Gender.NEUTRAL)

    if tone is not SkinTone.NEUTRAL:
        # Skin tone modifiers bind to the code point right before them.
        glyph = glyph[0] + tone.fragment + glyph[1:]
    if gender is not Gender.NEUTRAL:
        glyph = glyph + ZWJ + gender.fragment + VARIATION_SELECTOR_16
    return Glyph(glyph)
