"""Factory helpers for creating the gallery page entities."""
from __future__ import annotations

import math
from typing import Dict, List

from esper import World

from mythoji.categories import Category, Family
from mythoji.constants import GALLERY_COLS, GALLERY_ROWS
from mythoji.gallery.components import GalleryCell, GalleryState, GalleryTag
from mythoji.modifiers import Axis, Gender, Modifier, SkinTone
from mythoji.resolver import resolve, supported_axes

PAGE_SIZE = GALLERY_COLS * GALLERY_ROWS


def page_count(family: Family) -> int:
    return max(1, math.ceil(len(family.members()) / PAGE_SIZE))


def page_categories(family: Family, page: int) -> List[Category]:
    members = family.members()
    start = page * PAGE_SIZE
    return list(members[start:start + PAGE_SIZE])


def requested_modifiers(state: GalleryState) -> Dict[Axis, Modifier]:
    """Non-neutral modifiers chosen in the gallery, keyed by axis."""
    requested: Dict[Axis, Modifier] = {}
    if state.skin_tone is not SkinTone.NEUTRAL:
        requested[Axis.SKIN_TONE] = state.skin_tone
    if state.gender is not Gender.NEUTRAL:
        requested[Axis.GENDER] = state.gender
    return requested


def build_cell(index: int, category: Category, requested: Dict[Axis, Modifier]) -> GalleryCell:
    applied = frozenset(axis for axis in requested if axis in supported_axes(category))
    glyph = resolve(category, [requested[axis] for axis in applied])
    return GalleryCell(
        index=index,
        row=index // GALLERY_COLS,
        col=index % GALLERY_COLS,
        category=category,
        glyph=glyph,
        applied_axes=applied,
    )


def clear_gallery_page(world: World) -> None:
    to_delete = {ent for ent, _ in world.get_component(GalleryTag)}
    for ent in to_delete:
        world.delete_entity(ent, immediate=True)


def spawn_gallery_page(world: World, state: GalleryState) -> List[int]:
    """Replace the grid with cells for the state's family and page."""
    clear_gallery_page(world)
    requested = requested_modifiers(state)
    entities: List[int] = []
    for index, category in enumerate(page_categories(state.family, state.page)):
        entities.append(
            world.create_entity(build_cell(index, category, requested), GalleryTag())
        )
    return entities
