from __future__ import annotations

from enum import Enum
from typing import List, Type

from esper import World

from mythoji.categories import Family
from mythoji.events.bus import (
    EVENT_GALLERY_CHANGED,
    EVENT_GALLERY_FAMILY_REQUEST,
    EVENT_GALLERY_GENDER_REQUEST,
    EVENT_GALLERY_PAGE_REQUEST,
    EVENT_GALLERY_SELECT_REQUEST,
    EVENT_GALLERY_SELECTION_CHANGED,
    EVENT_GALLERY_SKIN_TONE_REQUEST,
    EventBus,
)
from mythoji.gallery.components import GalleryCell, GalleryState
from mythoji.gallery.factory import page_count, spawn_gallery_page
from mythoji.modifiers import Gender, SkinTone


def _cycle(enum_type: Type[Enum], current: Enum, step: int) -> Enum:
    members: List[Enum] = list(enum_type)
    return members[(members.index(current) + step) % len(members)]


class GallerySystem:
    """Applies gallery requests to the state and keeps the cell entities in sync."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_GALLERY_FAMILY_REQUEST, self.on_family_request)
        event_bus.subscribe(EVENT_GALLERY_PAGE_REQUEST, self.on_page_request)
        event_bus.subscribe(EVENT_GALLERY_SELECT_REQUEST, self.on_select_request)
        event_bus.subscribe(EVENT_GALLERY_SKIN_TONE_REQUEST, self.on_skin_tone_request)
        event_bus.subscribe(EVENT_GALLERY_GENDER_REQUEST, self.on_gender_request)

    def on_family_request(self, sender, **payload) -> None:
        state = self._get_state()
        if state is None:
            return
        state.family = _cycle(Family, state.family, payload.get("step", 1))
        state.page = 0
        state.selected_index = 0
        self._refresh(state, "family")

    def on_page_request(self, sender, **payload) -> None:
        state = self._get_state()
        if state is None:
            return
        pages = page_count(state.family)
        if pages == 1:
            return
        state.page = (state.page + payload.get("step", 1)) % pages
        state.selected_index = 0
        self._refresh(state, "page")

    def on_select_request(self, sender, **payload) -> None:
        state = self._get_state()
        if state is None:
            return
        cells = self.cells()
        if not cells:
            return
        state.selected_index = (state.selected_index + payload.get("step", 1)) % len(cells)
        self._emit_selection(state)

    def on_skin_tone_request(self, sender, **payload) -> None:
        state = self._get_state()
        if state is None:
            return
        state.skin_tone = _cycle(SkinTone, state.skin_tone, payload.get("step", 1))
        self._refresh(state, "skin_tone")

    def on_gender_request(self, sender, **payload) -> None:
        state = self._get_state()
        if state is None:
            return
        state.gender = _cycle(Gender, state.gender, payload.get("step", 1))
        self._refresh(state, "gender")

    def cells(self) -> List[GalleryCell]:
        return sorted((cell for _, cell in self.world.get_component(GalleryCell)), key=lambda cell: cell.index)

    def selected_cell(self) -> GalleryCell | None:
        state = self._get_state()
        if state is None:
            return None
        for cell in self.cells():
            if cell.index == state.selected_index:
                return cell
        return None

    def _refresh(self, state: GalleryState, reason: str) -> None:
        spawn_gallery_page(self.world, state)
        self.event_bus.emit(EVENT_GALLERY_CHANGED, reason=reason, family=state.family, page=state.page)
        self._emit_selection(state)

    def _emit_selection(self, state: GalleryState) -> None:
        cell = self.selected_cell()
        if cell is not None:
            self.event_bus.emit(EVENT_GALLERY_SELECTION_CHANGED, category=cell.category, glyph=cell.glyph)

    def _get_state(self) -> GalleryState | None:
        for _, state in self.world.get_component(GalleryState):
            return state
        return None
