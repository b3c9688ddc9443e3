"""Rendering system responsible for drawing the glyph gallery."""
import arcade
from esper import World

from mythoji.constants import (
    BACKGROUND_COLOR,
    CELL_COLOR,
    CELL_GAP,
    CELL_PARTIAL_COLOR,
    CELL_SIZE,
    GALLERY_COLS,
    GLYPH_FONT_SIZE,
    LABEL_FONT_SIZE,
    SELECTION_COLOR,
    STATUS_BAR_HEIGHT,
    STATUS_FONT_SIZE,
)
from mythoji.gallery.components import GalleryCell, GalleryState
from mythoji.gallery.factory import page_count, requested_modifiers


class GalleryRenderSystem:
    """Draws the current gallery page and a status line."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def process(self) -> None:
        state = self._get_state()
        if state is None:
            return
        arcade.draw_lrbt_rectangle_filled(0, self.window.width, 0, self.window.height, BACKGROUND_COLOR)
        requested = set(requested_modifiers(state))
        for _, cell in self.world.get_component(GalleryCell):
            self._draw_cell(cell, selected=cell.index == state.selected_index, partial=cell.applied_axes != requested)
        self._draw_status(state)

    def cell_origin(self, cell: GalleryCell) -> tuple[float, float]:
        """Bottom-left corner of ``cell``; rows grow downwards from the status bar."""
        grid_width = GALLERY_COLS * CELL_SIZE + (GALLERY_COLS - 1) * CELL_GAP
        left_margin = (self.window.width - grid_width) / 2
        top = self.window.height - STATUS_BAR_HEIGHT - CELL_GAP
        left = left_margin + cell.col * (CELL_SIZE + CELL_GAP)
        bottom = top - (cell.row + 1) * CELL_SIZE - cell.row * CELL_GAP
        return left, bottom

    def _draw_cell(self, cell: GalleryCell, *, selected: bool, partial: bool) -> None:
        left, bottom = self.cell_origin(cell)
        fill = CELL_PARTIAL_COLOR if partial else CELL_COLOR
        arcade.draw_lbwh_rectangle_filled(left, bottom, CELL_SIZE, CELL_SIZE, fill)
        if selected:
            arcade.draw_lbwh_rectangle_outline(left, bottom, CELL_SIZE, CELL_SIZE, SELECTION_COLOR, border_width=3)
        center_x = left + CELL_SIZE / 2
        arcade.draw_text(
            cell.glyph,
            center_x,
            bottom + CELL_SIZE * 0.58,
            arcade.color.WHITE,
            GLYPH_FONT_SIZE,
            anchor_x="center",
            anchor_y="center",
        )
        arcade.draw_text(
            cell.label,
            center_x,
            bottom + 10,
            arcade.color.SILVER,
            LABEL_FONT_SIZE,
            anchor_x="center",
        )

    def _draw_status(self, state: GalleryState) -> None:
        status = (
            f"{state.family.label}  page {state.page + 1}/{page_count(state.family)}"
            f"  |  skin tone: {state.skin_tone.name.lower()}  gender: {state.gender.name.lower()}"
            "  |  TAB family  UP/DOWN page  T tone  G gender"
        )
        arcade.draw_text(
            status,
            16,
            self.window.height - STATUS_BAR_HEIGHT / 2,
            SELECTION_COLOR,
            STATUS_FONT_SIZE,
            anchor_y="center",
        )

    def _get_state(self) -> GalleryState | None:
        for _, state in self.world.get_component(GalleryState):
            return state
        return None
