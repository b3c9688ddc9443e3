from mythoji import Axis, Family, Gender, Location, Person, SkinTone
from mythoji.gallery.components import GalleryState
from mythoji.gallery.factory import (
    PAGE_SIZE,
    build_cell,
    page_categories,
    page_count,
    requested_modifiers,
)
from mythoji.constants import GALLERY_COLS


def test_page_count_per_family():
    assert page_count(Family.PERSON) == 1
    assert page_count(Family.CREATURE) == 2
    assert page_count(Family.ITEM) == 3


def test_page_categories_past_end_is_empty():
    assert page_categories(Family.LOCATION, 0) == list(Family.LOCATION.members())
    assert page_categories(Family.LOCATION, 1) == []


def test_requested_modifiers_skip_neutral():
    assert requested_modifiers(GalleryState()) == {}
    state = GalleryState(skin_tone=SkinTone.DARK, gender=Gender.NEUTRAL)
    assert requested_modifiers(state) == {Axis.SKIN_TONE: SkinTone.DARK}


def test_build_cell_positions_and_label():
    cell = build_cell(GALLERY_COLS + 1, Person.MER_PERSON, {})
    assert cell.row == 1
    assert cell.col == 1
    assert cell.label == "mer person"


def test_build_cell_drops_unsupported_axes():
    cell = build_cell(0, Location.CASTLE, {Axis.GENDER: Gender.FEMALE})
    assert cell.glyph == "🏰"
    assert cell.applied_axes == frozenset()
    assert PAGE_SIZE == 24
