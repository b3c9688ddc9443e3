"""Tests for glyph resolution and modifier composition."""
import pytest

from mythoji import (
    Axis,
    ConflictingModifierError,
    Creature,
    Gender,
    GlyphResolutionError,
    Item,
    Location,
    Person,
    SkinTone,
    Symbol,
    UnsupportedModifierError,
    all_categories,
    resolve,
    supported_axes,
)

ZWJ = "\u200d"
VS16 = "\ufe0f"
MEDIUM = "\U0001F3FD"


def test_castle_resolves_to_castle_glyph():
    assert resolve(Location.CASTLE) == "🏰"


def test_female_elf_with_neutral_skin_tone():
    glyph = resolve(Person.ELF, [SkinTone.NEUTRAL, Gender.FEMALE])
    assert glyph == "\U0001F9DD" + ZWJ + "♀" + VS16
    assert glyph == "🧝\u200d♀\ufe0f"


@pytest.mark.parametrize("category", list(all_categories()), ids=lambda c: f"{type(c).__name__}.{c.name}")
def test_every_category_resolves_without_modifiers(category):
    first = resolve(category)
    assert isinstance(first, str)
    assert first
    assert resolve(category) == first
    assert resolve(category, []) == first
    assert str(category) == first


def test_modifier_order_does_not_matter():
    for person in Person:
        for tone in SkinTone:
            for gender in Gender:
                assert resolve(person, [tone, gender]) == resolve(person, [gender, tone])


def test_skin_tone_follows_base_pictograph():
    assert resolve(Person.MAGE, [SkinTone.MEDIUM]) == "🧙" + MEDIUM
    assert resolve(Person.BABY, [SkinTone.DARK]) == "👶\U0001F3FF"


def test_skin_tone_and_gender_sign():
    glyph = resolve(Person.VAMPIRE, [Gender.MALE, SkinTone.MEDIUM])
    assert glyph == "🧛" + MEDIUM + ZWJ + "♂" + VS16


def test_skin_tone_inside_joined_base():
    # Artist is already a joined sequence; the tone binds to its leading person.
    assert resolve(Person.ARTIST, [SkinTone.MEDIUM]) == "\U0001F9D1" + MEDIUM + ZWJ + "\U0001F3A8"


@pytest.mark.parametrize("person", [Person.PERSON, Person.ROYALTY, Person.CHILD, Person.OLD_PERSON])
def test_gender_appends_sign_to_base_pictograph(person):
    assert resolve(person, [Gender.FEMALE]) == str(person) + ZWJ + "♀" + VS16


def test_gender_sign_follows_skin_tone():
    assert resolve(Person.PERSON, [Gender.FEMALE]) == "🧑\u200d♀\ufe0f"
    assert resolve(Person.OLD_PERSON, [Gender.FEMALE, SkinTone.LIGHT]) == "🧓\U0001F3FB" + ZWJ + "♀" + VS16
    assert resolve(Person.ARTIST, [Gender.MALE]) == "\U0001F9D1" + ZWJ + "\U0001F3A8" + ZWJ + "♂" + VS16
    assert resolve(Person.ROYALTY, [Gender.MALE]) != resolve(Person.ROYALTY)


def test_neutral_modifiers_leave_base_unchanged():
    assert resolve(Person.ZOMBIE, [Gender.NEUTRAL]) == "🧟"
    assert resolve(Person.ELF, [SkinTone.NEUTRAL, Gender.NEUTRAL]) == "🧝"


def test_generator_of_modifiers_is_accepted():
    modifiers = (m for m in [Gender.FEMALE])
    assert resolve(Person.FAIRY, modifiers) == "🧚" + ZWJ + "♀" + VS16


@pytest.mark.parametrize("gender", list(Gender))
def test_location_rejects_any_gender(gender):
    with pytest.raises(UnsupportedModifierError) as excinfo:
        resolve(Location.TENT, [gender])
    assert excinfo.value.category is Location.TENT
    assert excinfo.value.modifier is gender


@pytest.mark.parametrize("category", [Creature.DRAGON, Item.WAND, Symbol.FIRE])
def test_non_person_rejects_skin_tone(category):
    with pytest.raises(UnsupportedModifierError):
        resolve(category, [SkinTone.LIGHT])


@pytest.mark.parametrize("person", list(Person), ids=lambda p: p.name)
def test_every_person_accepts_both_axes(person):
    assert supported_axes(person) == {Axis.SKIN_TONE, Axis.GENDER}
    glyph = resolve(person, [SkinTone.DARK, Gender.FEMALE])
    assert glyph == str(person)[0] + "\U0001F3FF" + str(person)[1:] + ZWJ + "♀" + VS16


def test_two_skin_tones_conflict():
    with pytest.raises(ConflictingModifierError) as excinfo:
        resolve(Person.ELF, [SkinTone.LIGHT, SkinTone.DARK])
    assert excinfo.value.axis is Axis.SKIN_TONE
    assert excinfo.value.modifiers == (SkinTone.LIGHT, SkinTone.DARK)


def test_repeated_modifier_still_conflicts():
    with pytest.raises(ConflictingModifierError):
        resolve(Person.MAGE, [Gender.MALE, Gender.MALE])


def test_conflict_reported_before_unsupported():
    with pytest.raises(ConflictingModifierError):
        resolve(Location.CAVE, [Gender.MALE, Gender.FEMALE])


def test_resolution_errors_are_value_errors():
    assert issubclass(UnsupportedModifierError, GlyphResolutionError)
    assert issubclass(ConflictingModifierError, GlyphResolutionError)
    with pytest.raises(ValueError):
        resolve(Item.AXE, [Gender.FEMALE])


def test_wrong_types_raise_type_error():
    with pytest.raises(TypeError):
        resolve("castle")
    with pytest.raises(TypeError):
        resolve(Person.ELF, ["female"])
    with pytest.raises(TypeError):
        supported_axes(SkinTone.LIGHT)


def test_supported_axes():
    assert supported_axes(Person.ELF) == {Axis.SKIN_TONE, Axis.GENDER}
    assert supported_axes(Person.ZOMBIE) == {Axis.SKIN_TONE, Axis.GENDER}
    assert supported_axes(Person.HEAD_SCARF_PERSON) == {Axis.SKIN_TONE, Axis.GENDER}
    assert supported_axes(Location.CASTLE) == frozenset()
