"""Tests for the plain-text glyph catalog."""
import pytest

from mythoji import Family, Gender, Person, SkinTone
from mythoji.catalog import family_lines, main, parse_families, person_variants


def test_location_catalog_lines():
    lines = family_lines(Family.LOCATION)
    assert lines[0] == "mythoji.Location:"
    assert lines[1] == ""
    assert "CASTLE                    = 🏰" in lines
    assert len(lines) == 2 + len(Family.LOCATION.members())


def test_person_catalog_lists_variants():
    lines = family_lines(Family.PERSON)
    elf_index = lines.index("ELF                       = 🧝")
    variants = lines[elf_index + 1:elf_index + 1 + len(SkinTone) * len(Gender)]
    assert variants[0] == "  NEUTRAL + NEUTRAL       = 🧝"
    assert "  NEUTRAL + FEMALE        = 🧝\u200d♀\ufe0f" in variants
    assert all(line.startswith("  ") for line in variants)


@pytest.mark.parametrize("person", list(Person), ids=lambda p: p.name)
def test_person_variants_cover_full_grid(person):
    variants = list(person_variants(person))
    assert len(variants) == len(SkinTone) * len(Gender)
    assert variants[0] == (SkinTone.NEUTRAL, Gender.NEUTRAL)
    assert variants[-1] == (SkinTone.DARK, Gender.FEMALE)


def test_zombie_lists_every_variant():
    lines = family_lines(Family.PERSON)
    zombie_index = lines.index("ZOMBIE                    = 🧟")
    assert lines[zombie_index + 1] == "  NEUTRAL + NEUTRAL       = 🧟"
    assert lines[zombie_index + 2] == "  NEUTRAL + MALE          = 🧟\u200d♂\ufe0f"
    assert lines[zombie_index + 4] == "  LIGHT + NEUTRAL         = 🧟\U0001F3FB"


def test_person_catalog_line_count():
    lines = family_lines(Family.PERSON)
    per_person = 1 + len(SkinTone) * len(Gender)
    assert len(lines) == 2 + len(Person) * per_person


def test_parse_families():
    assert parse_families([]) == list(Family)
    assert parse_families(["Item", "symbol"]) == [Family.ITEM, Family.SYMBOL]
    with pytest.raises(ValueError):
        parse_families(["weapons"])


def test_main_prints_requested_family(capsys):
    assert main(["location"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("mythoji.Location:\n")
    assert "mythoji.Item:" not in out


def test_main_rejects_unknown_family(capsys):
    assert main(["weapons"]) == 2
    err = capsys.readouterr().err
    assert "Unknown family 'weapons'" in err
