"""Plain-text listings of every glyph, grouped by family."""
from __future__ import annotations

import sys
from itertools import product
from typing import Iterator, List, Sequence

from mythoji.categories import Family, Person
from mythoji.modifiers import Gender, SkinTone
from mythoji.resolver import resolve

NAME_WIDTH = 25


def person_variants(person: Person) -> Iterator[tuple[SkinTone, Gender]]:
    """Yield every skin tone / gender pairing for ``person``."""
    if not isinstance(person, Person):
        raise TypeError(f"{person!r} is not a Person")
    yield from product(SkinTone, Gender)


def _variant_label(tone: SkinTone, gender: Gender) -> str:
    return f"{tone.name} + {gender.name}"


def family_lines(family: Family) -> List[str]:
    lines = [f"mythoji.{family.label}:", ""]
    for category in family.members():
        lines.append(f"{category.name:<{NAME_WIDTH}} = {category}")
        if not isinstance(category, Person):
            continue
        for tone, gender in person_variants(category):
            label = _variant_label(tone, gender)
            lines.append(f"  {label:<{NAME_WIDTH - 2}} = {resolve(category, [tone, gender])}")
    return lines


def parse_families(names: Sequence[str]) -> List[Family]:
    if not names:
        return list(Family)
    families: List[Family] = []
    for name in names:
        try:
            families.append(Family[name.upper()])
        except KeyError as exc:
            raise ValueError(f"Unknown family '{name}'") from exc
    return families


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        families = parse_families(args)
    except ValueError as exc:
        known = ", ".join(family.name.lower() for family in Family)
        print(f"{exc} (expected one of: {known})", file=sys.stderr)
        return 2
    for index, family in enumerate(families):
        if index:
            print()
        print("\n".join(family_lines(family)))
    return 0
