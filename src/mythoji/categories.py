"""Closed category enumerations: every fantasy concept that has a glyph."""
from __future__ import annotations

from enum import Enum, auto
from typing import Iterator, Tuple, Type, Union


class _GlyphEnum(Enum):
    """Enum whose text form is its base glyph."""

    def __str__(self) -> str:
        from mythoji.glyphs import base_glyph

        return base_glyph(self)


class Person(_GlyphEnum):
    """People that can be shown with different genders and skin tones."""

    ARTIST = auto()
    BABY = auto()
    BALD_PERSON = auto()
    BEARDED_PERSON = auto()
    CHILD = auto()
    ELF = auto()
    FAIRY = auto()
    GENIE = auto()
    HEAD_SCARF_PERSON = auto()
    MAGE = auto()
    MER_PERSON = auto()
    OLD_PERSON = auto()
    PERSON = auto()
    ROYALTY = auto()
    SKULL_CAP_PERSON = auto()
    TURBAN_PERSON = auto()
    VAMPIRE = auto()
    ZOMBIE = auto()


class Creature(_GlyphEnum):
    """Living things that are not people.

    Glyphs show the side view of the creature where Unicode offers one.
    """

    ANT = auto()
    BAT = auto()
    BEETLE = auto()
    BISON = auto()
    BOAR = auto()
    BUG = auto()
    BUTTERFLY = auto()
    CAMEL = auto()
    CAT = auto()
    COCKROACH = auto()
    COW = auto()
    CRAB = auto()
    CROCODILE = auto()
    DEER = auto()
    DOG = auto()
    DRAGON = auto()
    EAGLE = auto()
    ELEPHANT = auto()
    FISH = auto()
    GHOST = auto()
    GOAT = auto()
    GOBLIN = auto()
    HONEYBEE = auto()
    HORSE = auto()
    LEOPARD = auto()
    LLAMA = auto()
    MAMMOTH = auto()
    MOUSE = auto()
    OGRE = auto()
    PIG = auto()
    RABBIT = auto()
    RAM = auto()
    RAT = auto()
    RHINOCEROS = auto()
    SCORPION = auto()
    SHARK = auto()
    SNAKE = auto()
    SPIDER = auto()
    TIGER = auto()
    TROPICAL_FISH = auto()
    WATER_BUFFALO = auto()
    WOLF = auto()


class Location(_GlyphEnum):
    """Places a story can happen in."""

    BOAT_SAIL = auto()
    BUILDING_CLASSIC = auto()
    CAMPSITE = auto()
    CANOE = auto()
    CASTLE = auto()
    CASTLE_JAPANESE = auto()
    CAVE = auto()
    DESERT = auto()
    HUT = auto()
    MOUNTAIN = auto()
    MOUNTAIN_SNOW = auto()
    OASIS = auto()
    PALACE = auto()
    TENT = auto()
    TREE_DECIDUOUS = auto()
    TREE_EVERGREEN = auto()
    TREE_PALM = auto()
    VOLCANO = auto()


class Item(_GlyphEnum):
    """Things a character can carry, use or find."""

    AMULET = auto()
    AXE = auto()
    BAG = auto()
    BANDAGE = auto()
    BED = auto()
    BEER = auto()
    BLOOD_DROP = auto()
    BOMB = auto()
    BOOK_CLOSED = auto()
    BOOK_OPEN = auto()
    BOOMERANG = auto()
    BOW_AND_ARROW = auto()
    BRICK = auto()
    CANDLE = auto()
    COAT = auto()
    COFFIN = auto()
    COIN = auto()
    CROWN = auto()
    CRYSTAL_BALL = auto()
    DAGGER = auto()
    DART = auto()
    DOOR = auto()
    FLAG_BLACK = auto()
    FLAG_TRIANGLE = auto()
    FIRECRACKER = auto()
    GEM_STONE = auto()
    GRAVE = auto()
    HAMMER = auto()
    HAMMER_AND_PICK = auto()
    HEART_RED = auto()
    HOURGLASS_DONE = auto()
    HOURGLASS_NOT_DONE = auto()
    JAR = auto()
    KEY = auto()
    LEAF = auto()
    LEAF_FALLEN = auto()
    LEAF_MAPLE = auto()
    MAP = auto()
    MEAT_ON_BONE = auto()
    MEAT_CUT = auto()
    PICK = auto()
    POULTRY_LEG = auto()
    PRAYER_BEADS = auto()
    RED_ENVELOPE = auto()
    RED_LANTERN = auto()
    ROCK = auto()
    SCROLL = auto()
    SHIELD = auto()
    SWORDS_CROSSED = auto()
    TRIDENT = auto()
    URN = auto()
    WAND = auto()
    WATER_DROP = auto()


class Symbol(_GlyphEnum):
    """Marks and signs that are not objects."""

    ANGER = auto()
    COMET = auto()
    CYCLONE = auto()
    FIRE = auto()
    ELECTRICITY = auto()
    EXCLAMATION_DOUBLE = auto()
    EXCLAMATION_WITH_QUESTION = auto()
    EXCLAMATION_RED = auto()
    EXCLAMATION_WHITE = auto()
    GENDER_FEMALE = auto()
    GENDER_MALE = auto()
    QUESTION_RED = auto()
    QUESTION_WHITE = auto()
    SPARKLES = auto()
    SPEECH_BUBBLE = auto()
    SPEECH_BUBBLE_ANGRY = auto()
    SNOWFLAKE = auto()
    ZZZ = auto()


Category = Union[Person, Creature, Location, Item, Symbol]


class Family(Enum):
    """The category enumerations, in catalog order."""

    PERSON = "Person"
    CREATURE = "Creature"
    LOCATION = "Location"
    ITEM = "Item"
    SYMBOL = "Symbol"

    @property
    def category_type(self) -> Type[_GlyphEnum]:
        return _FAMILY_TYPES[self]

    @property
    def label(self) -> str:
        return self.value

    def members(self) -> Tuple[Category, ...]:
        return tuple(self.category_type)


_FAMILY_TYPES = {
    Family.PERSON: Person,
    Family.CREATURE: Creature,
    Family.LOCATION: Location,
    Family.ITEM: Item,
    Family.SYMBOL: Symbol,
}

CATEGORY_TYPES: Tuple[type, ...] = tuple(_FAMILY_TYPES.values())


def is_category(value: object) -> bool:
    return isinstance(value, CATEGORY_TYPES)


def family_of(category: Category) -> Family:
    """Return the family a category value belongs to."""
    for family in Family:
        if isinstance(category, family.category_type):
            return family
    raise TypeError(f"{category!r} is not a mythoji category")


def all_categories() -> Iterator[Category]:
    for family in Family:
        yield from family.members()
