"""Constant glyph tables for every category.

Glyphs containing a zero-width joiner or a variation selector are written as
escapes so the invisible code points stay reviewable.
"""
from __future__ import annotations

from typing import Mapping

from mythoji.categories import Category, Creature, Item, Location, Person, Symbol

ZWJ = "\u200d"
VARIATION_SELECTOR_16 = "\ufe0f"


_PERSON_GLYPHS: Mapping[Person, str] = {
    Person.ARTIST: "\U0001F9D1\u200d\U0001F3A8",
    Person.BABY: "👶",
    Person.BALD_PERSON: "\U0001F9D1\u200d\U0001F9B2",
    Person.BEARDED_PERSON: "🧔",
    Person.CHILD: "🧒",
    Person.ELF: "🧝",
    Person.FAIRY: "🧚",
    Person.GENIE: "🧞",
    Person.HEAD_SCARF_PERSON: "🧕",
    Person.MAGE: "🧙",
    Person.MER_PERSON: "🧜",
    Person.OLD_PERSON: "🧓",
    Person.PERSON: "🧑",
    Person.ROYALTY: "🤴",
    Person.SKULL_CAP_PERSON: "👲",
    Person.TURBAN_PERSON: "👳",
    Person.VAMPIRE: "🧛",
    Person.ZOMBIE: "🧟",
}

_CREATURE_GLYPHS: Mapping[Creature, str] = {
    Creature.ANT: "🐜",
    Creature.BAT: "🦇",
    Creature.BEETLE: "🐞",
    Creature.BISON: "🦬",
    Creature.BOAR: "🐗",
    Creature.BUG: "🐛",
    Creature.BUTTERFLY: "🦋",
    Creature.CAMEL: "🐫",
    Creature.CAT: "🐈",
    Creature.COCKROACH: "🪳",
    Creature.COW: "🐄",
    Creature.CRAB: "🦀",
    Creature.CROCODILE: "🐊",
    Creature.DEER: "🦌",
    Creature.DOG: "🐕",
    Creature.DRAGON: "🐉",
    Creature.EAGLE: "🦅",
    Creature.ELEPHANT: "🐘",
    Creature.FISH: "🐟",
    Creature.GHOST: "👻",
    Creature.GOAT: "🐐",
    Creature.GOBLIN: "👺",
    Creature.HONEYBEE: "🐝",
    Creature.HORSE: "🐎",
    Creature.LEOPARD: "🐆",
    Creature.LLAMA: "🦙",
    Creature.MAMMOTH: "🦣",
    Creature.MOUSE: "🐁",
    Creature.OGRE: "👹",
    Creature.PIG: "🐖",
    Creature.RABBIT: "🐇",
    Creature.RAM: "🐏",
    Creature.RAT: "🐀",
    Creature.RHINOCEROS: "🦏",
    Creature.SCORPION: "🦂",
    Creature.SHARK: "🦈",
    Creature.SNAKE: "🐍",
    Creature.SPIDER: "🕷",
    Creature.TIGER: "🐅",
    Creature.TROPICAL_FISH: "🐠",
    Creature.WATER_BUFFALO: "🐃",
    Creature.WOLF: "🐺",
}

_LOCATION_GLYPHS: Mapping[Location, str] = {
    Location.BOAT_SAIL: "⛵",
    Location.BUILDING_CLASSIC: "🏛",
    Location.CAMPSITE: "🏕",
    Location.CANOE: "🛶",
    Location.CASTLE: "🏰",
    Location.CASTLE_JAPANESE: "🏯",
    Location.CAVE: "🕳",
    Location.DESERT: "🏜",
    Location.HUT: "🛖",
    Location.MOUNTAIN: "⛰",
    Location.MOUNTAIN_SNOW: "🏔",
    Location.OASIS: "🏜",
    Location.PALACE: "🏯",
    Location.TENT: "⛺",
    Location.TREE_DECIDUOUS: "🌳",
    Location.TREE_EVERGREEN: "🌲",
    Location.TREE_PALM: "🌴",
    Location.VOLCANO: "🌋",
}

_ITEM_GLYPHS: Mapping[Item, str] = {
    Item.AMULET: "🧿",
    Item.AXE: "🪓",
    Item.BAG: "🎒",
    Item.BANDAGE: "🩹",
    Item.BED: "🛏",
    Item.BEER: "🍺",
    Item.BLOOD_DROP: "🩸",
    Item.BOMB: "💣",
    Item.BOOK_CLOSED: "📕",
    Item.BOOK_OPEN: "📖",
    Item.BOOMERANG: "🪃",
    Item.BOW_AND_ARROW: "🏹",
    Item.BRICK: "🧱",
    Item.CANDLE: "🕯",
    Item.COAT: "🧥",
    Item.COFFIN: "⚰\ufe0f",
    Item.COIN: "🪙",
    Item.CROWN: "👑",
    Item.CRYSTAL_BALL: "🔮",
    Item.DAGGER: "🗡",
    Item.DART: "🎯",
    Item.DOOR: "🚪",
    Item.FLAG_BLACK: "🏴",
    Item.FLAG_TRIANGLE: "🚩",
    Item.FIRECRACKER: "🧨",
    Item.GEM_STONE: "💎",
    Item.GRAVE: "🪦",
    Item.HAMMER: "🔨",
    Item.HAMMER_AND_PICK: "⚒\ufe0f",
    Item.HEART_RED: "❤\ufe0f",
    Item.HOURGLASS_DONE: "⌛",
    Item.HOURGLASS_NOT_DONE: "⏳",
    Item.JAR: "🏺",
    Item.KEY: "\U0001F5DD\ufe0f",
    Item.LEAF: "🍃",
    Item.LEAF_FALLEN: "🍂",
    Item.LEAF_MAPLE: "🍁",
    Item.MAP: "🗺",
    Item.MEAT_ON_BONE: "🍖",
    Item.MEAT_CUT: "🥩",
    Item.PICK: "⛏",
    Item.POULTRY_LEG: "🍗",
    Item.PRAYER_BEADS: "📿",
    Item.RED_ENVELOPE: "🧧",
    Item.RED_LANTERN: "🏮",
    Item.ROCK: "🪨",
    Item.SCROLL: "📜",
    Item.SHIELD: "🛡",
    Item.SWORDS_CROSSED: "⚔\ufe0f",
    Item.TRIDENT: "🔱",
    Item.URN: "⚱\ufe0f",
    Item.WAND: "🪄",
    Item.WATER_DROP: "💧",
}

_SYMBOL_GLYPHS: Mapping[Symbol, str] = {
    Symbol.ANGER: "💢",
    Symbol.COMET: "☄\ufe0f",
    Symbol.CYCLONE: "🌀",
    Symbol.FIRE: "🔥",
    Symbol.ELECTRICITY: "⚡",
    Symbol.EXCLAMATION_DOUBLE: "‼\ufe0f",
    Symbol.EXCLAMATION_WITH_QUESTION: "⁉\ufe0f",
    Symbol.EXCLAMATION_RED: "❗",
    Symbol.EXCLAMATION_WHITE: "❕",
    Symbol.GENDER_FEMALE: "♀\ufe0f",
    Symbol.GENDER_MALE: "♂\ufe0f",
    Symbol.QUESTION_RED: "❓",
    Symbol.QUESTION_WHITE: "❔",
    Symbol.SPARKLES: "✨",
    Symbol.SPEECH_BUBBLE: "💬",
    Symbol.SPEECH_BUBBLE_ANGRY: "\U0001F5EF\ufe0f",
    Symbol.SNOWFLAKE: "❄\ufe0f",
    Symbol.ZZZ: "💤",
}

_GLYPH_TABLES: Mapping[type, Mapping] = {
    Person: _PERSON_GLYPHS,
    Creature: _CREATURE_GLYPHS,
    Location: _LOCATION_GLYPHS,
    Item: _ITEM_GLYPHS,
    Symbol: _SYMBOL_GLYPHS,
}


def base_glyph(category: Category) -> str:
    """Return the unmodified glyph for ``category``."""
    try:
        table = _GLYPH_TABLES[type(category)]
    except KeyError as exc:
        raise TypeError(f"{category!r} is not a mythoji category") from exc
    return table[category]
