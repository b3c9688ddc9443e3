"""Emoji glyphs for fantasy text-based games.

Every glyph comes from a closed set of categories; people additionally take a
skin tone and a gender::

    >>> from mythoji import Gender, Location, Person, SkinTone, resolve
    >>> str(Location.CASTLE)
    '🏰'
    >>> resolve(Person.ELF, [SkinTone.NEUTRAL, Gender.FEMALE]) == "🧝\\u200d♀\\ufe0f"
    True

Not every terminal renders every sequence; be ready to fall back to a plainer
representation.
"""

from .categories import Category, Creature, Family, Item, Location, Person, Symbol, all_categories, family_of
from .emoji import Emoji
from .errors import ConflictingModifierError, GlyphResolutionError, UnsupportedModifierError
from .modifiers import Axis, Gender, Modifier, SkinTone
from .resolver import Glyph, resolve, supported_axes

__all__ = [
    "Axis",
    "Category",
    "ConflictingModifierError",
    "Creature",
    "Emoji",
    "Family",
    "Gender",
    "Glyph",
    "GlyphResolutionError",
    "Item",
    "Location",
    "Modifier",
    "Person",
    "SkinTone",
    "Symbol",
    "UnsupportedModifierError",
    "all_categories",
    "family_of",
    "resolve",
    "supported_axes",
]
