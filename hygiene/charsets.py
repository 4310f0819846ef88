"""
Character Class Catalog

Static definition of the four character classes used for generation and
strength estimation. Pools are disjoint and together form the default
94-character alphabet.
"""

import string
from typing import Iterable, NamedTuple, Optional, Tuple


class CharacterClass(NamedTuple):
    """A named, ordered pool of distinct characters."""
    name: str
    pool: str

    @property
    def size(self) -> int:
        return len(self.pool)

    def contains(self, char) -> bool:
        """True if char is a single character from this pool."""
        return isinstance(char, str) and len(char) == 1 and char in self.pool


LOWERCASE = CharacterClass('lowercase', string.ascii_lowercase)
UPPERCASE = CharacterClass('uppercase', string.ascii_uppercase)
DIGITS = CharacterClass('digits', string.digits)
SYMBOLS = CharacterClass('symbols', string.punctuation)  # 32 ASCII punctuation characters

# Canonical order: guaranteed characters are drawn in this order
CHARACTER_CLASSES: Tuple[CharacterClass, ...] = (LOWERCASE, UPPERCASE, DIGITS, SYMBOLS)
CLASS_NAMES: Tuple[str, ...] = tuple(cls.name for cls in CHARACTER_CLASSES)
DEFAULT_ALPHABET = ''.join(cls.pool for cls in CHARACTER_CLASSES)

_ALIASES = {
    'lower': 'lowercase',
    'upper': 'uppercase',
    'digit': 'digits',
    'numbers': 'digits',
    'symbol': 'symbols',
}

_BY_NAME = {cls.name: cls for cls in CHARACTER_CLASSES}


def get_character_class(name) -> CharacterClass:
    """
    Look up a character class by name.

    Accepts the canonical names, a few common aliases ('upper', 'numbers', ...)
    and CharacterClass instances from this catalog. Lookup is case-insensitive.

    Raises:
        KeyError: If the name is not a known class
    """
    if isinstance(name, CharacterClass):
        name = name.name
    key = str(name).strip().lower()
    key = _ALIASES.get(key, key)
    try:
        return _BY_NAME[key]
    except KeyError:
        raise KeyError(f"Unknown character class: '{name}'") from None


def resolve_classes(names: Iterable) -> Tuple[CharacterClass, ...]:
    """Resolve names to classes, dropping duplicates and sorting into canonical order."""
    wanted = {get_character_class(name) for name in names}
    return tuple(cls for cls in CHARACTER_CLASSES if cls in wanted)


def union_pool(classes: Iterable) -> str:
    """Concatenate the pools of the given classes in canonical order."""
    return ''.join(cls.pool for cls in resolve_classes(classes))


def character_class_of(char: str) -> Optional[CharacterClass]:
    """Return the class a single character belongs to, or None if it is outside every pool."""
    for cls in CHARACTER_CLASSES:
        if cls.contains(char):
            return cls
    return None


__all__ = [
    'CharacterClass',
    'LOWERCASE',
    'UPPERCASE',
    'DIGITS',
    'SYMBOLS',
    'CHARACTER_CLASSES',
    'CLASS_NAMES',
    'DEFAULT_ALPHABET',
    'get_character_class',
    'resolve_classes',
    'union_pool',
    'character_class_of',
]
