"""Character classification for width-weighted layout.

Each character falls into exactly one :class:`CharacterClass`, tested in this
priority order:

1. CJK ideograph (U+4E00 - U+9FA5)
2. Uppercase Latin letter (A-Z)
3. Lowercase Latin letter (a-z)
4. CJK / full-width punctuation, except for the last character of the text
5. ASCII punctuation (plus curly quotes)
6. Other

Tests are plain code point and set membership checks.
"""

from collections import Counter
from typing import Dict, List

from .types import CharacterClass

CJK_IDEOGRAPH_FIRST = 0x4E00
CJK_IDEOGRAPH_LAST = 0x9FA5

CJK_PUNCTUATION = frozenset("；、，。：！？～【】《》…（）")
ASCII_PUNCTUATION = frozenset("!?.‘’:“”@*<>;\"',-")


def is_cjk_ideograph(character: str) -> bool:
    """Check if character is a CJK unified ideograph in the basic block."""
    return CJK_IDEOGRAPH_FIRST <= ord(character) <= CJK_IDEOGRAPH_LAST


def is_uppercase_latin(character: str) -> bool:
    return "A" <= character <= "Z"


def is_lowercase_latin(character: str) -> bool:
    return "a" <= character <= "z"


def is_cjk_punctuation(character: str) -> bool:
    """Check if character is CJK punctuation (ideographs also qualify)."""
    return is_cjk_ideograph(character) or character in CJK_PUNCTUATION


def is_ascii_punctuation(character: str) -> bool:
    return character in ASCII_PUNCTUATION


def classify_character(character: str, is_last: bool = False) -> CharacterClass:
    """Classify one character into its width class.

    Args:
        character: A single character (one code point).
        is_last: Whether this is the final character of the text. A trailing
            CJK punctuation mark is not given the wide class and falls
            through to the ASCII punctuation / other checks.

    Returns:
        The character's class.

    Raises:
        ValueError: If ``character`` is not exactly one code point.

    Example:
        >>> classify_character("。")
        <CharacterClass.CJK_PUNCTUATION: 'cjk_punctuation'>
        >>> classify_character("。", is_last=True)
        <CharacterClass.OTHER: 'other'>
    """
    if len(character) != 1:
        raise ValueError(f"Expected a single character, got {character!r}")

    if is_cjk_ideograph(character):
        return CharacterClass.CJK
    if is_uppercase_latin(character):
        return CharacterClass.UPPERCASE
    if is_lowercase_latin(character):
        return CharacterClass.LOWERCASE
    if not is_last and is_cjk_punctuation(character):
        return CharacterClass.CJK_PUNCTUATION
    if is_ascii_punctuation(character):
        return CharacterClass.ASCII_PUNCTUATION
    return CharacterClass.OTHER


def classify_text(text: str) -> List[CharacterClass]:
    """Classify every character of ``text`` in order."""
    last_index = len(text) - 1
    return [
        classify_character(character, is_last=(i == last_index))
        for i, character in enumerate(text)
    ]


def count_character_classes(text: str) -> Dict[CharacterClass, int]:
    """Count characters per class; every class is present in the result."""
    counts = Counter(classify_text(text))
    return {cls: counts.get(cls, 0) for cls in CharacterClass}
