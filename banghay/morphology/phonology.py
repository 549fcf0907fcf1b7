"""
Tagalog Phonology Module.

This module provides the character classifiers and string transforms that the
focus handlers are built from: vowel tests, syllable extraction, reduplication,
infixation, prefixation and the o/u and d/r sound changes.

Every function is total over strings. The empty string is returned unchanged
(``attach_prefix`` returns the bare prefix).
"""

import re

from banghay.core.constants import HIGH_BACK_VOWELS, LIQUID_CONSONANTS, PREFIX_HYPHEN, VOWELS

LAST_O_OR_U_PATTERN = re.compile(r"[ou](?=[^ou]*$)", re.IGNORECASE)


def is_vowel(char: str) -> bool:
    """
    Check whether a single character is a vowel (a, e, i, o, u).

    Args:
        char: A single character

    Returns:
        True for a vowel, False for anything else (including the empty string)
    """
    return len(char) == 1 and char.lower() in VOWELS


def is_liquid(char: str) -> bool:
    """Check whether a single character is a liquid consonant (l or r)."""
    return len(char) == 1 and char.lower() in LIQUID_CONSONANTS


def is_high_back_vowel(char: str) -> bool:
    """Check whether a single character is o or u."""
    return len(char) == 1 and char.lower() in HIGH_BACK_VOWELS


def first_vowel_index(root: str) -> int:
    """
    Find the index of the first vowel in a string.

    Args:
        root: The string to search

    Returns:
        Index of the first vowel, or -1 if there is none
    """
    for index, char in enumerate(root):
        if is_vowel(char):
            return index
    return -1


def first_syllable(root: str) -> str:
    """
    Extract the first syllable using a CV heuristic.

    The syllable is the first character followed by the first vowel, so
    consonant clusters collapse to their first consonant (trabaho -> ta).
    Vowel-initial roots and roots without vowels give their first character.

    Args:
        root: The verb root

    Returns:
        The reduplicable first syllable

    Examples:
        first_syllable("luto") -> "lu"
        first_syllable("kain") -> "ka"
        first_syllable("inom") -> "i"
    """
    if not root:
        return root
    vowel_index = first_vowel_index(root)
    if vowel_index <= 0:
        return root[0]
    return root[0] + root[vowel_index]


def reduplicate(root: str) -> str:
    """
    Reduplicate the first syllable of the root (luto -> luluto, kain -> kakain).
    """
    return first_syllable(root) + root


def insert_infix(root: str, infix: str) -> str:
    """
    Insert an infix after the first consonant, or prefix it to a vowel-initial root.

    Args:
        root: The stem receiving the infix
        infix: The infix, e.g. "um" or "in"

    Returns:
        The infixed stem

    Examples:
        insert_infix("luto", "um") -> "lumuto"
        insert_infix("inom", "um") -> "uminom"
    """
    if not root:
        return root
    if is_vowel(root[0]):
        return infix + root
    return root[0] + infix + root[1:]


def attach_prefix(prefix: str, stem: str) -> str:
    """
    Attach a prefix to a stem, hyphenating before a vowel-initial stem.

    Examples:
        attach_prefix("mag", "luto") -> "magluto"
        attach_prefix("mag", "aral") -> "mag-aral"
    """
    if not stem:
        return prefix
    if is_vowel(stem[0]):
        return prefix + PREFIX_HYPHEN + stem
    return prefix + stem


def transform_o_to_u(root: str) -> str:
    """
    Change the last o or u in the root to u.

    This vowel raising applies before the -in/-hin suffixes
    (luto -> lutu, inom -> inum).
    """
    return LAST_O_OR_U_PATTERN.sub("u", root, count=1)


def transform_d_to_r(root: str) -> str:
    """
    Change a final d (either case) to r before -in suffixation (lakad -> lakar).
    """
    if root[-1:].lower() == "d":
        return root[:-1] + "r"
    return root


def should_use_hin_suffix(root: str) -> bool:
    """
    Decide whether the infinitive suffix is drawn from the -hin branch.

    Args:
        root: The verb root

    Returns:
        True when the root ends in a vowel, False otherwise
    """
    return bool(root) and is_vowel(root[-1])
