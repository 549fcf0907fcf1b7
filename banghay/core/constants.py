"""
Core Constants Module.

This module defines the phonological inventories, affixes and configuration
values used across the application.
"""

# Phonology
VOWELS = "aeiou"
LIQUID_CONSONANTS = ("l", "r")
HIGH_BACK_VOWELS = ("o", "u")

# Affixes
MAG_PREFIX = "mag"
NAG_PREFIX = "nag"
UM_AFFIX = "um"
IN_AFFIX = "in"
NI_PREFIX = "ni"
IN_SUFFIX = "in"
HIN_SUFFIX = "hin"
PREFIX_HYPHEN = "-"

# Lexicon data
DEFAULT_LEXICON_FILE = "lexicon"
LEXICON_KEY_SEPARATOR = ":"

# Error messages
ERROR_INVALID_FOCUS = "Invalid focus {value!r}. Supported focuses are: {choices}."
ERROR_INVALID_ASPECT = "Invalid aspect {value!r}. Supported aspects are: {choices}."
ERROR_INVALID_ROOT = "Root must be a string, got {type_name}."
ERROR_INVALID_LEXICON_KEY = "Invalid lexicon key {key!r} for root {root!r}; expected 'focus:aspect'."
ERROR_INVALID_LEXICON_FORM = "Lexicon form for {root!r} ({key}) must be a non-empty string."
