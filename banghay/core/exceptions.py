"""
Exception types raised by the conjugation engine.
"""


class BanghayError(Exception):
    """Base class for all errors raised by banghay."""


class InvalidConjugationArgument(BanghayError, ValueError):
    """A focus, aspect or root outside the engine's declared domain."""


class LexiconFormatError(BanghayError, ValueError):
    """A lexicon data file or mapping that cannot be parsed into overrides."""
