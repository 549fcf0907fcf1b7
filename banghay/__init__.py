"""
Banghay: a Tagalog verb conjugation engine.

This package maps a verb root plus a grammatical focus (mag, um, in) and an
aspect (infinitive, completed, incompleted, contemplated) to its conjugated
surface form.
"""

from banghay.core.exceptions import BanghayError, InvalidConjugationArgument, LexiconFormatError
from banghay.core.models import Aspect, ConjugationKey, ConjugatorConfig, Focus, Paradigm
from banghay.morphology.conjugator import Conjugator, conjugate, get_all_paradigms, get_paradigm

__version__ = "0.1.0"

__all__ = [
    "Aspect",
    "BanghayError",
    "ConjugationKey",
    "Conjugator",
    "ConjugatorConfig",
    "Focus",
    "InvalidConjugationArgument",
    "LexiconFormatError",
    "Paradigm",
    "conjugate",
    "get_all_paradigms",
    "get_paradigm",
]
