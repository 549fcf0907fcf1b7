"""
Morphology Package.

This package contains the phonology primitives, the irregular-form lexicon,
the three focus handlers and the dispatcher that ties them together.
"""

from banghay.morphology.conjugator import (
    FOCUS_HANDLERS,
    Conjugator,
    conjugate,
    get_all_paradigms,
    get_paradigm,
)
from banghay.morphology.in_focus import conjugate_in
from banghay.morphology.lexicon import DEFAULT_LEXICON, Lexicon
from banghay.morphology.mag_focus import conjugate_mag
from banghay.morphology.um_focus import conjugate_um

__all__ = [
    # Dispatcher
    "Conjugator",
    "conjugate",
    "get_paradigm",
    "get_all_paradigms",
    "FOCUS_HANDLERS",
    # Lexicon
    "Lexicon",
    "DEFAULT_LEXICON",
    # Focus handlers
    "conjugate_mag",
    "conjugate_um",
    "conjugate_in",
]
