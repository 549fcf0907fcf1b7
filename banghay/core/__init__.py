"""
Core Package.

This package provides the data model, constants, errors and file helpers
shared by the morphology engine and the command line.
"""

from banghay.core.exceptions import BanghayError, InvalidConjugationArgument, LexiconFormatError
from banghay.core.models import (
    Aspect,
    ConjugationKey,
    ConjugatorConfig,
    Focus,
    Paradigm,
    coerce_aspect,
    coerce_focus,
)
from banghay.core.utils import get_file_contents, read_data_file, write_file_contents

__all__ = [
    # Models
    "Focus",
    "Aspect",
    "ConjugationKey",
    "Paradigm",
    "ConjugatorConfig",
    "coerce_focus",
    "coerce_aspect",
    # Errors
    "BanghayError",
    "InvalidConjugationArgument",
    "LexiconFormatError",
    # Utilities
    "read_data_file",
    "get_file_contents",
    "write_file_contents",
]
