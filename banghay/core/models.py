"""
Core domain models for the conjugation engine.

Defines the closed focus and aspect enumerations, the conjugation key used to
address both the lexicon and the dispatcher, the paradigm container returned
for a full set of aspect forms, and the engine configuration model.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel

from banghay.core.constants import ERROR_INVALID_ASPECT, ERROR_INVALID_FOCUS, LEXICON_KEY_SEPARATOR
from banghay.core.exceptions import InvalidConjugationArgument


class Focus(str, Enum):
    """Grammatical focus of a Tagalog verb.

    MAG and UM are actor focus affixes; IN is the object focus affix.
    """

    MAG = "mag"
    UM = "um"
    IN = "in"


class Aspect(str, Enum):
    """Verbal aspect: base form, past, progressive and future."""

    INFINITIVE = "infinitive"
    COMPLETED = "completed"
    INCOMPLETED = "incompleted"
    CONTEMPLATED = "contemplated"


def _coerce(value: Any, enum_cls: Any, message: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    choices = ", ".join(member.value for member in enum_cls)
    if not isinstance(value, str):
        raise InvalidConjugationArgument(message.format(value=value, choices=choices))
    try:
        return enum_cls(value.strip().lower())
    except ValueError:
        raise InvalidConjugationArgument(message.format(value=value, choices=choices)) from None


def coerce_focus(value: Any) -> Focus:
    """
    Convert a focus given as an enum member or its string value.

    Args:
        value: ``Focus`` member or one of ``"mag"``, ``"um"``, ``"in"``

    Returns:
        Focus: The matching enum member

    Raises:
        InvalidConjugationArgument: If the value names no supported focus
    """
    return _coerce(value, Focus, ERROR_INVALID_FOCUS)


def coerce_aspect(value: Any) -> Aspect:
    """
    Convert an aspect given as an enum member or its string value.

    Args:
        value: ``Aspect`` member or its lowercase name

    Returns:
        Aspect: The matching enum member

    Raises:
        InvalidConjugationArgument: If the value names no supported aspect
    """
    return _coerce(value, Aspect, ERROR_INVALID_ASPECT)


class ConjugationKey(BaseModel):
    """A (root, focus, aspect) triple."""

    model_config = {"frozen": True}

    root: str
    focus: Focus
    aspect: Aspect

    @property
    def lexicon_key(self) -> str:
        """Key used for this focus and aspect in lexicon data files."""
        return f"{self.focus.value}{LEXICON_KEY_SEPARATOR}{self.aspect.value}"


class Paradigm(BaseModel):
    """The four aspect forms of a root in one focus."""

    root: str
    focus: Focus
    infinitive: str
    completed: str
    incompleted: str
    contemplated: str

    def form(self, aspect: Aspect) -> str:
        return getattr(self, coerce_aspect(aspect).value)

    def as_dict(self) -> Dict[str, str]:
        return {aspect.value: self.form(aspect) for aspect in Aspect}


class ConjugatorConfig(BaseModel):
    """Configuration for a conjugator instance."""

    use_lexicon: bool = True
    extra_lexicon_path: Optional[str] = None
