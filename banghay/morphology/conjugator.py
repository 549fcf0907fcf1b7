"""
Conjugation dispatcher.

``conjugate`` consults the lexicon first and falls back to the regular
focus handler on a miss. A ``Conjugator`` holds only immutable state, so one
instance can serve any number of threads.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from banghay.core.constants import ERROR_INVALID_ROOT
from banghay.core.exceptions import InvalidConjugationArgument
from banghay.core.models import (
    Aspect,
    ConjugationKey,
    ConjugatorConfig,
    Focus,
    Paradigm,
    coerce_aspect,
    coerce_focus,
)
from banghay.morphology import in_focus
from banghay.morphology.lexicon import DEFAULT_LEXICON, Lexicon
from banghay.morphology.mag_focus import conjugate_mag
from banghay.morphology.um_focus import conjugate_um

logger = logging.getLogger(__name__)

FocusHandler = Callable[[str, Aspect], str]

FOCUS_HANDLERS: Dict[Focus, FocusHandler] = {
    Focus.MAG: conjugate_mag,
    Focus.UM: conjugate_um,
    Focus.IN: in_focus.conjugate_in,
}

_unhandled = set(Focus) - set(FOCUS_HANDLERS)
if _unhandled:
    raise RuntimeError(f"No conjugation handler for focus: {sorted(f.value for f in _unhandled)}")


def _validate_root(root: Any) -> str:
    if not isinstance(root, str):
        raise InvalidConjugationArgument(ERROR_INVALID_ROOT.format(type_name=type(root).__name__))
    return root


class Conjugator:
    """Conjugates Tagalog verb roots using a lexicon and the regular focus rules."""

    def __init__(self, config: Optional[ConjugatorConfig] = None, lexicon: Optional[Lexicon] = None) -> None:
        """
        Initialize a conjugator.

        Args:
            config: Engine configuration (defaults to ``ConjugatorConfig()``)
            lexicon: Base lexicon (defaults to the built-in lexicon)
        """
        self.config = config or ConjugatorConfig()

        if not self.config.use_lexicon:
            self.lexicon = Lexicon.empty()
            return

        base = lexicon if lexicon is not None else DEFAULT_LEXICON
        if self.config.extra_lexicon_path:
            base = base.merged(Lexicon.from_file(self.config.extra_lexicon_path))
        self.lexicon = base

    def conjugate(self, root: str, focus: Any, aspect: Any) -> str:
        """
        Conjugate a root in the given focus and aspect.

        Args:
            root: The verb root, e.g. "luto"
            focus: ``Focus`` member or its string value
            aspect: ``Aspect`` member or its string value

        Returns:
            str: The conjugated surface form

        Raises:
            InvalidConjugationArgument: If focus or aspect is not supported, or root is not a string
        """
        root = _validate_root(root)
        focus = coerce_focus(focus)
        aspect = coerce_aspect(aspect)

        override = self.lexicon.lookup(root, focus, aspect)
        if override is not None:
            logger.debug("Lexicon override for %s (%s:%s): %s", root, focus.value, aspect.value, override)
            return override

        if focus is Focus.IN and aspect is Aspect.CONTEMPLATED:
            infinitive = self.lexicon.lookup(root, Focus.IN, Aspect.INFINITIVE)
            if infinitive is not None:
                logger.debug("Contemplated form of %s derived from lexicon infinitive %s", root, infinitive)
                return in_focus.build_contemplated(root, infinitive)

        return FOCUS_HANDLERS[focus](root, aspect)

    def conjugate_key(self, key: ConjugationKey) -> str:
        return self.conjugate(key.root, key.focus, key.aspect)

    def paradigm(self, root: str, focus: Any) -> Paradigm:
        """
        Conjugate a root in all four aspects of one focus.

        Args:
            root: The verb root
            focus: ``Focus`` member or its string value

        Returns:
            Paradigm: The four aspect forms
        """
        focus = coerce_focus(focus)
        forms = {aspect.value: self.conjugate(root, focus, aspect) for aspect in Aspect}
        return Paradigm(root=root, focus=focus, **forms)

    def paradigms(self, root: str) -> Dict[Focus, Paradigm]:
        """Conjugate a root in every focus and aspect."""
        return {focus: self.paradigm(root, focus) for focus in Focus}


_DEFAULT_CONJUGATOR = Conjugator()


def conjugate(root: str, focus: Any, aspect: Any) -> str:
    """
    Conjugate a root with the built-in lexicon.

    Examples:
        conjugate("luto", Focus.MAG, Aspect.INFINITIVE) -> "magluto"
        conjugate("kain", "um", "incompleted") -> "kumakain"
    """
    return _DEFAULT_CONJUGATOR.conjugate(root, focus, aspect)


def get_paradigm(root: str, focus: Any) -> Paradigm:
    return _DEFAULT_CONJUGATOR.paradigm(root, focus)


def get_all_paradigms(root: str) -> Dict[Focus, Paradigm]:
    return _DEFAULT_CONJUGATOR.paradigms(root)
