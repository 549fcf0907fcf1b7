"""
IN focus (object) conjugation.

IN focus emphasizes the receiver of the action. Its patterns depend on the
shape of the root more than the actor focuses do:

- Infinitive takes the -in or -hin suffix, with o/u raising and d/r changes
  (kainin, lutuin, takbuhin, lakarin, inumin).
- Completed prefixes in- to vowel-initial roots (ininom), prefixes ni- to
  liquid-initial roots (niluto) and infixes -in- elsewhere (kinain).
- Incompleted follows whichever completed pattern the root took
  (niluluto, kinakain).
- Contemplated is the reduplicated syllable followed by the infinitive
  (lulutuin, kakainin).

Irregular roots such as dala and kuha are handled by the lexicon.
"""

from banghay.core.constants import HIN_SUFFIX, IN_AFFIX, IN_SUFFIX, NI_PREFIX
from banghay.core.models import Aspect
from banghay.morphology.phonology import (
    first_syllable,
    insert_infix,
    is_high_back_vowel,
    is_liquid,
    is_vowel,
    reduplicate,
    should_use_hin_suffix,
    transform_d_to_r,
    transform_o_to_u,
)


def _build_vowel_final_infinitive(root: str) -> str:
    # Liquid-initial roots ending in o/u keep the plain -in suffix (luto -> lutuin)
    if is_high_back_vowel(root[-1]):
        if is_liquid(root[0]):
            return transform_o_to_u(root) + IN_SUFFIX
        return transform_o_to_u(root) + HIN_SUFFIX
    return root + HIN_SUFFIX


def build_infinitive(root: str) -> str:
    """
    Build the IN focus infinitive.

    Args:
        root: The verb root

    Returns:
        The suffixed infinitive

    Examples:
        build_infinitive("basa") -> "basahin"
        build_infinitive("luto") -> "lutuin"
        build_infinitive("takbo") -> "takbuhin"
        build_infinitive("lakad") -> "lakarin"
    """
    if should_use_hin_suffix(root):
        return _build_vowel_final_infinitive(root)
    return transform_o_to_u(transform_d_to_r(root)) + IN_SUFFIX


def build_completed(root: str) -> str:
    """
    Build the IN focus completed form (ininom, niluto, kinain).
    """
    if not root:
        return root
    if is_vowel(root[0]):
        return IN_AFFIX + root
    if is_liquid(root[0]):
        return NI_PREFIX + root
    return insert_infix(root, IN_AFFIX)


def build_incompleted(root: str) -> str:
    """Build the incompleted form from the pattern the completed form used."""
    if build_completed(root).startswith(NI_PREFIX):
        return NI_PREFIX + reduplicate(root)
    return insert_infix(reduplicate(root), IN_AFFIX)


def build_contemplated(root: str, infinitive: str) -> str:
    """
    Build the contemplated form from the root's infinitive.

    The reduplicated first syllable is prepended to the infinitive, so the
    future form always carries the same suffix as the infinitive.

    Args:
        root: The verb root
        infinitive: The root's IN focus infinitive (regular or from the lexicon)

    Returns:
        The contemplated form
    """
    return first_syllable(root) + infinitive


def conjugate_in(root: str, aspect: Aspect) -> str:
    if aspect is Aspect.INFINITIVE:
        return build_infinitive(root)
    if aspect is Aspect.COMPLETED:
        return build_completed(root)
    if aspect is Aspect.INCOMPLETED:
        return build_incompleted(root)
    if aspect is Aspect.CONTEMPLATED:
        return build_contemplated(root, build_infinitive(root))
    raise ValueError(f"Unsupported aspect: {aspect}")
