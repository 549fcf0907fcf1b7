"""
UM focus (actor) conjugation.

    infinitive:   -um- infixed after the first consonant (kumain, uminom)
    completed:    same surface form as the infinitive
    incompleted:  -um- infixed into the reduplicated root (kumakain)
    contemplated: reduplicated root, no -um- (kakain)

Vowel-initial roots take um as a prefix, which ``insert_infix`` handles.
"""

from banghay.core.constants import UM_AFFIX
from banghay.core.models import Aspect
from banghay.morphology.phonology import insert_infix, reduplicate


def conjugate_um(root: str, aspect: Aspect) -> str:
    if aspect in (Aspect.INFINITIVE, Aspect.COMPLETED):
        return insert_infix(root, UM_AFFIX)
    if aspect is Aspect.INCOMPLETED:
        return insert_infix(reduplicate(root), UM_AFFIX)
    if aspect is Aspect.CONTEMPLATED:
        return reduplicate(root)
    raise ValueError(f"Unsupported aspect: {aspect}")
