"""
MAG focus (actor) conjugation.

    infinitive:   mag + root            (magluto, mag-aral)
    completed:    nag + root            (nagluto)
    incompleted:  nag + redup(root)     (nagluluto)
    contemplated: mag + redup(root)     (magluluto)
"""

from banghay.core.constants import MAG_PREFIX, NAG_PREFIX
from banghay.core.models import Aspect
from banghay.morphology.phonology import attach_prefix, reduplicate


def conjugate_mag(root: str, aspect: Aspect) -> str:
    if aspect is Aspect.INFINITIVE:
        return attach_prefix(MAG_PREFIX, root)
    if aspect is Aspect.COMPLETED:
        return attach_prefix(NAG_PREFIX, root)
    if aspect is Aspect.INCOMPLETED:
        return attach_prefix(NAG_PREFIX, reduplicate(root))
    if aspect is Aspect.CONTEMPLATED:
        return attach_prefix(MAG_PREFIX, reduplicate(root))
    raise ValueError(f"Unsupported aspect: {aspect}")
