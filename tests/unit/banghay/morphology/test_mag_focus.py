"""Tests for MAG focus conjugation."""

import pytest

from banghay.core.models import Aspect
from banghay.morphology.mag_focus import conjugate_mag


@pytest.mark.parametrize(
    "root,infinitive,completed,incompleted,contemplated",
    [
        ("luto", "magluto", "nagluto", "nagluluto", "magluluto"),
        ("trabaho", "magtrabaho", "nagtrabaho", "nagtatrabaho", "magtatrabaho"),
        ("aral", "mag-aral", "nag-aral", "nag-aaral", "mag-aaral"),
        ("lakad", "maglakad", "naglakad", "naglalakad", "maglalakad"),
        ("bigay", "magbigay", "nagbigay", "nagbibigay", "magbibigay"),
        ("linis", "maglinis", "naglinis", "naglilinis", "maglilinis"),
    ],
)
def test_conjugate_mag(root, infinitive, completed, incompleted, contemplated):
    assert conjugate_mag(root, Aspect.INFINITIVE) == infinitive
    assert conjugate_mag(root, Aspect.COMPLETED) == completed
    assert conjugate_mag(root, Aspect.INCOMPLETED) == incompleted
    assert conjugate_mag(root, Aspect.CONTEMPLATED) == contemplated


def test_empty_root_gives_bare_prefix():
    assert conjugate_mag("", Aspect.INFINITIVE) == "mag"
    assert conjugate_mag("", Aspect.INCOMPLETED) == "nag"
