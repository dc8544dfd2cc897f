"""Age eligibility gating.

Being outside a test's normative range is a normal, displayable state and
never an exception; only unknown test codes raise.
"""

from __future__ import annotations

import math
from typing import Optional

from neuro_score.models.results import EligibilityStatus
from neuro_score.registry import get_table, get_test

ADOLESCENT_AGE = 12
ADULT_AGE = 18


def is_eligible(test_code: str, subject_age: float) -> bool:
    """True when the subject's age in whole years is inside the test's range."""
    definition = get_test(test_code)
    return definition.valid_age_range.contains(math.floor(subject_age))


def check_eligibility(test_code: str, subject_age: float) -> EligibilityStatus:
    """Eligibility plus a message suitable for showing next to the form."""
    definition = get_test(test_code)
    years = math.floor(subject_age)
    eligible = definition.valid_age_range.contains(years)
    message = None
    if not eligible:
        message = (
            f"O teste {definition.name} é validado apenas para "
            f"{definition.valid_age_range.label}. A idade atual ({years} anos) "
            "está fora da faixa normativa."
        )
    return EligibilityStatus(
        test_code=definition.code,
        subject_age=years,
        eligible=eligible,
        message=message,
    )


def age_band_name(test_code: str, subject_age: float) -> Optional[str]:
    """Display name of the normative age band used for this subject.

    Tests normed by caller-supplied values have no bands and return None.
    """
    definition = get_test(test_code)
    years = math.floor(subject_age)
    for subscore in definition.subscores:
        table = get_table(definition.code, subscore.name)
        if table is None:
            continue
        band = table.band_for(years)
        if band is None:
            return None
        return f"{_group_name(band.min_age)} de {band.label}"
    return None


def _group_name(min_age: int) -> str:
    if min_age >= ADULT_AGE:
        return "Adultos"
    if min_age >= ADOLESCENT_AGE:
        return "Adolescentes"
    return "Crianças"
