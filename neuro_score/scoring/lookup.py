"""Normative lookup for a single subscore."""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import Optional, Union

from neuro_score.exceptions import UnknownTestError
from neuro_score.models.definitions import EducationLevel
from neuro_score.norms.tables import LookupResult
from neuro_score.registry import get_table, get_test
from neuro_score.scoring.coercion import normalize_number

logger = logging.getLogger(__name__)


def lookup(
    test_code: str,
    subscore: str,
    subject_age: float,
    education: Optional[EducationLevel],
    raw: Union[float, str],
    group: Optional[str] = None,
) -> Optional[LookupResult]:
    """Look up the normative score and percentile for one raw value.

    Percentile subscores entered by hand (exact value or range code) and
    standard scores read from a manual pass straight through. Returns None
    when no age band or education stratum matches, or when the raw value
    lies outside the table's domain. ``group`` selects the norm group
    (school type, schooling) for tests that have one.

    Raises:
        UnknownTestError: If the test or subscore is not registered.
    """
    return _cached_lookup(test_code, subscore, math.floor(subject_age), education, raw, group)


@lru_cache(maxsize=4096)
def _cached_lookup(
    test_code: str,
    subscore: str,
    age: int,
    education: Optional[EducationLevel],
    raw: Union[float, str],
    group: Optional[str] = None,
) -> Optional[LookupResult]:
    definition = get_test(test_code)
    subscore_def = definition.get_subscore(subscore)
    if subscore_def is None:
        raise UnknownTestError(test_code, subscore)

    if subscore_def.categorical:
        percentile = raw if isinstance(raw, str) else normalize_number(raw)
        return LookupResult(percentile=percentile)
    if subscore_def.entered:
        return None if isinstance(raw, str) else LookupResult(score=normalize_number(raw))

    table = get_table(test_code, subscore)
    if table is None or isinstance(raw, str):
        return None
    if definition.requires_education and education is None:
        return None
    if definition.group_field is not None and group not in definition.groups:
        return None

    result = table.lookup(age, education, raw, group)
    if result is None:
        logger.debug(
            "No norm for %s.%s age=%s education=%s group=%s raw=%s",
            test_code, subscore, age, education, group, raw,
        )
    return result


def clear_lookup_cache() -> None:
    _cached_lookup.cache_clear()
