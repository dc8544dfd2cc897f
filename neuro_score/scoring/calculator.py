"""Score calculation for one test administration.

``calculate`` is pure: it reads the registry and the raw input and returns
a new ``CalculatedResult``, or None while the form is still incomplete.

Pipeline:
  1. Completeness: every declared input present and non-blank.
  2. Parsing: lenient numeric coercion and valid-range checks per field; the
     norm group field must name one of the test's groups.
  3. Derived raw scores (differences, totals, ratios) in declaration order,
     so a total can feed a later difference.
  4. Normative lookup or inline Z-score per subscore.
  5. Classification under the test's scoring model.

A field that is present but unparseable or out of range only leaves the
subscores that read it unscored; every other subscore is still computed.
Descriptive subscores without norms are reported among the raw scores only.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from neuro_score.models.definitions import ScoringModel, SubscoreDefinition, TestDefinition
from neuro_score.models.results import CalculatedResult, RawScoreInput, RawValue
from neuro_score.numeric import finite_or_none, round_half_up, z_score, z_to_percentile
from neuro_score.registry import get_test
from neuro_score.scoring.classification import (
    PERCENTILE_CODES,
    classify,
    classify_percentile,
    classify_standard_score,
    classify_zscore,
)
from neuro_score.scoring.coercion import is_blank, normalize_number, parse_numeric
from neuro_score.scoring.lookup import lookup

logger = logging.getLogger(__name__)

ParsedValue = Union[int, float, str, None]

STANDARD_MEAN = 100
STANDARD_SD = 15


def is_complete(definition: TestDefinition, raw_input: RawScoreInput) -> bool:
    """True when every required input (and education, if stratified) is entered."""
    if definition.requires_education and raw_input.education_level is None:
        return False
    return not any(is_blank(raw_input.values.get(f)) for f in definition.input_fields)


def _field_owner(definition: TestDefinition, field: str) -> Optional[SubscoreDefinition]:
    """Subscore whose raw value is read from ``field``, if any."""
    for subscore in definition.subscores:
        if not subscore.is_derived and subscore.input_field == field:
            return subscore
    return None


def _parse_field(owner: Optional[SubscoreDefinition], value: RawValue) -> ParsedValue:
    if owner is not None and owner.categorical and isinstance(value, str):
        code = value.strip()
        if code in PERCENTILE_CODES:
            return code
    number = parse_numeric(value)
    if number is None:
        return None
    if owner is not None and not owner.accepts(number):
        return None
    return normalize_number(number)


def _parse_group(definition: TestDefinition, value: RawValue) -> Optional[str]:
    if not isinstance(value, str):
        return None
    group = value.strip().lower()
    return group if group in definition.groups else None


def parse_inputs(definition: TestDefinition, raw_input: RawScoreInput) -> dict[str, ParsedValue]:
    """Parse every declared input; malformed or out-of-range fields become None."""
    parsed: dict[str, ParsedValue] = {}
    for field in definition.input_fields:
        raw_value = raw_input.values.get(field)
        if field == definition.group_field:
            value = _parse_group(definition, raw_value)
        else:
            value = _parse_field(_field_owner(definition, field), raw_value)
        if value is None:
            logger.debug("%s: input %s=%r is not scoreable", definition.code, field, raw_value)
        parsed[field] = value
    return parsed


def _derive(subscore: SubscoreDefinition, values: dict[str, ParsedValue]) -> ParsedValue:
    operands = {name: values.get(name) for name in subscore.derived.operands}
    if any(not isinstance(v, (int, float)) for v in operands.values()):
        return None
    derived = subscore.derived.compute(operands)
    if derived is None or finite_or_none(derived) is None:
        return None
    return normalize_number(round_half_up(derived, 2))


def _score_inline(
    subscore: SubscoreDefinition, parsed: dict[str, ParsedValue]
) -> tuple[Optional[float], Optional[int], str]:
    raw = parsed.get(subscore.input_field)
    mean = parsed.get(subscore.mean_field)
    sd = parsed.get(subscore.sd_field)
    if any(not isinstance(v, (int, float)) for v in (raw, mean, sd)):
        return None, None, classify_zscore(None)
    z = z_score(raw, mean, sd)
    percentile = None if z is None else z_to_percentile(z)
    return z, percentile, classify_zscore(z)


def _score_from_table(
    definition: TestDefinition,
    subscore: SubscoreDefinition,
    raw: ParsedValue,
    raw_input: RawScoreInput,
    group: Optional[str] = None,
) -> tuple[Optional[float], Optional[Union[int, float, str]], str]:
    if raw is None:
        return None, None, classify(definition.scoring_model, None)

    result = lookup(
        definition.code,
        subscore.name,
        raw_input.age_years,
        raw_input.education_level,
        raw,
        group,
    )
    if result is None:
        return None, None, classify(definition.scoring_model, None)

    if subscore.categorical:
        percentile = result.percentile
        score = percentile if isinstance(percentile, (int, float)) else None
        return score, percentile, classify_percentile(percentile)

    if definition.scoring_model == ScoringModel.NORMATIVE_TABLE:
        score = result.score
        percentile = None
        if score is not None:
            percentile = z_to_percentile((score - STANDARD_MEAN) / STANDARD_SD)
        return score, percentile, classify_standard_score(score)

    if definition.scoring_model == ScoringModel.ZSCORE:
        return result.score, result.percentile, classify_zscore(result.score)

    return result.score, result.percentile, classify_percentile(result.percentile)


def calculate(test_code: str, raw_input: RawScoreInput) -> Optional[CalculatedResult]:
    """Compute scores, percentiles and classifications for a test.

    Args:
        test_code: Registered test code.
        raw_input: Subject age, education level and raw values.

    Returns:
        CalculatedResult, or None when a required input is still missing.

    Raises:
        UnknownTestError: If ``test_code`` is not registered.
    """
    definition = get_test(test_code)
    if not is_complete(definition, raw_input):
        logger.debug("%s: input incomplete, no result yet", test_code)
        return None

    parsed = parse_inputs(definition, raw_input)
    group = parsed.get(definition.group_field) if definition.group_field else None
    raw_scores: dict[str, ParsedValue] = dict(parsed)
    for subscore in definition.subscores:
        if subscore.is_derived:
            raw_scores[subscore.name] = _derive(subscore, raw_scores)

    calculated_scores: dict[str, Optional[float]] = {}
    percentiles: dict[str, Optional[Union[int, float, str]]] = {}
    classifications: dict[str, str] = {}

    for subscore in definition.subscores:
        if not subscore.normed:
            continue
        if subscore.uses_inline_norms:
            score, percentile, label = _score_inline(subscore, parsed)
        else:
            raw = raw_scores[subscore.raw_key]
            score, percentile, label = _score_from_table(definition, subscore, raw, raw_input, group)
        calculated_scores[subscore.name] = score
        percentiles[subscore.name] = percentile
        classifications[subscore.name] = label

    result = CalculatedResult(
        test_code=definition.code,
        scoring_model=definition.scoring_model,
        raw_scores=raw_scores,
        calculated_scores=calculated_scores,
        percentiles=percentiles,
        classifications=classifications,
        notes=raw_input.notes,
    )
    logger.debug("%s: scored %s", test_code, classifications)
    return result
