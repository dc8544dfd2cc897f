"""Reading a subject's stored results for display."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Mapping, Optional, Union

from neuro_score.models.results import NOT_CLASSIFIED, PersistedTestResult
from neuro_score.registry import find_test

Value = Optional[Union[int, float, str]]

UNKNOWN_APPLIER = "Desconhecido"


@dataclass(frozen=True)
class SubscoreRow:
    name: str
    label: str
    raw: Value
    score: Value
    percentile: Value
    classification: Optional[str]


@dataclass(frozen=True)
class HistoryEntry:
    """A stored result with its resolved applier and headline subscore."""

    result: PersistedTestResult
    applier_name: Optional[str]
    main_subscore: Optional[str]
    main_score: Value
    main_classification: str
    rows: tuple[SubscoreRow, ...]


def _sort_key(result: PersistedTestResult) -> datetime:
    applied_at = result.applied_at
    if applied_at.tzinfo is None:
        applied_at = applied_at.replace(tzinfo=timezone.utc)
    return applied_at


def order_history(results: Iterable[PersistedTestResult]) -> list[PersistedTestResult]:
    """Newest first; results applied at the same instant keep their input order."""
    return sorted(results, key=_sort_key, reverse=True)


def _stored_keys(result: PersistedTestResult) -> list[str]:
    keys: list[str] = []
    for mapping in (result.classifications, result.calculated_scores, result.percentiles):
        for key in mapping:
            if key not in keys:
                keys.append(key)
    return keys


def subscore_rows(result: PersistedTestResult) -> list[SubscoreRow]:
    """Rows for a result, using its own test's subscores.

    Results whose test code is no longer registered fall back to the keys
    stored with them.
    """
    definition = find_test(result.test_code)
    if definition is None:
        return [
            SubscoreRow(
                name=key,
                label=key,
                raw=result.raw_scores.get(key),
                score=result.calculated_scores.get(key),
                percentile=result.percentiles.get(key),
                classification=result.classifications.get(key),
            )
            for key in _stored_keys(result)
        ]

    rows = []
    for subscore in definition.subscores:
        rows.append(SubscoreRow(
            name=subscore.name,
            label=subscore.label,
            raw=result.raw_scores.get(subscore.raw_key),
            score=result.calculated_scores.get(subscore.name),
            percentile=result.percentiles.get(subscore.name),
            classification=result.classifications.get(subscore.name),
        ))
    return rows


def summarize_history(
    results: Iterable[PersistedTestResult],
    applier_names: Optional[Mapping[str, str]] = None,
) -> list[HistoryEntry]:
    """Build display entries for a subject's results, newest first."""
    names = applier_names or {}
    entries = []
    for result in order_history(results):
        rows = tuple(subscore_rows(result))
        definition = find_test(result.test_code)
        main = definition.main_subscore if definition else None
        if main is None and rows:
            main = rows[0].name
        entries.append(HistoryEntry(
            result=result,
            applier_name=names.get(result.applied_by, UNKNOWN_APPLIER) if result.applied_by else None,
            main_subscore=main,
            main_score=result.calculated_scores.get(main) if main else None,
            main_classification=result.classifications.get(main, NOT_CLASSIFIED) if main else NOT_CLASSIFIED,
            rows=rows,
        ))
    return entries
