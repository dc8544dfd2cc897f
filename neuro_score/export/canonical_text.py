"""Plain-text rendering of stored results for pasting into reports.

The block is byte-stable: the same result, names and timezone always
produce the same text.

    TESTE: Trilhas A e B
    Paciente: Ana Souza (8 anos)
    Data: 14/03/2025
    Aplicador: Dra. Marta Lima
    ATENÇÃO: normas provisórias, confira com o manual antes de usar.
    RESULTADOS:
    --------------------------------------------------------------------
    Variável                | Bruto | Escore | Percentil | Classificação
    --------------------------------------------------------------------
    Sequências A            |    10 |     80 |         9 | Baixa
    ...
    --------------------------------------------------------------------
    OBSERVAÇÕES:
    Colaborativa.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from neuro_score.export.formatting import EMPTY, format_date, format_number
from neuro_score.history.reader import UNKNOWN_APPLIER, order_history, subscore_rows
from neuro_score.models.results import PersistedTestResult
from neuro_score.registry import find_test

PROVISIONAL_NOTICE = "ATENÇÃO: normas provisórias, confira com o manual antes de usar."

NAME_WIDTH = 23
RAW_WIDTH = 5
SCORE_WIDTH = 6
PERCENTILE_WIDTH = 9

HEADER = " | ".join([
    "Variável".ljust(NAME_WIDTH),
    "Bruto".rjust(RAW_WIDTH),
    "Escore".rjust(SCORE_WIDTH),
    "Percentil".rjust(PERCENTILE_WIDTH),
    "Classificação",
])
RULE = "-" * len(HEADER)


def _row(label: str, raw: str, score: str, percentile: str, classification: str) -> str:
    return " | ".join([
        label.ljust(NAME_WIDTH),
        raw.rjust(RAW_WIDTH),
        score.rjust(SCORE_WIDTH),
        percentile.rjust(PERCENTILE_WIDTH),
        classification,
    ])


def to_canonical_text(
    result: PersistedTestResult,
    subject_name: str,
    applier_names: Optional[Mapping[str, str]] = None,
    tz: Optional[str] = None,
) -> str:
    """Render one stored result as the canonical text block.

    Args:
        result: The stored test result.
        subject_name: Display name of the subject.
        applier_names: Mapping from ``applied_by`` ids to display names.
        tz: IANA timezone for the date; defaults to the configured one.
    """
    lines = [
        f"TESTE: {result.test_name}",
        f"Paciente: {subject_name} ({result.patient_age} anos)",
        f"Data: {format_date(result.applied_at, tz)}",
    ]
    if result.applied_by:
        names = applier_names or {}
        lines.append(f"Aplicador: {names.get(result.applied_by, UNKNOWN_APPLIER)}")

    definition = find_test(result.test_code)
    if definition is not None and definition.provisional_norms:
        lines.append(PROVISIONAL_NOTICE)

    lines.extend(["RESULTADOS:", RULE, HEADER, RULE])
    for row in subscore_rows(result):
        lines.append(_row(
            row.label,
            format_number(row.raw),
            format_number(row.score),
            format_number(row.percentile),
            row.classification or EMPTY,
        ))
    lines.append(RULE)

    if result.notes:
        lines.extend(["OBSERVAÇÕES:", result.notes])
    return "\n".join(lines)


def render_history(
    results: Iterable[PersistedTestResult],
    subject_name: str,
    applier_names: Optional[Mapping[str, str]] = None,
    tz: Optional[str] = None,
) -> str:
    """Render several results newest first, separated by a blank line."""
    return "\n\n".join(
        to_canonical_text(result, subject_name, applier_names, tz)
        for result in order_history(results)
    )
