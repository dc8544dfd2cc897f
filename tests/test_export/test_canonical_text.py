"""Tests for the canonical text export."""

import uuid
from datetime import datetime, timezone

from neuro_score.export import format_date, format_number, render_history, to_canonical_text
from neuro_score.models.results import PersistedTestResult, RawScoreInput
from neuro_score.scoring import calculate
from neuro_score.scoring.aggregator import build_persisted_result

CLIENT_ID = uuid.UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaaa")
APPLIER_ID = "bbbbbbbb-bbbb-bbbb-bbbb-bbbbbbbbbbbb"

RULE = "-" * 68


class TestFormatting:
    def test_numbers(self):
        assert format_number(None) == "-"
        assert format_number(80) == "80"
        assert format_number(-2.0) == "-2"
        assert format_number(0.655) == "0,66"
        assert format_number(1.5) == "1,50"
        assert format_number(">95") == ">95"

    def test_date_in_report_timezone(self):
        late_evening = datetime(2025, 3, 15, 2, 30, tzinfo=timezone.utc)
        assert format_date(late_evening) == "14/03/2025"
        assert format_date(late_evening, "UTC") == "15/03/2025"

    def test_naive_dates_are_utc(self):
        assert format_date(datetime(2025, 3, 15, 2, 30)) == "14/03/2025"


class TestCanonicalText:
    def test_full_block(self, trilhas_record):
        text = to_canonical_text(trilhas_record, "Ana Souza", {APPLIER_ID: "Dra. Marta Lima"})

        assert text.split("\n") == [
            "TESTE: Trilhas A e B",
            "Paciente: Ana Souza (8 anos)",
            "Data: 14/03/2025",
            "Aplicador: Dra. Marta Lima",
            "ATENÇÃO: normas provisórias, confira com o manual antes de usar.",
            "RESULTADOS:",
            RULE,
            "Variável" + " " * 15 + " | Bruto | Escore | Percentil | Classificação",
            RULE,
            "Sequências A" + " " * 11 + " |    10 |     80 |         9 | Baixa",
            "Sequências B" + " " * 11 + " |     8 |     90 |        25 | Média",
            "Diferença B-A" + " " * 10 + " |    -2 |     89 |        23 | Média",
            RULE,
            "OBSERVAÇÕES:",
            "Colaborativa.",
        ]

    def test_stable(self, trilhas_record):
        names = {APPLIER_ID: "Dra. Marta Lima"}
        assert to_canonical_text(trilhas_record, "Ana", names) == to_canonical_text(
            trilhas_record, "Ana", names
        )

    def test_published_norms_have_no_notice(self, make_record):
        text = to_canonical_text(make_record(datetime(2025, 1, 10, 12, tzinfo=timezone.utc)), "Ana")
        assert "ATENÇÃO" not in text

    def test_descriptive_rows_show_raw_only(self):
        result = calculate(
            "RAVLT",
            RawScoreInput(
                subject_age=25,
                values={
                    "a1": 7, "a2": 11, "a3": 12, "a4": 13, "a5": 13,
                    "b1": 6, "a6": 12, "a7": 12, "rec": 49,
                },
            ),
        )
        record = build_persisted_result(
            result,
            client_id=CLIENT_ID,
            patient_age=25,
            applied_at=datetime(2025, 3, 14, 15, tzinfo=timezone.utc),
        )
        lines = to_canonical_text(record, "Ana").split("\n")
        ratio_row = next(line for line in lines if line.startswith("Interferência Proativa"))
        assert ratio_row.endswith(" |  0,86 |      - |         - | -")

    def test_unresolved_applier(self, trilhas_record):
        text = to_canonical_text(trilhas_record, "Ana")
        assert "Aplicador: Desconhecido" in text

    def test_without_applier_or_notes(self, trilhas_record):
        record = trilhas_record.model_copy(update={"applied_by": None, "notes": None})
        text = to_canonical_text(record, "Ana")
        assert "Aplicador" not in text
        assert "OBSERVAÇÕES" not in text
        assert text.endswith(RULE)

    def test_unknown_test_uses_stored_keys(self):
        record = PersistedTestResult(
            client_id=CLIENT_ID,
            test_code="RETIRED_TEST",
            test_name="Teste Antigo",
            patient_age=40,
            calculated_scores={"total": 1.25},
            percentiles={"total": 89},
            classifications={"total": "Médio Superior"},
            applied_at=datetime(2020, 6, 1, 12, tzinfo=timezone.utc),
        )
        lines = to_canonical_text(record, "Ana").split("\n")
        assert lines[-2] == "total" + " " * 18 + " |     - |   1,25 |        89 | Médio Superior"


class TestRenderHistory:
    def test_newest_first(self, make_record):
        old = make_record(datetime(2024, 1, 10, 12, tzinfo=timezone.utc))
        new = make_record(datetime(2025, 1, 10, 12, tzinfo=timezone.utc), pontuacao=30)

        text = render_history([old, new], "Ana")
        blocks = text.split("\n\n")
        assert len(blocks) == 2
        assert "Data: 10/01/2025" in blocks[0]
        assert "Data: 10/01/2024" in blocks[1]
