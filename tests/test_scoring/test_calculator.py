"""Tests for the score calculator."""

import pytest

from neuro_score.exceptions import UnknownTestError
from neuro_score.models.definitions import EducationLevel, ScoringModel
from neuro_score.models.results import NOT_CLASSIFIED, RawScoreInput
from neuro_score.scoring import calculate, severity_rank
from neuro_score.scoring.aggregator import quick_copy_text


def _input(age, education=None, **values):
    return RawScoreInput(subject_age=age, education_level=education, values=values)


class TestTrilhas:
    def test_derived_difference_is_looked_up(self, trilhas_input):
        result = calculate("TRILHAS", trilhas_input)

        assert result.scoring_model == ScoringModel.NORMATIVE_TABLE
        assert result.raw_scores == {"sequenciasA": 10, "sequenciasB": 8, "diferencaBA": -2}
        assert result.calculated_scores == {"sequenciasA": 80, "sequenciasB": 90, "diferencaBA": 89}
        assert result.classifications == {
            "sequenciasA": "Baixa",
            "sequenciasB": "Média",
            "diferencaBA": "Média",
        }
        assert result.percentiles["sequenciasA"] == 9
        assert result.is_fully_scored

    def test_deterministic(self, trilhas_input):
        assert calculate("TRILHAS", trilhas_input) == calculate("TRILHAS", trilhas_input)

    def test_string_values_are_coerced(self):
        result = calculate("TRILHAS", _input(8, sequenciasA=" 10 ", sequenciasB="8"))
        assert result.calculated_scores["diferencaBA"] == 89

    def test_malformed_field_leaves_siblings_scored(self):
        result = calculate("TRILHAS", _input(8, sequenciasA="abc", sequenciasB=8))

        assert result.raw_scores["sequenciasA"] is None
        assert result.raw_scores["diferencaBA"] is None
        assert result.classifications["sequenciasA"] == NOT_CLASSIFIED
        assert result.classifications["diferencaBA"] == NOT_CLASSIFIED
        assert result.calculated_scores["sequenciasB"] == 90
        assert result.unscored == ["sequenciasA", "diferencaBA"]

    def test_out_of_range_value_is_unscored(self):
        result = calculate("TRILHAS", _input(8, sequenciasA=30, sequenciasB=8))
        assert result.calculated_scores["sequenciasA"] is None
        assert result.calculated_scores["sequenciasB"] == 90

    def test_monotonic_in_raw_score(self):
        ranks = []
        for raw in range(0, 26):
            result = calculate("TRILHAS", _input(10, sequenciasA=raw, sequenciasB=10))
            ranks.append(severity_rank(result.classifications["sequenciasA"]))
        assert ranks == sorted(ranks)


class TestCompleteness:
    @pytest.mark.parametrize(
        "values",
        [
            {},
            {"sequenciasA": 10},
            {"sequenciasA": 10, "sequenciasB": None},
            {"sequenciasA": 10, "sequenciasB": "  "},
        ],
    )
    def test_incomplete_returns_none(self, values):
        raw_input = RawScoreInput(subject_age=8, values=values)
        assert calculate("TRILHAS", raw_input) is None
        assert calculate("TRILHAS", raw_input) is None

        completed = RawScoreInput(
            subject_age=8, values={**values, "sequenciasA": 10, "sequenciasB": 8}
        )
        result = calculate("TRILHAS", completed)
        assert result is not None
        assert result.is_fully_scored
        assert result.calculated_scores == {"sequenciasA": 80, "sequenciasB": 90, "diferencaBA": 89}

    def test_missing_education_is_incomplete(self):
        assert calculate("HAYLING_ADULTO", _input(30, tempoA=10, tempoB=40, errosB=5)) is None

    def test_unknown_test(self):
        with pytest.raises(UnknownTestError):
            calculate("NOPE", _input(30, x=1))


class TestPreSchool:
    def test_scores(self):
        result = calculate("TRILHAS_PRE_ESCOLAR", _input(5, sequenciasA=3, sequenciasB=10))
        assert result.calculated_scores == {"sequenciasA": 95, "sequenciasB": 136}
        assert result.classifications == {"sequenciasA": "Média", "sequenciasB": "Muito Alta"}

    def test_zero_sequences_not_classified(self):
        result = calculate("TRILHAS_PRE_ESCOLAR", _input(4, sequenciasA=0, sequenciasB=2))
        assert result.classifications["sequenciasA"] == NOT_CLASSIFIED
        assert result.calculated_scores["sequenciasB"] == 97


class TestHaylingAdulto:
    def test_percentiles_from_means(self, hayling_input):
        result = calculate("HAYLING_ADULTO", hayling_input)

        assert result.raw_scores["inibiçãoBA"] == 38.77
        assert result.calculated_scores["tempoA"] == 0.0
        assert result.calculated_scores["tempoB"] == 1.0
        assert result.calculated_scores["inibiçãoBA"] == 1.19
        assert result.percentiles == {"tempoA": 50, "tempoB": 16, "errosB": 50, "inibiçãoBA": 12}
        assert result.classifications["tempoA"] == "Média"
        assert result.classifications["tempoB"] == "Média Inferior"
        assert result.classifications["inibiçãoBA"] == "Média Inferior"

    def test_slower_is_worse(self):
        fast = calculate("HAYLING_ADULTO", _input(30, EducationLevel.MEDIO, tempoA=10, tempoB=20, errosB=2))
        slow = calculate("HAYLING_ADULTO", _input(30, EducationLevel.MEDIO, tempoA=30, tempoB=90, errosB=20))
        for name in ("tempoA", "tempoB", "errosB", "inibiçãoBA"):
            assert fast.percentiles[name] > slow.percentiles[name]


class TestTmtAdulto:
    def test_percentile_codes(self):
        result = calculate("TMT_ADULTO", _input(30, EducationLevel.MEDIO, tempoA="20", tempoB=60.5))
        assert result.raw_scores["tempoBA"] == 40.5
        assert result.percentiles["tempoA"] == ">95"
        assert result.classifications["tempoA"] == "Superior"
        assert result.calculated_scores["tempoA"] is None


class TestBntbr:
    def test_zscore_model(self):
        result = calculate("BNTBR", _input(30, acertos=25))
        assert result.calculated_scores == {"acertos": 0.31}
        assert result.percentiles == {"acertos": 62}
        assert result.classifications == {"acertos": "Médio"}


class TestManualCalculations:
    def test_zscore_boundary(self):
        result = calculate("CALC_FAS", _input(30, pontuacao="34,95", media=30, desvioPadrao="7,5"))
        assert result.calculated_scores == {"zScore": 0.66}
        assert result.classifications == {"zScore": "Médio Superior"}
        assert quick_copy_text(result) == "FAS: Z-Score 0,66, Classificação Médio Superior"

    def test_zero_sd_propagates_to_its_subscore_only(self):
        result = calculate(
            "CALC_SPAN_DIGITOS",
            _input(
                30,
                diretoPontuacao=6,
                diretoMedia=6,
                diretoDesvioPadrao=0,
                inversoPontuacao=5,
                inversoMedia=4,
                inversoDesvioPadrao=1,
            ),
        )
        assert result.calculated_scores["direto"] is None
        assert result.percentiles["direto"] is None
        assert result.classifications["direto"] == NOT_CLASSIFIED
        assert result.calculated_scores["inverso"] == 1.0
        assert result.classifications["inverso"] == "Médio Superior"

    @pytest.mark.parametrize(
        "percentil, expected",
        [("25-50", "Média"), ("40", "Média"), (95, "Superior"), ("≤5", "Inferior")],
    )
    def test_percentile_pass_through(self, percentil, expected):
        result = calculate("CALC_FVA", _input(30, percentil=percentil))
        assert result.classifications == {"percentil": expected}

    def test_code_kept_as_given(self):
        result = calculate("CALC_TFV", _input(8, percentil="5-25"))
        assert result.percentiles == {"percentil": "5-25"}
        assert result.calculated_scores == {"percentil": None}
        assert quick_copy_text(result) == "TFV: Percentil 5-25, Classificação Média Inferior"

    def test_unknown_code_not_classified(self):
        result = calculate("CALC_FVA", _input(30, percentil="30-60"))
        assert result.classifications == {"percentil": NOT_CLASSIFIED}

    def test_two_part_quick_copy(self):
        result = calculate(
            "CALC_TAYLOR",
            _input(
                30,
                copiaPontuacao=30,
                copiaMedia=30,
                copiaDesvioPadrao=3,
                reproducaoPontuacao=10,
                reproducaoMedia=16,
                reproducaoDesvioPadrao=4,
            ),
        )
        assert quick_copy_text(result) == (
            "Taylor: Cópia Z-Score 0, Classificação Médio; "
            "Reprodução da Memória Z-Score -1,50, Classificação Inferior"
        )

    def test_huge_score_does_not_raise(self):
        result = calculate("CALC_FAS", _input(30, pontuacao="1" + "0" * 30, media="0", desvioPadrao="1"))
        assert result.calculated_scores == {"zScore": 1e30}
        assert result.percentiles == {"zScore": 100}
        assert result.classifications == {"zScore": "Superior"}

    def test_overflowing_score_is_unscored(self):
        result = calculate("CALC_FAS", _input(30, pontuacao="9" * 400, media="0", desvioPadrao="1"))
        assert result.raw_scores["pontuacao"] is None
        assert result.calculated_scores == {"zScore": None}
        assert result.classifications == {"zScore": NOT_CLASSIFIED}

    def test_tiny_sd_overflow_is_unscored(self):
        result = calculate("CALC_FAS", _input(30, pontuacao=1e300, media=0, desvioPadrao=1e-300))
        assert result.calculated_scores == {"zScore": None}


class TestFdt:
    def test_percentiles_by_time(self):
        result = calculate(
            "FDT", _input(25, leitura=21, contagem=24, escolha=35, alternancia=90)
        )
        assert result.raw_scores["inibicao"] == 14
        assert result.raw_scores["flexibilidade"] == 69
        assert result.percentiles == {
            "leitura": 50,
            "contagem": 50,
            "escolha": 50,
            "alternancia": 1,
            "inibicao": 50,
            "flexibilidade": 1,
        }
        assert result.classifications["leitura"] == "Média"
        assert result.classifications["flexibilidade"] == "Inferior"

    def test_fastest_reading_capped(self):
        result = calculate("FDT", _input(25, leitura=15, contagem=24, escolha=35, alternancia=40))
        assert result.percentiles["leitura"] == 99
        assert result.classifications["leitura"] == "Superior"


@pytest.fixture
def ravlt_values():
    return {
        "a1": 7, "a2": 11, "a3": 12, "a4": 13, "a5": 13,
        "b1": 6, "a6": 12, "a7": 12, "rec": 49,
    }


class TestRavlt:
    def test_totals_and_ratios(self, ravlt_values):
        result = calculate("RAVLT", _input(25, **ravlt_values))

        assert result.raw_scores["escoreTotal"] == 56
        assert result.raw_scores["reconhecimento"] == 14
        assert result.raw_scores["alt"] == 21
        assert result.raw_scores["ve"] == 1
        assert result.raw_scores["ip"] == 0.86
        assert result.raw_scores["ir"] == 0.92
        assert result.percentiles["escoreTotal"] == 50
        assert result.percentiles["reconhecimento"] == 50
        assert result.percentiles["a1"] == 50

    def test_descriptive_measures_are_not_classified(self, ravlt_values):
        result = calculate("RAVLT", _input(25, **ravlt_values))
        assert set(result.classifications) == {
            "a1", "a2", "a3", "a4", "a5", "b1", "a6", "a7", "escoreTotal", "reconhecimento",
        }
        assert result.is_fully_scored

    def test_zero_denominator_leaves_ratio_empty(self, ravlt_values):
        result = calculate("RAVLT", _input(25, **{**ravlt_values, "a6": 0, "a7": 0}))
        assert result.raw_scores["ve"] is None
        assert result.raw_scores["ir"] == 0
        assert result.classifications["a6"] == "Inferior"


class TestBpa2:
    def test_general_attention_sums_subtests(self):
        result = calculate(
            "BPA2",
            _input(
                30,
                acAcertos=120, acErros=3, acOmissoes=2,
                adAcertos=100, adErros=5, adOmissoes=3,
                aaAcertos=145, aaErros=4, aaOmissoes=3,
            ),
        )
        assert result.raw_scores["ac"] == 115
        assert result.raw_scores["ad"] == 92
        assert result.raw_scores["aa"] == 138
        assert result.raw_scores["ag"] == 345
        assert result.percentiles == {"ac": 50, "ad": 50, "aa": 50, "ag": 50}

    def test_negative_score_gets_lowest_percentile(self):
        result = calculate(
            "BPA2",
            _input(
                30,
                acAcertos=10, acErros=15, acOmissoes=5,
                adAcertos=100, adErros=5, adOmissoes=3,
                aaAcertos=145, aaErros=4, aaOmissoes=3,
            ),
        )
        assert result.raw_scores["ac"] == -10
        assert result.percentiles["ac"] == 1
        assert result.classifications["ac"] == "Inferior"


class TestNormGroups:
    def test_schooling_selects_the_table(self):
        infantil = calculate("PCFO", _input(6, escolaridade="infantil", acertos=19))
        fundamental = calculate("PCFO", _input(6, escolaridade=" Fundamental ", acertos=19))
        assert infantil.calculated_scores == {"acertos": 143}
        assert infantil.classifications == {"acertos": "Muito Alta"}
        assert fundamental.calculated_scores == {"acertos": 100}
        assert fundamental.classifications == {"acertos": "Média"}

    def test_unknown_group_not_classified(self):
        result = calculate("PCFO", _input(8, escolaridade="medio", acertos=19))
        assert result.raw_scores["escolaridade"] is None
        assert result.calculated_scores == {"acertos": None}
        assert result.classifications == {"acertos": NOT_CLASSIFIED}

    def test_group_without_norms_for_age(self):
        result = calculate("PCFO", _input(8, escolaridade="infantil", acertos=19))
        assert result.classifications == {"acertos": NOT_CLASSIFIED}

    def test_tsbc_extrapolates_past_the_table(self):
        result = calculate("TSBC", _input(10, tipoEscola="privada", ordemDireta=3, ordemInversa=3))
        assert result.calculated_scores == {"ordemDireta": 40, "ordemInversa": 69}
        assert result.classifications == {"ordemDireta": "Muito Baixa", "ordemInversa": "Muito Baixa"}

    def test_tsbc_keeps_published_dip(self):
        result = calculate("TSBC", _input(8, tipoEscola="publica", ordemDireta=3, ordemInversa=16))
        assert result.calculated_scores == {"ordemDireta": 63, "ordemInversa": 324}

    def test_tsbc_extrapolation_is_clamped(self):
        result = calculate("TSBC", _input(8, tipoEscola="publica", ordemDireta=16, ordemInversa=0))
        assert result.calculated_scores == {"ordemDireta": 160, "ordemInversa": 57}

    def test_hayling_school_type(self):
        privada = calculate(
            "HAYLING_INFANTIL", _input(9, tipoEscola="privada", tempoA=20, tempoB=40, errosB=1)
        )
        publica = calculate(
            "HAYLING_INFANTIL", _input(9, tipoEscola="publica", tempoA=20, tempoB=40, errosB=1)
        )
        assert privada.raw_scores["inibicaoBA"] == 20
        assert privada.percentiles["tempoA"] == 5
        assert publica.percentiles["tempoA"] == 25
        assert privada.percentiles["errosB"] == 95

    def test_hayling_slowest_gets_floor(self):
        result = calculate(
            "HAYLING_INFANTIL", _input(9, tipoEscola="privada", tempoA=40, tempoB=40, errosB=1)
        )
        assert result.percentiles["tempoA"] == 2
        assert result.classifications["tempoA"] == "Inferior"

    def test_fpt_school_year(self):
        result = calculate("FPT_INFANTIL", _input(10, anoEscolar="10-11", total=26))
        assert result.percentiles == {"total": 67}
        assert calculate("FPT_INFANTIL", _input(10, anoEscolar="10-11", total=5)).percentiles == {"total": 1}
        assert calculate("FPT_INFANTIL", _input(10, anoEscolar="16-17", total=26)).classifications == {
            "total": NOT_CLASSIFIED
        }

    def test_tfv_exact_anchor_and_range(self):
        exact = calculate("TFV", _input(8, tipoEscola="privada", livre=41, fonemica=13, semantica=13))
        between = calculate("TFV", _input(8, tipoEscola="privada", livre=43, fonemica=30, semantica=3))
        assert exact.percentiles == {"livre": "50", "fonemica": "50", "semantica": "50"}
        assert exact.classifications["livre"] == "Média"
        assert between.percentiles == {"livre": "50-75", "fonemica": ">95", "semantica": "<5"}
        assert between.classifications == {
            "livre": "Média",
            "fonemica": "Superior",
            "semantica": "Inferior",
        }


class TestFva:
    def test_adult_ranges(self):
        result = calculate("FVA", _input(30, animais=20, frutas=25, pares=3))
        assert result.percentiles == {"animais": "50-75", "frutas": ">95", "pares": "<5"}
        assert result.classifications == {"animais": "Média", "frutas": "Superior", "pares": "Inferior"}

    def test_children_normed_on_animals_only(self):
        result = calculate("FVA", _input(8, animais=12, frutas=10, pares=4))
        assert result.percentiles["animais"] == "50-75"
        assert result.classifications["frutas"] == NOT_CLASSIFIED
        assert result.classifications["pares"] == NOT_CLASSIFIED
        assert result.unscored == ["frutas", "pares"]


class TestTotalsAndEnteredScores:
    def test_trpp_total(self):
        result = calculate("TRPP", _input(7, palavras=5, pseudopalavras=5))
        assert result.raw_scores["total"] == 10
        assert result.calculated_scores == {"total": 142}
        assert result.classifications == {"total": "Muito Alta"}

    def test_trpp_untabled_total(self):
        result = calculate("TRPP", _input(7, palavras=0, pseudopalavras=1))
        assert result.classifications == {"total": NOT_CLASSIFIED}

    def test_tin_entered_standard_score(self):
        result = calculate("TIN", _input(9, acertos=40, escorePadrao="92"))
        assert result.raw_scores["acertos"] == 40
        assert result.calculated_scores == {"escorePadrao": 92}
        assert result.percentiles == {"escorePadrao": 30}
        assert result.classifications == {"escorePadrao": "Média"}

    def test_fas_total(self):
        result = calculate("FAS", _input(30, letraF=15, letraA=12, letraS=16))
        assert result.raw_scores["total"] == 43
        assert result.calculated_scores == {"total": -0.05}
        assert result.percentiles == {"total": 48}
        assert quick_copy_text(result) == "FAS: Percentil 48, Classificação Média"

    def test_taylor_means(self):
        result = calculate("TAYLOR", _input(30, copia=34.86, reproducaoMemoria=18.70))
        assert result.calculated_scores == {"copia": 0.0, "reproducaoMemoria": -1.0}
        assert result.percentiles == {"copia": 50, "reproducaoMemoria": 16}
        assert result.classifications == {"copia": "Média", "reproducaoMemoria": "Média Inferior"}

    def test_tom(self):
        result = calculate("TOM", _input(4, total=12))
        assert result.calculated_scores == {"total": 0.98}
        assert result.classifications == {"total": "Média Superior"}
