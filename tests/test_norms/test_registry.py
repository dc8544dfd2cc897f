"""Tests for the test definition catalogue."""

import pytest
from pydantic import ValidationError

from neuro_score.exceptions import UnknownTestError
from neuro_score.models.definitions import (
    AgeRange,
    DerivedScore,
    ScoringModel,
    SubscoreDefinition,
    TestDefinition,
)
from neuro_score import registry
from neuro_score.registry import find_test, get_table, get_test, list_tests


class TestCatalogue:
    def test_all_codes_registered(self):
        codes = {d.code for d in list_tests()}
        assert {
            "HAYLING_ADULTO",
            "TRILHAS",
            "TRILHAS_PRE_ESCOLAR",
            "TMT_ADULTO",
            "BNTBR",
            "CALC_FVA",
            "CALC_TFV",
            "CALC_TMT",
            "CALC_FPT_ADULTO",
            "CALC_HAYLING_INFANTIL",
            "CALC_BNTBR",
            "CALC_HAYLING_ADULTO",
            "CALC_TAYLOR",
            "CALC_TOM",
            "CALC_FAS",
            "CALC_SPAN_DIGITOS",
            "CALC_CUBOS_CORSI",
            "FDT",
            "RAVLT",
            "BPA2",
            "PCFO",
            "TSBC",
            "FVA",
            "HAYLING_INFANTIL",
            "FPT_INFANTIL",
            "FPT_ADULTO",
            "TFV",
            "TIN",
            "TRPP",
            "TAYLOR",
            "TOM",
            "FAS",
        } <= codes

    def test_get_unknown_raises(self):
        with pytest.raises(UnknownTestError) as exc_info:
            get_test("NOPE")
        assert exc_info.value.test_code == "NOPE"
        assert isinstance(exc_info.value, KeyError)

    def test_find_unknown_returns_none(self):
        assert find_test("NOPE") is None

    def test_hayling_definition(self):
        hayling = get_test("HAYLING_ADULTO")
        assert hayling.scoring_model == ScoringModel.PERCENTILE
        assert hayling.requires_education
        assert hayling.subscore_names == ["tempoA", "tempoB", "errosB", "inibiçãoBA"]
        assert hayling.get_subscore("inibiçãoBA").derived.operands == ("tempoB", "tempoA")

    def test_tests_for_age(self):
        codes = {d.code for d in registry.tests_for_age(5)}
        assert "TRILHAS_PRE_ESCOLAR" in codes
        assert "CALC_TOM" in codes
        assert "TRILHAS" not in codes

    def test_every_normed_subscore_has_a_table(self):
        for definition in list_tests():
            for subscore in definition.subscores:
                if not registry.needs_table(subscore):
                    continue
                assert get_table(definition.code, subscore.name) is not None, (
                    definition.code,
                    subscore.name,
                )


class TestDefinitionModels:
    def test_age_range_order(self):
        with pytest.raises(ValidationError):
            AgeRange(min_age=10, max_age=5)

    def test_derived_subscore_needs_declared_inputs(self):
        with pytest.raises(ValidationError):
            TestDefinition(
                code="X",
                name="X",
                full_name="X",
                valid_age_range=AgeRange(min_age=1, max_age=2),
                scoring_model=ScoringModel.NORMATIVE_TABLE,
                input_fields=("a",),
                subscores=(
                    SubscoreDefinition(
                        name="diff", label="Diff", derived=DerivedScore.difference("b", "a")
                    ),
                ),
            )

    def test_duplicate_subscores_rejected(self):
        with pytest.raises(ValidationError):
            TestDefinition(
                code="X",
                name="X",
                full_name="X",
                valid_age_range=AgeRange(min_age=1, max_age=2),
                scoring_model=ScoringModel.NORMATIVE_TABLE,
                input_fields=("a",),
                subscores=(
                    SubscoreDefinition(name="a", label="A"),
                    SubscoreDefinition(name="a", label="A again"),
                ),
            )

    def test_mean_without_sd_rejected(self):
        with pytest.raises(ValidationError):
            SubscoreDefinition(name="z", label="Z", mean_field="media")

    def test_derived_operations(self):
        total = DerivedScore.total("a", "b", "c")
        assert total.compute({"a": 1, "b": 2, "c": 3}) == 6
        shifted = DerivedScore.shifted("rec", -35)
        assert shifted.compute({"rec": 49}) == 14
        weighted = DerivedScore.linear({"et": 1, "a1": -5})
        assert weighted.compute({"et": 56, "a1": 7}) == 21

    def test_ratio_with_zero_denominator(self):
        ratio = DerivedScore.ratio("a7", "a6")
        assert ratio.compute({"a7": 6, "a6": 12}) == 0.5
        assert ratio.compute({"a7": 6, "a6": 0}) is None

    def test_ratio_takes_two_operands(self):
        with pytest.raises(ValidationError):
            DerivedScore(operation="ratio", operands=("a", "b", "c"))

    def test_group_field_must_be_an_input(self):
        with pytest.raises(ValidationError):
            TestDefinition(
                code="X",
                name="X",
                full_name="X",
                valid_age_range=AgeRange(min_age=1, max_age=2),
                scoring_model=ScoringModel.NORMATIVE_TABLE,
                input_fields=("a",),
                subscores=(SubscoreDefinition(name="a", label="A"),),
                group_field="escola",
                groups=("publica", "privada"),
            )

    def test_entered_score_cannot_be_derived(self):
        with pytest.raises(ValidationError):
            SubscoreDefinition(
                name="ep", label="EP", entered=True, derived=DerivedScore.difference("a", "b")
            )


class TestNewBatteries:
    def test_grouped_tests_declare_their_groups(self):
        assert get_test("TSBC").groups == ("publica", "privada")
        assert get_test("HAYLING_INFANTIL").group_field == "tipoEscola"
        assert get_test("FPT_INFANTIL").groups == ("8-9", "10-11", "12-13", "14-15")
        assert get_test("PCFO").groups == ("infantil", "fundamental")

    def test_descriptive_measures_have_no_table(self):
        ravlt = get_test("RAVLT")
        assert [s.name for s in ravlt.subscores if not s.normed] == ["alt", "ve", "ip", "ir"]
        assert get_table("RAVLT", "ve") is None

    def test_entered_score_has_no_table(self):
        assert get_test("TIN").get_subscore("escorePadrao").entered
        assert get_table("TIN", "escorePadrao") is None

    def test_provisional_norms_flagged(self):
        assert get_test("TRILHAS").provisional_norms
        assert not get_test("TRILHAS_PRE_ESCOLAR").provisional_norms
