"""Tests for CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from neuro_score.cli import commands
from neuro_score.cli.commands import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Keep rich from wrapping tables and JSON at the default 80 columns."""
    monkeypatch.setattr(commands.console, "width", 200)


class TestTestsCommand:
    def test_lists_all(self):
        result = runner.invoke(app, ["tests"])
        assert result.exit_code == 0
        assert "HAYLING_ADULTO" in result.stdout

    def test_filter_by_age(self):
        result = runner.invoke(app, ["tests", "--age", "5"])
        assert result.exit_code == 0
        assert "TRILHAS_PRE_ESCOLAR" in result.stdout
        assert "HAYLING_ADULTO" not in result.stdout


class TestEligibilityCommand:
    def test_eligible(self):
        result = runner.invoke(app, ["eligibility", "HAYLING_ADULTO", "19"])
        assert result.exit_code == 0
        assert "Elegível" in result.stdout
        assert "Adultos de 19 a 39 anos" in result.stdout

    def test_not_eligible(self):
        result = runner.invoke(app, ["eligibility", "HAYLING_ADULTO", "18"])
        assert result.exit_code == 2
        assert "19 a 75 anos" in result.stdout

    def test_unknown_test(self):
        result = runner.invoke(app, ["eligibility", "NOPE", "30"])
        assert result.exit_code == 1
        assert "Unknown test code" in result.stdout


class TestScoreCommand:
    def test_json_output(self):
        result = runner.invoke(
            app,
            ["score", "TRILHAS", "--age", "8", "-v", "sequenciasA=10", "-v", "sequenciasB=8", "--json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["raw_scores"]["diferencaBA"] == -2
        assert data["calculated_scores"]["diferencaBA"] == 89

    def test_table_output(self):
        result = runner.invoke(
            app,
            ["score", "CALC_FAS", "--age", "30", "-v", "pontuacao=34,95", "-v", "media=30", "-v", "desvioPadrao=7,5"],
        )
        assert result.exit_code == 0
        assert "Médio Superior" in result.stdout

    def test_education_option(self):
        result = runner.invoke(
            app,
            [
                "score", "TMT_ADULTO", "--age", "30", "--education", "9-11",
                "-v", "tempoA=20", "-v", "tempoB=60", "--json",
            ],
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["percentiles"]["tempoA"] == ">95"

    def test_provisional_norms_noted(self):
        result = runner.invoke(
            app, ["score", "TRILHAS", "--age", "8", "-v", "sequenciasA=10", "-v", "sequenciasB=8"]
        )
        assert result.exit_code == 0
        assert "normas provisórias" in result.stdout

    def test_published_norms_not_noted(self):
        result = runner.invoke(
            app, ["score", "TRILHAS_PRE_ESCOLAR", "--age", "5", "-v", "sequenciasA=3", "-v", "sequenciasB=10"]
        )
        assert result.exit_code == 0
        assert "normas provisórias" not in result.stdout

    def test_descriptive_rows(self):
        result = runner.invoke(
            app,
            [
                "score", "TRPP", "--age", "7", "-v", "palavras=5", "-v", "pseudopalavras=5",
            ],
        )
        assert result.exit_code == 0
        assert "Pseudopalavras" in result.stdout
        assert "TRPP: Escore Padrão 142, Classificação Muito Alta" in result.stdout

    def test_school_type_value(self):
        result = runner.invoke(
            app,
            [
                "score", "TSBC", "--age", "8", "-v", "tipoEscola=publica",
                "-v", "ordemDireta=3", "-v", "ordemInversa=16", "--json",
            ],
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["calculated_scores"] == {"ordemDireta": 63, "ordemInversa": 324}

    def test_incomplete(self):
        result = runner.invoke(app, ["score", "TRILHAS", "--age", "8", "-v", "sequenciasA=10"])
        assert result.exit_code == 1
        assert "sequenciasB" in result.stdout

    def test_ineligible(self):
        result = runner.invoke(app, ["score", "TRILHAS", "--age", "20", "-v", "sequenciasA=10"])
        assert result.exit_code == 2

    def test_bad_value_syntax(self):
        result = runner.invoke(app, ["score", "TRILHAS", "--age", "8", "-v", "sequenciasA"])
        assert result.exit_code == 1


class TestCalculatorCommands:
    def test_zscore(self):
        result = runner.invoke(app, ["zscore", "34,95", "30", "7,5"])
        assert result.exit_code == 0
        assert "Z-Score 0,66" in result.stdout
        assert "Médio Superior" in result.stdout

    def test_zscore_zero_sd(self):
        result = runner.invoke(app, ["zscore", "10", "10", "0"])
        assert result.exit_code == 1

    def test_percentile_code(self):
        result = runner.invoke(app, ["percentile", "25-50"])
        assert result.exit_code == 0
        assert "Classificação Média" in result.stdout

    def test_validate_norms(self):
        result = runner.invoke(app, ["validate-norms"])
        assert result.exit_code == 0
        assert "tabelas normativas válidas" in result.stdout
