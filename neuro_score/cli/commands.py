"""CLI commands for the neuro scoring engine."""

from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from neuro_score.config import get_settings
from neuro_score.exceptions import NeuroScoreError
from neuro_score.export.canonical_text import PROVISIONAL_NOTICE
from neuro_score.export.formatting import EMPTY, format_number
from neuro_score.models.definitions import EducationLevel
from neuro_score.models.results import RawScoreInput
from neuro_score.numeric import z_score, z_to_percentile
from neuro_score.registry import build_registry, find_test, list_tests, tests_for_age
from neuro_score.scoring import (
    age_band_name,
    calculate,
    check_eligibility,
    classify_percentile,
    classify_zscore,
)
from neuro_score.scoring.aggregator import quick_copy_text
from neuro_score.scoring.coercion import parse_numeric

app = typer.Typer(
    name="neuro-score",
    help="Normative scoring of neuropsychological tests",
    add_completion=False,
)
console = Console()


def _require_test(test_code: str):
    definition = find_test(test_code)
    if definition is None:
        console.print(f"[red]Unknown test code: {test_code}[/red]")
        raise typer.Exit(1)
    return definition


def _parse_values(values: list[str]) -> dict[str, str]:
    parsed = {}
    for item in values:
        field, sep, value = item.partition("=")
        if not sep or not field:
            console.print(f"[red]Invalid value {item!r}; use field=value[/red]")
            raise typer.Exit(1)
        parsed[field.strip()] = value
    return parsed


@app.command()
def tests(
    age: Optional[float] = typer.Option(None, "--age", "-a", help="Only tests normed for this age"),
):
    """List the registered tests."""
    definitions = list_tests() if age is None else tests_for_age(age)

    table = Table(title="Testes")
    table.add_column("Código")
    table.add_column("Nome")
    table.add_column("Idades")
    table.add_column("Modelo")
    for definition in definitions:
        table.add_row(
            definition.code,
            definition.name,
            definition.valid_age_range.label,
            definition.scoring_model.value,
        )
    console.print(table)


@app.command()
def eligibility(
    test_code: str = typer.Argument(..., help="Test code, e.g. TRILHAS"),
    age: float = typer.Argument(..., help="Subject age in years"),
):
    """Check whether a test is normed for an age."""
    _require_test(test_code)
    status = check_eligibility(test_code, age)
    if status.eligible:
        band = age_band_name(test_code, age)
        suffix = f" ({band})" if band else ""
        console.print(f"[green]Elegível[/green]{suffix}")
    else:
        console.print(f"[yellow]{status.message}[/yellow]")
        raise typer.Exit(2)


@app.command()
def score(
    test_code: str = typer.Argument(..., help="Test code, e.g. TRILHAS"),
    age: float = typer.Option(..., "--age", "-a", help="Subject age in years"),
    education: Optional[EducationLevel] = typer.Option(None, "--education", "-e", help="Education level"),
    value: list[str] = typer.Option([], "--value", "-v", help="Raw value as field=value"),
    output_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Score raw values for a test."""
    definition = _require_test(test_code)
    status = check_eligibility(test_code, age)
    if not status.eligible:
        console.print(f"[yellow]{status.message}[/yellow]")
        raise typer.Exit(2)

    raw_input = RawScoreInput(
        subject_age=age, education_level=education, values=_parse_values(value)
    )
    result = calculate(test_code, raw_input)
    if result is None:
        missing = [f for f in definition.input_fields if f not in raw_input.values]
        if definition.requires_education and education is None:
            missing.append("--education")
        console.print(f"[yellow]Entrada incompleta. Faltando: {', '.join(missing)}[/yellow]")
        raise typer.Exit(1)

    if output_json:
        console.print(result.model_dump_json(indent=2))
        return

    table = Table(title=f"{definition.name} - {age_band_name(test_code, age) or definition.valid_age_range.label}")
    table.add_column("Variável")
    table.add_column("Bruto", justify="right")
    table.add_column("Escore", justify="right")
    table.add_column("Percentil", justify="right")
    table.add_column("Classificação")
    for subscore in definition.subscores:
        table.add_row(
            subscore.label,
            format_number(result.raw_scores.get(subscore.raw_key)),
            format_number(result.calculated_scores.get(subscore.name)),
            format_number(result.percentiles.get(subscore.name)),
            result.classifications.get(subscore.name, EMPTY),
        )
    console.print(table)
    if definition.provisional_norms:
        console.print(f"[yellow]{PROVISIONAL_NOTICE}[/yellow]")
    console.print(Panel(quick_copy_text(result), title="Resumo"))


@app.command()
def zscore(
    raw: str = typer.Argument(..., help="Raw score"),
    mean: str = typer.Argument(..., help="Normative mean"),
    sd: str = typer.Argument(..., help="Normative standard deviation"),
):
    """Z-score, percentile and classification from a mean and SD."""
    numbers = [parse_numeric(v) for v in (raw, mean, sd)]
    if any(n is None for n in numbers):
        console.print("[red]Valores numéricos inválidos[/red]")
        raise typer.Exit(1)
    z = z_score(*numbers)
    if z is None:
        console.print("[red]O desvio padrão deve ser diferente de zero[/red]")
        raise typer.Exit(1)
    console.print(
        f"Z-Score {format_number(z)} | Percentil {z_to_percentile(z)} | "
        f"Classificação {classify_zscore(z)}"
    )


@app.command()
def percentile(
    value: str = typer.Argument(..., help="Percentile or range code, e.g. 40 or 25-50"),
):
    """Classify a percentile or percentile range."""
    console.print(f"Percentil {value.strip()} | Classificação {classify_percentile(value)}")


@app.command("validate-norms")
def validate_norms():
    """Validate every normative table."""
    try:
        registry = build_registry(validate=True)
    except NeuroScoreError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print(
        f"[green]{len(registry.tables)} tabelas normativas válidas "
        f"para {len(registry.definitions)} testes[/green]"
    )


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Host to bind"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to bind"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
):
    """Start the REST API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port
    console.print(f"Starting neuro-score API server on {host}:{port}")
    uvicorn.run(
        "neuro_score.api.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )
