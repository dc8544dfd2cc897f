"""Catalogue of test definitions and their normative tables.

The registry is built once, validated, and shared read-only by every
scoring call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from neuro_score.config import get_settings
from neuro_score.exceptions import NormativeDataError, UnknownTestError
from neuro_score.models.definitions import (
    AgeRange,
    DerivedScore,
    Direction,
    ScoringModel,
    SubscoreDefinition,
    TestDefinition,
)
from neuro_score.norms.data import (
    bntbr,
    bpa2,
    fas,
    fdt,
    fpt,
    fva,
    hayling_adulto,
    hayling_infantil,
    pcfo,
    ravlt,
    taylor,
    tfv,
    tmt_adulto,
    tom,
    trilhas,
    trilhas_pre_escolar,
    trpp,
    tsbc,
)
from neuro_score.norms.tables import AnyNormativeTable
from neuro_score.norms.validation import validate_table

logger = logging.getLogger(__name__)

LOWER = Direction.LOWER_IS_BETTER


HAYLING_ADULTO = TestDefinition(
    code="HAYLING_ADULTO",
    name="Hayling Adulto",
    full_name="Teste Hayling - Versão Adulto",
    description="Avalia iniciação e inibição de respostas verbais, controle inibitório e flexibilidade cognitiva.",
    valid_age_range=AgeRange(min_age=19, max_age=75),
    scoring_model=ScoringModel.PERCENTILE,
    input_fields=("tempoA", "tempoB", "errosB"),
    subscores=(
        SubscoreDefinition(name="tempoA", label="Parte A - Tempo", direction=LOWER, valid_range=(0, 600)),
        SubscoreDefinition(name="tempoB", label="Parte B - Tempo", direction=LOWER, valid_range=(0, 600)),
        SubscoreDefinition(name="errosB", label="Parte B - Erros", direction=LOWER, valid_range=(0, 45)),
        SubscoreDefinition(
            name="inibiçãoBA",
            label="Inibição B-A",
            derived=DerivedScore.difference("tempoB", "tempoA"),
            direction=LOWER,
        ),
    ),
    requires_education=True,
    main_subscore="inibiçãoBA",
)

TRILHAS = TestDefinition(
    code="TRILHAS",
    name="Trilhas A e B",
    full_name="Teste de Trilhas: Partes A e B",
    description="Avalia atenção, velocidade de processamento e flexibilidade cognitiva em crianças e adolescentes de 6 a 14 anos.",
    valid_age_range=AgeRange(min_age=6, max_age=14),
    scoring_model=ScoringModel.NORMATIVE_TABLE,
    input_fields=("sequenciasA", "sequenciasB"),
    subscores=(
        SubscoreDefinition(name="sequenciasA", label="Sequências A", valid_range=(0, 25)),
        SubscoreDefinition(name="sequenciasB", label="Sequências B", valid_range=(0, 24)),
        SubscoreDefinition(
            name="diferencaBA",
            label="Diferença B-A",
            derived=DerivedScore.difference("sequenciasB", "sequenciasA"),
        ),
    ),
    main_subscore="diferencaBA",
    provisional_norms=True,
)

TRILHAS_PRE_ESCOLAR = TestDefinition(
    code="TRILHAS_PRE_ESCOLAR",
    name="TT-P",
    full_name="Teste de Trilhas Pré-Escolares",
    description="Avalia atenção e flexibilidade cognitiva em crianças pré-escolares (4-6 anos).",
    valid_age_range=AgeRange(min_age=4, max_age=6),
    scoring_model=ScoringModel.NORMATIVE_TABLE,
    input_fields=("sequenciasA", "sequenciasB"),
    subscores=(
        SubscoreDefinition(name="sequenciasA", label="Sequências A", valid_range=(0, 5)),
        SubscoreDefinition(name="sequenciasB", label="Sequências B", valid_range=(0, 10)),
    ),
    main_subscore="sequenciasB",
)

TMT_ADULTO = TestDefinition(
    code="TMT_ADULTO",
    name="TMT Adulto",
    full_name="Teste de Trilhas - Versão Adulto",
    description="Avalia atenção, velocidade de processamento e flexibilidade cognitiva em adultos de 19 a 75 anos.",
    valid_age_range=AgeRange(min_age=19, max_age=75),
    scoring_model=ScoringModel.PERCENTILE,
    input_fields=("tempoA", "tempoB"),
    subscores=(
        SubscoreDefinition(name="tempoA", label="Parte A - Tempo", direction=LOWER, valid_range=(0, 900)),
        SubscoreDefinition(name="tempoB", label="Parte B - Tempo", direction=LOWER, valid_range=(0, 900)),
        SubscoreDefinition(
            name="tempoBA",
            label="Tempo B-A",
            derived=DerivedScore.difference("tempoB", "tempoA"),
            direction=LOWER,
        ),
    ),
    requires_education=True,
    main_subscore="tempoBA",
)

BNTBR = TestDefinition(
    code="BNTBR",
    name="BNT-BR",
    full_name="Teste de Nomeação de Boston - Versão Brasileira (30 itens)",
    description="Avalia a nomeação por confrontação visual.",
    valid_age_range=AgeRange(min_age=6, max_age=99),
    scoring_model=ScoringModel.ZSCORE,
    input_fields=("acertos",),
    subscores=(SubscoreDefinition(name="acertos", label="Total de Acertos", valid_range=(0, 30)),),
    main_subscore="acertos",
)

FDT = TestDefinition(
    code="FDT",
    name="FDT",
    full_name="Five Digit Test - Teste dos Cinco Dígitos",
    description="Avalia velocidade de processamento, atenção e funções executivas (inibição e flexibilidade).",
    valid_age_range=AgeRange(min_age=6, max_age=99),
    scoring_model=ScoringModel.PERCENTILE,
    input_fields=("leitura", "contagem", "escolha", "alternancia"),
    subscores=(
        SubscoreDefinition(name="leitura", label="Leitura", direction=LOWER, valid_range=(0, 600)),
        SubscoreDefinition(name="contagem", label="Contagem", direction=LOWER, valid_range=(0, 600)),
        SubscoreDefinition(name="escolha", label="Escolha", direction=LOWER, valid_range=(0, 600)),
        SubscoreDefinition(name="alternancia", label="Alternância", direction=LOWER, valid_range=(0, 600)),
        SubscoreDefinition(
            name="inibicao",
            label="Inibição",
            derived=DerivedScore.difference("escolha", "leitura"),
            direction=LOWER,
        ),
        SubscoreDefinition(
            name="flexibilidade",
            label="Flexibilidade",
            derived=DerivedScore.difference("alternancia", "leitura"),
            direction=LOWER,
        ),
    ),
    main_subscore="flexibilidade",
)


def _words(name: str, label: str) -> SubscoreDefinition:
    return SubscoreDefinition(name=name, label=label, valid_range=(0, 15))


RAVLT = TestDefinition(
    code="RAVLT",
    name="RAVLT",
    full_name="Teste de Aprendizagem Auditivo-Verbal de Rey",
    description="Avalia aprendizagem e memória episódica verbal, interferência e reconhecimento.",
    valid_age_range=AgeRange(min_age=6, max_age=81),
    scoring_model=ScoringModel.PERCENTILE,
    input_fields=("a1", "a2", "a3", "a4", "a5", "b1", "a6", "a7", "rec"),
    subscores=(
        _words("a1", "A1"),
        _words("a2", "A2"),
        _words("a3", "A3"),
        _words("a4", "A4"),
        _words("a5", "A5"),
        _words("b1", "B1 - Lista distratora"),
        _words("a6", "A6 - Evocação imediata"),
        _words("a7", "A7 - Evocação tardia"),
        SubscoreDefinition(
            name="escoreTotal",
            label="Escore Total (A1 a A5)",
            derived=DerivedScore.total("a1", "a2", "a3", "a4", "a5"),
        ),
        SubscoreDefinition(
            name="reconhecimento",
            label="Reconhecimento (REC - 35)",
            derived=DerivedScore.shifted("rec", -35),
        ),
        SubscoreDefinition(
            name="alt",
            label="ALT - Aprendizagem ao longo das tentativas",
            derived=DerivedScore.linear({"escoreTotal": 1, "a1": -5}),
            normed=False,
        ),
        SubscoreDefinition(
            name="ve",
            label="Velocidade de Esquecimento (A7/A6)",
            derived=DerivedScore.ratio("a7", "a6"),
            normed=False,
        ),
        SubscoreDefinition(
            name="ip",
            label="Interferência Proativa (B1/A1)",
            derived=DerivedScore.ratio("b1", "a1"),
            normed=False,
        ),
        SubscoreDefinition(
            name="ir",
            label="Interferência Retroativa (A6/A5)",
            derived=DerivedScore.ratio("a6", "a5"),
            normed=False,
        ),
    ),
    main_subscore="escoreTotal",
)


def _attention(prefix: str, label: str) -> SubscoreDefinition:
    return SubscoreDefinition(
        name=prefix,
        label=label,
        derived=DerivedScore.linear(
            {f"{prefix}Acertos": 1, f"{prefix}Erros": -1, f"{prefix}Omissoes": -1}
        ),
    )


BPA2 = TestDefinition(
    code="BPA2",
    name="BPA-2",
    full_name="Bateria Psicológica para Avaliação da Atenção - 2ª edição",
    description="Avalia atenção concentrada, dividida e alternada, e a atenção geral.",
    valid_age_range=AgeRange(min_age=6, max_age=81),
    scoring_model=ScoringModel.PERCENTILE,
    input_fields=tuple(
        f"{prefix}{part}" for prefix in ("ac", "ad", "aa") for part in ("Acertos", "Erros", "Omissoes")
    ),
    subscores=(
        _attention("ac", "Atenção Concentrada"),
        _attention("ad", "Atenção Dividida"),
        _attention("aa", "Atenção Alternada"),
        SubscoreDefinition(
            name="ag", label="Atenção Geral", derived=DerivedScore.total("ac", "ad", "aa")
        ),
    ),
    main_subscore="ag",
)

PCFO = TestDefinition(
    code="PCFO",
    name="PCFO",
    full_name="Prova de Consciência Fonológica por produção Oral",
    description="Avalia a consciência fonológica em crianças de 3 a 14 anos.",
    valid_age_range=AgeRange(min_age=3, max_age=14),
    scoring_model=ScoringModel.NORMATIVE_TABLE,
    input_fields=("escolaridade", "acertos"),
    subscores=(SubscoreDefinition(name="acertos", label="Total de Acertos", valid_range=(0, 40)),),
    group_field="escolaridade",
    groups=pcfo.GROUPS,
    main_subscore="acertos",
)

TSBC = TestDefinition(
    code="TSBC",
    name="TSBC",
    full_name="Tarefa Span de Blocos - Corsi",
    description="Avalia a memória de trabalho visuoespacial em ordem direta e inversa.",
    valid_age_range=AgeRange(min_age=4, max_age=10),
    scoring_model=ScoringModel.NORMATIVE_TABLE,
    input_fields=("tipoEscola", "ordemDireta", "ordemInversa"),
    subscores=(
        SubscoreDefinition(name="ordemDireta", label="Ordem Direta", valid_range=(0, 16)),
        SubscoreDefinition(name="ordemInversa", label="Ordem Inversa", valid_range=(0, 16)),
    ),
    group_field="tipoEscola",
    groups=tsbc.GROUPS,
    main_subscore="ordemInversa",
)

FVA = TestDefinition(
    code="FVA",
    name="FVA",
    full_name="Fluência Verbal Alternada",
    description="Avalia fluência verbal semântica e alternância entre categorias (animais e frutas).",
    valid_age_range=AgeRange(min_age=7, max_age=70),
    scoring_model=ScoringModel.PERCENTILE,
    input_fields=("animais", "frutas", "pares"),
    subscores=(
        SubscoreDefinition(name="animais", label="Animais", valid_range=(0, 100)),
        SubscoreDefinition(name="frutas", label="Frutas", valid_range=(0, 100)),
        SubscoreDefinition(name="pares", label="Pares alternados", valid_range=(0, 100)),
    ),
    main_subscore="pares",
)

HAYLING_INFANTIL = TestDefinition(
    code="HAYLING_INFANTIL",
    name="Hayling Infantil",
    full_name="Teste Hayling de Inibição Verbal - Versão Infantil",
    description="Avalia iniciação (Parte A) e inibição verbal (Parte B) em crianças de 6 a 12 anos.",
    valid_age_range=AgeRange(min_age=6, max_age=12),
    scoring_model=ScoringModel.PERCENTILE,
    input_fields=("tipoEscola", "tempoA", "tempoB", "errosB"),
    subscores=(
        SubscoreDefinition(name="tempoA", label="Parte A - Tempo", direction=LOWER, valid_range=(0, 600)),
        SubscoreDefinition(name="tempoB", label="Parte B - Tempo", direction=LOWER, valid_range=(0, 600)),
        SubscoreDefinition(name="errosB", label="Parte B - Erros", direction=LOWER, valid_range=(0, 45)),
        SubscoreDefinition(
            name="inibicaoBA",
            label="Inibição B-A",
            derived=DerivedScore.difference("tempoB", "tempoA"),
            direction=LOWER,
        ),
    ),
    group_field="tipoEscola",
    groups=hayling_infantil.GROUPS,
    main_subscore="inibicaoBA",
)

FPT_INFANTIL = TestDefinition(
    code="FPT_INFANTIL",
    name="FPT Infantil",
    full_name="Five-Point Test - Versão Infantil",
    description="Avalia fluência de desenhos e flexibilidade cognitiva não verbal em crianças de 8 a 15 anos.",
    valid_age_range=AgeRange(min_age=8, max_age=15),
    scoring_model=ScoringModel.PERCENTILE,
    input_fields=("anoEscolar", "total"),
    subscores=(SubscoreDefinition(name="total", label="Desenhos únicos", valid_range=(0, 80)),),
    group_field="anoEscolar",
    groups=fpt.ANO_ESCOLAR_GROUPS,
    main_subscore="total",
)

FPT_ADULTO = TestDefinition(
    code="FPT_ADULTO",
    name="FPT Adulto",
    full_name="Five-Point Test - Versão Adulto",
    description="Avalia fluência de desenhos e flexibilidade cognitiva não verbal em adultos.",
    valid_age_range=AgeRange(min_age=20, max_age=99),
    scoring_model=ScoringModel.PERCENTILE,
    input_fields=("total",),
    subscores=(SubscoreDefinition(name="total", label="Desenhos únicos", valid_range=(0, 80)),),
    main_subscore="total",
)

TFV = TestDefinition(
    code="TFV",
    name="TFV",
    full_name="Tarefas de Fluência Verbal",
    description="Avalia fluência verbal livre, fonêmica (letra P) e semântica (vestimentas) em crianças de 6 a 12 anos.",
    valid_age_range=AgeRange(min_age=6, max_age=12),
    scoring_model=ScoringModel.PERCENTILE,
    input_fields=("tipoEscola", "livre", "fonemica", "semantica"),
    subscores=(
        SubscoreDefinition(name="livre", label="Fluência Livre", valid_range=(0, 200)),
        SubscoreDefinition(name="fonemica", label="Fluência Fonêmica", valid_range=(0, 100)),
        SubscoreDefinition(name="semantica", label="Fluência Semântica", valid_range=(0, 100)),
    ),
    group_field="tipoEscola",
    groups=tfv.GROUPS,
    main_subscore="livre",
)

TIN = TestDefinition(
    code="TIN",
    name="TIN",
    full_name="Teste Infantil de Nomeação",
    description="Avalia vocabulário expressivo e nomeação em crianças de 3 a 14 anos; escore padrão lido no manual.",
    valid_age_range=AgeRange(min_age=3, max_age=14),
    scoring_model=ScoringModel.NORMATIVE_TABLE,
    input_fields=("acertos", "escorePadrao"),
    subscores=(
        SubscoreDefinition(name="acertos", label="Total de Acertos", valid_range=(0, 60), normed=False),
        SubscoreDefinition(name="escorePadrao", label="Escore Padrão", valid_range=(0, 200), entered=True),
    ),
    main_subscore="escorePadrao",
)

TRPP = TestDefinition(
    code="TRPP",
    name="TRPP",
    full_name="Teste de Repetição de Palavras e Pseudopalavras",
    description="Avalia a memória de trabalho fonológica em crianças de 3 a 14 anos.",
    valid_age_range=AgeRange(min_age=3, max_age=14),
    scoring_model=ScoringModel.NORMATIVE_TABLE,
    input_fields=("palavras", "pseudopalavras"),
    subscores=(
        SubscoreDefinition(name="palavras", label="Palavras", valid_range=(0, 10), normed=False),
        SubscoreDefinition(name="pseudopalavras", label="Pseudopalavras", valid_range=(0, 10), normed=False),
        SubscoreDefinition(
            name="total", label="Total", derived=DerivedScore.total("palavras", "pseudopalavras")
        ),
    ),
    main_subscore="total",
)

TAYLOR = TestDefinition(
    code="TAYLOR",
    name="Taylor",
    full_name="Figura Complexa Modificada de Taylor",
    description="Avalia habilidades visuoconstrutivas (cópia) e memória visual (reprodução).",
    valid_age_range=AgeRange(min_age=18, max_age=92),
    scoring_model=ScoringModel.PERCENTILE,
    input_fields=("copia", "reproducaoMemoria"),
    subscores=(
        SubscoreDefinition(name="copia", label="Cópia", valid_range=(0, 36)),
        SubscoreDefinition(name="reproducaoMemoria", label="Reprodução da Memória", valid_range=(0, 36)),
    ),
    main_subscore="reproducaoMemoria",
)

TOM = TestDefinition(
    code="TOM",
    name="ToM",
    full_name="Bateria de Tarefas para Avaliação da Teoria da Mente",
    description="Avalia a teoria da mente em crianças de 3 a 5 anos.",
    valid_age_range=AgeRange(min_age=3, max_age=5),
    scoring_model=ScoringModel.PERCENTILE,
    input_fields=("total",),
    subscores=(SubscoreDefinition(name="total", label="Total de Acertos", valid_range=(0, 30)),),
    main_subscore="total",
)

FAS = TestDefinition(
    code="FAS",
    name="FAS",
    full_name="Fluência Verbal Fonêmica F-A-S",
    description="Avalia a fluência verbal fonêmica pelas letras F, A e S em adultos.",
    valid_age_range=AgeRange(min_age=19, max_age=59),
    scoring_model=ScoringModel.PERCENTILE,
    input_fields=("letraF", "letraA", "letraS"),
    subscores=(
        SubscoreDefinition(name="letraF", label="Letra F", valid_range=(0, 60), normed=False),
        SubscoreDefinition(name="letraA", label="Letra A", valid_range=(0, 60), normed=False),
        SubscoreDefinition(name="letraS", label="Letra S", valid_range=(0, 60), normed=False),
        SubscoreDefinition(
            name="total", label="Total F-A-S", derived=DerivedScore.total("letraF", "letraA", "letraS")
        ),
    ),
    main_subscore="total",
)

NORMED_TESTS = (
    HAYLING_ADULTO,
    HAYLING_INFANTIL,
    TRILHAS,
    TRILHAS_PRE_ESCOLAR,
    TMT_ADULTO,
    BNTBR,
    FDT,
    RAVLT,
    BPA2,
    PCFO,
    TSBC,
    FVA,
    FPT_INFANTIL,
    FPT_ADULTO,
    TFV,
    TIN,
    TRPP,
    TAYLOR,
    TOM,
    FAS,
)


def _manual_percentile(code: str, name: str, min_age: int, max_age: int) -> TestDefinition:
    return TestDefinition(
        code=code,
        name=f"{name} (Cálculo Manual)",
        full_name=f"{name} - Cálculo manual por percentil",
        description="Percentil exato ou faixa percentílica obtida na tabela do manual.",
        valid_age_range=AgeRange(min_age=min_age, max_age=max_age),
        scoring_model=ScoringModel.PERCENTILE,
        input_fields=("percentil",),
        subscores=(
            SubscoreDefinition(name="percentil", label="Percentil", categorical=True, valid_range=(0, 100)),
        ),
        main_subscore="percentil",
    )


def _manual_zscore(
    code: str,
    name: str,
    min_age: int,
    max_age: int,
    parts: Optional[tuple[tuple[str, str], ...]] = None,
) -> TestDefinition:
    if parts is None:
        inputs = ("pontuacao", "media", "desvioPadrao")
        subscores = (
            SubscoreDefinition(
                name="zScore",
                label="Z-Score",
                source="pontuacao",
                mean_field="media",
                sd_field="desvioPadrao",
            ),
        )
    else:
        inputs = tuple(
            f"{prefix}{suffix}" for prefix, _ in parts for suffix in ("Pontuacao", "Media", "DesvioPadrao")
        )
        subscores = tuple(
            SubscoreDefinition(
                name=prefix,
                label=label,
                source=f"{prefix}Pontuacao",
                mean_field=f"{prefix}Media",
                sd_field=f"{prefix}DesvioPadrao",
            )
            for prefix, label in parts
        )
    return TestDefinition(
        code=code,
        name=f"{name} (Cálculo Manual)",
        full_name=f"{name} - Cálculo manual por Z-score",
        description="Z = (Pontuação - Média) / Desvio Padrão, com média e desvio do manual.",
        valid_age_range=AgeRange(min_age=min_age, max_age=max_age),
        scoring_model=ScoringModel.ZSCORE,
        input_fields=inputs,
        subscores=subscores,
        main_subscore=subscores[0].name,
    )


MANUAL_TESTS = (
    _manual_percentile("CALC_FVA", "FVA", 7, 70),
    _manual_percentile("CALC_TFV", "TFV", 6, 12),
    _manual_percentile("CALC_TMT", "TMT", 19, 75),
    _manual_percentile("CALC_FPT_ADULTO", "FPT Adulto", 20, 99),
    _manual_percentile("CALC_HAYLING_INFANTIL", "Hayling Infantil", 6, 12),
    _manual_zscore("CALC_BNTBR", "BNT-BR", 6, 99),
    _manual_zscore("CALC_HAYLING_ADULTO", "Hayling Adulto", 19, 75),
    _manual_zscore("CALC_TOM", "TOM", 3, 5),
    _manual_zscore("CALC_FAS", "FAS", 19, 59),
    _manual_zscore(
        "CALC_TAYLOR", "Taylor", 18, 92, parts=(("copia", "Cópia"), ("reproducao", "Reprodução da Memória"))
    ),
    _manual_zscore(
        "CALC_SPAN_DIGITOS", "Span de Dígitos", 6, 90, parts=(("direto", "Ordem Direta"), ("inverso", "Ordem Inversa"))
    ),
    _manual_zscore(
        "CALC_CUBOS_CORSI", "Cubos de Corsi", 6, 90, parts=(("direto", "Ordem Direta"), ("inverso", "Ordem Inversa"))
    ),
)

TABLES_BY_TEST = {
    HAYLING_ADULTO.code: hayling_adulto.TABLES,
    TRILHAS.code: trilhas.TABLES,
    TRILHAS_PRE_ESCOLAR.code: trilhas_pre_escolar.TABLES,
    TMT_ADULTO.code: tmt_adulto.TABLES,
    BNTBR.code: bntbr.TABLES,
    FDT.code: fdt.TABLES,
    RAVLT.code: ravlt.TABLES,
    BPA2.code: bpa2.TABLES,
    PCFO.code: pcfo.TABLES,
    TSBC.code: tsbc.TABLES,
    FVA.code: fva.TABLES,
    HAYLING_INFANTIL.code: hayling_infantil.TABLES,
    FPT_INFANTIL.code: fpt.INFANTIL_TABLES,
    FPT_ADULTO.code: fpt.ADULTO_TABLES,
    TFV.code: tfv.TABLES,
    TRPP.code: trpp.TABLES,
    TAYLOR.code: taylor.TABLES,
    TOM.code: tom.TABLES,
    FAS.code: fas.TABLES,
}



def needs_table(subscore: SubscoreDefinition) -> bool:
    """True for subscores scored against a registered normative table."""
    return subscore.normed and not (
        subscore.categorical or subscore.uses_inline_norms or subscore.entered
    )


@dataclass(frozen=True)
class Registry:
    """Immutable mapping of test codes to definitions and tables."""

    definitions: dict[str, TestDefinition]
    tables: dict[tuple[str, str], AnyNormativeTable]

    def validate(self) -> None:
        """Validate every table against its test's age range."""
        for (code, subscore), table in self.tables.items():
            definition = self.definitions[code]
            if definition.get_subscore(subscore) is None:
                raise UnknownTestError(code, subscore)
            if table.groups and table.groups != definition.groups:
                raise NormativeDataError(
                    table.name,
                    [f"table groups {table.groups} differ from {code} groups {definition.groups}"],
                )
            validate_table(table, definition.valid_age_range)
        for definition in self.definitions.values():
            for subscore in definition.subscores:
                if not needs_table(subscore):
                    continue
                if (definition.code, subscore.name) not in self.tables:
                    raise UnknownTestError(definition.code, subscore.name)


def build_registry(validate: bool = True) -> Registry:
    definitions = {
        d.code: d
        for d in (*NORMED_TESTS, *MANUAL_TESTS)
    }
    tables = {
        (code, subscore): table
        for code, by_subscore in TABLES_BY_TEST.items()
        for subscore, table in by_subscore.items()
    }
    registry = Registry(definitions=definitions, tables=tables)
    if validate:
        registry.validate()
        logger.info("Loaded %d test definitions and %d normative tables", len(definitions), len(tables))
    return registry


@lru_cache
def load_registry() -> Registry:
    """Get the process-wide registry, validated on first use."""
    return build_registry(validate=get_settings().validate_norms_on_load)


def find_test(test_code: str) -> Optional[TestDefinition]:
    return load_registry().definitions.get(test_code)


def get_test(test_code: str) -> TestDefinition:
    """Get a test definition by code; unknown codes are programmer errors."""
    definition = find_test(test_code)
    if definition is None:
        raise UnknownTestError(test_code)
    return definition


def list_tests() -> list[TestDefinition]:
    return list(load_registry().definitions.values())


def tests_for_age(age: float) -> list[TestDefinition]:
    """Tests whose normative range includes ``age`` (whole years)."""
    years = int(age)
    return [d for d in list_tests() if d.valid_age_range.contains(years)]


def get_table(test_code: str, subscore: str) -> Optional[AnyNormativeTable]:
    return load_registry().tables.get((test_code, subscore))
